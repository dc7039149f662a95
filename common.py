#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import json

import numpy as np
import pandas as pd

import streamlit as st
import streamlit.components.v1 as components

import environ

from tax.pt import calculate_imt


def menu_items():
    about = "Portuguese property purchase tools.\n"
    items = {"About": about}
    if environ.project_url:
        url = environ.project_url.rstrip('/')
        items["Get help"] = f"{url}/discussions"
        items["Report a Bug"] = f"{url}/issues"
        items["About"] = f"{about}\n{url}\n"
    return items


# https://docs.streamlit.io/library/api-reference/utilities/st.set_page_config
def set_page_config(page_title, page_icon=":material/home:", layout="centered", initial_sidebar_state="auto"):
    st.set_page_config(
        page_title=page_title,
        page_icon=page_icon,
        layout=layout,
        initial_sidebar_state=initial_sidebar_state,
        menu_items=menu_items(),
    )


def statcounter_html():
    if not (environ.production and environ.statcounter_project and environ.statcounter_security):
        return '<div class="statcounter"></div>'
    return (
        '<script type="text/javascript">'
        f'var sc_project={int(environ.statcounter_project)}; '
        'var sc_invisible=1; '
        f'var sc_security={json.dumps(environ.statcounter_security)}; '
        '</script>'
        '<script type="text/javascript" src="https://www.statcounter.com/counter/counter.js" async></script>'
    )


def analytics_html():
    # An invisible test marker, used when testing to ensure a page ran till the end
    st.html('<span id="test-marker" style="display:none"></span>')

    components.html(statcounter_html())


def effective_rates(property_type, location, max_value, num=256):
    values = np.linspace(max_value / num, max_value, num)
    rates = [calculate_imt(float(value), property_type, location).rate for value in values]
    return pd.DataFrame({'Value': values, 'Rate': rates})


def plot_effective_rate(df, value=None):
    import altair as alt

    xAxis = alt.Axis(format=",.0f", title="Property value (€)")
    yAxis = alt.Axis(format=".2~f", title="Effective rate (%)")

    chart = (
        alt.Chart(df)
        .mark_line()
        .encode(
            alt.X("Value:Q", axis=xAxis),
            alt.Y("Rate:Q", axis=yAxis),
        )
    )
    if value is not None:
        rule = alt.Chart(pd.DataFrame({'Value': [value]})).mark_rule(strokeDash=[4, 4]).encode(alt.X("Value:Q"))
        chart = chart + rule
    st.altair_chart(chart, use_container_width=True)

#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import logging

import streamlit as st

import common


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(name)s %(levelname)s %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True,
)


common.set_page_config(
    page_title="Portuguese property purchase tools.",
    layout="centered",
    initial_sidebar_state="expanded"
)

st.title("Portuguese property purchase tools.")

st.markdown('''Welcome!

This site hosts tools to estimate the taxes due when buying property in Portugal:
- IMT (_Imposto Municipal sobre as Transmissões Onerosas de Imóveis_), the property transfer tax, for primary residences, secondary homes, commercial property and land, in the mainland and in the autonomous regions;
- Stamp duty (_Imposto do Selo_) on mortgage loans.

Personal data entered into the website will not persist across page reloads.

Please read the [disclaimer](/Disclaimer) and choose a tool on the left sidebar.
''')

common.analytics_html()

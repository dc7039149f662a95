#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import streamlit as st

import common


common.set_page_config(
    page_title="Disclaimer",
    layout="centered",
    initial_sidebar_state="expanded",
)

st.title('Disclaimer')

st.html("<style>.stMarkdown { text-align: justify; }</style>")

st.markdown('''
The information provided on this site is for general informational purposes only. All information is provided in good faith, however we make no representation or warranty of any kind, express or implied, regarding the accuracy, adequacy, validity, reliability, availability, or completeness of any information on the site.

Tax figures are estimates based on the 2024 mainland IMT tables and do not account for exemptions, municipal surcharges, or the special regimes for young buyers and non-residents. The reduction applied to the autonomous regions is an approximation of the regional tables.

The site does not contain tax or legal advice. Before buying property, consult a notary, a solicitor or the Autoridade Tributária e Aduaneira. YOUR RELIANCE ON ANY INFORMATION ON THE SITE IS SOLELY AT YOUR OWN RISK.
''')

common.analytics_html()

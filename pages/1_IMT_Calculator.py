#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import pandas as pd
import streamlit as st

import common
import environ
import ptdistricts

from listing import estimate_purchase_costs, imt_property_type, listing_types
from ptformat import format_portuguese_number, format_portuguese_price as fmt
from tax.pt import imt_breakdown


common.set_page_config(
    page_title="IMT Calculator",
)

st.title('IMT Calculator')

st.markdown('''This tool estimates the property transfer tax ([IMT](https://info.portaldasfinancas.gov.pt/pt/informacao_fiscal/codigos_tributarios/cimt/Pages/cimt17.aspx)) and the stamp duty due when buying property in Portugal.
''')


#
# Parameters
#

districts = ptdistricts.get_all_districts()

price = st.number_input('Price (€)', value=250000.0, min_value=0.0, step=1000.0, format='%.2f', key='price')
col1, col2 = st.columns(2)
with col1:
    listing_type = st.selectbox('Property', options=sorted(listing_types), index=sorted(listing_types).index('apartment'), key='listing_type')
with col2:
    district = st.selectbox('District', options=districts, index=districts.index('Lisboa'), key='district')
primary_residence = st.checkbox('Primary residence', value=True, key='primary_residence')
col1, col2 = st.columns(2)
with col1:
    loan_amount = st.number_input('Mortgage loan (€)', value=0.0, min_value=0.0, step=1000.0, format='%.2f', key='loan_amount')
with col2:
    square_meters = st.number_input('Area (m²)', value=0.0, min_value=0.0, step=1.0, format='%.0f', key='square_meters')


#
# Calculation
#

costs = estimate_purchase_costs(price, listing_type, district, loan_amount=loan_amount, primary_residence=primary_residence, square_meters=square_meters)
imt = costs.imt


st.header('Results')

if imt.details is not None:
    st.warning(imt.details, icon="⚠️")
    common.analytics_html()
    st.stop()

col1, col2, col3 = st.columns(3)
with col1:
    st.metric('IMT', fmt(imt.imt))
with col2:
    st.metric('Effective rate', f'{imt.rate:.2f}%')
with col3:
    st.metric('Stamp duty', fmt(costs.stamp_duty))

col1, col2 = st.columns(2)
with col1:
    st.metric('Total taxes', fmt(costs.total_taxes))
with col2:
    st.metric('Total cost', fmt(costs.total))

if imt.island_reduction != 'N/A':
    st.info(f'{imt.island_reduction} reduction for the autonomous region of {district}.')

if costs.price_per_square_meter is not None:
    st.caption(f'{fmt(costs.price_per_square_meter)}/m², {format_portuguese_number(costs.square_feet, 0)} sq ft.')


st.subheader('Brackets')

rows = []
for lbound, ubound, rate, taxable, tax in imt_breakdown(price, imt.property_type):
    rows.append({
        'From': fmt(lbound),
        'To': fmt(ubound) if ubound is not None else '',
        'Rate': f'{rate:.1%}',
        'Taxable': fmt(taxable),
        'Tax': fmt(tax),
    })
st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

st.caption('Bracket amounts are for the mainland, before any regional reduction.')


st.subheader('Effective rate')

location = ptdistricts.district_location(district)
max_value = max(environ.chart_max_value, price * 1.25)
df = common.effective_rates(imt_property_type(listing_type, primary_residence), location, max_value)
common.plot_effective_rate(df, price)


common.analytics_html()

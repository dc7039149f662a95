#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import dataclasses
import logging

import ptdistricts

from ptformat import square_meters_to_feet
from tax.pt import IMTResult, calculate_imt, calculate_stamp_duty, round_currency


__all__ = [
    'listing_types',
    'imt_property_type',
    'PurchaseCosts',
    'estimate_purchase_costs',
]


logger = logging.getLogger('listing')


dwelling_types = frozenset([
    'apartment',
    'house',
    'villa',
    'townhouse',
    'condo',
    'penthouse',
    'studio',
])

land_types = frozenset([
    'land',
    'farm',
])

commercial_types = frozenset([
    'commercial',
    'office',
    'warehouse',
    'retail',
    'garage',
    'building',
])

listing_types = dwelling_types | land_types | commercial_types


def imt_property_type(listing_type:str, primary_residence:bool=True) -> str:
    if listing_type in dwelling_types:
        return 'residential' if primary_residence else 'secondary-home'
    if listing_type in land_types:
        return 'land'
    if listing_type in commercial_types:
        return 'commercial'
    raise ValueError(f'unknown listing type {listing_type!r}')


@dataclasses.dataclass(frozen=True)
class PurchaseCosts:
    price: float
    imt: IMTResult
    stamp_duty: float
    square_meters: float|None = None
    square_feet: float|None = None
    price_per_square_meter: float|None = None

    @property
    def total_taxes(self) -> float:
        return round_currency(self.imt.imt + self.stamp_duty)

    @property
    def total(self) -> float:
        return round_currency(self.price + self.total_taxes)


def estimate_purchase_costs(price:float, listing_type:str, district:str, loan_amount:float=0, primary_residence:bool=True, square_meters:float|None=None) -> PurchaseCosts:
    """Estimate the taxes due when buying a listed property.

    The IMT location follows from the district, the IMT schedule from the
    listing type and whether the buyer will live there.  Stamp duty is only
    due on the mortgage loan, if any.
    """

    if ptdistricts.get_district_info(district) is None:
        logger.warning(f'unknown district {district!r}, assuming mainland')
    location = ptdistricts.district_location(district)

    property_type = imt_property_type(listing_type, primary_residence)

    imt = calculate_imt(price, property_type, location)
    stamp_duty = calculate_stamp_duty(loan_amount)

    square_feet = None
    price_per_square_meter = None
    if square_meters is not None and square_meters > 0:
        square_feet = square_meters_to_feet(square_meters)
        if imt.details is None:
            price_per_square_meter = round_currency(price / square_meters)

    return PurchaseCosts(
        price=price,
        imt=imt,
        stamp_duty=stamp_duty,
        square_meters=square_meters,
        square_feet=square_feet,
        price_per_square_meter=price_per_square_meter,
    )

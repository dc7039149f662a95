#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import re

from tax.pt import round_currency


__all__ = [
    'square_feet_per_square_meter',
    'square_meters_to_feet',
    'square_feet_to_meters',
    'validate_portuguese_zip_code',
    'format_portuguese_number',
    'format_portuguese_price',
]


square_feet_per_square_meter = 10.764


def square_meters_to_feet(square_meters:float) -> float:
    return round_currency(square_meters * square_feet_per_square_meter)


def square_feet_to_meters(square_feet:float) -> float:
    return round_currency(square_feet / square_feet_per_square_meter)


# Código postal, e.g. 1000-001
_zip_code_re = re.compile(r'[0-9]{4}-[0-9]{3}')


def validate_portuguese_zip_code(zip_code:str) -> bool:
    if not isinstance(zip_code, str):
        return False
    return _zip_code_re.fullmatch(zip_code) is not None


# CLDR pt-PT: no-break space grouping, comma decimal separator, trailing
# currency symbol, and grouping only from 5 integer digits upwards.
_nbsp = '\u00a0'


def format_portuguese_number(amount:float, ndigits:int=2) -> str:
    amount = round_currency(amount, ndigits)
    sign = '-' if amount < 0 else ''
    integer, _, fraction = f'{abs(amount):.{ndigits}f}'.partition('.')
    if len(integer) > 4:
        integer = f'{int(integer):,}'.replace(',', _nbsp)
    text = integer
    if fraction:
        text += ',' + fraction
    return sign + text


def format_portuguese_price(amount:float, ndigits:int=2) -> str:
    return f'{format_portuguese_number(amount, ndigits)}{_nbsp}€'

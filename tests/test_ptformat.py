#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import pytest

from ptformat import *


nbsp = '\u00a0'


@pytest.mark.parametrize("zip_code,valid", [
    ('1000-001', True),
    ('4050-345', True),
    ('9500-150', True),
    ('1000001', False),
    ('1000-01', False),
    ('10000-001', False),
    ('1000-0011', False),
    (' 1000-001', False),
    ('1000-001 ', False),
    ('1000-001\n', False),
    ('1000 001', False),
    ('ABCD-EFG', False),
    ('١٠٠٠-٠٠١', False),
    ('', False),
    (None, False),
    (1000001, False),
])
def test_validate_portuguese_zip_code(zip_code, valid:bool) -> None:
    assert validate_portuguese_zip_code(zip_code) is valid


def test_square_meters_to_feet() -> None:
    assert square_meters_to_feet(100) == pytest.approx(1076.4, abs=0.01)
    assert square_meters_to_feet(1) == 10.76
    assert square_meters_to_feet(0) == 0


def test_square_feet_to_meters() -> None:
    assert square_feet_to_meters(1076.4) == pytest.approx(100, abs=0.01)
    assert square_feet_to_meters(10.764) == 1


@pytest.mark.parametrize("square_meters", [1, 33, 60, 75, 90, 120, 1234.5])
def test_square_meters_round_trip(square_meters:float) -> None:
    square_feet = square_meters_to_feet(square_meters)
    assert square_feet_to_meters(square_feet) == pytest.approx(square_meters, abs=0.01)


@pytest.mark.parametrize("amount,text", [
    (0, '0,00 €'),
    (0.005, '0,01 €'),
    (12.5, '12,50 €'),
    (1234.56, '1234,56 €'),
    (12345.67, '12 345,67 €'),
    (250000, '250 000,00 €'),
    (1234567.891, '1 234 567,89 €'),
    (-50, '-50,00 €'),
    (-98765.4321, '-98 765,43 €'),
])
def test_format_portuguese_price(amount:float, text:str) -> None:
    assert format_portuguese_price(amount) == text.replace(' ', nbsp)


def test_format_portuguese_price_ndigits() -> None:
    assert format_portuguese_price(250000.4, ndigits=0) == f'250{nbsp}000{nbsp}€'


@pytest.mark.parametrize("amount,ndigits,text", [
    (1076.4, 0, '1076'),
    (12916.8, 0, '12 917'),
    (1234567.891, 2, '1 234 567,89'),
    (-0.004, 2, '0,00'),
])
def test_format_portuguese_number(amount:float, ndigits:int, text:str) -> None:
    assert format_portuguese_number(amount, ndigits) == text.replace(' ', nbsp)


def test_large_amounts() -> None:
    text = format_portuguese_price(1e27)
    assert text.startswith(f'1{nbsp}000{nbsp}000')
    assert text.endswith(f',00{nbsp}€')
    assert square_meters_to_feet(1e30) == pytest.approx(1.0764e31)
    assert square_feet_to_meters(1e30) == pytest.approx(1e30 / 10.764)

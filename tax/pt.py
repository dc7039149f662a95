"""Portuguese property transfer tax (IMT) and stamp duty."""


#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import decimal
import logging
import math
import numbers
import types
import typing
from decimal import Decimal, ROUND_HALF_UP


__all__ = [
    'TaxBracket',
    'Schedule',
    'IMTResult',
    'schedules',
    'island_factor',
    'stamp_duty_rate',
    'round_currency',
    'calculate_imt',
    'calculate_stamp_duty',
    'marginal_rate',
    'imt_breakdown',
]


logger = logging.getLogger('imt')


class TaxBracket(typing.NamedTuple):
    ubound: int
    rate: float


class Schedule(typing.NamedTuple):
    # Progressive brackets, applied up to flat_threshold
    bands: tuple[TaxBracket, ...]
    # Above flat_threshold, flat_rate applies to the whole value
    flat_threshold: int
    flat_rate: float

    def progressive(self, value:float) -> float:
        tax = 0.0
        lbound = 0
        for ubound, rate in self.bands:
            if value <= ubound:
                return tax + (value - lbound) * rate
            tax += (ubound - lbound) * rate
            lbound = ubound
        return tax

    def tax(self, value:float) -> float:
        if value > self.flat_threshold:
            return value * self.flat_rate
        return self.progressive(value)

    def marginal_rate(self, value:float) -> float:
        if value > self.flat_threshold:
            return self.flat_rate
        for ubound, rate in self.bands:
            if value <= ubound:
                return rate
        return self.flat_rate

    def breakdown(self, value:float) -> list[tuple[float, float|None, float, float, float]]:
        """Tax per bracket, as (lbound, ubound, rate, taxable, tax) tuples."""
        if value > self.flat_threshold:
            return [(0, None, self.flat_rate, value, value * self.flat_rate)]
        rows = []
        lbound = 0
        for ubound, rate in self.bands:
            taxable = min(value, ubound) - lbound
            if taxable <= 0:
                break
            rows.append((lbound, ubound, rate, taxable, taxable * rate))
            lbound = ubound
        return rows


# https://info.portaldasfinancas.gov.pt/pt/informacao_fiscal/codigos_tributarios/cimt/Pages/cimt17.aspx
# Taxas do IMT 2024, Portugal continental
_residential_bands = (
    TaxBracket(  97064, 0.00),
    TaxBracket( 115038, 0.02),
    TaxBracket( 133495, 0.05),
    TaxBracket( 176310, 0.07),
    TaxBracket( 633453, 0.08),
)

# Secondary homes pay 1% on the first bracket
_secondary_home_bands = (TaxBracket(97064, 0.01),) + _residential_bands[1:]

_residential = Schedule(_residential_bands, 633453, 0.06)
_secondary_home = Schedule(_secondary_home_bands, 633453, 0.06)

# Urban property other than dwellings, and rustic land
_commercial = Schedule((), 0, 0.065)

schedules: typing.Mapping[str, Schedule] = types.MappingProxyType({
    'residential': _residential,
    'secondary-home': _secondary_home,
    'commercial': _commercial,
    'land': _commercial,
})

for _bands in (_residential_bands, _secondary_home_bands):
    assert all(b0.ubound < b1.ubound for b0, b1 in zip(_bands[:-1], _bands[1:]))
    assert _bands[-1].ubound == _residential.flat_threshold


# Autonomous regions (Açores, Madeira)
island_factor = 0.8


# Imposto do Selo, Tabela Geral, verba 17.1.4: mortgage loans over 5 years
stamp_duty_rate = 0.006


class IMTResult(typing.NamedTuple):
    imt: float
    rate: float
    property_value: typing.Any
    property_type: str
    location: str
    island_reduction: str
    details: str|None = None


def round_currency(x:float, ndigits:int=2) -> float:
    """Round half away from zero, from the shortest decimal representation of x."""
    if not math.isfinite(x):
        return float(x)
    q = Decimal(1).scaleb(-ndigits)
    d = Decimal(repr(float(x)))
    with decimal.localcontext() as ctx:
        # Enough digits for the integer part plus ndigits decimals
        ctx.prec = max(28, d.adjusted() + ndigits + 2)
        d = d.quantize(q, rounding=ROUND_HALF_UP)
    # https://bugs.python.org/issue45995
    return float(d) + 0.0


def _is_valid_amount(x:typing.Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool) and math.isfinite(x) and x > 0


def calculate_imt(property_value:typing.Any, property_type:str='residential', location:str='mainland') -> IMTResult:
    """Calculate the IMT due on the acquisition of a property.

    Never raises: invalid property values yield a zero result with
    `details` set, and unknown property types yield zero tax.
    """

    island_reduction = '20%' if location != 'mainland' else 'N/A'

    if not _is_valid_amount(property_value):
        logger.warning(f'invalid property value {property_value!r}')
        return IMTResult(0, 0, property_value, property_type, location, island_reduction, 'Invalid property value')

    value = float(property_value)

    try:
        schedule = schedules[property_type]
    except (KeyError, TypeError):
        logger.warning(f'unknown property type {property_type!r}')
        imt = 0.0
    else:
        imt = schedule.tax(value)

    if location != 'mainland':
        imt *= island_factor

    rate = imt / value * 100

    return IMTResult(
        round_currency(imt),
        round_currency(rate),
        property_value,
        property_type,
        location,
        island_reduction,
    )


def calculate_stamp_duty(loan_amount:typing.Any) -> float:
    if not _is_valid_amount(loan_amount):
        return 0
    return round_currency(loan_amount * stamp_duty_rate)


def marginal_rate(property_value:float, property_type:str='residential') -> float:
    schedule = schedules[property_type]
    return schedule.marginal_rate(property_value)


def imt_breakdown(property_value:float, property_type:str='residential') -> list[tuple[float, float|None, float, float, float]]:
    """Mainland IMT per bracket, before any island reduction and rounding."""
    schedule = schedules[property_type]
    return schedule.breakdown(property_value)

#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import pytest

from ptdistricts import *


def test_get_district_info() -> None:
    lisboa = get_district_info('Lisboa')
    assert lisboa is not None
    assert lisboa.code == 'LIS'
    assert lisboa.region == 'Lisboa'
    assert 'Sintra' in lisboa.cities

    evora = get_district_info('Évora')
    assert evora is not None
    assert evora.code == 'EVR'
    assert evora.cities[0] == 'Évora'


@pytest.mark.parametrize("name", ['Unknown', 'lisboa', 'LISBOA', ' Lisboa', 'Evora', '', None])
def test_get_district_info_unknown(name) -> None:
    assert get_district_info(name) is None
    assert get_cities_by_district(name) == []


def test_get_all_districts() -> None:
    districts = get_all_districts()
    assert len(districts) == 20
    assert districts[0] == 'Aveiro'
    assert districts[-2:] == ['Açores', 'Madeira']
    assert 'Viana do Castelo' in districts
    assert len(set(districts)) == len(districts)

    codes = [get_district_info(name).code for name in districts]
    assert len(set(codes)) == len(codes)


def test_get_cities_by_district() -> None:
    assert get_cities_by_district('Faro') == ['Faro', 'Portimão', 'Loulé', 'Albufeira', 'Lagos', 'Tavira']
    assert get_cities_by_district('Açores') == ['Ponta Delgada', 'Angra do Heroísmo', 'Horta']


def test_read_only() -> None:
    cities = get_cities_by_district('Porto')
    cities.append('Lisboa')
    assert 'Lisboa' not in get_cities_by_district('Porto')

    districts = get_all_districts()
    districts.clear()
    assert len(get_all_districts()) == 20

    district = get_district_info('Porto')
    with pytest.raises(AttributeError):
        district.code = 'XXX'  # type: ignore[misc]


def test_get_districts_by_region() -> None:
    assert get_districts_by_region('Norte') == ['Braga', 'Bragança', 'Porto', 'Viana do Castelo', 'Vila Real']
    assert get_districts_by_region('Algarve') == ['Faro']
    assert get_districts_by_region('Atlântida') == []


@pytest.mark.parametrize("name,location", [
    ('Lisboa', 'mainland'),
    ('Faro', 'mainland'),
    ('Açores', 'azores'),
    ('Madeira', 'madeira'),
    ('Unknown', 'mainland'),
])
def test_district_location(name:str, location:str) -> None:
    assert district_location(name) == location

#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import types
import typing


__all__ = [
    'District',
    'get_district_info',
    'get_all_districts',
    'get_cities_by_district',
    'get_districts_by_region',
    'district_location',
]


class District(typing.NamedTuple):
    name: str
    code: str
    region: str
    cities: tuple[str, ...]


# Mainland districts, followed by the autonomous regions
_table = [
    ('Aveiro',           'AVR', 'Centro',   ('Aveiro', 'Ovar', 'Águeda', 'Ílhavo', 'Oliveira de Azeméis')),
    ('Beja',             'BEJ', 'Alentejo', ('Beja', 'Castro Verde', 'Serpa', 'Moura', 'Odemira')),
    ('Braga',            'BRG', 'Norte',    ('Braga', 'Guimarães', 'Barcelos', 'Famalicão', 'Esposende')),
    ('Bragança',         'BRN', 'Norte',    ('Bragança', 'Mirandela', 'Macedo de Cavaleiros', 'Miranda do Douro')),
    ('Castelo Branco',   'CBR', 'Centro',   ('Castelo Branco', 'Covilhã', 'Fundão', 'Belmonte')),
    ('Coimbra',          'CMB', 'Centro',   ('Coimbra', 'Figueira da Foz', 'Cantanhede', 'Lousã')),
    ('Évora',            'EVR', 'Alentejo', ('Évora', 'Estremoz', 'Montemor-o-Novo', 'Vendas Novas')),
    ('Faro',             'FAR', 'Algarve',  ('Faro', 'Portimão', 'Loulé', 'Albufeira', 'Lagos', 'Tavira')),
    ('Guarda',           'GRD', 'Centro',   ('Guarda', 'Seia', 'Gouveia', 'Manteigas')),
    ('Leiria',           'LEI', 'Centro',   ('Leiria', 'Marinha Grande', 'Alcobaça', 'Nazaré', 'Caldas da Rainha')),
    ('Lisboa',           'LIS', 'Lisboa',   ('Lisboa', 'Sintra', 'Cascais', 'Loures', 'Oeiras', 'Amadora', 'Odivelas')),
    ('Portalegre',       'PTL', 'Alentejo', ('Portalegre', 'Elvas', 'Ponte de Sor', 'Campo Maior')),
    ('Porto',            'PRT', 'Norte',    ('Porto', 'Vila Nova de Gaia', 'Matosinhos', 'Gondomar', 'Maia', 'Valongo')),
    ('Santarém',         'STR', 'Centro',   ('Santarém', 'Torres Novas', 'Entroncamento', 'Tomar', 'Almeirim')),
    ('Setúbal',          'STB', 'Lisboa',   ('Setúbal', 'Almada', 'Barreiro', 'Seixal', 'Sesimbra')),
    ('Viana do Castelo', 'VCT', 'Norte',    ('Viana do Castelo', 'Ponte de Lima', 'Caminha', 'Valença')),
    ('Vila Real',        'VRL', 'Norte',    ('Vila Real', 'Chaves', 'Peso da Régua', 'Lamego')),
    ('Viseu',            'VIS', 'Centro',   ('Viseu', 'Lamego', 'Tondela', 'São Pedro do Sul')),
    ('Açores',           'AZR', 'Açores',   ('Ponta Delgada', 'Angra do Heroísmo', 'Horta')),
    ('Madeira',          'MDR', 'Madeira',  ('Funchal', 'Câmara de Lobos', 'Machico', 'Santa Cruz')),
]


_districts: typing.Mapping[str, District] = types.MappingProxyType({
    name: District(name, code, region, cities) for name, code, region, cities in _table
})

assert len(_districts) == 20

del _table


# District names to IMT locations
_locations = {
    'Açores': 'azores',
    'Madeira': 'madeira',
}


def get_district_info(name:str) -> District|None:
    try:
        return _districts.get(name)
    except TypeError:
        return None


def get_all_districts() -> list[str]:
    return list(_districts.keys())


def get_cities_by_district(name:str) -> list[str]:
    district = get_district_info(name)
    if district is None:
        return []
    return list(district.cities)


def get_districts_by_region(region:str) -> list[str]:
    return [district.name for district in _districts.values() if district.region == region]


def district_location(name:str) -> str:
    """Location for IMT purposes; anything but the autonomous regions is mainland."""
    return _locations.get(name, 'mainland')

"""
Tests for the breakpoint tables used to display quantities.
"""

import pytest

from constants import MAX_CANONICAL
from models import UnitSystem, Weight, Volume, Ingredient
from services import format_weight, format_volume, format_quantity, format_ingredient, parse_volume
from services.formatting import BREAKPOINT_TABLES

METRIC = UnitSystem.METRIC
IMPERIAL = UnitSystem.IMPERIAL


@pytest.mark.parametrize('key', list(BREAKPOINT_TABLES))
def test_tables_are_exhaustive_and_ascending(key):
    bounds = [bound for bound, _ in BREAKPOINT_TABLES[key]]
    assert bounds[0] == 0
    assert all(a < b for a, b in zip(bounds, bounds[1:]))
    assert bounds[-1] <= MAX_CANONICAL


@pytest.mark.parametrize('key', list(BREAKPOINT_TABLES))
def test_every_boundary_renders(key):
    kind, system = key
    for bound, _ in BREAKPOINT_TABLES[key]:
        for value in (bound, max(bound - 1, 0), bound + 1, MAX_CANONICAL):
            assert isinstance(format_quantity(kind(value), system), str)


@pytest.mark.parametrize('value, expected', [
    (0, '0 g'),
    (1, '1 mg'),
    (999, '999 mg'),
    (1_000, '1 g'),
    (999_999, '999 g'),
    (1_000_000, '1.0 kg'),
    (2_540_000, '2.5 kg'),
    (9_999_999, '10.0 kg'),
    (10_000_000, '10 kg'),
    (10_000_000_000, '10000 kg'),
])
def test_metric_weight(value, expected):
    assert format_weight(Weight.new_metric(value)) == expected


@pytest.mark.parametrize('value, expected', [
    (0, '0 oz'),
    (249, '0 oz'),
    (250, '1/8 tsp'),
    (500, '1/4 tsp'),
    (1_000, '1/2 tsp'),
    (2_000, '1 tsp'),
    (4_000, '1/2 tbsp'),
    (8_000, '1 tbsp'),
    (11_999, '1 tbsp'),
    (28_349, '1.0 oz'),
    (28_349 * 8 - 1, '8.0 oz'),
    (28_349 * 8, '0.5 g'),
    (453_592 * 2, '2.0 g'),
    (453_592 * 4, '4 g'),
    (453_592 * 10 + 5, '10 g'),
])
def test_imperial_weight(value, expected):
    assert format_weight(Weight.new_imperial(value)) == expected


@pytest.mark.parametrize('value, expected', [
    (0, '0 ml'),
    (499, '0 ml'),
    (500, '0 ml'),
    (1_000, '1 ml'),
    (250_000, '250 ml'),
    (499_999, '499 ml'),
    (500_000, '0.5 l'),
    (1_500_000, '1.5 l'),
    (5_000_000, '5 l'),
])
def test_metric_volume(value, expected):
    assert format_volume(Volume.new_metric(value)) == expected


@pytest.mark.parametrize('value, expected', [
    (0, '0 tsp'),
    (327, '0 tsp'),
    (328, '1/8 tsp'),
    (739, '1/4 tsp'),
    (1_478, '1/2 tsp'),
    (2_956, '3/4 tsp'),
    (4_435, '1 tsp'),
    (4_928, '1 tsp'),
    (5_913, '1/2 tbsp'),
    (8_871, '1 tbsp'),
    (14_786, '1 tbsp'),
    (17_743, '0.6 floz'),
    (29_573, '1.0 floz'),
    (236_584, '1.0 cups'),
    (236_588, '1.0 cups'),
    (899_035, '0.9 quarts'),
    (946_353 * 5, '5 quarts'),
])
def test_imperial_volume(value, expected):
    assert format_volume(Volume.new_imperial(value)) == expected


def test_explicit_system_overrides_tag():
    w = Weight.new_metric(2_000)
    assert format_weight(w) == '2 g'
    assert format_weight(w, IMPERIAL) == '1 tsp'
    assert format_quantity(w.as_imperial(), METRIC) == '2 g'


def test_format_quantity_rejects_other_types():
    with pytest.raises(TypeError):
        format_quantity(42)


def test_format_ingredient():
    water = Ingredient(name='water', quantity=parse_volume('1 cup'))
    assert format_ingredient(water) == '236 ml water'
    assert format_ingredient(water.as_imperial()) == '1.0 cups water'
    assert format_ingredient(Ingredient(name='salt')) == 'salt'

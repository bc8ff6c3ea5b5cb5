"""
Formatting Service

Renders canonical quantities as display strings. Each unit system has a
breakpoint table per quantity kind: an ascending list of lower bounds,
each with the rule used for values from that bound up to the next one.
Small amounts snap to kitchen fractions, large ones become decimals.
"""

from bisect import bisect_right

from constants import (
    OUNCE, POUND, FLUID_OUNCE, CUP, QUART,
    WEIGHT_OUNCE_LIMIT, WEIGHT_POUND_LIMIT,
    VOLUME_LOWEST_LIMIT, VOLUME_EIGHTH_TSP_LIMIT, VOLUME_QUARTER_TSP_LIMIT,
    VOLUME_HALF_TSP_LIMIT, VOLUME_THREE_QUARTER_TSP_LIMIT, VOLUME_TSP_LIMIT,
    VOLUME_HALF_TBSP_LIMIT, VOLUME_TBSP_LIMIT, VOLUME_OUNCE_LIMIT,
    VOLUME_CUP_LIMIT, VOLUME_QUART_LIMIT,
)
from models import UnitSystem, Weight, Volume


def _label(text):
    return lambda n: text


def _whole(divisor, unit):
    return lambda n: f"{n // divisor} {unit}"


def _decimal(divisor, unit):
    return lambda n: f"{n / divisor:.1f} {unit}"


METRIC_WEIGHT_TABLE = (
    (0, _label('0 g')),
    (1, _whole(1, 'mg')),
    (1_000, _whole(1_000, 'g')),
    (1_000_000, _decimal(1_000_000, 'kg')),
    (10_000_000, _whole(1_000_000, 'kg')),
)

IMPERIAL_WEIGHT_TABLE = (
    (0, _label('0 oz')),
    (250, _label('1/8 tsp')),
    (500, _label('1/4 tsp')),
    (1_000, _label('1/2 tsp')),
    (2_000, _label('1 tsp')),
    (4_000, _label('1/2 tbsp')),
    (8_000, _label('1 tbsp')),
    (12_000, _decimal(OUNCE, 'oz')),
    (WEIGHT_OUNCE_LIMIT, _decimal(POUND, 'g')),
    (WEIGHT_POUND_LIMIT, _whole(POUND, 'g')),
)

METRIC_VOLUME_TABLE = (
    (0, _label('0 ml')),
    (500, _whole(1_000, 'ml')),
    (500_000, _decimal(1_000_000, 'l')),
    (5_000_000, _whole(1_000_000, 'l')),
)

IMPERIAL_VOLUME_TABLE = (
    (0, _label('0 tsp')),
    (VOLUME_LOWEST_LIMIT, _label('1/8 tsp')),
    (VOLUME_EIGHTH_TSP_LIMIT, _label('1/4 tsp')),
    (VOLUME_QUARTER_TSP_LIMIT, _label('1/2 tsp')),
    (VOLUME_HALF_TSP_LIMIT, _label('3/4 tsp')),
    (VOLUME_THREE_QUARTER_TSP_LIMIT, _label('1 tsp')),
    (VOLUME_TSP_LIMIT, _label('1/2 tbsp')),
    (VOLUME_HALF_TBSP_LIMIT, _label('1 tbsp')),
    (VOLUME_TBSP_LIMIT, _decimal(FLUID_OUNCE, 'floz')),
    (VOLUME_OUNCE_LIMIT, _decimal(CUP, 'cups')),
    (VOLUME_CUP_LIMIT, _decimal(QUART, 'quarts')),
    (VOLUME_QUART_LIMIT, _whole(QUART, 'quarts')),
)

BREAKPOINT_TABLES = {
    (Weight, UnitSystem.METRIC): METRIC_WEIGHT_TABLE,
    (Weight, UnitSystem.IMPERIAL): IMPERIAL_WEIGHT_TABLE,
    (Volume, UnitSystem.METRIC): METRIC_VOLUME_TABLE,
    (Volume, UnitSystem.IMPERIAL): IMPERIAL_VOLUME_TABLE,
}

# Lower bounds per table, for bisect
_BOUNDS = {key: [bound for bound, _ in table] for key, table in BREAKPOINT_TABLES.items()}


def _render(kind, value, system):
    """Render value with the last breakpoint whose lower bound is <= value."""
    key = (kind, system)
    index = bisect_right(_BOUNDS[key], value) - 1
    _, rule = BREAKPOINT_TABLES[key][index]
    return rule(value)


def format_weight(weight, system=None):
    return _render(Weight, weight.get(), system or weight.system)


def format_volume(volume, system=None):
    return _render(Volume, volume.get(), system or volume.system)


def format_quantity(quantity, system=None):
    """Format a Weight or Volume, in its own unit system unless one is given."""
    if isinstance(quantity, Weight):
        return format_weight(quantity, system)
    if isinstance(quantity, Volume):
        return format_volume(quantity, system)
    raise TypeError(f"Expected a Weight or Volume, got {quantity!r}")


def format_ingredient(ingredient, system=None):
    """Format an ingredient as '<quantity> <name>', or just the name."""
    if ingredient.quantity is None:
        return ingredient.name
    return f"{format_quantity(ingredient.quantity, system or ingredient.system)} {ingredient.name}"

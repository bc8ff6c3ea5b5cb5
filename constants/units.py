"""
Unit Constants and Conversion Tables

Contains the canonical unit factors and the alias tables used to turn
free-text units into milligrams and micro-millilitres.
"""

# Largest canonical value a quantity can hold (unsigned 64-bit)
MAX_CANONICAL = 2 ** 64 - 1

# Weight factors, in milligrams
OUNCE = 28_349
POUND = 453_592

# Volume factors, in 1/1000 ml
TSP = 4_928
TBSP = 14_786
FLUID_OUNCE = 29_573
RICE_CUP = 180_000
CUP = 236_588
QUART = 946_353

# Weight aliases (lowercase singular -> milligrams per unit)
WEIGHT_ALIASES = {
    'mg': 1, 'milligram': 1,
    'cg': 10, 'centigram': 10,
    'dg': 100, 'decigram': 100,
    'g': 1_000, 'gram': 1_000,
    'kg': 1_000_000, 'kilogram': 1_000_000,
    'oz': OUNCE, 'ounce': OUNCE,
    'lb': POUND, 'pound': POUND,
}

# Volume aliases (lowercase singular -> micro-millilitres per unit)
VOLUME_ALIASES = {
    'ml': 1_000, 'milliliter': 1_000, 'millilitre': 1_000,
    'cl': 10_000, 'centiliter': 10_000, 'centilitre': 10_000,
    'dl': 100_000, 'deciliter': 100_000, 'decilitre': 100_000,
    'l': 1_000_000, 'liter': 1_000_000, 'litre': 1_000_000,
    'tsp': TSP,
    'tbsp': TBSP,
    'floz': FLUID_OUNCE,
    'cup': CUP,
    'quart': QUART,
}

# "rice" only counts as a unit when the text also says "cup" ("2 rice cups")
RICE_CUP_ALIAS = 'rice'
RICE_CUP_MARKER = 'cup'

# Imperial weight display limits
WEIGHT_OUNCE_LIMIT = OUNCE * 8
WEIGHT_POUND_LIMIT = POUND * 4

# Imperial volume display limits (integer arithmetic on purpose)
VOLUME_LOWEST_LIMIT = TSP // 15
VOLUME_EIGHTH_TSP_LIMIT = TSP * 12 // 80
VOLUME_QUARTER_TSP_LIMIT = TSP * 12 // 40
VOLUME_HALF_TSP_LIMIT = TSP * 12 // 20
VOLUME_THREE_QUARTER_TSP_LIMIT = TSP * 120000 // 133333
VOLUME_TSP_LIMIT = TSP * 12 // 10
VOLUME_HALF_TBSP_LIMIT = TBSP * 12 // 20
VOLUME_TBSP_LIMIT = TBSP * 12 // 10
VOLUME_OUNCE_LIMIT = FLUID_OUNCE * 8
VOLUME_CUP_LIMIT = QUART * 190 // 200
VOLUME_QUART_LIMIT = QUART * 5

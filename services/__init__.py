"""
Services Package

Business logic modules for the recipe book.
"""

from .errors import (
    MeasurementError,
    EmptyString,
    InvalidFormat,
    UnknownUnit,
    InvalidNumber,
    RecipeError,
    ExpectedTitle,
    ExpectedImageHref,
    ExpectedIngredientsStart,
    ExpectedIngredient,
    ExpectedStepsStart,
    UnexpectedEOF,
    RecipeNotFound,
)

from .parsing import (
    parse_weight,
    parse_volume,
    parse_quantity,
    parse_ingredient,
    parse_recipe,
)

from .formatting import (
    format_weight,
    format_volume,
    format_quantity,
    format_ingredient,
)

from .loading import (
    list_recipes,
    read_recipe_text,
    fetch_recipe_text,
    load_recipe,
)

__all__ = [
    # Errors
    'MeasurementError',
    'EmptyString',
    'InvalidFormat',
    'UnknownUnit',
    'InvalidNumber',
    'RecipeError',
    'ExpectedTitle',
    'ExpectedImageHref',
    'ExpectedIngredientsStart',
    'ExpectedIngredient',
    'ExpectedStepsStart',
    'UnexpectedEOF',
    'RecipeNotFound',
    # Parsing
    'parse_weight',
    'parse_volume',
    'parse_quantity',
    'parse_ingredient',
    'parse_recipe',
    # Formatting
    'format_weight',
    'format_volume',
    'format_quantity',
    'format_ingredient',
    # Loading
    'list_recipes',
    'read_recipe_text',
    'fetch_recipe_text',
    'load_recipe',
]

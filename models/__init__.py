"""
Models Package

Exports the measurement and recipe value types used throughout the application.
"""

from .measurements import UnitSystem, Weight, Volume
from .recipe import QUANTITY_TYPES, is_quantity, Ingredient, Step, Image, Recipe

__all__ = [
    'UnitSystem',
    'Weight',
    'Volume',
    'QUANTITY_TYPES',
    'is_quantity',
    'Ingredient',
    'Step',
    'Image',
    'Recipe',
]

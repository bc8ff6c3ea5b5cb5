"""
Measurement Models

Weight and Volume stored as integer counts of a canonical unit
(milligrams and 1/1000 ml). The unit system only picks how a value is
displayed; switching it never touches the stored number.
"""

import enum
from dataclasses import dataclass, replace

from constants import MAX_CANONICAL, OUNCE, POUND, TSP, TBSP, FLUID_OUNCE, RICE_CUP, CUP, QUART


class UnitSystem(enum.Enum):
    METRIC = 'metric'
    IMPERIAL = 'imperial'

    @classmethod
    def from_name(cls, name, default=None):
        """Look up a system by its query-string name, falling back to default."""
        if not name:
            return default if default is not None else cls.METRIC
        try:
            return cls(name.strip().lower())
        except ValueError:
            return default if default is not None else cls.METRIC


class _Canonical:
    """Shared behaviour of the canonical quantity types."""

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f'{type(self).__name__} value must be an int, got {self.value!r}')
        if not 0 <= self.value <= MAX_CANONICAL:
            raise ValueError(f'{type(self).__name__} value out of range: {self.value}')

    @classmethod
    def new_metric(cls, value):
        return cls(value, UnitSystem.METRIC)

    @classmethod
    def new_imperial(cls, value):
        return cls(value, UnitSystem.IMPERIAL)

    def get(self):
        return self.value

    def as_imperial(self):
        return replace(self, system=UnitSystem.IMPERIAL)

    def as_metric(self):
        return replace(self, system=UnitSystem.METRIC)

    def as_system(self, system):
        return replace(self, system=system)


@dataclass(frozen=True)
class Weight(_Canonical):
    """Weight in milligrams."""
    value: int = 0
    system: UnitSystem = UnitSystem.METRIC

    OUNCE = OUNCE
    POUND = POUND


@dataclass(frozen=True)
class Volume(_Canonical):
    """Volume in 1/1000 ml."""
    value: int = 0
    system: UnitSystem = UnitSystem.METRIC

    TSP = TSP
    TBSP = TBSP
    OUNCE = FLUID_OUNCE
    RICE_CUP = RICE_CUP
    CUP = CUP
    QUART = QUART

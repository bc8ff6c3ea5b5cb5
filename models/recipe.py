"""
Recipe Models

Immutable value objects produced by the recipe document parser. A parsed
recipe is metric; as_imperial() and as_metric() return re-tagged copies.
"""

from dataclasses import dataclass, field, replace

from .measurements import UnitSystem, Weight, Volume

# A quantity is either a Weight or a Volume
QUANTITY_TYPES = (Weight, Volume)


def is_quantity(value):
    return isinstance(value, QUANTITY_TYPES)


@dataclass(frozen=True)
class Ingredient:
    """One line of the ingredient list: a name and an optional quantity."""
    name: str
    quantity: object = None
    system: UnitSystem = UnitSystem.METRIC

    def __post_init__(self):
        if self.quantity is not None:
            if not is_quantity(self.quantity):
                raise TypeError(f'Ingredient quantity must be a Weight or Volume, got {self.quantity!r}')
            # The quantity's tag is authoritative
            object.__setattr__(self, 'system', self.quantity.system)

    def as_system(self, system):
        quantity = self.quantity.as_system(system) if self.quantity is not None else None
        return replace(self, quantity=quantity, system=system)

    def as_imperial(self):
        return self.as_system(UnitSystem.IMPERIAL)

    def as_metric(self):
        return self.as_system(UnitSystem.METRIC)


@dataclass(frozen=True)
class Step:
    body: str


@dataclass(frozen=True)
class Image:
    href: str


@dataclass(frozen=True)
class Recipe:
    title: str
    image: Image = None
    introduction: str = None
    ingredients: tuple = field(default_factory=tuple)
    steps: tuple = field(default_factory=tuple)
    system: UnitSystem = UnitSystem.METRIC

    def __post_init__(self):
        object.__setattr__(self, 'ingredients', tuple(i.as_system(self.system) for i in self.ingredients))
        object.__setattr__(self, 'steps', tuple(self.steps))

    def as_system(self, system):
        return replace(self, system=system)

    def as_imperial(self):
        return self.as_system(UnitSystem.IMPERIAL)

    def as_metric(self):
        return self.as_system(UnitSystem.METRIC)

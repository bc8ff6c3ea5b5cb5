"""
Error Taxonomy

Exceptions raised by the quantity parser and the recipe document parser.
The base classes double as the generic custom-message variant, used to
wrap lower-level numeric or network failures.
"""


class MeasurementError(ValueError):
    """Raised when a quantity string cannot be parsed."""
    pass


class EmptyString(MeasurementError):
    def __init__(self):
        super().__init__('String is empty')


class UnknownUnit(MeasurementError):
    def __init__(self):
        super().__init__('Unknown unit')


class InvalidFormat(MeasurementError):
    def __init__(self):
        super().__init__('Invalid format')


class InvalidNumber(MeasurementError):
    """Raised when the amount in front of the unit is not a number."""
    pass


class RecipeError(ValueError):
    """Raised when a recipe document cannot be parsed or loaded."""
    pass


class ExpectedTitle(RecipeError):
    def __init__(self):
        super().__init__('Expected a title for the recipe')


class ExpectedImageHref(RecipeError):
    def __init__(self):
        super().__init__('Encountered `image:` but no subsequent href was provided')


class ExpectedIngredientsStart(RecipeError):
    def __init__(self):
        super().__init__('Expected `---ingredients` to indicate the start of the ingredient list')


class ExpectedIngredient(RecipeError):
    def __init__(self):
        super().__init__('Expected an ingredient, found an empty string')


class ExpectedStepsStart(RecipeError):
    def __init__(self):
        super().__init__('Expected `---steps` to indicate the start of the recipe steps')


class UnexpectedEOF(RecipeError):
    def __init__(self, expected):
        self.expected = expected
        super().__init__(f'Expected {expected}, found EOF')


class RecipeNotFound(RecipeError):
    def __init__(self, name):
        self.name = name
        super().__init__(f'No recipe named {name!r}')

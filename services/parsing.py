"""
Parsing Service

Functions for parsing quantity strings, ingredient lines and whole recipe
documents into model objects.
"""

import logging
import math

from constants import (
    MAX_CANONICAL, WEIGHT_ALIASES, VOLUME_ALIASES, RICE_CUP, RICE_CUP_ALIAS, RICE_CUP_MARKER,
    SECTION_SEPARATOR, LINE_SEPARATOR, IMAGE_MARKER, INGREDIENTS_MARKER, STEPS_MARKER,
)
from models import Weight, Volume, Ingredient, Step, Image, Recipe
from .errors import (
    MeasurementError, EmptyString, InvalidFormat, UnknownUnit, InvalidNumber,
    ExpectedTitle, ExpectedImageHref, ExpectedIngredientsStart, ExpectedIngredient,
    ExpectedStepsStart, UnexpectedEOF,
)

logger = logging.getLogger(__name__)


def _split_amount(text):
    """
    Split a quantity string into (amount, unit).

    '10 pounds of eggs' -> (10.0, 'pound'). Anything after the unit is
    ignored so callers can keep free text after the quantity.
    """
    if not text:
        raise EmptyString()

    amount, sep, rest = text.partition(' ')
    if not sep:
        raise InvalidFormat()

    unit = rest.partition(' ')[0].strip().lower()
    # Naive plural handling: 'pounds' -> 'pound', 'KGs' -> 'kg'
    if unit.endswith('s'):
        unit = unit[:-1]

    amount = amount.strip()
    # float() also takes '1_000' and non-ASCII digits; plain decimals only
    if '_' in amount or not amount.isascii():
        raise InvalidNumber(f"invalid float literal: {amount!r}")
    try:
        amount = float(amount)
    except ValueError as e:
        raise InvalidNumber(str(e)) from e

    return amount, unit


def _to_canonical(amount, factor):
    """Truncate amount * factor to an integer, saturating to the canonical range."""
    value = amount * factor
    if math.isnan(value) or value <= 0:
        return 0
    if value >= MAX_CANONICAL:
        return MAX_CANONICAL
    return int(value)


def parse_weight(text):
    """Parse text like '10 g' or '2 pounds of flour' into a metric Weight (mg)."""
    amount, unit = _split_amount(text)

    factor = WEIGHT_ALIASES.get(unit)
    if factor is None:
        raise UnknownUnit()

    return Weight.new_metric(_to_canonical(amount, factor))


def parse_volume(text):
    """Parse text like '1 cup' or '2 rice cups' into a metric Volume (1/1000 ml)."""
    amount, unit = _split_amount(text)

    if unit == RICE_CUP_ALIAS and RICE_CUP_MARKER in text:
        factor = RICE_CUP
    else:
        factor = VOLUME_ALIASES.get(unit)
    if factor is None:
        raise UnknownUnit()

    return Volume.new_metric(_to_canonical(amount, factor))


def parse_quantity(text):
    """Parse text as a Weight, falling back to a Volume. Raises the volume error if both fail."""
    try:
        return parse_weight(text)
    except UnknownUnit:
        return parse_volume(text)


def parse_ingredient(line):
    """
    Parse one ingredient line like '2 cups flour' into an Ingredient.

    The first two words are tried as a quantity (weight, then volume). If
    neither parses, the whole line is the ingredient name.
    """
    if not line:
        raise ExpectedIngredient()

    first_space = line.find(' ')
    second_space = line.find(' ', first_space + 1) if first_space != -1 else -1
    amount_end = second_space if second_space != -1 else len(line)

    candidate = line[:amount_end].rstrip()

    for parse in (parse_weight, parse_volume):
        try:
            quantity = parse(candidate)
        except MeasurementError:
            continue
        return Ingredient(name=line[amount_end:].lstrip(), quantity=quantity)

    return Ingredient(name=line, quantity=None)


# ============================================
# RECIPE DOCUMENT GRAMMAR
# ============================================
# Each stage takes the remaining text and returns (value, remaining text).

def _parse_title(text):
    end = text.find(SECTION_SEPARATOR)
    if end == -1:
        raise ExpectedTitle()
    return text[:end], text[end:].lstrip()


def _parse_image(text):
    if not text.startswith(IMAGE_MARKER):
        return None, text

    end = text.find(SECTION_SEPARATOR)
    if end == -1:
        raise ExpectedImageHref()
    href = text[len(IMAGE_MARKER):end].lstrip()
    return Image(href=href), text[end:].lstrip()


def _parse_introduction(text):
    if text.startswith(INGREDIENTS_MARKER):
        return None, text

    end = text.find(SECTION_SEPARATOR)
    if end == -1:
        # Same error as a dangling image section
        raise ExpectedImageHref()
    return text[:end].lstrip(), text[end:].lstrip()


def _parse_ingredients(text):
    if not text.startswith(INGREDIENTS_MARKER):
        raise ExpectedIngredientsStart()

    text = text[len(INGREDIENTS_MARKER):].lstrip()
    ingredients = []
    # The list ends at the first blank line
    while not text.startswith(LINE_SEPARATOR):
        end = text.find(LINE_SEPARATOR)
        if end == -1:
            raise UnexpectedEOF('Ingredient')
        ingredients.append(parse_ingredient(text[:end]))
        text = text[end + 1:]

    return ingredients, text.lstrip()


def _parse_steps(text):
    if not text.startswith(STEPS_MARKER):
        raise ExpectedStepsStart()

    text = text[len(STEPS_MARKER):].strip()
    return [Step(body=paragraph) for paragraph in text.split(SECTION_SEPARATOR)]


def parse_recipe(text):
    """
    Parse a recipe document into a metric Recipe.

    Layout: title, optional 'image:' paragraph, optional introduction
    paragraph, '---ingredients' with one ingredient per line, a blank line,
    then '---steps' with one step per paragraph. The first error stops the
    parse; no partial recipe is returned.
    """
    title, rest = _parse_title(text)
    logger.debug("Parsed title: %r", title)

    image, rest = _parse_image(rest)
    logger.debug("Parsed image: %r", image)

    introduction, rest = _parse_introduction(rest)
    logger.debug("Parsed introduction: %r", introduction)

    ingredients, rest = _parse_ingredients(rest)
    logger.debug("Parsed %d ingredients", len(ingredients))

    steps = _parse_steps(rest)
    logger.debug("Parsed %d steps", len(steps))

    return Recipe(
        title=title,
        image=image,
        introduction=introduction,
        ingredients=ingredients,
        steps=steps,
    )

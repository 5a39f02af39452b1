from __future__ import annotations

import math
import re
from dataclasses import replace
from fractions import Fraction
from typing import Union

from .ingredients import QUANTITY_PATTERN, evaluate_quantity
from .types import Ingredient, Recipe

FRACTION_TOLERANCE = 0.01
# ruido de ponto flutuante, nao arredondamento de exibicao
INTEGER_TOLERANCE = 1e-9
COMMON_FRACTIONS: tuple[tuple[float, str], ...] = (
    (1 / 4, "1/4"),
    (1 / 3, "1/3"),
    (1 / 2, "1/2"),
    (2 / 3, "2/3"),
    (3 / 4, "3/4"),
)

_NUMBER = rf"({QUANTITY_PATTERN})"
_HOURS = r"(?:hours?|hrs?)\b"
_MINUTES = r"(?:minutes?|mins?)\b"
# "1 hour 30 minutes" conta como uma unica expressao de tempo
_TIME_RE = re.compile(
    rf"{_NUMBER}\s*{_HOURS}(?:\s*(?:and\s+)?{_NUMBER}\s*{_MINUTES})?|{_NUMBER}\s*{_MINUTES}",
    re.IGNORECASE,
)

Factor = Union[Fraction, float]


def _plural(value: int, word: str) -> str:
    return f"{value} {word}" if value == 1 else f"{value} {word}s"


def format_minutes(minutes: float) -> str:
    total = int(round(minutes))
    if total < 60:
        return _plural(total, "minute")
    hours, remainder = divmod(total, 60)
    text = _plural(hours, "hour")
    if remainder:
        text += " " + _plural(remainder, "minute")
    return text


def _time_in_minutes(match: re.Match[str]) -> Fraction | None:
    hours, extra_minutes, only_minutes = match.groups()
    if hours is None:
        return evaluate_quantity(only_minutes)

    hour_value = evaluate_quantity(hours)
    extra_value = evaluate_quantity(extra_minutes) if extra_minutes else Fraction(0)
    if hour_value is None or extra_value is None:
        return None
    return hour_value * 60 + extra_value


def scale_cooking_time(cooking_time: str, factor: Factor) -> str:
    """Reescala o primeiro tempo encontrado; sem tempo reconhecivel devolve o texto original."""
    match = _TIME_RE.search(cooking_time)
    if not match:
        return cooking_time

    minutes = _time_in_minutes(match)
    if minutes is None:
        return cooking_time

    scaled = format_minutes(minutes * factor)
    return cooking_time[: match.start()] + scaled + cooking_time[match.end():]


def _scale_ingredient(ingredient: Ingredient, factor: Fraction) -> Ingredient:
    return replace(ingredient, quantity=float(Fraction(ingredient.quantity) * factor))


def scale_recipe(recipe: Recipe, new_servings: int) -> Recipe:
    """
    Nova receita com quantidades multiplicadas por new_servings / servings.
    A receita original nunca e alterada. Sem servings de referencia devolve
    uma copia inalterada.
    """
    if new_servings <= 0:
        raise ValueError("new_servings must be a positive integer")

    if recipe.servings is None:
        return replace(recipe)

    factor = Fraction(new_servings, recipe.servings)
    return replace(
        recipe,
        ingredients=tuple(_scale_ingredient(ing, factor) for ing in recipe.ingredients),
        cooking_time=(
            scale_cooking_time(recipe.cooking_time, factor) if recipe.cooking_time else recipe.cooking_time
        ),
        servings=new_servings,
    )


def format_quantity(quantity: float) -> str:
    nearest = round(quantity)
    if abs(quantity - nearest) < INTEGER_TOLERANCE:
        return str(int(nearest))

    whole = math.floor(quantity)
    remainder = quantity - whole
    for value, label in COMMON_FRACTIONS:
        if abs(remainder - value) < FRACTION_TOLERANCE:
            return f"{whole} {label}" if whole else label

    return f"{quantity:.2f}"

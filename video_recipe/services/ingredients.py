from __future__ import annotations

import re
from fractions import Fraction
from typing import Optional

from .types import Ingredient

WHOLE_UNIT = "whole"

UNIT_ALIASES: dict[str, str] = {
    "tbsp": "tablespoons",
    "tablespoon": "tablespoons",
    "tsp": "teaspoons",
    "teaspoon": "teaspoons",
    "oz": "ounces",
    "ounce": "ounces",
    "lb": "pounds",
    "lbs": "pounds",
    "pound": "pounds",
    "g": "grams",
    "gram": "grams",
    "ml": "milliliters",
    "milliliter": "milliliters",
    "l": "liters",
    "liter": "liters",
    "c": "cups",
    "cup": "cups",
}

# quantidade: "1 1/2" | "1/2" | "1.5" | ".5" | "2"
QUANTITY_PATTERN = r"\d+\s+\d+/\d+|\d+/\d+|\d*\.?\d+"
_INGREDIENT_RE = re.compile(rf"^({QUANTITY_PATTERN})\s*(?:([A-Za-z]+)\s+)?(.+)$")
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")


def evaluate_quantity(token: str) -> Optional[Fraction]:
    """
    Avalia int, decimal, a/b ou "a b/c" como racional.
    Retorna None para denominador zero ou token fora da gramatica.
    """
    token = token.strip()
    try:
        mixed = _MIXED_RE.match(token)
        if mixed:
            whole, num, den = (int(g) for g in mixed.groups())
            return whole + Fraction(num, den)

        simple = _FRACTION_RE.match(token)
        if simple:
            num, den = (int(g) for g in simple.groups())
            return Fraction(num, den)

        return Fraction(token)
    except (ValueError, ZeroDivisionError):
        return None


def normalize_unit(unit: Optional[str]) -> str:
    if not unit:
        return WHOLE_UNIT
    lowered = unit.lower()
    return UNIT_ALIASES.get(lowered, lowered)


def parse_ingredient(line: str) -> Ingredient:
    text = line.strip()
    match = _INGREDIENT_RE.match(text)

    if match:
        quantity_token, unit, name = match.groups()
        quantity = evaluate_quantity(quantity_token)
        if quantity is not None:
            return Ingredient(
                quantity=float(quantity),
                unit=normalize_unit(unit),
                name=name.strip(),
                original_text=line,
            )

    # Sem quantidade explicita ("salt to taste"): 1 whole
    return Ingredient(quantity=1.0, unit=WHOLE_UNIT, name=text, original_text=line)

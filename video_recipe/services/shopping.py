from __future__ import annotations

import json
import logging
import re
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import IngredientNormalizationError
from .export import ingredient_display_line
from .gemini_client import TextGenerator
from .prompts import build_shopping_prompt
from .types import Ingredient, ShoppingItem

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


class ShoppingTerm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    search_term: str = Field(alias="searchTerm")
    full_description: str = Field(alias="fullDescription")

    @field_validator("search_term")
    @classmethod
    def check_generic_name(cls, value: str) -> str:
        words = value.split()
        if not 1 <= len(words) <= 2:
            raise ValueError("searchTerm must have 1 or 2 words")
        for word in words:
            if any(ch.isdigit() for ch in word):
                raise ValueError("searchTerm must not contain quantities")
            if not word[0].isupper():
                raise ValueError("searchTerm words must be capitalized")
        return " ".join(words)


_TERMS_ADAPTER = TypeAdapter(list[ShoppingTerm])


def _strip_code_fences(text: str) -> str:
    return _CODE_FENCE.sub("", text.strip()).replace("```", "").strip()


def parse_shopping_terms(text: str) -> list[ShoppingItem]:
    cleaned = _strip_code_fences(text)
    try:
        terms = _TERMS_ADAPTER.validate_python(json.loads(cleaned))
    except json.JSONDecodeError as error:
        logger.error("Resposta de normalizacao nao e JSON: %r", cleaned[:200])
        raise IngredientNormalizationError("Failed to normalize ingredients") from error
    except ValidationError as error:
        logger.error("Resposta de normalizacao fora do contrato: %s", error)
        raise IngredientNormalizationError("Failed to normalize ingredients") from error

    return [ShoppingItem(search_term=t.search_term, full_description=t.full_description) for t in terms]


def normalize_for_shopping(
    ingredients: Sequence[Ingredient],
    generator: TextGenerator,
) -> list[ShoppingItem]:
    if not ingredients:
        return []

    lines = [ingredient_display_line(ing) for ing in ingredients]
    response = generator.generate_content(build_shopping_prompt(lines))
    return parse_shopping_terms(response)

from __future__ import annotations

from typing import Optional

from .ingredients import WHOLE_UNIT
from .scaling import format_quantity
from .types import Ingredient, Recipe

NOT_SPECIFIED = "Not specified"


def ingredient_display_line(ingredient: Ingredient) -> str:
    unit = "" if ingredient.unit == WHOLE_UNIT else f" {ingredient.unit}"
    return f"{format_quantity(ingredient.quantity)}{unit} {ingredient.name}"


def recipe_to_markdown(recipe: Recipe, url: Optional[str] = None) -> str:
    sections = [
        f"# {recipe.title}",
        recipe.description,
        # secao do video so quando a URL de origem e conhecida
        f"## Video\n{url}" if url else "",
        f"## Cooking Time\n{recipe.cooking_time or NOT_SPECIFIED}",
        f"## Servings\n{recipe.servings or NOT_SPECIFIED}",
        "## Ingredients\n" + "\n".join(f"- {ingredient_display_line(ing)}" for ing in recipe.ingredients),
        "## Instructions\n" + "\n".join(f"{i}. {step}" for i, step in enumerate(recipe.steps, start=1)),
    ]
    if recipe.tips:
        sections.append("## Tips\n" + "\n".join(f"- {tip}" for tip in recipe.tips))

    return "\n\n".join(section for section in sections if section) + "\n"

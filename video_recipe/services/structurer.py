from __future__ import annotations

import logging
import re
from typing import Any, Sequence, Union

from .gemini_client import TextGenerator
from .ingredients import parse_ingredient
from .prompts import build_recipe_prompt
from .types import Recipe, TranscriptSegment

logger = logging.getLogger(__name__)

TITLE = "TITLE:"
DESCRIPTION = "DESCRIPTION:"
COOKING_TIME = "COOKING TIME:"
SERVINGS = "SERVINGS:"
INGREDIENTS = "INGREDIENTS:"
INSTRUCTIONS = "INSTRUCTIONS:"
TIPS = "TIPS:"

_BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")
_STEP_NUMBER = re.compile(r"^\d+\.\s*")
_FIRST_INT = re.compile(r"\d+")


def join_transcript(transcript: Union[str, Sequence[TranscriptSegment]]) -> str:
    if isinstance(transcript, str):
        return transcript
    return " ".join(segment.text for segment in transcript)


def _strip_marker(block: str, marker: str) -> str:
    return block[len(marker):].strip()


def _lines(body: str) -> list[str]:
    return [line.strip() for line in body.split("\n") if line.strip()]


def _dash_items(body: str) -> list[str]:
    return [line[1:].strip() for line in _lines(body) if line.startswith("-")]


def _parse_servings(value: str) -> int | None:
    match = _FIRST_INT.search(value)
    if not match:
        return None
    servings = int(match.group(0))
    return servings if servings > 0 else None


def _parse_time_and_servings(block: str, fields: dict[str, Any]) -> None:
    for line in block.split("\n"):
        if COOKING_TIME in line:
            cooking_time = line.split(COOKING_TIME, 1)[1].strip()
            fields["cooking_time"] = cooking_time or None
        if SERVINGS in line:
            fields["servings"] = _parse_servings(line.split(SERVINGS, 1)[1])


def parse_recipe_text(text: str) -> Recipe:
    """
    Converte a resposta em texto do modelo para Recipe.

    Cada bloco separado por linha em branco e roteado pelo marcador inicial.
    Blocos desconhecidos sao ignorados e secoes ausentes ficam com o valor
    padrao, sem levantar erro.
    """
    fields: dict[str, Any] = {}
    blocks = _BLOCK_SEPARATOR.split(text.replace("\r\n", "\n"))

    for raw_block in blocks:
        block = raw_block.strip()
        if not block:
            continue

        if block.startswith(TITLE):
            fields["title"] = _strip_marker(block, TITLE)
        elif block.startswith(DESCRIPTION):
            fields["description"] = _strip_marker(block, DESCRIPTION)
        elif COOKING_TIME in block or SERVINGS in block:
            _parse_time_and_servings(block, fields)
        elif block.startswith(INGREDIENTS):
            fields["ingredients"] = tuple(
                parse_ingredient(item) for item in _dash_items(_strip_marker(block, INGREDIENTS))
            )
        elif block.startswith(INSTRUCTIONS):
            fields["steps"] = tuple(
                _STEP_NUMBER.sub("", line)
                for line in _lines(_strip_marker(block, INSTRUCTIONS))
                if _STEP_NUMBER.match(line)
            )
        elif block.startswith(TIPS):
            fields["tips"] = tuple(_dash_items(_strip_marker(block, TIPS)))

    missing = [name for name in ("title", "ingredients", "steps") if name not in fields]
    if missing:
        logger.warning("Resposta do modelo sem secoes: %s", ", ".join(missing))

    return Recipe(**fields)


def recipe_to_text(recipe: Recipe) -> str:
    """Serializa a receita no mesmo formato de secoes que o prompt exige."""
    blocks = [f"{TITLE} {recipe.title}", f"{DESCRIPTION} {recipe.description}"]

    time_lines = []
    if recipe.cooking_time:
        time_lines.append(f"{COOKING_TIME} {recipe.cooking_time}")
    if recipe.servings is not None:
        time_lines.append(f"{SERVINGS} {recipe.servings}")
    if time_lines:
        blocks.append("\n".join(time_lines))

    blocks.append("\n".join([INGREDIENTS] + [f"- {ing.original_text}" for ing in recipe.ingredients]))
    blocks.append(
        "\n".join([INSTRUCTIONS] + [f"{i}. {step}" for i, step in enumerate(recipe.steps, start=1)])
    )
    if recipe.tips:
        blocks.append("\n".join([TIPS] + [f"- {tip}" for tip in recipe.tips]))

    return "\n\n".join(blocks)


def structure_recipe(
    transcript: Union[str, Sequence[TranscriptSegment]],
    generator: TextGenerator,
) -> Recipe:
    text = join_transcript(transcript)
    logger.info("Estruturando receita a partir de %d caracteres de transcript", len(text))
    response = generator.generate_content(build_recipe_prompt(text))
    return parse_recipe_text(response)

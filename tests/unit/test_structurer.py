from __future__ import annotations

import pytest

from video_recipe.services.errors import StructuringFailedError
from video_recipe.services.prompts import RECIPE_PROMPT
from video_recipe.services.structurer import parse_recipe_text, recipe_to_text, structure_recipe
from video_recipe.services.types import TranscriptSegment

WELL_FORMED = """TITLE: Garlic Butter Pasta

DESCRIPTION: A quick weeknight pasta.
Rich and buttery.

COOKING TIME: 25 minutes
SERVINGS: 4 servings

INGREDIENTS:
- 1/2 lb spaghetti
- 2 tbsp butter
- 3 cloves garlic, minced
- salt to taste

INSTRUCTIONS:
1. Boil the pasta.
2. Melt the butter and fry the garlic.
3. Toss everything together.

TIPS:
- Save some pasta water.
- Use fresh garlic.
"""


class GeneratorStub:
    def __init__(self, response: str = WELL_FORMED) -> None:
        self.response = response
        self.prompts: list[str] = []

    def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.response


class FailingGenerator:
    def generate_content(self, prompt: str) -> str:
        raise StructuringFailedError("boom")


class TestParseRecipeText:
    def test_parses_every_section(self) -> None:
        recipe = parse_recipe_text(WELL_FORMED)

        assert recipe.title == "Garlic Butter Pasta"
        assert recipe.description == "A quick weeknight pasta.\nRich and buttery."
        assert recipe.cooking_time == "25 minutes"
        assert recipe.servings == 4
        assert [ing.name for ing in recipe.ingredients] == [
            "spaghetti",
            "butter",
            "garlic, minced",
            "salt to taste",
        ]
        assert recipe.ingredients[0].quantity == 0.5
        assert recipe.ingredients[0].unit == "pounds"
        assert recipe.ingredients[0].original_text == "1/2 lb spaghetti"
        assert recipe.steps == (
            "Boil the pasta.",
            "Melt the butter and fry the garlic.",
            "Toss everything together.",
        )
        assert recipe.tips == ("Save some pasta water.", "Use fresh garlic.")

    def test_missing_tips_section_gives_empty_tips(self) -> None:
        text = WELL_FORMED.split("\n\nTIPS:")[0]
        recipe = parse_recipe_text(text)
        assert recipe.tips == ()
        assert len(recipe.steps) == 3

    def test_servings_without_integer_stays_absent(self) -> None:
        recipe = parse_recipe_text("TITLE: Soup\n\nCOOKING TIME: 1 hour\nSERVINGS: a few")
        assert recipe.servings is None
        assert recipe.cooking_time == "1 hour"

    def test_servings_only_block(self) -> None:
        recipe = parse_recipe_text("SERVINGS: 6")
        assert recipe.servings == 6
        assert recipe.cooking_time is None

    def test_ignores_unnumbered_steps_and_undashed_items(self) -> None:
        text = "INGREDIENTS:\n- 1 cup rice\nwater as needed\n\nINSTRUCTIONS:\nFirst, rinse.\n1. Cook the rice."
        recipe = parse_recipe_text(text)
        assert [ing.name for ing in recipe.ingredients] == ["rice"]
        assert recipe.steps == ("Cook the rice.",)

    def test_garbage_yields_empty_recipe(self) -> None:
        recipe = parse_recipe_text("Sorry, I can't help with that.")
        assert recipe.title == ""
        assert recipe.description == ""
        assert recipe.ingredients == ()
        assert recipe.steps == ()
        assert recipe.cooking_time is None
        assert recipe.servings is None
        assert recipe.tips == ()

    def test_windows_line_endings(self) -> None:
        recipe = parse_recipe_text(WELL_FORMED.replace("\n", "\r\n"))
        assert recipe.title == "Garlic Butter Pasta"
        assert len(recipe.ingredients) == 4


class TestRecipeToText:
    def test_round_trip_is_stable(self) -> None:
        recipe = parse_recipe_text(WELL_FORMED)
        assert parse_recipe_text(recipe_to_text(recipe)) == recipe

    def test_round_trip_without_optional_fields(self) -> None:
        recipe = parse_recipe_text("TITLE: Toast\n\nINSTRUCTIONS:\n1. Toast the bread.")
        assert parse_recipe_text(recipe_to_text(recipe)) == recipe


class TestStructureRecipe:
    def test_sends_prompt_with_transcript_once(self) -> None:
        generator = GeneratorStub()
        segments = [
            TranscriptSegment(text="boil pasta", timestamp="00:00:01"),
            TranscriptSegment(text="add butter", timestamp="00:00:05"),
        ]

        recipe = structure_recipe(segments, generator)

        assert generator.prompts == [RECIPE_PROMPT + "boil pasta add butter"]
        assert recipe.title == "Garlic Butter Pasta"

    def test_accepts_plain_text_transcript(self) -> None:
        generator = GeneratorStub()
        structure_recipe("just text", generator)
        assert generator.prompts[0].endswith("Transcript:\njust text")

    def test_transport_failure_propagates(self) -> None:
        with pytest.raises(StructuringFailedError):
            structure_recipe("anything", FailingGenerator())

"""
Prompts enviados ao Gemini.

O formato de secoes do RECIPE_PROMPT e lido por structurer.parse_recipe_text:
qualquer mudanca nos marcadores precisa vir junto com os testes do parser.
"""
from __future__ import annotations

RECIPE_PROMPT = """
You are a professional chef and recipe writer. Analyze the following video transcript and create a well-structured recipe.
Format your response in plain text without any markdown or special characters, following this structure:

TITLE: [Recipe Name]

DESCRIPTION: [2-3 sentences describing the dish]

COOKING TIME: [Total time needed]
SERVINGS: [Just the number, e.g. "4" not "4 servings"]

INGREDIENTS:
- [List each ingredient with quantity in this format: "QUANTITY UNIT INGREDIENT", e.g. "2 cups flour" or "3 whole eggs"]
- Always use numbers for quantities (e.g. "0.5" or "1/2" instead of "half")
- Use standard units: cups, tablespoons (tbsp), teaspoons (tsp), ounces (oz), pounds (lb), grams (g), milliliters (ml), liters (l), whole
- For items without units, use "whole" (e.g. "2 whole eggs")

INSTRUCTIONS:
1. [First step]
2. [Second step]
...

TIPS:
- [Any helpful tips or notes]

Make sure to:
- Keep measurements consistent (use standard US measurements)
- List ingredients in order of use
- Break down instructions into clear, manageable steps
- Include specific temperatures and timing
- Add any helpful tips mentioned in the video

Transcript:
"""

SHOPPING_TERMS_PROMPT = """
Convert these recipe ingredients into simple supermarket search terms.
Return a JSON array of objects with 'searchTerm' and 'fullDescription'.
For searchTerm:
- Use the most basic form (usually 1 word, max 2 words)
- Remove all measurements, numbers, and descriptive words
- Focus on the main ingredient name that would work in a supermarket search
- Capitalize the first letter of each word
For fullDescription, repeat the ingredient line exactly as given.

Examples:
"2 tablespoons extra virgin olive oil, cold pressed" -> [{"searchTerm": "Oil", "fullDescription": "2 tablespoons extra virgin olive oil, cold pressed"}]
"1 pound New York strip steak, 1.5 inches thick" -> [{"searchTerm": "Steak", "fullDescription": "1 pound New York strip steak, 1.5 inches thick"}]
"2-3 cloves garlic, smashed" -> [{"searchTerm": "Garlic", "fullDescription": "2-3 cloves garlic, smashed"}]

Ingredients:
"""


def build_recipe_prompt(transcript: str) -> str:
    return RECIPE_PROMPT + transcript


def build_shopping_prompt(ingredient_lines: list[str]) -> str:
    return SHOPPING_TERMS_PROMPT + "\n".join(ingredient_lines)

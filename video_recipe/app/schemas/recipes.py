from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from video_recipe.services.types import Ingredient, Recipe, ShoppingItem, TranscriptSegment, VideoReference


class IngredientItem(BaseModel):
    quantity: float = Field(ge=0)
    unit: str
    name: str
    originalText: str

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientItem":
        return cls(
            quantity=ingredient.quantity,
            unit=ingredient.unit,
            name=ingredient.name,
            originalText=ingredient.original_text,
        )

    def to_domain(self) -> Ingredient:
        return Ingredient(
            quantity=self.quantity,
            unit=self.unit,
            name=self.name,
            original_text=self.originalText,
        )


class RecipeModel(BaseModel):
    title: str = ""
    description: str = ""
    ingredients: list[IngredientItem] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    cookingTime: Optional[str] = None
    servings: Optional[int] = Field(default=None, gt=0)
    tips: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeModel":
        return cls(
            title=recipe.title,
            description=recipe.description,
            ingredients=[IngredientItem.from_domain(ing) for ing in recipe.ingredients],
            steps=list(recipe.steps),
            cookingTime=recipe.cooking_time,
            servings=recipe.servings,
            tips=list(recipe.tips),
        )

    def to_domain(self) -> Recipe:
        return Recipe(
            title=self.title,
            description=self.description,
            ingredients=tuple(item.to_domain() for item in self.ingredients),
            steps=tuple(self.steps),
            cooking_time=self.cookingTime,
            servings=self.servings,
            tips=tuple(self.tips),
        )


class VideoInfo(BaseModel):
    platform: Literal["youtube", "tiktok", "instagram"]
    id: str

    @classmethod
    def from_domain(cls, reference: VideoReference) -> "VideoInfo":
        return cls(platform=reference.platform.value, id=reference.id)


class TranscriptItem(BaseModel):
    text: str
    timestamp: str

    @classmethod
    def from_domain(cls, segment: TranscriptSegment) -> "TranscriptItem":
        return cls(text=segment.text, timestamp=segment.timestamp)


class ProcessVideoRequest(BaseModel):
    url: str


class ProcessVideoResponse(BaseModel):
    videoInfo: VideoInfo
    transcript: list[TranscriptItem]
    recipe: RecipeModel


class ScaleRequest(BaseModel):
    recipe: RecipeModel
    servings: int = Field(gt=0)


class ScaleResponse(BaseModel):
    recipe: RecipeModel
    displayQuantities: list[str]


class ShoppingTermsRequest(BaseModel):
    ingredients: list[IngredientItem]


class ShoppingTermItem(BaseModel):
    searchTerm: str
    fullDescription: str

    @classmethod
    def from_domain(cls, item: ShoppingItem) -> "ShoppingTermItem":
        return cls(searchTerm=item.search_term, fullDescription=item.full_description)


class MarkdownRequest(BaseModel):
    recipe: RecipeModel
    url: Optional[str] = None


class MarkdownResponse(BaseModel):
    markdown: str

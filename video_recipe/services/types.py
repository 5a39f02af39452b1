from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Platform(str, Enum):
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"


@dataclass(frozen=True)
class VideoReference:
    platform: Platform
    id: str


@dataclass(frozen=True)
class TranscriptSegment:
    text: str
    timestamp: str  # HH:MM:SS


@dataclass(frozen=True)
class Ingredient:
    quantity: float
    unit: str
    name: str
    original_text: str


@dataclass(frozen=True)
class Recipe:
    """
    Structured recipe produced from a transcript.
    Ingredients and steps keep the order the model listed them in.
    """
    title: str = ""
    description: str = ""
    ingredients: tuple[Ingredient, ...] = ()
    steps: tuple[str, ...] = ()
    cooking_time: Optional[str] = None
    servings: Optional[int] = None
    tips: tuple[str, ...] = ()


@dataclass(frozen=True)
class ShoppingItem:
    search_term: str
    full_description: str


@dataclass
class ProcessedVideo:
    reference: VideoReference
    transcript: list[TranscriptSegment] = field(default_factory=list)
    recipe: Recipe = field(default_factory=Recipe)

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from .fetcher import fetch_transcript
from .gemini_client import TextGenerator
from .ids import detect_platform_and_id
from .structurer import join_transcript, structure_recipe
from .types import ProcessedVideo, TranscriptSegment

logger = logging.getLogger(__name__)


def format_transcript(segments: Sequence[TranscriptSegment]) -> str:
    return "\n".join(f"[{segment.timestamp}] {segment.text}" for segment in segments)


def process_video(
    url: str,
    *,
    http_client: httpx.Client,
    generator: TextGenerator,
) -> ProcessedVideo:
    """
    URL -> referencia -> transcript -> receita.

    Qualquer falha de etapa propaga como ServiceError; nunca devolve
    resultado parcial.
    """
    reference = detect_platform_and_id(url)
    logger.info("Processando video %s:%s", reference.platform.value, reference.id)

    transcript = fetch_transcript(reference, http_client)
    logger.info("Transcript com %d segmentos", len(transcript))

    recipe = structure_recipe(join_transcript(transcript), generator)
    logger.info("Receita '%s' com %d ingredientes", recipe.title, len(recipe.ingredients))

    return ProcessedVideo(reference=reference, transcript=list(transcript), recipe=recipe)

# video_recipe/app/routers/recipes.py
from __future__ import annotations

import logging
from typing import NoReturn

import httpx
from fastapi import APIRouter, Depends, HTTPException, status
from starlette.concurrency import run_in_threadpool

from video_recipe.app.deps import get_http_client, get_text_generator
from video_recipe.app.schemas.recipes import (
    MarkdownRequest,
    MarkdownResponse,
    ProcessVideoRequest,
    ProcessVideoResponse,
    RecipeModel,
    ScaleRequest,
    ScaleResponse,
    ShoppingTermItem,
    ShoppingTermsRequest,
    TranscriptItem,
    VideoInfo,
)
from video_recipe.services.errors import (
    FetchFailedError,
    GeminiConfigurationError,
    IngredientNormalizationError,
    InvalidURLError,
    NetworkTimeoutError,
    RateLimitedError,
    ServiceError,
    StructuringFailedError,
    UnsupportedPlatformError,
)
from video_recipe.services.export import recipe_to_markdown
from video_recipe.services.gemini_client import TextGenerator
from video_recipe.services.ingest import process_video
from video_recipe.services.scaling import format_quantity, scale_recipe
from video_recipe.services.shopping import normalize_for_shopping

log = logging.getLogger("recipes")
router = APIRouter(prefix="/recipes", tags=["recipes"])

# Ordem importa: subclasses antes das classes base
_STATUS_BY_ERROR: tuple[tuple[type[ServiceError], int], ...] = (
    (InvalidURLError, status.HTTP_400_BAD_REQUEST),
    (UnsupportedPlatformError, 422),
    (NetworkTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (FetchFailedError, status.HTTP_502_BAD_GATEWAY),
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (StructuringFailedError, status.HTTP_502_BAD_GATEWAY),
    (IngredientNormalizationError, status.HTTP_502_BAD_GATEWAY),
    (GeminiConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for_error(error: ServiceError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _raise_http(error: ServiceError) -> NoReturn:
    status_code = status_for_error(error)
    log.warning("%s: %s", type(error).__name__, error)
    raise HTTPException(status_code=status_code, detail=error.public_message) from error


@router.post("/process-video", response_model=ProcessVideoResponse)
async def post_process_video(
    payload: ProcessVideoRequest,
    http_client: httpx.Client = Depends(get_http_client),
    generator: TextGenerator = Depends(get_text_generator),
) -> ProcessVideoResponse:
    try:
        result = await run_in_threadpool(
            process_video,
            payload.url,
            http_client=http_client,
            generator=generator,
        )
    except ServiceError as error:
        _raise_http(error)

    return ProcessVideoResponse(
        videoInfo=VideoInfo.from_domain(result.reference),
        transcript=[TranscriptItem.from_domain(segment) for segment in result.transcript],
        recipe=RecipeModel.from_domain(result.recipe),
    )


@router.post("/scale", response_model=ScaleResponse)
def post_scale(payload: ScaleRequest) -> ScaleResponse:
    scaled = scale_recipe(payload.recipe.to_domain(), payload.servings)
    return ScaleResponse(
        recipe=RecipeModel.from_domain(scaled),
        displayQuantities=[format_quantity(ing.quantity) for ing in scaled.ingredients],
    )


@router.post("/shopping-terms", response_model=list[ShoppingTermItem])
async def post_shopping_terms(
    payload: ShoppingTermsRequest,
    generator: TextGenerator = Depends(get_text_generator),
) -> list[ShoppingTermItem]:
    ingredients = [item.to_domain() for item in payload.ingredients]
    try:
        items = await run_in_threadpool(normalize_for_shopping, ingredients, generator)
    except ServiceError as error:
        _raise_http(error)

    return [ShoppingTermItem.from_domain(item) for item in items]


@router.post("/markdown", response_model=MarkdownResponse)
def post_markdown(payload: MarkdownRequest) -> MarkdownResponse:
    return MarkdownResponse(markdown=recipe_to_markdown(payload.recipe.to_domain(), url=payload.url))

# video_recipe/app/deps.py (singletons compartilhados entre requests)

from __future__ import annotations

import threading

import httpx

from video_recipe.app.config import settings
from video_recipe.services.fetcher import create_http_client
from video_recipe.services.gemini_client import GeminiClient, TextGenerator

_http_client: httpx.Client | None = None
_gemini: GeminiClient | None = None
_lock = threading.Lock()


def get_http_client() -> httpx.Client:
    global _http_client
    with _lock:
        if _http_client is None:
            _http_client = create_http_client(
                proxy_url=settings.PROXY_URL,
                timeout=settings.HTTP_TIMEOUT_SECONDS,
                user_agent=settings.USER_AGENT,
            )
    return _http_client


def get_text_generator() -> TextGenerator:
    global _gemini
    with _lock:
        if _gemini is None:
            _gemini = GeminiClient(
                api_key=settings.GEMINI_API_KEY,
                model_name=settings.GEMINI_MODEL,
                timeout=settings.GEMINI_TIMEOUT_SECONDS,
            )
    return _gemini


def close_http_client() -> None:
    global _http_client
    with _lock:
        if _http_client is not None:
            _http_client.close()
            _http_client = None

from __future__ import annotations

import logging
from typing import Protocol

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from .errors import GeminiConfigurationError, RateLimitedError, StructuringFailedError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-1.5-flash"
DEFAULT_TIMEOUT_SECONDS = 60.0


class TextGenerator(Protocol):
    def generate_content(self, prompt: str) -> str: ...


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL_NAME,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self._configure_api()
        self._model = genai.GenerativeModel(model_name=self.model_name)

    def _configure_api(self) -> None:
        if not self.api_key:
            raise GeminiConfigurationError("Missing Gemini API key.")
        genai.configure(api_key=self.api_key)

    def generate_content(self, prompt: str) -> str:
        try:
            response = self._model.generate_content(prompt, request_options={"timeout": self.timeout})
        except google_exceptions.ResourceExhausted as err:
            raise RateLimitedError(
                "Limite da API do Gemini atingido. Tente novamente em alguns instantes."
            ) from err
        except google_exceptions.GoogleAPIError as err:
            raise StructuringFailedError(f"Gemini request failed: {err}") from err

        try:
            text = response.text
        except ValueError as err:
            # resposta bloqueada ou sem candidatos
            raise StructuringFailedError(f"Model response did not include text: {err}") from err

        if not text or not text.strip():
            raise StructuringFailedError("Model response did not include text content.")
        logger.debug("Gemini (%s) returned %d chars", self.model_name, len(text))
        return text

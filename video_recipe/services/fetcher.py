from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from .errors import (
    FetchFailedError,
    NetworkTimeoutError,
    TranscriptUnavailableError,
    UnsupportedPlatformError,
)
from .types import Platform, TranscriptSegment, VideoReference

logger = logging.getLogger(__name__)

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT_SECONDS = 15.0

CAPTION_TRACK_PATTERN = re.compile(
    r'"captions":.*?"playerCaptionsTracklistRenderer":.*?"captionTracks":\s*\[.*?"baseUrl":\s*"([^"]+)"',
    re.DOTALL,
)
PLAYER_RESPONSE_PATTERN = re.compile(r"ytInitialPlayerResponse\s*=\s*(?={)")

NO_TRANSCRIPT_SEGMENT = TranscriptSegment(text="No transcript available", timestamp="00:00:00")


def create_http_client(
    proxy_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Cliente HTTP compartilhado (thread-safe), opcionalmente via proxy."""
    return httpx.Client(
        proxy=proxy_url or None,
        timeout=timeout,
        follow_redirects=True,
        headers={"User-Agent": user_agent},
        transport=transport,
    )


def format_timestamp(seconds: float) -> str:
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _get(client: httpx.Client, url: str) -> httpx.Response:
    try:
        response = client.get(url)
    except httpx.TimeoutException as error:
        timeout = client.timeout.read or DEFAULT_TIMEOUT_SECONDS
        raise NetworkTimeoutError(url, timeout) from error
    except httpx.HTTPError as error:
        raise FetchFailedError(f"Erro de rede ao acessar {url}: {error}") from error
    return response


def _safe_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0


def parse_timed_text(xml: str) -> list[TranscriptSegment]:
    soup = BeautifulSoup(xml, "xml")
    return [
        TranscriptSegment(
            text=node.get_text(),
            timestamp=format_timestamp(_safe_float(node.get("start"))),
        )
        for node in soup.find_all("text")
    ]


def _find_caption_url_in_markup(html: str) -> Optional[str]:
    match = CAPTION_TRACK_PATTERN.search(html)
    if not match:
        return None
    return match.group(1).replace("\\u0026", "&")


def _find_caption_url_in_player_response(html: str) -> Optional[str]:
    match = PLAYER_RESPONSE_PATTERN.search(html)
    if not match:
        return None

    try:
        player_response, _ = json.JSONDecoder().raw_decode(html, match.end())
    except json.JSONDecodeError:
        logger.warning("ytInitialPlayerResponse encontrado mas nao e JSON valido")
        return None

    if not isinstance(player_response, dict):
        return None

    tracks = (
        ((player_response.get("captions") or {}).get("playerCaptionsTracklistRenderer") or {})
        .get("captionTracks")
    )
    if not isinstance(tracks, list) or not tracks:
        return None

    first = tracks[0]
    return first.get("baseUrl") if isinstance(first, dict) else None


class TranscriptSource(ABC):
    platform: Platform

    @abstractmethod
    def retrieve(self, video_id: str) -> list[TranscriptSegment]:
        """Retorna os segmentos em ordem ou levanta um ServiceError."""


class YouTubeTranscriptSource(TranscriptSource):
    platform = Platform.YOUTUBE

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def _download_segments(self, caption_url: str) -> list[TranscriptSegment]:
        response = _get(self._client, caption_url)
        if not response.is_success:
            logger.warning("Caption track respondeu HTTP %s", response.status_code)
            return []
        return parse_timed_text(response.text)

    def _fetch_watch_page(self, video_id: str) -> str:
        url = YOUTUBE_WATCH_URL.format(video_id=video_id)
        response = _get(self._client, url)
        if not response.is_success:
            raise FetchFailedError(f"HTTP error! status: {response.status_code}")
        return response.text

    def _extract_segments(self, html: str) -> list[TranscriptSegment]:
        strategies = (
            ("caption-track markup", _find_caption_url_in_markup),
            ("player response", _find_caption_url_in_player_response),
        )
        for name, find_caption_url in strategies:
            caption_url = find_caption_url(html)
            if not caption_url:
                logger.info("Estrategia '%s' nao encontrou legendas", name)
                continue

            segments = self._download_segments(caption_url)
            if segments:
                return segments

        raise TranscriptUnavailableError("Nenhuma faixa de legenda utilizavel na pagina")

    def retrieve(self, video_id: str) -> list[TranscriptSegment]:
        logger.info("Buscando transcript do YouTube para %s", video_id)
        html = self._fetch_watch_page(video_id)

        try:
            return self._extract_segments(html)
        except TranscriptUnavailableError as error:
            logger.warning("Transcript indisponivel para %s: %s", video_id, error)
            return [NO_TRANSCRIPT_SEGMENT]


class UnsupportedTranscriptSource(TranscriptSource):
    def __init__(self, platform: Platform) -> None:
        self.platform = platform

    def retrieve(self, video_id: str) -> list[TranscriptSegment]:
        raise UnsupportedPlatformError(self.platform.value)


def build_transcript_sources(client: httpx.Client) -> dict[Platform, TranscriptSource]:
    return {
        Platform.YOUTUBE: YouTubeTranscriptSource(client),
        Platform.TIKTOK: UnsupportedTranscriptSource(Platform.TIKTOK),
        Platform.INSTAGRAM: UnsupportedTranscriptSource(Platform.INSTAGRAM),
    }


def fetch_transcript(reference: VideoReference, client: httpx.Client) -> list[TranscriptSegment]:
    source = build_transcript_sources(client)[reference.platform]
    return source.retrieve(reference.id)

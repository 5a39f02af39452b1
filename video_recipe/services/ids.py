# video_recipe/services/ids.py
from __future__ import annotations

import re
from typing import Callable, Optional

from .errors import InvalidURLError
from .types import Platform, VideoReference

YOUTUBE_ID_LENGTH = 11

_YT_RE = re.compile(r"(?:youtu\.be/|youtube\.com/(?:embed/|shorts/|\S*?[?&]v=))([^#&?/]*)")
_IG_RE = re.compile(r"instagram\.com/(?:[\w.-]+/)?reels?/([A-Za-z0-9_-]+)")
_TIKTOK_RE = re.compile(r"tiktok\.com/@[\w.-]+/video/(\d+)")


def normalize_url(url: str) -> str:
    """Reescreve URLs de Shorts para o formato watch?v= do YouTube."""
    return url.strip().replace("youtube.com/shorts/", "youtube.com/watch?v=")


def _match_youtube(url: str) -> Optional[str]:
    m = _YT_RE.search(url)
    if m and len(m.group(1)) == YOUTUBE_ID_LENGTH:
        return m.group(1)
    return None


def _match_instagram(url: str) -> Optional[str]:
    m = _IG_RE.search(url)
    return m.group(1) if m else None


def _match_tiktok(url: str) -> Optional[str]:
    m = _TIKTOK_RE.search(url)
    return m.group(1) if m else None


# Ordem importa: a primeira regra que casa vence
_RULES: tuple[tuple[Platform, Callable[[str], Optional[str]]], ...] = (
    (Platform.YOUTUBE, _match_youtube),
    (Platform.INSTAGRAM, _match_instagram),
    (Platform.TIKTOK, _match_tiktok),
)


def classify_url(url: object) -> Optional[VideoReference]:
    """Retorna a referencia (plataforma, id) ou None se nenhuma regra casar."""
    if not isinstance(url, str) or not url.strip():
        return None

    normalized = normalize_url(url)
    for platform, match in _RULES:
        video_id = match(normalized)
        if video_id:
            return VideoReference(platform=platform, id=video_id)
    return None


def detect_platform_and_id(url: str) -> VideoReference:
    ref = classify_url(url)
    if ref is None:
        raise InvalidURLError(f"URL nao reconhecida como YouTube, Instagram ou TikTok: {url}")
    return ref

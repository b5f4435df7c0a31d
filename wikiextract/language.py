"""Page language: the language MediaWiki declares, else a langdetect guess."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

# langdetect is non-deterministic unless seeded.
DetectorFactory.seed = 0

# Shorter samples give unstable guesses.
MIN_DETECT_CHARS = 40

# The content area carries the page content language, which can differ from
# the interface language on <html>.
_DECLARING_SELECTORS: tuple[str, ...] = ("#mw-content-text[lang]", "html[lang]")


def declared_language(soup: BeautifulSoup) -> str | None:
    for selector in _DECLARING_SELECTORS:
        el = soup.select_one(selector)
        if el is None:
            continue
        lang = str(el.get("lang") or "").strip()
        if lang:
            return lang
    return None


def detect_language(text: str, min_chars: int = MIN_DETECT_CHARS) -> str | None:
    sample = (text or "").strip()
    if len(sample) < min_chars:
        return None
    try:
        return detect(sample) or None
    except LangDetectException as exc:
        logger.debug("Language detection failed: %s", exc)
        return None


def resolve_language(declared: str | None, text: str) -> str | None:
    """Prefer the declared language; guess from *text* only when there is none."""
    return declared or detect_language(text)

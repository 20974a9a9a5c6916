from __future__ import annotations

import logging

import pyphen

from ..errors import UnsupportedLanguageError
from .base import HyphenationProvider

logger = logging.getLogger(__name__)


class PyphenProvider(HyphenationProvider):
    """Hyphenation backed by the pattern tables bundled with pyphen."""

    def __init__(self, tag: str) -> None:
        resolved = pyphen.language_fallback(tag)
        if resolved is None:
            supported = ", ".join(sorted(pyphen.LANGUAGES.keys())[:10])
            raise UnsupportedLanguageError(
                f"Language '{tag}' is not supported by pyphen. "
                f"Supported languages include: {supported}..."
            )
        self._tag = resolved
        self._dic = pyphen.Pyphen(lang=resolved)
        logger.debug("Loaded pyphen patterns for %s (requested %s)", resolved, tag)

    @property
    def tag(self) -> str:
        return self._tag

    def hyphenate(self, clean_word: str) -> list[str]:
        if not clean_word:
            return [clean_word]
        length = len(clean_word)
        cuts = sorted({int(pos) for pos in self._dic.positions(clean_word) if 0 < pos < length})
        bounds = [0, *cuts, length]
        return [clean_word[start:end] for start, end in zip(bounds, bounds[1:])]

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Mapping, Tuple

from .aggregation import aggregate
from .cache import LineCache
from .classification import classify_line
from .cleaning import clean_word, reconstruct_syllables
from .errors import UnsupportedLanguageError
from .hyphenation import HyphenationProvider, build_providers, check_syllables
from .languages import Language
from .models import DocumentStats, LineStats, Token, TokenKind
from .tokenization import is_whitespace, split_line

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import EngineConfig

logger = logging.getLogger(__name__)

CacheKey = Tuple[Language, str]


class LineAnalyzer:
    """
    Computes per-line syllable statistics and caches them by exact line text.

    The analyzer owns its cache; callers must treat returned LineStats as
    read-only since cache hits hand back the stored object.
    """

    def __init__(
        self,
        providers: Mapping[Language, HyphenationProvider],
        cache: LineCache[CacheKey, LineStats] | None = None,
    ) -> None:
        self._providers = dict(providers)
        self._cache: LineCache[CacheKey, LineStats] = (
            cache if cache is not None else LineCache()
        )

    @classmethod
    def from_config(cls, config: "EngineConfig") -> "LineAnalyzer":
        """Build providers for every language and a cache sized by ``config``."""
        cache: LineCache[CacheKey, LineStats] = LineCache(
            capacity=config.cache_capacity,
            eviction_ratio=config.cache_eviction_ratio,
        )
        return cls(build_providers(config), cache=cache)

    @property
    def cache(self) -> LineCache[CacheKey, LineStats]:
        return self._cache

    def provider_for(self, language: Language | str) -> HyphenationProvider:
        resolved = Language.parse(language)
        provider = self._providers.get(resolved)
        if provider is None:
            raise UnsupportedLanguageError(
                f"No hyphenation provider configured for {resolved.value}."
            )
        return provider

    def analyze_document(self, text: str, language: Language | str) -> DocumentStats:
        """Analyze a full buffer and reduce it to document statistics."""
        return aggregate(self.analyze_text(text, language))

    def analyze_text(self, text: str, language: Language | str) -> List[LineStats]:
        """Analyze each ``\\n``-separated line, preserving document order."""
        resolved = Language.parse(language)
        # Fail once up front rather than per line.
        self.provider_for(resolved)
        return [self.analyze_line(line, resolved) for line in text.split("\n")]

    def analyze_line(self, line: str, language: Language | str) -> LineStats:
        resolved = Language.parse(language)
        key: CacheKey = (resolved, line)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        stats = self._compute_line(line, resolved)
        self._cache.put(key, stats)
        return stats

    def _compute_line(self, line: str, language: Language) -> LineStats:
        is_header, is_comment = classify_line(line)
        if is_header or is_comment:
            synthetic = Token(
                raw=line, kind=TokenKind.WORD, syllables=(line,), syllable_count=0
            )
            return LineStats(
                text=line,
                is_header=is_header,
                is_comment=is_comment,
                syllable_count=0,
                tokens=(synthetic,),
            )

        tokens = tuple(self.analyze_token(piece, language) for piece in split_line(line))
        return LineStats(
            text=line,
            is_header=False,
            is_comment=False,
            syllable_count=sum(token.syllable_count for token in tokens),
            tokens=tokens,
        )

    def analyze_token(self, piece: str, language: Language | str) -> Token:
        """Syllabify one piece produced by the tokenizer."""
        if not piece:
            return Token(raw="", kind=TokenKind.WHITESPACE, syllables=(), syllable_count=0)
        if is_whitespace(piece):
            return Token(
                raw=piece, kind=TokenKind.WHITESPACE, syllables=(piece,), syllable_count=0
            )

        clean = clean_word(piece)
        if not clean:
            return Token(raw=piece, kind=TokenKind.WORD, syllables=(piece,), syllable_count=0)

        provider = self.provider_for(language)
        try:
            parts = provider.hyphenate(clean)
            check_syllables(clean, parts)
        except Exception as exc:  # provider output must never abort a document
            logger.warning(
                "Hyphenation failed for token %r (clean %r): %s; keeping it unsplit.",
                piece,
                clean,
                exc,
            )
            return Token(raw=piece, kind=TokenKind.WORD, syllables=(piece,), syllable_count=1)

        syllables = reconstruct_syllables(piece, clean, parts)
        return Token(
            raw=piece,
            kind=TokenKind.WORD,
            syllables=tuple(syllables),
            syllable_count=len(parts),
        )

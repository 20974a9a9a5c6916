from __future__ import annotations

from typing import Mapping, Sequence

from lyric_syllables.analyzer import LineAnalyzer
from lyric_syllables.cache import LineCache
from lyric_syllables.hyphenation.base import HyphenationProvider
from lyric_syllables.languages import Language

ENGLISH_SPLITS: dict[str, list[str]] = {
    "beautiful": ["beau", "ti", "ful"],
    "dancing": ["danc", "ing"],
    "over": ["o", "ver"],
    "summer": ["sum", "mer"],
    "don't": ["don't"],
    "well-known": ["well-", "known"],
}

GERMAN_SPLITS: dict[str, list[str]] = {
    "feiern": ["fei", "ern"],
    "sommer": ["som", "mer"],
    "über": ["ü", "ber"],
}


class TableProvider(HyphenationProvider):
    """Splits words using a fixed lowercase table; unknown words stay whole."""

    def __init__(self, table: Mapping[str, Sequence[str]]) -> None:
        self.table = {key.lower(): list(value) for key, value in table.items()}
        self.calls: list[str] = []

    def hyphenate(self, clean_word: str) -> list[str]:
        self.calls.append(clean_word)
        parts = self.table.get(clean_word.lower())
        if parts is None:
            return [clean_word]
        # Slice the original so casing survives.
        result: list[str] = []
        start = 0
        for part in parts:
            result.append(clean_word[start : start + len(part)])
            start += len(part)
        return result


def make_analyzer(capacity: int = 2000) -> LineAnalyzer:
    """Analyzer wired to table providers for both languages."""
    providers = {
        Language.EN: TableProvider(ENGLISH_SPLITS),
        Language.DE: TableProvider(GERMAN_SPLITS),
    }
    return LineAnalyzer(providers, cache=LineCache(capacity=capacity))

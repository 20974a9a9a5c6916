from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from ..errors import HyphenationContractError


class HyphenationProvider(ABC):
    """Splits a clean word (letters, marks, apostrophes, hyphens) into syllables."""

    @abstractmethod
    def hyphenate(self, clean_word: str) -> list[str]:
        """
        Return the syllables of ``clean_word``.

        The result has at least one element and its concatenation equals the
        input. A word that cannot be split comes back as ``[clean_word]``.
        """
        raise NotImplementedError


class CallableProvider(HyphenationProvider):
    """Adapt an arbitrary callable into the HyphenationProvider interface."""

    def __init__(self, func: Callable[[str], Sequence[str]]) -> None:
        self._func = func

    def hyphenate(self, clean_word: str) -> list[str]:
        return list(self._func(clean_word))


def check_syllables(clean_word: str, syllables: Sequence[str]) -> None:
    """Raise HyphenationContractError unless ``syllables`` rebuild ``clean_word``."""
    if not syllables:
        raise HyphenationContractError(
            f"Provider returned no syllables for {clean_word!r}."
        )
    if any(not part for part in syllables):
        raise HyphenationContractError(
            f"Provider returned an empty syllable for {clean_word!r}: {list(syllables)!r}."
        )
    joined = "".join(syllables)
    if joined != clean_word:
        raise HyphenationContractError(
            f"Provider syllables {list(syllables)!r} rebuild {joined!r}, "
            f"expected {clean_word!r}."
        )

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Whether a token is a whitespace run or a non-whitespace run."""

    WHITESPACE = "whitespace"
    WORD = "word"


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """
    One piece of a line.

    Joining ``syllables`` reproduces ``raw``; boundary punctuation is folded
    into the first and last syllable.
    """

    raw: str
    kind: TokenKind
    syllables: tuple[str, ...]
    syllable_count: int

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE


@dataclass(frozen=True, slots=True)
class LineStats:
    """Syllable statistics for a single line of text."""

    text: str
    is_header: bool
    is_comment: bool
    syllable_count: int
    tokens: tuple[Token, ...]

    @property
    def is_content(self) -> bool:
        """True for non-blank lines that are neither headers nor comments."""
        return not self.is_header and not self.is_comment and bool(self.text.strip())

    @property
    def word_count(self) -> int:
        return sum(1 for token in self.tokens if token.syllable_count > 0)


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Aggregated statistics for a full document."""

    word_count: int
    total_syllables: int
    avg_syllables_per_line: float
    lines: tuple[LineStats, ...]

from __future__ import annotations


class HyphenationError(Exception):
    """Base exception for hyphenation-related errors."""


class UnsupportedLanguageError(HyphenationError, ValueError):
    """Raised when a language or pattern tag has no hyphenation table."""


class HyphenationContractError(HyphenationError):
    """Raised when a provider returns syllables that do not rebuild the word."""

from __future__ import annotations

from enum import Enum

from .errors import UnsupportedLanguageError


class Language(str, Enum):
    """Languages the engine can syllabify."""

    EN = "EN"
    DE = "DE"

    @property
    def pattern_tag(self) -> str:
        """Default pyphen dictionary tag for the language."""
        return _PATTERN_TAGS[self]

    @classmethod
    def parse(cls, value: "Language | str") -> "Language":
        """Resolve a member from a name ('en', 'DE') or a pattern tag ('de_DE')."""
        if isinstance(value, Language):
            return value
        normalized = str(value).strip().replace("-", "_")
        try:
            return cls[normalized.upper()]
        except KeyError:
            pass
        for member, tag in _PATTERN_TAGS.items():
            if normalized.lower() == tag.lower():
                return member
        supported = ", ".join(member.value for member in cls)
        raise UnsupportedLanguageError(
            f"Unknown language '{value}'. Supported languages: {supported}."
        )


_PATTERN_TAGS: dict[Language, str] = {
    Language.EN: "en_US",
    Language.DE: "de_DE",
}

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from ..errors import HyphenationContractError, UnsupportedLanguageError
from ..languages import Language
from .base import CallableProvider, HyphenationProvider, check_syllables
from .pyphen_provider import PyphenProvider

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import EngineConfig

__all__ = [
    "HyphenationProvider",
    "CallableProvider",
    "PyphenProvider",
    "HyphenationContractError",
    "UnsupportedLanguageError",
    "check_syllables",
    "create_provider",
    "build_providers",
]


def create_provider(language: Language | str, tag: str | None = None) -> HyphenationProvider:
    """Factory for the pattern-table provider of a language."""
    resolved = Language.parse(language)
    return PyphenProvider(tag or resolved.pattern_tag)


def build_providers(config: "EngineConfig") -> Mapping[Language, HyphenationProvider]:
    """Build one provider per supported language, honouring tag overrides."""
    overrides = {
        Language.parse(name): tag for name, tag in config.pattern_tags.items()
    }
    return {
        language: create_provider(language, overrides.get(language))
        for language in Language
    }

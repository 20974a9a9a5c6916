"""
lyric_syllables package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .aggregation import aggregate
from .analyzer import LineAnalyzer
from .cache import LineCache
from .config import EngineConfig, config_from_dict, config_from_yaml, load_config
from .errors import HyphenationContractError, HyphenationError, UnsupportedLanguageError
from .hyphenation import CallableProvider, HyphenationProvider, PyphenProvider
from .languages import Language
from .models import DocumentStats, LineStats, Token, TokenKind

__all__ = [
    "EngineConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Language",
    "LineAnalyzer",
    "LineCache",
    "aggregate",
    "HyphenationProvider",
    "CallableProvider",
    "PyphenProvider",
    "HyphenationError",
    "HyphenationContractError",
    "UnsupportedLanguageError",
    "Token",
    "TokenKind",
    "LineStats",
    "DocumentStats",
]

__version__ = "0.1.0"

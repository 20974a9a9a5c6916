from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping

import yaml

from .cache import DEFAULT_CAPACITY, DEFAULT_EVICTION_RATIO


@dataclass(slots=True)
class EngineConfig:
    """Configuration options for the line analysis engine."""

    language: str = "en"
    cache_capacity: int = DEFAULT_CAPACITY
    cache_eviction_ratio: float = DEFAULT_EVICTION_RATIO
    syllable_separator: str = "·"
    show_syllables: bool = True
    # Language name -> pyphen tag, e.g. {"en": "en_GB"}.
    pattern_tags: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EngineConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "pattern_tags" in kwargs:
        tags = kwargs["pattern_tags"] or {}
        if not isinstance(tags, Mapping):
            raise ValueError("pattern_tags must map language names to pyphen tags.")
        kwargs["pattern_tags"] = {str(key): str(value) for key, value in tags.items()}
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> EngineConfig:
    """Build an EngineConfig from a dictionary-like input."""
    if data is None:
        return EngineConfig()
    return EngineConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EngineConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EngineConfig()
    return config_from_yaml(path)

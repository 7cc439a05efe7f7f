from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


def _default_formulas() -> List[str]:
    return ["coleman_liau", "ari", "gulpease"]


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for readability reports."""

    formulas: List[str] = field(default_factory=_default_formulas)
    es_rule: str = "intended"
    include_grade: bool = True
    file_extensions: List[str] = field(default_factory=lambda: [".txt"])

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as plain data, ready for yaml.safe_dump."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadabilityConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for list_key in ("formulas", "file_extensions"):
        if list_key in kwargs and isinstance(kwargs[list_key], str):
            kwargs[list_key] = [kwargs[list_key]]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build report settings from a mapping; a bare string becomes a list."""
    if data is None:
        return ReadabilityConfig()
    return ReadabilityConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Read report settings such as formulas and es_rule from YAML."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Return settings from ``path``, or defaults scoring every formula."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)

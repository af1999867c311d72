"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import RenderSettings

_KNOWN_KEYS = frozenset({"description", "selection", "output"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> RenderSettings:
    """Load and validate the run configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    return RenderSettings(
        include_description=_require_bool(parsed.get("description", True), "description"),
        selection=_normalize_selection(parsed.get("selection")),
        output=_optional_path(parsed.get("output"), path.parent),
    )


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _normalize_selection(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("selection entries must be strings.")
            stripped = item.strip()
            if stripped and stripped not in normalized:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError("selection must be a string or list of strings.")


def _optional_path(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError("output must be a string.")
    stripped = value.strip()
    if not stripped:
        return None
    candidate = Path(stripped)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate

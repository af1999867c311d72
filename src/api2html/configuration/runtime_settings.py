"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenderSettings:
    """Options of one documentation run."""

    include_description: bool = True
    selection: tuple[str, ...] = ()
    output: Path | None = None

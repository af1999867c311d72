"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run.

    `None` values fall back to the configuration file, then to defaults.
    """

    input_path: str
    selection: tuple[str, ...] = ()
    output_path: str | None = None
    include_description: bool | None = None
    config_path: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path | None
    schema_count: int
    rendered_ids: tuple[str, ...]
    missing_ids: tuple[str, ...]

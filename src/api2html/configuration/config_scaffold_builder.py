"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "api2html.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration for api2html.
# Every key is optional; command line options override these values.

# Include schema and field descriptions in the generated tables.
description: true

# Schema names to render, in this order. Leave empty to render every schema.
selection: []
#  - Pet
#  - Order

# Destination HTML file, relative to this file. Omit to write to stdout.
# output: "schemas.html"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the run configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

"""Documentation run use-case service."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from api2html.configuration import ConfigurationError, RenderSettings, load_configuration
from api2html.document_ingestion import DocumentError, load_api_document, read_schema_definitions
from api2html.document_rendering import HtmlSchemaRenderer, RenderDispatcher, RenderReport
from api2html.schema_resolution import Schema, SchemaResolutionError, resolve_all

from .run_contracts import RunOutcome, RunRequest

LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_documentation_run(request: RunRequest, *, stdout: TextIO | None = None) -> RunOutcome:
    """Resolve every schema of the input document, then render the selection.

    Resolution completes before any output is written, so a fatal resolution
    error never leaves a partial document behind.
    """
    settings = _effective_settings(request)
    schemas = _resolve_document(request.input_path)

    if settings.output is None:
        report = _render(schemas, settings, stdout or sys.stdout)
    else:
        try:
            settings.output.parent.mkdir(parents=True, exist_ok=True)
            with settings.output.open("w", encoding="utf-8") as sink:
                report = _render(schemas, settings, sink)
        except OSError as exc:
            raise RunExecutionError(f"Cannot write output {settings.output}: {exc}") from exc

    LOGGER.info(
        "Rendered %d of %d schemas (%d missing)",
        len(report.rendered_ids),
        len(schemas),
        len(report.missing_ids),
    )
    return RunOutcome(
        output_path=settings.output.resolve() if settings.output else None,
        schema_count=len(schemas),
        rendered_ids=report.rendered_ids,
        missing_ids=report.missing_ids,
    )


def _effective_settings(request: RunRequest) -> RenderSettings:
    try:
        configured = (
            load_configuration(request.config_path) if request.config_path else RenderSettings()
        )
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    include_description = (
        configured.include_description
        if request.include_description is None
        else request.include_description
    )
    return RenderSettings(
        include_description=include_description,
        selection=request.selection or configured.selection,
        output=Path(request.output_path) if request.output_path else configured.output,
    )


def _resolve_document(input_path: str) -> dict[str, Schema]:
    try:
        definitions = read_schema_definitions(load_api_document(input_path))
        return resolve_all(definitions)
    except (DocumentError, SchemaResolutionError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _render(schemas: Mapping[str, Schema], settings: RenderSettings, sink: TextIO) -> RenderReport:
    renderer = HtmlSchemaRenderer(sink)
    dispatcher = RenderDispatcher(renderer, include_description=settings.include_description)
    renderer.begin_document()
    report = dispatcher.render_selection(schemas, settings.selection)
    renderer.end_document()
    return report

"""Schema traversal emitting one render per distinct compound schema."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from api2html.schema_resolution.schema_models import (
    Schema,
    SchemaKind,
    SchemaReference,
    SchemaResolutionError,
)

LOGGER = logging.getLogger(__name__)

OBJECT_TEMPLATE = "object"
COMPOSED_TEMPLATE = "composed"


class SchemaRenderer(Protocol):
    """Renderer collaborator writing one formatted schema to the output sink."""

    def render(self, template_name: str, schema: Schema, include_description: bool) -> None:
        """Render `schema` with the named template."""


@dataclass(frozen=True)
class RenderReport:
    """Outcome of one render pass."""

    rendered_ids: tuple[str, ...]
    skipped_ids: tuple[str, ...]
    missing_ids: tuple[str, ...]


@dataclass
class _TraversalState:
    """Run-local bookkeeping for one render pass."""

    processed: set[str] = field(default_factory=set)
    visited_arrays: set[str] = field(default_factory=set)
    rendered: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class RenderDispatcher:
    """Walk resolved schemas in pre-order and dispatch render instructions."""

    def __init__(self, renderer: SchemaRenderer, *, include_description: bool = True) -> None:
        self._renderer = renderer
        self._include_description = include_description

    def render_selection(
        self, schemas: Mapping[str, Schema], selection: Sequence[str] = ()
    ) -> RenderReport:
        """Render the selected schemas, or every schema when nothing is selected.

        Unknown ids are logged and skipped; the remaining ids still render.
        """
        state = _TraversalState()
        missing: list[str] = []
        for schema_id in selection or tuple(schemas):
            schema = schemas.get(schema_id)
            if schema is None:
                LOGGER.warning("Cannot find schema %s", schema_id)
                missing.append(schema_id)
                continue
            self._generate_for(schema, state)

        return RenderReport(
            rendered_ids=tuple(state.rendered),
            skipped_ids=tuple(state.skipped),
            missing_ids=tuple(missing),
        )

    def _generate_for(self, schema: Schema, state: _TraversalState) -> None:
        kind = schema.kind
        if kind is SchemaKind.ARRAY:
            if schema.id in state.visited_arrays:
                LOGGER.debug("Array schema %s visited already", schema.id)
                return
            state.visited_arrays.add(schema.id)
            if schema.items is not None:
                self._generate_for(_resolved(schema.items), state)
        elif kind is SchemaKind.COMPOSED and schema.alternatives:
            if self._emit(COMPOSED_TEMPLATE, schema, state):
                for alternative in schema.alternatives:
                    self._generate_for(_resolved(alternative), state)
        elif kind is SchemaKind.OBJECT and schema.properties:
            if self._emit(OBJECT_TEMPLATE, schema, state):
                for child in schema.properties.values():
                    self._generate_for(_resolved(child), state)
        elif kind in (
            SchemaKind.STRING,
            SchemaKind.BOOLEAN,
            SchemaKind.INTEGER,
            SchemaKind.NUMBER,
            SchemaKind.OBJECT,
            SchemaKind.COMPOSED,
        ):
            return
        else:  # pragma: no cover
            raise ValueError(f"Unsupported schema kind: {kind}")

    def _emit(self, template_name: str, schema: Schema, state: _TraversalState) -> bool:
        if schema.id in state.processed:
            LOGGER.info("Schema %s rendered already", schema.id)
            state.skipped.append(schema.id)
            return False
        state.processed.add(schema.id)
        self._renderer.render(template_name, schema, self._include_description)
        state.rendered.append(schema.id)
        return True


def _resolved(child: Schema | SchemaReference) -> Schema:
    if isinstance(child, SchemaReference):
        raise SchemaResolutionError(f"Unresolved reference {child.ref} reached the renderer")
    return child

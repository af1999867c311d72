"""Jinja2 HTML renderer writing schema tables to an output stream."""

from __future__ import annotations

from typing import TextIO

from jinja2 import Environment, PackageLoader, select_autoescape

from api2html.schema_resolution.schema_models import Schema, SchemaKind, SchemaReference
from api2html.schema_resolution.schema_titles import uncapitalize

from .render_dispatcher import COMPOSED_TEMPLATE, OBJECT_TEMPLATE

TEMPLATE_NAMES: tuple[str, ...] = (OBJECT_TEMPLATE, COMPOSED_TEMPLATE)
DEFAULT_PAGE_TITLE = "API schemas"


def build_environment() -> Environment:
    """Create the template environment with the schema filters registered."""
    environment = Environment(
        loader=PackageLoader("api2html.document_rendering", "templates"),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )
    environment.filters["type_label"] = type_label
    environment.filters["link_target"] = link_target
    return environment


def type_label(schema: Schema | SchemaReference | None) -> str:
    """Return the display type of a field or alternative."""
    if schema is None:
        return "Object"
    if isinstance(schema, SchemaReference):
        return schema.ref
    if schema.kind is SchemaKind.ARRAY:
        if schema.items is None:
            return "List"
        return f"List<{type_label(schema.items)}>"
    return schema.title or schema.kind.value


def link_target(schema: Schema | SchemaReference | None) -> Schema | None:
    """Return the rendered schema a field should link to, if any."""
    if not isinstance(schema, Schema):
        return None
    if schema.kind is SchemaKind.ARRAY:
        return link_target(schema.items)
    return schema if schema.is_compound else None


class HtmlSchemaRenderer:
    """Render schemas as HTML tables into a single output stream."""

    def __init__(self, sink: TextIO, environment: Environment | None = None) -> None:
        self._sink = sink
        self._environment = environment or build_environment()

    def begin_document(self, title: str = DEFAULT_PAGE_TITLE) -> None:
        """Write the page prologue."""
        self._sink.write(self._environment.get_template("page_start.html").render(title=title))

    def end_document(self) -> None:
        """Write the page epilogue."""
        self._sink.write(self._environment.get_template("page_end.html").render())

    def render(self, template_name: str, schema: Schema, include_description: bool) -> None:
        """Render one schema table with the `object` or `composed` template."""
        if template_name not in TEMPLATE_NAMES:
            raise ValueError(f"Unsupported template: {template_name}")
        template = self._environment.get_template(f"{template_name}.html")
        self._sink.write(
            template.render(
                schema=schema,
                description=include_description,
                required={uncapitalize(name) for name in schema.required},
            )
        )

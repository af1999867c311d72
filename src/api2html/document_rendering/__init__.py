"""Document rendering exports."""

from .html_renderer import HtmlSchemaRenderer, build_environment
from .render_dispatcher import (
    COMPOSED_TEMPLATE,
    OBJECT_TEMPLATE,
    RenderDispatcher,
    RenderReport,
    SchemaRenderer,
)

__all__ = [
    "COMPOSED_TEMPLATE",
    "OBJECT_TEMPLATE",
    "HtmlSchemaRenderer",
    "RenderDispatcher",
    "RenderReport",
    "SchemaRenderer",
    "build_environment",
]

"""Rendering configuration."""

from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel

from raml2html.generator.helpers import DEFAULT_HELPERS

TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_TEMPLATE = TEMPLATES_DIR / "template.html.j2"
DEFAULT_ENGINE = "jinja2"


class RenderConfig(BaseModel):
    """Everything a single compilation needs besides the document itself."""

    template: Path = DEFAULT_TEMPLATE
    template_engine: str = DEFAULT_ENGINE
    template_options: dict[str, Any] = {}  # merged onto the document top level
    helpers: dict[str, Callable[..., Any]] = {}
    partials: dict[str, str] = {}  # name -> template source


def default_config(template: Path | None = None) -> RenderConfig:
    """The bundled configuration: default template, helpers and the resource partial.

    Passing ``template`` swaps the page template but keeps helpers and partials.
    """
    return RenderConfig(
        template=template or DEFAULT_TEMPLATE,
        template_engine=DEFAULT_ENGINE,
        template_options={},
        helpers=dict(DEFAULT_HELPERS),
        partials={"resource": (TEMPLATES_DIR / "resource.html.j2").read_text(encoding="utf-8")},
    )

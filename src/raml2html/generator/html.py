"""HTML generator — renders an annotated RAML document through a template engine."""

import logging
from pathlib import Path
from typing import Any, Callable

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, TemplateError

from raml2html.config import RenderConfig
from raml2html.exceptions import RenderError
from raml2html.generator.annotate import annotate, resolve_base_uri
from raml2html.parser.base import RamlDocument

logger = logging.getLogger(__name__)


def render_jinja2(config: RenderConfig, context: dict[str, Any]) -> str:
    """Render ``config.template`` with Jinja2.

    Helpers are available both as functions and as filters; partials are
    looked up by name before the template's own directory.
    """
    template_path = Path(config.template)
    env = Environment(
        loader=ChoiceLoader([
            DictLoader(dict(config.partials)),
            FileSystemLoader(str(template_path.parent)),
        ]),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(config.helpers)
    env.filters.update(config.helpers)

    try:
        template = env.get_template(template_path.name)
        return template.render(**context)
    except (TemplateError, OSError) as e:
        raise RenderError(f"Failed to render template {template_path}: {e}") from e


TEMPLATE_ENGINES: dict[str, Callable[[RenderConfig, dict[str, Any]], str]] = {
    "jinja2": render_jinja2,
}


class HtmlGenerator:
    """Compiles RAML documents into HTML pages with one configuration.

    The template environment is built per call, so generators with
    different helpers or partials never see each other's registrations.
    """

    def __init__(self, config: RenderConfig):
        self.config = config

    def generate(self, doc: RamlDocument) -> str:
        """Annotate ``doc`` in place and render it, returning the HTML."""
        engine = TEMPLATE_ENGINES.get(self.config.template_engine)
        if engine is None:
            raise RenderError(
                f"Unsupported template engine {self.config.template_engine!r}; "
                f"available: {', '.join(sorted(TEMPLATE_ENGINES))}"
            )

        doc = resolve_base_uri(doc)
        doc = annotate(doc)
        doc.config = self.config

        for key, value in self.config.template_options.items():
            setattr(doc, key, value)

        logger.debug(
            "Rendering %s with %s (%d helpers, %d partials)",
            self.config.template,
            self.config.template_engine,
            len(self.config.helpers),
            len(self.config.partials),
        )
        return engine(self.config, dict(doc))

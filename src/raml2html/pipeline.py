"""Programmatic entry points: source -> parsed document -> HTML."""

from raml2html.config import RenderConfig, default_config
from raml2html.generator.html import HtmlGenerator
from raml2html.parser.detect import detect_source
from raml2html.parser.loader import load, load_async


def parse(source) -> str:
    """Render ``source`` with the bundled template and helpers."""
    return parse_with_config(source, default_config())


def parse_with_config(source, config: RenderConfig) -> str:
    """Render ``source`` with a caller-supplied configuration.

    ``source`` is a FilePath, RawText or ParsedDocument, or anything
    detect_source() accepts: a file path, RAML text, bytes, a RamlDocument
    or a RAML mapping.
    """
    document = load(detect_source(source))
    return HtmlGenerator(config).generate(document)


async def parse_async(source) -> str:
    return await parse_with_config_async(source, default_config())


async def parse_with_config_async(source, config: RenderConfig) -> str:
    document = await load_async(detect_source(source))
    return HtmlGenerator(config).generate(document)

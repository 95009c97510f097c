"""Generate single-page HTML documentation from RAML API descriptions."""

from raml2html.config import RenderConfig, default_config
from raml2html.exceptions import Raml2HtmlError, RamlParseError, RenderError, SourceTypeError
from raml2html.parser.detect import FilePath, ParsedDocument, RawText
from raml2html.pipeline import parse, parse_async, parse_with_config, parse_with_config_async

__all__ = [
    "FilePath",
    "ParsedDocument",
    "Raml2HtmlError",
    "RamlParseError",
    "RawText",
    "RenderConfig",
    "RenderError",
    "SourceTypeError",
    "default_config",
    "parse",
    "parse_async",
    "parse_with_config",
    "parse_with_config_async",
]

"""Source shapes accepted by the loader, and detection for untyped input."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from raml2html.exceptions import SourceTypeError
from .base import RamlDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilePath:
    """A RAML file on disk."""

    path: Path


@dataclass(frozen=True)
class RawText:
    """RAML source text, as str or UTF-8 bytes."""

    text: str | bytes


@dataclass(frozen=True)
class ParsedDocument:
    """An already-parsed document, or a RAML mapping loaded elsewhere."""

    document: RamlDocument | Mapping


RamlSource = FilePath | RawText | ParsedDocument


def detect_source(source: object) -> RamlSource:
    """Wrap a file path, RAML text or parsed document in its source type.

    A string naming an existing file is a FilePath; any other string is RAML
    text.
    """
    if isinstance(source, (FilePath, RawText, ParsedDocument)):
        return source
    if isinstance(source, Path):
        return FilePath(source)
    if isinstance(source, str):
        if os.path.isfile(source):
            logger.debug("Source %s is a file path", source)
            return FilePath(Path(source))
        return RawText(source)
    if isinstance(source, (bytes, bytearray)):
        return RawText(bytes(source))
    if isinstance(source, (RamlDocument, Mapping)):
        return ParsedDocument(source)

    raise SourceTypeError(
        "You must supply either a file path, RAML text (str or bytes) "
        f"or a parsed document as source, not {type(source).__name__}"
    )

"""Load a RamlDocument from any supported source."""

import asyncio

from raml2html.exceptions import SourceTypeError
from .base import RamlDocument
from .detect import FilePath, ParsedDocument, RamlSource, RawText
from .raml import build_document, parse_raml, parse_raml_file


def load(source: RamlSource) -> RamlDocument:
    """Return the parsed document for a source.

    A ParsedDocument holding a RamlDocument is returned as the same object.
    """
    if isinstance(source, FilePath):
        return parse_raml_file(source.path)
    elif isinstance(source, RawText):
        return parse_raml(source.text)
    elif isinstance(source, ParsedDocument):
        if isinstance(source.document, RamlDocument):
            return source.document
        return build_document(dict(source.document))
    raise SourceTypeError(f"Unsupported source: {source!r}")


async def load_async(source: RamlSource) -> RamlDocument:
    """Async variant of load().

    Always completes after at least one event loop iteration, so callers
    see the same ordering whatever the source type. File and text sources
    are parsed in a worker thread.
    """
    if isinstance(source, ParsedDocument):
        await asyncio.sleep(0)
        return load(source)
    return await asyncio.to_thread(load, source)

"""RAML 0.8 document reader.

Loads RAML text with PyYAML (``!include`` tags resolved relative to the
including file) and converts the mapping into RamlDocument models.
Traits and resource types are kept as references, not expanded. A body
schema naming an entry of the root ``schemas`` is replaced by that schema.
"""

import json
import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from raml2html.exceptions import RamlParseError
from .base import (
    Body,
    DocumentationItem,
    Method,
    Parameter,
    RamlDocument,
    Resource,
    Response,
    SecurityScheme,
)

logger = logging.getLogger(__name__)

RAML_HEADER = "#%RAML"

HTTP_METHODS = ("get", "patch", "put", "post", "delete", "head", "options")

URI_TEMPLATE_RE = re.compile(r"{([^}]+)}")

YAML_SUFFIXES = (".raml", ".yaml", ".yml")

DEFAULT_MEDIA_TYPE = "application/json"

BODY_KEYS = ("schema", "example", "formParameters")


def parse_raml_file(file_path: Path) -> RamlDocument:
    """Parse a RAML file into a RamlDocument."""
    file_path = Path(file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RamlParseError(f"Cannot read RAML file {file_path}: {e}") from e
    return parse_raml(text, base_dir=file_path.parent)


def parse_raml(text: str | bytes, base_dir: Path | None = None) -> RamlDocument:
    """Parse RAML text into a RamlDocument.

    ``base_dir`` is where ``!include`` paths are resolved from; it defaults
    to the current directory.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")
    text = text.lstrip("\ufeff")

    if not text.startswith(RAML_HEADER):
        raise RamlParseError(f"Invalid RAML document: first line must start with '{RAML_HEADER}'")

    data = _load_yaml(text, Path(base_dir) if base_dir else Path.cwd())
    if not isinstance(data, dict):
        raise RamlParseError("Invalid RAML document: root must be a mapping")

    return build_document(data)


@dataclass(frozen=True)
class _Defaults:
    """Document-wide values inherited by nested nodes."""

    secured_by: list
    media_type: str
    schemas: dict[str, str]


def build_document(data: dict) -> RamlDocument:
    """Convert a RAML mapping (as loaded from YAML) into a RamlDocument.

    Raises:
        RamlParseError: If a node does not have the shape RAML requires.
    """
    try:
        doc = _build_document(data)
    except (ValidationError, AttributeError, TypeError, ValueError) as e:
        raise RamlParseError(f"Invalid RAML document: {e}") from e

    logger.debug("Parsed RAML document %r with %d top-level resources", doc.title, len(doc.resources))
    return doc


def _build_document(data: dict) -> RamlDocument:
    defaults = _Defaults(
        secured_by=data.get("securedBy") or [],
        media_type=data.get("mediaType") or DEFAULT_MEDIA_TYPE,
        schemas=_parse_schemas(data.get("schemas")),
    )
    fields = {k: v for k, v in data.items() if not (isinstance(k, str) and k.startswith("/"))}

    fields["version"] = None if data.get("version") is None else str(data["version"])
    fields["baseUriParameters"] = _parse_parameters(data.get("baseUriParameters"), required=True)
    fields["documentation"] = [DocumentationItem(**item) for item in data.get("documentation") or []]
    fields["securitySchemes"] = _parse_security_schemes(data.get("securitySchemes"))
    fields["securedBy"] = defaults.secured_by
    fields["resources"] = _parse_resources(data, defaults)
    for key in ("schemas", "traits", "resourceTypes"):
        fields.pop(key, None)

    return RamlDocument(**fields)


def _load_yaml(text: str, base_dir: Path) -> Any:
    try:
        return yaml.load(text, Loader=_make_loader(base_dir))
    except yaml.YAMLError as e:
        raise RamlParseError(f"Invalid RAML document: {e}") from e


def _make_loader(base_dir: Path) -> type:
    """Build a SafeLoader subclass that resolves ``!include`` from base_dir."""

    class RamlLoader(yaml.SafeLoader):
        pass

    def include(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
        path = base_dir / loader.construct_scalar(node)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise RamlParseError(f"Cannot read included file {path}: {e}") from e
        if path.suffix in YAML_SUFFIXES:
            return yaml.load(content, Loader=_make_loader(path.parent))
        return content

    RamlLoader.add_constructor("!include", include)
    return RamlLoader


def _parse_resources(node: dict, defaults: _Defaults) -> dict[str, Resource]:
    """Collect child resources (keys starting with '/') in document order."""
    return {
        key: _parse_resource(key, definition or {}, defaults)
        for key, definition in node.items()
        if isinstance(key, str) and key.startswith("/")
    }


def _parse_resource(relative_uri: str, definition: dict, defaults: _Defaults) -> Resource:
    if "securedBy" in definition:
        defaults = replace(defaults, secured_by=definition["securedBy"] or [])

    uri_parameters = _parse_parameters(definition.get("uriParameters"), required=True)
    for name in URI_TEMPLATE_RE.findall(relative_uri):
        if name not in uri_parameters:
            uri_parameters[name] = Parameter(name=name, display_name=name, required=True)

    methods = [
        _parse_method(verb, definition[verb] or {}, defaults)
        for verb in definition
        if verb in HTTP_METHODS
    ]

    return Resource(
        relative_uri=relative_uri,
        display_name=definition.get("displayName") or relative_uri,
        description=definition.get("description") or "",
        type=definition.get("type"),
        is_=definition.get("is") or [],
        uri_parameters=uri_parameters,
        methods=methods,
        resources=_parse_resources(definition, defaults),
    )


def _parse_method(verb: str, definition: dict, defaults: _Defaults) -> Method:
    secured_by = (definition["securedBy"] or []) if "securedBy" in definition else defaults.secured_by
    return Method(
        method=verb,
        description=definition.get("description") or "",
        query_parameters=_parse_parameters(definition.get("queryParameters")),
        headers=_parse_parameters(definition.get("headers")),
        body=_parse_bodies(definition.get("body"), defaults),
        responses=_parse_responses(definition.get("responses"), defaults),
        secured_by=secured_by,
        protocols=definition.get("protocols") or [],
    )


def _parse_parameters(params: dict | None, required: bool = False) -> dict[str, Parameter]:
    result = {}
    for name, definition in (params or {}).items():
        # RAML 0.8 allows a list of alternative definitions; use the first one.
        if isinstance(definition, list):
            definition = definition[0] if definition else {}
        definition = dict(definition or {})
        definition.setdefault("displayName", name)
        definition.setdefault("required", required)
        result[name] = Parameter(name=name, **definition)
    return result


def _parse_bodies(body: dict | None, defaults: _Defaults) -> dict[str, Body]:
    body = body or {}
    # Without a media type key the body applies to the document's mediaType.
    if any(key in BODY_KEYS for key in body):
        body = {defaults.media_type: body}

    result = {}
    for media_type, definition in body.items():
        definition = definition or {}
        schema = definition.get("schema")
        result[media_type] = Body(
            schema_=_as_text(defaults.schemas.get(schema, schema) if isinstance(schema, str) else schema),
            example=_as_text(definition.get("example")),
            form_parameters=_parse_parameters(definition.get("formParameters")),
        )
    return result


def _parse_responses(responses: dict | None, defaults: _Defaults) -> dict[str, Response]:
    result = {}
    for status_code, definition in (responses or {}).items():
        definition = definition or {}
        result[str(status_code)] = Response(
            description=definition.get("description") or "",
            headers=_parse_parameters(definition.get("headers")),
            body=_parse_bodies(definition.get("body"), defaults),
        )
    return result


def _parse_schemas(schemas: list | dict | None) -> dict[str, str]:
    # Like security schemes: a list of single-key mappings, name -> schema.
    if isinstance(schemas, dict):
        schemas = [schemas]

    result = {}
    for entry in schemas or []:
        for name, schema in entry.items():
            result[name] = _as_text(schema)
    return result


def _parse_security_schemes(schemes: list | dict | None) -> dict[str, SecurityScheme]:
    # RAML 0.8 declares schemes as a list of single-key mappings.
    if isinstance(schemes, dict):
        schemes = [schemes]

    result = {}
    for entry in schemes or []:
        for name, definition in entry.items():
            result[name] = SecurityScheme(name=name, **(definition or {}))
    return result


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, indent=2)

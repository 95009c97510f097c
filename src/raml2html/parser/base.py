"""Data models for a parsed RAML document.

The RAML reader builds these models from the YAML source; the annotator
then fills in the derived fields (``parent_url``, ``unique_id``,
``all_uri_parameters``) in place before rendering.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RamlModel(BaseModel):
    """Base for all document models: camelCase RAML keys, extra keys kept."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Parameter(RamlModel):
    """A named parameter (URI, base URI, query, header or form)."""

    name: str = ""
    display_name: str = ""
    type: str = "string"
    description: str = ""
    required: bool = False
    default: Any = None
    example: Any = None
    enum: list[Any] | None = None
    pattern: str | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    repeat: bool = False


class Body(RamlModel):
    """Payload description for a single media type."""

    schema_: str | None = Field(default=None, alias="schema")
    example: str | None = None
    form_parameters: dict[str, Parameter] = {}


class Response(RamlModel):
    description: str = ""
    headers: dict[str, Parameter] = {}
    body: dict[str, Body] = {}


class Method(RamlModel):
    """One HTTP method on a resource."""

    method: str  # get / post / put / delete / patch / head / options
    description: str = ""
    query_parameters: dict[str, Parameter] = {}
    headers: dict[str, Parameter] = {}
    body: dict[str, Body] = {}
    responses: dict[str, Response] = {}
    secured_by: list[Any] = []  # None entry means "no auth"
    protocols: list[str] = []


class Resource(RamlModel):
    """A node of the resource tree, keyed by its relative URI."""

    relative_uri: str
    display_name: str = ""
    description: str = ""
    type: Any = None
    is_: list[Any] = Field(default=[], alias="is")
    uri_parameters: dict[str, Parameter] = {}
    methods: list[Method] = []
    resources: dict[str, "Resource"] = {}

    # Filled in by the annotator.
    parent_url: str = ""
    unique_id: str = ""
    all_uri_parameters: list[Parameter] = []


class SecurityScheme(RamlModel):
    name: str = ""
    type: str = ""
    description: str = ""
    described_by: dict[str, Any] = {}
    settings: dict[str, Any] = {}


class DocumentationItem(RamlModel):
    title: str = ""
    content: str = ""


class RamlDocument(RamlModel):
    """Root of a parsed RAML document."""

    title: str = ""
    version: str | None = None
    base_uri: str | None = None
    base_uri_parameters: dict[str, Parameter] = {}
    protocols: list[str] = []
    media_type: str | None = None
    documentation: list[DocumentationItem] = []
    security_schemes: dict[str, SecurityScheme] = {}
    secured_by: list[Any] = []
    resources: dict[str, Resource] = {}

    # Rendering configuration, attached at compile time.
    config: Any = None

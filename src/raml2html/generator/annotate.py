"""Pre-render passes over a parsed document.

``annotate`` walks the resource tree and gives every resource its anchor id
and the URI parameters it inherits from its ancestors. ``resolve_base_uri``
fills the ``{version}`` placeholder of the base URI.
"""

import re

NON_WORD_RE = re.compile(r"\W", re.ASCII)


def make_unique_id(resource) -> str:
    """Full path of a resource with every non-word character replaced by '_'.

    Distinct paths can map to the same id (``/a-b`` and ``/a_b``).
    """
    return NON_WORD_RE.sub("_", resource.parent_url + resource.relative_uri)


def annotate(tree, parent_url: str = "", all_uri_parameters: list | None = None):
    """Annotate every resource below ``tree`` in place and return ``tree``.

    Each resource gets ``parent_url``, ``unique_id`` and
    ``all_uri_parameters``: the ancestors' URI parameters, root first,
    followed by its own in declaration order. Parents are visited before
    their children.
    """
    for resource in (getattr(tree, "resources", None) or {}).values():
        resource.parent_url = parent_url
        resource.unique_id = make_unique_id(resource)
        resource.all_uri_parameters = list(all_uri_parameters or [])
        resource.all_uri_parameters.extend((resource.uri_parameters or {}).values())

        annotate(resource, parent_url + resource.relative_uri, resource.all_uri_parameters)

    return tree


def resolve_base_uri(doc):
    """Substitute the first ``{version}`` in ``doc.base_uri``.

    No other URI template variables are expanded. A document without a
    version keeps its placeholder.
    """
    if doc.base_uri and doc.version is not None:
        doc.base_uri = doc.base_uri.replace("{version}", str(doc.version), 1)
    return doc

"""Exception hierarchy for raml2html.

Every error carries an ``exit_code`` the CLI exits with::

    Raml2HtmlError (exit 1)
    +-- SourceTypeError
    +-- RamlParseError
    +-- RenderError
"""

EXIT_FAILURE = 1


class Raml2HtmlError(Exception):
    """Base exception for all raml2html errors."""

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class SourceTypeError(Raml2HtmlError, TypeError):
    """Raised when a source is not a file path, RAML text or parsed document."""


class RamlParseError(Raml2HtmlError):
    """Raised when RAML input cannot be read or parsed."""


class RenderError(Raml2HtmlError):
    """Raised when the template engine fails to produce HTML."""

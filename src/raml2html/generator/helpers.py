"""Template helpers: Markdown, code highlighting and the lock icon.

Each helper returns pre-escaped Markup, or an empty string for empty input.
"""

import markdown
from markupsafe import Markup
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, guess_lexer
from pygments.util import ClassNotFound

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

LOCK_ICON = ' <span class="glyphicon glyphicon-lock" title="Authentication required"></span>'


def markdown_helper(text: str | None) -> Markup | str:
    """Render Markdown text to HTML."""
    if not text:
        return ""
    return Markup(markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS))


def highlight_helper(code: str | None) -> Markup | str:
    """Syntax-highlight a code sample, guessing its language."""
    if not code:
        return ""
    try:
        lexer = guess_lexer(code)
    except ClassNotFound:
        lexer = TextLexer()
    return Markup(highlight(code, lexer, HtmlFormatter(nowrap=True)))


def lock_icon_helper(secured_by: list | None) -> Markup | str:
    """Lock icon if any security scheme applies besides 'null' (no auth)."""
    if not secured_by:
        return ""

    schemes = list(secured_by)
    if None in schemes:
        schemes.remove(None)

    if schemes:
        return Markup(LOCK_ICON)
    return ""


DEFAULT_HELPERS = {
    "md": markdown_helper,
    "highlight": highlight_helper,
    "lock": lock_icon_helper,
}

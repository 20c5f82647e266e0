"""Syntax highlighting of code snippets with language auto-detection."""

import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import guess_lexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# Code containing an inline tag is left for the tag rewriters.
INLINE_TAG_MARKER = "{@"


def highlight_inline(code: str) -> str | None:
    """Highlight an inline code span, or return None to keep it unhighlighted."""
    if not code.strip() or INLINE_TAG_MARKER in code:
        return None
    try:
        lexer = guess_lexer(code)
    except ClassNotFound:
        logger.debug("No lexer found for inline code %r", code)
        return None
    return highlight(code, lexer, HtmlFormatter(nowrap=True)).rstrip("\n")

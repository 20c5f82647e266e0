"""Utility for reading the raw text of a Doxi entry."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def text_field(entry: dict[str, Any], log: logging.Logger = logger) -> str:
    """Return the entry's text, or "" when it is absent or not a string."""
    text = entry.get("text")
    if text is None:
        return ""
    if not isinstance(text, str):
        log.warning("Ignoring non-string text of %r: %r", entry.get("name"), text)
        return ""
    return text

"""Logic for selecting the members of one type from a class record."""

import logging
from typing import Any

from doxi_pages.prepare_text import prepare_text
from doxi_pages.text_field import text_field

logger = logging.getLogger(__name__)


def items_by_type(
    class_items: list[Any] | None,
    member_type: str,
    log: logging.Logger = logger,
) -> list[dict[str, Any]]:
    """Return the members of the given type with their text prepared.

    Only the first group whose ``$type`` matches is used. A missing group or
    a group without items yields an empty list.
    """
    group = next(
        (
            g
            for g in class_items or []
            if isinstance(g, dict) and g.get("$type") == member_type
        ),
        None,
    )
    if group is None:
        return []

    items: list[dict[str, Any]] = []
    for item in group.get("items") or []:
        if not isinstance(item, dict):
            log.warning(
                "Skipping %s entry that is not an object: %r", member_type, item
            )
            continue
        if not item.get("name"):
            log.warning("Found a member in %s without a name", member_type)
        items.append({**item, "text": prepare_text(text_field(item, log))})
    return items

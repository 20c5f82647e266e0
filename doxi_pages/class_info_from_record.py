"""Utility for extracting the class entry from a Doxi record."""

from typing import Any

from doxi_pages.models import ClassInfo
from doxi_pages.text_field import text_field


def class_info_from_record(file_content: dict[str, Any]) -> ClassInfo:
    """Return the first item of the record's global block as a ClassInfo."""
    global_block = file_content.get("global") or {}
    class_items = global_block.get("items") or []
    if not class_items or not isinstance(class_items[0], dict):
        return ClassInfo()

    info = class_items[0]
    return ClassInfo(
        name=info.get("name") or None,
        text=text_field(info),
        items=info.get("items") or [],
    )

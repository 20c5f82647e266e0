"""Assembly of the page data for one Doxi class record."""

import logging
from typing import Any

from doxi_pages.class_info_from_record import class_info_from_record
from doxi_pages.items_by_type import items_by_type
from doxi_pages.models import DocumentModel
from doxi_pages.omit_deep import omit_deep
from doxi_pages.prepare_text import prepare_text

logger = logging.getLogger(__name__)

MEMBER_TYPES = ("configs", "events", "methods", "properties")

# Source-location metadata never reaches the template.
OMITTED_KEY = "src"


def prepare_data(
    file_content: dict[str, Any], log: logging.Logger = logger
) -> DocumentModel:
    """Model the page data for a class record.

    Member groups other than MEMBER_TYPES are dropped.
    """
    class_info = class_info_from_record(file_content)
    if not class_info.name:
        log.error("Could not find a class name")

    data: dict[str, Any] = {
        "className": class_info.name,
        "classText": prepare_text(class_info.text),
    }
    for member_type in MEMBER_TYPES:
        data[member_type] = items_by_type(class_info.items, member_type, log=log)

    return DocumentModel.from_dict(omit_deep(data, OMITTED_KEY))

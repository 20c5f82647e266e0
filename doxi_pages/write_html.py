"""Logic for writing a rendered class page to disk."""

import logging
from pathlib import Path

from jinja2 import Template

from doxi_pages.models import DocumentModel

logger = logging.getLogger(__name__)

UNNAMED_CLASS = "unspecified"


def write_html(
    template: Template,
    model: DocumentModel,
    html_dir: Path,
    extension: str = ".html",
    log: logging.Logger = logger,
) -> Path:
    """Render the model with the template and write it as <className>.html.

    Raises ValueError when the class name would place the page outside
    html_dir.
    """
    class_name = model.class_name
    if not class_name:
        log.error("No class name found")

    file_name = f"{class_name or UNNAMED_CLASS}{extension}"
    out_file = html_dir / file_name
    if out_file.resolve().parent != html_dir.resolve():
        msg = f"Class name {class_name!r} does not map to a file in {html_dir}"
        raise ValueError(msg)
    out_file.write_text(template.render(**model.to_dict()), encoding="utf-8")
    log.info("%s written", file_name)
    return out_file

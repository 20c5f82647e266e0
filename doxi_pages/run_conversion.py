"""Orchestration logic for converting Doxi JSON to HTML class pages."""

import logging
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from doxi_pages.find_json_files import find_json_files
from doxi_pages.load_class_record import load_class_record
from doxi_pages.load_template import load_template
from doxi_pages.models import ConversionSummary
from doxi_pages.prepare_data import prepare_data
from doxi_pages.prepare_output_directory import prepare_output_directory
from doxi_pages.write_html import write_html

logger = logging.getLogger(__name__)


def run_conversion(config: dict[str, Any]) -> ConversionSummary:
    """Execute the full conversion pipeline.

    A file that fails to load, assemble or write is logged and skipped.
    """
    paths = config["paths"]
    json_dir = Path(paths["json_dir"])
    if not json_dir.is_dir():
        msg = f"JSON input directory not found: {json_dir}"
        raise SystemExit(msg)

    template_path = Path(paths["template"]) if paths.get("template") else None
    try:
        template = load_template(template_path)
    except TemplateError as e:
        msg = f"Could not load template {template_path or 'class.html.j2'}: {e}"
        raise SystemExit(msg) from e

    html_dir = Path(paths["html_dir"])
    prepare_output_directory(html_dir, clean=config["output"]["clean"])

    json_files = find_json_files(json_dir)
    logger.info("Converting %d JSON files from %s", len(json_files), json_dir)

    summary = ConversionSummary()
    for json_file in json_files:
        try:
            model = prepare_data(load_class_record(json_file))
            write_html(template, model, html_dir, config["output"]["extension"])
        except Exception:
            logger.exception("Error converting %s", json_file.name)
            summary.failed += 1
        else:
            summary.written += 1
    return summary

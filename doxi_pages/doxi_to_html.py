"""Convert Doxi class JSON into HTML reference pages.

Each JSON file produced by Doxi describes one class. Its description and the
texts of its configs, events, methods and properties are rendered from
Markdown, their ``{@link}`` and ``{@img}`` tags are turned into HTML, and the
result is written through a Jinja2 template as ``<className>.html``.
"""

import argparse
import logging
from pathlib import Path

from doxi_pages.load_config import load_config
from doxi_pages.run_conversion import run_conversion


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments for the converter."""
    ap = argparse.ArgumentParser(
        description="Convert Doxi class JSON into HTML reference pages.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--json-dir",
        type=Path,
        help="Directory containing Doxi *.json class files",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        help="Directory the HTML pages are written to",
    )
    ap.add_argument(
        "--template",
        type=Path,
        help="Jinja2 class template (default: the bundled class.html.j2)",
    )
    ap.add_argument(
        "--keep-output",
        action="store_true",
        help="Do not empty the output directory before writing",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap.parse_args()


def main() -> int:
    """Run the conversion process."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    paths = config["paths"]
    if args.json_dir:
        paths["json_dir"] = str(args.json_dir)
    if args.out_dir:
        paths["html_dir"] = str(args.out_dir)
    if args.template:
        paths["template"] = str(args.template)
    if args.keep_output:
        config["output"]["clean"] = False

    summary = run_conversion(config)

    print(f"Generated {summary.written} HTML pages into: {paths['html_dir']}")
    if summary.failed:
        print(f"Skipped {summary.failed} files with errors (see log)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

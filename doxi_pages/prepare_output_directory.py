"""Logic for preparing the HTML output directory."""

import shutil
from pathlib import Path


def prepare_output_directory(html_dir: Path, *, clean: bool = True) -> None:
    """Ensure html_dir exists, emptying it first when clean is set."""
    if clean and html_dir.is_dir():
        for child in html_dir.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
    html_dir.mkdir(parents=True, exist_ok=True)

"""Logic for loading a Doxi class record."""

import json
from pathlib import Path
from typing import Any


def load_class_record(path: Path) -> dict[str, Any]:
    """Load and parse one Doxi JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))

"""Utility for listing the Doxi JSON files in a directory."""

from pathlib import Path


def find_json_files(json_dir: Path) -> list[Path]:
    """Return the .json files directly inside json_dir, sorted by name."""
    return sorted(
        p for p in json_dir.iterdir() if p.is_file() and p.suffix.lower() == ".json"
    )

"""Logic for loading the converter configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from doxi_pages.merge_config import merge_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "json_dir": "./codesrc/output/json",
        "html_dir": "./output/html",
        "template": None,  # bundled class template
    },
    "output": {
        "clean": True,
        "extension": ".html",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = merge_config(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config

"""Recursive removal of a key from nested dicts and lists."""

from typing import Any


def omit_deep(value: Any, key: str) -> Any:
    """Return a copy of value with every mapping entry named key removed.

    Dicts and lists are traversed; every other value, strings included, is
    returned as is.
    """
    if isinstance(value, dict):
        return {k: omit_deep(v, key) for k, v in value.items() if k != key}
    if isinstance(value, list):
        return [omit_deep(v, key) for v in value]
    return value

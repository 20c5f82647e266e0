"""Logic for deep merging configuration dictionaries."""

from typing import Any


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge update into base without modifying either.

    Nested dicts are merged recursively; lists and scalars in update replace
    the value from base.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_config(current, value)
        else:
            result[key] = value
    return result

from copy import deepcopy
from typing import Any, Mapping


def deep_update(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict:
    """Return a copy of *base* recursively updated with *override*.

    Nested mappings are merged key by key; any other value in ``override``
    (lists and tuples included) replaces the one in ``base``.  Neither input is
    modified.
    """
    result = deepcopy(dict(base))
    for key, value in override.items():
        current = result.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_update(current, value)
        else:
            result[key] = deepcopy(value)
    return result

"""Text encoding for list-valued profile columns.

Lists (tags, gallery references) live in plain text columns as JSON arrays.
Order is preserved and duplicates are kept.
"""

import json


def dump_list(values) -> str:
    return json.dumps(list(values or []))


def load_list(text) -> list:
    """Decode a stored JSON array; empty or missing text yields []."""
    if text is None or text == "":
        return []
    value = json.loads(text)
    if not isinstance(value, list):
        raise ValueError(f"Expected a JSON array, got {type(value).__name__}.")
    return value

"""
Canonical JSON

Sorts object keys lexicographically and encodes with no extra whitespace so
the JSON rendering of an operation is stable byte-for-byte.
"""

import json
from typing import Any


def dumps_canonical(obj: Any) -> str:
    """
    Encode object as canonical JSON string.

    Deterministic key order, no extra whitespace. Nested objects and arrays
    are canonicalized recursively; array order is preserved.

    Args:
        obj: Object to encode (dict, list, str, int, bool, None)

    Returns:
        Canonical JSON string with sorted keys and no extra whitespace
    """
    return json.dumps(_canonicalize(obj), separators=(',', ':'), ensure_ascii=False, sort_keys=True)


def _canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: keys stringified and sorted, values canonicalized
    - Lists: elements canonicalized, order preserved
    - Primitives: int subclasses (enums) reduced to plain int, others unchanged
    """
    if isinstance(v, dict):
        return {str(k): _canonicalize(v[k]) for k in sorted(v.keys(), key=str)}
    elif isinstance(v, list):
        return [_canonicalize(item) for item in v]
    elif isinstance(v, int) and not isinstance(v, bool):
        return int(v)
    return v

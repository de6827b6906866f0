"""Normalization of loosely typed form values.

Multipart forms deliver everything as text while JSON bodies deliver native
types, so the same flag may arrive as ``True``, ``1``, ``"1"`` or ``"true"``.
"""

import re

_TRUE_STRINGS = {"1", "true"}
_FALSE_STRINGS = {"0", "false", ""}
_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")

# Upper bound of the positive integer column the distance is stored in.
TRAVEL_DISTANCE_MAX = 2147483647


def coerce_flag(value) -> bool:
    """Return the boolean meaning of a client-supplied flag.

    Accepted inputs:
      - ``True`` / ``False``
      - integers ``1`` / ``0``
      - strings ``"1"``, ``"0"``, ``"true"``, ``"false"`` (case-insensitive,
        surrounding whitespace ignored)
      - ``None`` and ``""``, both meaning False

    Raises ValueError for anything else.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"Invalid flag value: {value!r}.")
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"Invalid flag value: {value!r}.")


def normalize_travel_distance(value) -> int:
    """Parse a travel distance in km.

    The leading integer of the text is used (``"25 km"`` -> 25). Values
    without one fall back to 0, negatives are clamped to 0 and anything above
    ``TRAVEL_DISTANCE_MAX`` is clamped to it.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return _clamp_distance(value)
    if isinstance(value, float):
        try:
            return _clamp_distance(int(value))
        except (ValueError, OverflowError):
            return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if sign == "-":
        return 0
    # Compare lengths first; int() rejects very long digit strings.
    if len(digits) > len(str(TRAVEL_DISTANCE_MAX)):
        return TRAVEL_DISTANCE_MAX
    return _clamp_distance(int(digits))


def _clamp_distance(km: int) -> int:
    return min(max(km, 0), TRAVEL_DISTANCE_MAX)

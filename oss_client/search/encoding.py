"""Value encoding helpers shared by search request fragments."""

import math
import re
from typing import Any
from urllib.parse import quote_plus

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def encode(value: Any) -> str:
    """URL-encode a parameter value.

    Spaces become ``+`` and ``*`` is left literal, so the match-all
    query renders as ``*%3A*``.
    """
    return quote_plus("" if value is None else str(value), safe="*")


def is_blank(value: Any) -> bool:
    """True for values the engine treats as absent: falsy ones and ``"0"``."""
    return not value or value == "0"


def _float_to_int(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(value)


def to_int(value: Any) -> int:
    """Coerce ``value`` to an integer with loose numeric semantics.

    Integers pass through, floats are truncated, booleans map to 0/1 and
    strings yield their leading number, exponent included
    (``"12abc"`` -> 12, ``"1e3"`` -> 1000, ``"2.9"`` -> 2). Anything
    that has no numeric reading becomes 0.

    Args:
        value: Value to coerce

    Returns:
        The integer reading of ``value``
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _float_to_int(value)
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8", "replace") if isinstance(value, bytes) else value
        match = _LEADING_NUMBER.match(text)
        if not match:
            return 0
        number = match.group(1)
        if any(c in number for c in ".eE"):
            return _float_to_int(float(number))
        return int(number)
    return 0

"""Validity rules for normalized city names and pollution values."""

import math
import re
from typing import Any

from smog.domain.city.model.city import NormalizedKey

# Placeholder values upstream uses for "no name".
INVALID_TOKENS = frozenset({"na", "n/a", "null", "none", "unknown", "undefined"})

# Substrings marking monitoring sites that are not cities.
NON_CITY_KEYWORDS = ("station", "powerplant", "plant", "factory", "industrial")

MIN_NAME_LENGTH = 3

# Letters, whitespace, hyphen, apostrophe and period only, 2-64 characters.
CITY_NAME_PATTERN = re.compile(r"[a-zA-Z\s\-'.]{2,64}")


def is_city_name(key: NormalizedKey) -> bool:
    """Return True if a normalized name looks like a real city."""
    if key in INVALID_TOKENS:
        return False
    if any(keyword in key for keyword in NON_CITY_KEYWORDS) or len(key) < MIN_NAME_LENGTH:
        return False
    return CITY_NAME_PATTERN.fullmatch(key) is not None


# Numeric string forms upstream may send: plain decimals with optional
# exponent, and unsigned 0x/0o/0b integer literals. No digit separators,
# no "nan"/"inf" spellings.
_DECIMAL_STRING = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INT_STRING = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def coerce_pollution(value: Any) -> float | int | None:
    """Return ``value`` as a finite number, or None if it is not one.

    Numeric strings are accepted; blank strings, booleans, NaN and infinities
    are not.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        return _parse_numeric_string(value.strip())
    return None


def _parse_numeric_string(text: str) -> float | int | None:
    if _DECIMAL_STRING.fullmatch(text):
        number = float(text)
        return number if math.isfinite(number) else None
    if _PREFIXED_INT_STRING.fullmatch(text):
        integer = int(text, 0)
        try:
            float(integer)
        except OverflowError:
            return None
        return integer
    return None

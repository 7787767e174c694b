"""Parse free-text Rupiah amounts typed into /setbudget.

Examples:
- "175000", "175.000", "Rp 175.000" -> 175000
- "200k", "200rb" -> 200000
- "2jt", "2m" -> 2000000
- "1.5jt" -> 1500000
"""

import math
import re
from typing import Optional

THOUSAND_MARKERS = ("k", "rb")
MILLION_MARKERS = ("m", "jt")

_SUFFIX = r"(k|rb|m|jt)"

# "175.000" or "1.250.000rb" - dots between groups of exactly three digits
_GROUPED = re.compile(r"^\d{1,3}(?:\.\d{3})+" + _SUFFIX + r"?$")

_DIGITS = re.compile(r"^\d+$")
_DIGITS_SUFFIX = re.compile(r"^(\d+)" + _SUFFIX + r"$")
_DECIMAL_SUFFIX = re.compile(r"^(\d+\.?\d*)" + _SUFFIX + r"$")


def _normalize(text: str) -> str:
    s = re.sub(r"rp|\s", "", text.strip().lower())
    if _GROUPED.match(s):
        s = s.replace(".", "")
    return s


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _multiplier(marker: str) -> int:
    return 1_000 if marker in THOUSAND_MARKERS else 1_000_000


def parse_amount(text: str) -> Optional[int]:
    """Parse a Rupiah amount into whole Rupiah.

    Returns None when the text is not a number. Zero and negative values
    are returned as-is; rejecting them is up to the caller.
    """
    s = _normalize(text or "")
    if not s:
        return None

    if _DIGITS.match(s):
        return int(s)

    match = _DIGITS_SUFFIX.match(s)
    if match:
        return int(match.group(1)) * _multiplier(match.group(2))

    match = _DECIMAL_SUFFIX.match(s)
    if match:
        # Million markers are checked before thousand markers
        value = float(match.group(1))
        if match.group(2) in MILLION_MARKERS:
            return _round_half_up(value * 1_000_000)
        return _round_half_up(value * 1_000)

    try:
        value = float(s)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return _round_half_up(value)

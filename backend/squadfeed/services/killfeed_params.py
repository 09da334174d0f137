"""Query-string parsing for the killfeed route."""
import re
from typing import Optional

# Largest absolute epoch-ms value that still maps to a valid date
MAX_TIMESTAMP_MS = 8_640_000_000_000_000

# Prefixes longer than this are only kept as "very large" (>= 10**17)
MAX_SIGNIFICANT_DIGITS = 17

_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?)([0-9]+)")


def parse_int_prefix(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a query value.
    
    Trailing garbage is ignored ("25abc" -> 25, "5.9" -> 5). Returns None when
    the value is missing or does not start with an ASCII digit. Overlong
    numbers are truncated to MAX_SIGNIFICANT_DIGITS + 1 digits, which keeps
    them out of range for every caller.
    """
    if value is None:
        return None
    match = _INT_PREFIX.match(value)
    if not match:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_SIGNIFICANT_DIGITS:
        digits = digits[:MAX_SIGNIFICANT_DIGITS + 1]
    number = int(digits)
    return -number if sign == "-" else number


def parse_last_time(value: Optional[str]) -> Optional[int]:
    """Cursor timestamp (epoch ms), or None if it should not be used."""
    last_time = parse_int_prefix(value)
    if last_time is None or abs(last_time) > MAX_TIMESTAMP_MS:
        return None
    # Zero is treated as "no cursor"
    if last_time == 0:
        return None
    return last_time


def parse_last_n(value: Optional[str], default: int) -> int:
    """Number of recent events to return, falling back to default."""
    last_n = parse_int_prefix(value)
    if last_n is None or last_n < 1:
        return default
    return last_n

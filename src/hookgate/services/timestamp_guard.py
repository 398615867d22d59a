"""Freshness check for signed delivery timestamps."""

import math
import re
import time

DEFAULT_TOLERANCE_SECONDS = 300

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def parse_timestamp(timestamp: str) -> float | None:
    """Parse a Unix-seconds string; ``None`` for non-numeric or non-finite input.

    Accepts decimal and exponent notation plus unsigned ``0x``/``0o``/``0b``
    literals, surrounded by optional whitespace. Digit separators
    (``1_700_000_000``) and other Python-only spellings are rejected.
    """
    if not isinstance(timestamp, str):
        return None
    text = timestamp.strip()
    if _DECIMAL_RE.fullmatch(text):
        value = float(text)
    elif _RADIX_RE.fullmatch(text):
        try:
            value = float(int(text, 0))
        except OverflowError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def is_timestamp_fresh(
    timestamp: str,
    now: float | None = None,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> bool:
    """Return True iff the timestamp lies within ``tolerance`` seconds of now.

    The window is symmetric so a sender clock running slightly ahead is still
    accepted. ``now`` is truncated to whole seconds before comparing.
    """
    value = parse_timestamp(timestamp)
    if value is None:
        return False
    current = math.floor(time.time() if now is None else now)
    return abs(current - value) <= tolerance

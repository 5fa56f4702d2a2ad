"""
Value coercion for canonical product fields.

Source CSV cells arrive as verbatim strings. These helpers turn them into the
types the canonical schema expects, returning None for anything that is not
convertible instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_NUMBER_CLEANUP = re.compile(r"[^\d,.\-]")


def to_text(value: Any) -> Optional[str]:
    """Return `value` as a stripped string, or None when empty."""
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def to_float(value: Any) -> Optional[float]:
    """
    Convert numeric-like values to float. Return None if not possible.

    Handles currency symbols / spaces ("1 299,00 Kč" -> 1299.0) and both
    decimal separators. When both "," and "." appear, the last one is the
    decimal separator.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        f = float(value)
        return None if math.isnan(f) else f

    s = _NUMBER_CLEANUP.sub("", str(value).strip())
    if not s or s in {"-", ".", ","}:
        return None

    if "," in s and "." in s:
        if s.rfind(",") > s.rfind("."):
            s = s.replace(".", "").replace(",", ".")
        else:
            s = s.replace(",", "")
    else:
        s = s.replace(",", ".")

    try:
        return float(s)
    except ValueError:
        return None


def to_int(value: Any) -> Optional[int]:
    """Convert numeric-like values to int (truncating decimals). Return None if not possible."""
    f = to_float(value)
    if f is None or math.isinf(f):
        return None
    return int(f)

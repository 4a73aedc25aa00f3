"""Numeric coercion for spreadsheet key cells.

Spreadsheet exports carry stray text in key columns, so coercion never raises:
anything that does not read as a finite-or-infinite decimal number yields
``None`` and the caller skips the cell.
"""

from __future__ import annotations

import math
from typing import Any

Number = int | float


def to_number(value: Any) -> Number | None:
    """Coerce a cell value to a number, or return None when it is not numeric.

    Rules:
      - int/float pass through (NaN rejected)
      - bool is not a number
      - strings are stripped and parsed as decimal floats; blank strings are not numeric
      - integral results are returned as int so 5, 5.0 and "5" compare and hash equal

    Examples:
        >>> to_number(" 7 ")
        7
        >>> to_number("7.5")
        7.5
        >>> to_number("abc") is None
        True

    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        # float() accepts "1_000"; spreadsheets don't
        if not text or "_" in text:
            return None
        # Only the spelled-out "Infinity" is numeric; "inf" and "nan" are text
        word = text.lstrip("+-")
        if word.isalpha() and word != "Infinity":
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number):
        return None
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def is_blank(value: Any) -> bool:
    """Return True for empty cells (None or whitespace-only strings)."""
    return value is None or (isinstance(value, str) and not value.strip())

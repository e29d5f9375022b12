"""
Route draft form state.

Holds the in-progress trip request typed into the "Add a New Route" form.
Each keystroke replaces a single field; nothing here is ever persisted.

Author: SafeSteps Team
Date: 2026-10-16
"""

import math
import re
from typing import Any, Dict, Union

Number = Union[int, float]

# Screen field names mapped to draft attributes
FIELD_ALIASES = {
    "startPoint": "start_point",
    "start_point": "start_point",
    "destination": "destination",
    "date": "date",
    "time": "time",
    "passengers": "passengers",
}

DEFAULT_PASSENGERS = 1

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_RADIX_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")


def coerce_number(text: Any) -> Number:
    """Convert form text to a number the way the numeric keypad field does.

    Empty or blank text becomes 0, decimal/exponent and 0x/0o/0b literals
    are parsed, "Infinity" keeps its sign, and anything else is NaN.
    Never raises.

    Args:
        text: Raw field text (non-strings are stringified first).

    Returns:
        An int for integral values, a float otherwise (including NaN).
    """
    if isinstance(text, bool):
        return int(text)
    if isinstance(text, (int, float)):
        return text

    s = str(text).strip()
    if not s:
        return 0

    if _RADIX_RE.match(s):
        return int(s, 0)

    if _INFINITY_RE.match(s):
        return -math.inf if s.startswith("-") else math.inf

    if _DECIMAL_RE.match(s):
        value = float(s)
        if value.is_integer() and abs(value) < 2 ** 53:
            return int(value)
        return value

    return math.nan


def is_valid_passenger_count(value: Number) -> bool:
    """True when the stored passenger count is a finite number."""
    return isinstance(value, (int, float)) and math.isfinite(value)


class RouteDraft:
    """Transient route-entry record.

    Attributes:
        start_point: Where the trip begins.
        destination: Where the trip ends.
        date: Free-form date text.
        time: Free-form time text.
        passengers: Coerced passenger count (may be NaN).
    """

    __slots__ = ("start_point", "destination", "date", "time", "passengers")

    def __init__(
        self,
        start_point: str = "",
        destination: str = "",
        date: str = "",
        time: str = "",
        passengers: Number = DEFAULT_PASSENGERS,
    ):
        self.start_point = start_point
        self.destination = destination
        self.date = date
        self.time = time
        self.passengers = passengers

    def update(self, name: str, value: Any) -> "RouteDraft":
        """Return a copy of the draft with one field replaced.

        Args:
            name: Field name, either screen style (startPoint) or attribute style.
            value: New text for the field. Passengers is coerced to a number.

        Returns:
            New RouteDraft; self is left untouched.

        Raises:
            KeyError: If name is not a route draft field.
        """
        attr = FIELD_ALIASES[name]
        fields = self.to_dict()
        fields[attr] = coerce_number(value) if attr == "passengers" else value
        return RouteDraft(**fields)

    def to_dict(self) -> Dict[str, Any]:
        return {attr: getattr(self, attr) for attr in self.__slots__}

    def __eq__(self, other):
        if not isinstance(other, RouteDraft):
            return NotImplemented
        # NaN passengers still compare equal to themselves
        mine, theirs = self.to_dict(), other.to_dict()
        for attr in self.__slots__:
            a, b = mine[attr], theirs[attr]
            if a == b:
                continue
            if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
                continue
            return False
        return True

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"RouteDraft({fields})"

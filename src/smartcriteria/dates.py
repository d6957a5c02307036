"""Relative date values.

A date criteria value is either an absolute keyword ("today", "yesterday",
"last week") or a relative magnitude such as "3 days" or "1 week".
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import DATE_KEYWORDS
from .exceptions import MalformedCriteriaValueError

__all__ = ("DateUnit", "RelativeDate", "decode_relative_date", "encode_relative_date")


class DateUnit(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def singular(self) -> str:
        return self.value

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    def suffix(self, count: int) -> str:
        return self.singular if count == 1 else self.plural


# Plural before singular so "3 days" never leaves a trailing "s" behind
_SUFFIXES: Tuple[Tuple[str, DateUnit], ...] = tuple(
    (suffix, unit) for unit in DateUnit for suffix in (unit.plural, unit.singular)
)


class RelativeDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=0, description="Number of units.")
    unit: DateUnit = Field(..., description="Calendar unit.")

    def __str__(self) -> str:
        return encode_relative_date(self.count, self.unit)


def decode_relative_date(value: str) -> Optional[RelativeDate]:
    """Decode a "<count> <unit>" value.

    Returns None for absolute date keywords, matched case-insensitively so
    "Yesterday" is not read as a malformed "Yester day" count, and for values
    without a unit suffix.

    Raises:
        MalformedCriteriaValueError: a unit suffix is present but the rest of
            the value is not a non-negative integer
    """
    if value.lower() in DATE_KEYWORDS:
        return None
    match = next(((s, u) for s, u in _SUFFIXES if value.endswith(s)), None)
    if match is None:
        return None
    suffix, unit = match
    count_text = value[: -len(suffix)].strip()
    if not (count_text.isascii() and count_text.isdigit()):
        raise MalformedCriteriaValueError("malformed criteria value", value=value)
    return RelativeDate(count=int(count_text), unit=unit)


def encode_relative_date(count: int, unit: DateUnit) -> str:
    """Format a magnitude and unit as a criteria value, e.g. "3 days"."""
    if count < 0:
        raise MalformedCriteriaValueError("relative date count must not be negative", count=count)
    return f"{count} {unit.suffix(count)}"

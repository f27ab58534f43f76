"""Text-to-number parsing for raw shell input.

Parse failures are returned as values so callers can check them before
touching the record store.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Plain decimal notation only: no digit separators, no hex, no Unicode digits.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Result of converting one raw input string.

    Exactly one of ``value`` / ``error`` is set.
    """

    field: str
    raw: str
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_blank(raw: str | None) -> bool:
    """True for ``None`` or whitespace-only input ("leave unchanged")."""
    return raw is None or not raw.strip()


def _parse_int(raw: str) -> int | None:
    text = raw.strip()
    return int(text) if INTEGER_PATTERN.fullmatch(text) else None


def parse_age(raw: str, *, field: str = "age") -> ParseOutcome[int]:
    """Parse a whole number of years.

    Examples:
        >>> parse_age(" 30 ").value
        30
        >>> parse_age("thirty").ok
        False
    """
    value = _parse_int(raw)
    if value is None:
        return ParseOutcome(field=field, raw=raw, error=f"Age must be a whole number, got {raw!r}")
    return ParseOutcome(field=field, raw=raw, value=value)


def parse_salary(raw: str, *, field: str = "basic_salary") -> ParseOutcome[float]:
    """Parse a finite decimal amount.

    Examples:
        >>> parse_salary("50000").value
        50000.0
        >>> parse_salary("nan").ok
        False
    """
    text = raw.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        return ParseOutcome(field=field, raw=raw, error=f"Salary must be a number, got {raw!r}")
    value = float(text)
    if not math.isfinite(value):
        return ParseOutcome(field=field, raw=raw, error=f"Salary is out of range, got {raw!r}")
    return ParseOutcome(field=field, raw=raw, value=value)


def parse_employee_id(raw: str, *, field: str = "id") -> ParseOutcome[int]:
    """Parse an employee number typed at a prompt."""
    value = _parse_int(raw)
    if value is None:
        return ParseOutcome(
            field=field, raw=raw, error=f"Employee number must be a whole number, got {raw!r}"
        )
    return ParseOutcome(field=field, raw=raw, value=value)


PARSERS = {
    "age": parse_age,
    "basic_salary": parse_salary,
}

"""Field validation rules for employee records.

Two entry points:

- :func:`validate_new_employee` — creation path.  All fields are checked
  and the first failing check wins, in the order emptiness, age, salary,
  date of joining, phone number.
- :func:`validate_field` — modification path.  One field at a time, so a
  bad value for one field never blocks the others.

Both return ``None`` when the value is acceptable, else a
:class:`ValidationIssue` naming the field.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from staffctl.domain.employee import REQUIRED_TEXT_FIELDS, EmployeeFields

MIN_AGE = 18
MAX_AGE = 65

# ASCII-only: ``\d`` would also accept other Unicode digits.
DATE_OF_JOINING_PATTERN = re.compile(r"[0-9]{2}-[A-Za-z]{3}-[0-9]{4}")
PHONE_NUMBER_PATTERN = re.compile(r"[0-9]{10}")

MSG_EMPTY = "Found empty fields: {field}"
MSG_AGE = f"Invalid age. Age must be between {MIN_AGE} and {MAX_AGE}."
MSG_SALARY = "Invalid salary. Salary must be non-negative."
MSG_DATE = "Invalid date format. Date must be in DD-MMM-YYYY format."
MSG_PHONE = "Invalid phone number. Phone number must be 10 digits."


@dataclass(frozen=True)
class ValidationIssue:
    """A rejected field value."""

    field: str
    message: str


# ---------------------------------------------------------------------------
# Single-value checks
# ---------------------------------------------------------------------------


def is_non_empty(value: str) -> bool:
    return len(value.strip()) > 0


def is_valid_age(value: int) -> bool:
    return MIN_AGE <= value <= MAX_AGE


def is_valid_salary(value: float) -> bool:
    return value >= 0


def is_valid_date_of_joining(value: str) -> bool:
    """Pattern check only; ``"99-Zzz-0000"`` passes."""
    return DATE_OF_JOINING_PATTERN.fullmatch(value) is not None


def is_valid_phone_number(value: str) -> bool:
    return PHONE_NUMBER_PATTERN.fullmatch(value) is not None


def _check_non_empty(field: str) -> Callable[[Any], ValidationIssue | None]:
    def _check(value: Any) -> ValidationIssue | None:
        if is_non_empty(str(value)):
            return None
        return ValidationIssue(field, MSG_EMPTY.format(field=field))

    return _check


def _check_age(value: Any) -> ValidationIssue | None:
    return None if is_valid_age(value) else ValidationIssue("age", MSG_AGE)


def _check_salary(value: Any) -> ValidationIssue | None:
    return None if is_valid_salary(value) else ValidationIssue("basic_salary", MSG_SALARY)


def _check_date(value: Any) -> ValidationIssue | None:
    if is_valid_date_of_joining(str(value)):
        return None
    return ValidationIssue("date_of_joining", MSG_DATE)


def _check_phone(value: Any) -> ValidationIssue | None:
    if is_valid_phone_number(str(value)):
        return None
    return ValidationIssue("phone_number", MSG_PHONE)


FIELD_VALIDATORS: dict[str, Callable[[Any], ValidationIssue | None]] = {
    **{name: _check_non_empty(name) for name in REQUIRED_TEXT_FIELDS},
    "age": _check_age,
    "basic_salary": _check_salary,
    "date_of_joining": _check_date,
    "phone_number": _check_phone,
}

# Creation-path order: emptiness first, then the format checks.
_CREATION_ORDER: tuple[str, ...] = (
    *REQUIRED_TEXT_FIELDS,
    "age",
    "basic_salary",
    "date_of_joining",
    "phone_number",
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_field(field: str, value: Any) -> ValidationIssue | None:
    """Validate one proposed field value.

    Raises:
        KeyError: If *field* is not an editable employee field.
    """
    return FIELD_VALIDATORS[field](value)


def validate_new_employee(fields: EmployeeFields) -> ValidationIssue | None:
    """Validate a full field set; return the first failing check, if any."""
    for name in _CREATION_ORDER:
        issue = FIELD_VALIDATORS[name](getattr(fields, name))
        if issue is not None:
            return issue
    return None

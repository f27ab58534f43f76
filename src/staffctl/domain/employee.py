"""Employee record model and the field catalogue.

Field names map 1:1 to the persisted JSON keys.  ``FIELD_LABELS`` fixes the
prompt and display order used by every interface.

INVARIANT: ``id`` is assigned by the record store and never changes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# ---------------------------------------------------------------------------
# Field catalogue
# ---------------------------------------------------------------------------

# Editable fields in prompt order (id excluded).
EMPLOYEE_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "age",
    "basic_salary",
    "department",
    "date_of_joining",
    "address",
    "city",
    "phone_number",
)

FIELD_LABELS: dict[str, str] = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "age": "Age",
    "basic_salary": "Basic Salary",
    "department": "Department",
    "date_of_joining": "Date of Joining (DD-MMM-YYYY)",
    "address": "Address",
    "city": "City",
    "phone_number": "Phone Number",
}

# Table headers, keyed by the field they display.
COLUMN_HEADERS: dict[str, str] = {
    "id": "Emp No",
    "first_name": "First Name",
    "last_name": "Last Name",
    "age": "Age",
    "basic_salary": "Salary",
    "department": "Department",
    "date_of_joining": "DOJ",
    "address": "Address",
    "city": "City",
    "phone_number": "Phone",
}

NUMERIC_FIELDS = frozenset({"age", "basic_salary"})

# Fields that must be non-blank; checked first during creation.
REQUIRED_TEXT_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "department",
    "address",
    "city",
)

# Criteria accepted by search, in prompt order.
SEARCH_FIELDS: tuple[str, ...] = ("first_name", "last_name", "department")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class EmployeeFields(BaseModel):
    """Typed field set for a record that has not been assigned an id yet.

    Carries values as given; business rules live in
    :mod:`staffctl.domain.validation`, not here, so a bad value reaches the
    validator and is reported instead of failing construction.
    """

    model_config = {"frozen": True}

    first_name: str
    last_name: str
    age: int
    basic_salary: float
    department: str
    date_of_joining: str
    address: str
    city: str
    phone_number: str


class Employee(EmployeeFields):
    """A stored employee record."""

    id: int

    def with_changes(self, changes: dict[str, Any]) -> Employee:
        """Return a copy with *changes* applied; ``id`` is never replaced."""
        updates = {k: v for k, v in changes.items() if k != "id"}
        return self.model_copy(update=updates)

    def to_row(self) -> dict[str, Any]:
        """Plain dict in display order, ``id`` first."""
        return {"id": self.id, **{name: getattr(self, name) for name in EMPLOYEE_FIELDS}}

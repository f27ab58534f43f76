"""Tests for the employee model and field catalogue."""

import pytest
from pydantic import ValidationError

from staffctl.domain.employee import (
    COLUMN_HEADERS,
    EMPLOYEE_FIELDS,
    FIELD_LABELS,
    Employee,
)
from tests.conftest import ANNA


class TestFieldCatalogue:
    def test_labels_cover_fields(self) -> None:
        assert list(FIELD_LABELS) == list(EMPLOYEE_FIELDS)

    def test_headers_start_with_id(self) -> None:
        assert list(COLUMN_HEADERS)[0] == "id"
        assert list(COLUMN_HEADERS)[1:] == list(EMPLOYEE_FIELDS)


class TestEmployee:
    def test_frozen(self) -> None:
        emp = Employee(id=1, **ANNA)
        with pytest.raises(ValidationError):
            emp.city = "Gotham"  # type: ignore[misc]

    def test_with_changes_keeps_id(self) -> None:
        emp = Employee(id=1, **ANNA)
        changed = emp.with_changes({"city": "Gotham", "id": 99})
        assert changed.id == 1
        assert changed.city == "Gotham"
        assert emp.city == "Metropolis"

    def test_to_row_order(self) -> None:
        row = Employee(id=4, **ANNA).to_row()
        assert list(row) == ["id", *EMPLOYEE_FIELDS]
        assert row["id"] == 4

"""RecordService — shell-facing employee operations.

Accepts raw text the way a prompt or CLI option delivers it, parses the
numeric fields, and delegates to the :class:`RecordStore`.

Pipeline per mutation: PARSE → STORE → RESPOND.  A parse failure stops
the pipeline before the store is touched.
"""

from __future__ import annotations

from typing import Any

from staffctl.domain.employee import EmployeeFields
from staffctl.domain.parsing import PARSERS, ParseOutcome, is_blank
from staffctl.services.base import BaseService
from staffctl.services.result import NOT_FOUND, PARSE_ERROR, ServiceResult


def _parse_failure(op: str, outcome: ParseOutcome[Any]) -> ServiceResult:
    return ServiceResult.failure(
        op,
        PARSE_ERROR,
        outcome.error or "Unparsable input",
        field=outcome.field,
        value=outcome.raw,
    )


def _items(records: list[Any]) -> list[dict[str, Any]]:
    return [r.to_row() for r in records]


class RecordService(BaseService):
    """Add, delete, modify, look up, search, list, and count employees."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_employee(
        self,
        *,
        first_name: str,
        last_name: str,
        age: str,
        basic_salary: str,
        department: str,
        date_of_joining: str,
        address: str,
        city: str,
        phone_number: str,
    ) -> ServiceResult:
        """Parse *age* and *basic_salary*, then add the employee."""
        op = "add"
        parsed: dict[str, Any] = {}
        for name, raw in (("age", age), ("basic_salary", basic_salary)):
            outcome = PARSERS[name](raw)
            if not outcome.ok:
                return _parse_failure(op, outcome)
            parsed[name] = outcome.value

        fields = EmployeeFields(
            first_name=first_name,
            last_name=last_name,
            department=department,
            date_of_joining=date_of_joining,
            address=address,
            city=city,
            phone_number=phone_number,
            **parsed,
        )
        return self._store.add(fields)

    def delete_employee(self, emp_id: int) -> ServiceResult:
        return self._store.delete(emp_id)

    def modify_employee(self, emp_id: int, **raw: str | None) -> ServiceResult:
        """Apply the non-blank entries of *raw* to employee *emp_id*.

        Unknown ids fail with ``NOT_FOUND`` before any input is parsed.
        Numeric text that does not parse fails the whole operation.
        """
        op = "modify"
        if self._store.find_by_id(emp_id) is None:
            return ServiceResult.failure(
                op, NOT_FOUND, f"Employee not found: {emp_id}", id=emp_id
            )

        changes: dict[str, Any] = {}
        for name, value in raw.items():
            if is_blank(value):
                continue
            assert value is not None
            parser = PARSERS.get(name)
            if parser is None:
                changes[name] = value
                continue
            outcome = parser(value)
            if not outcome.ok:
                return _parse_failure(op, outcome)
            changes[name] = outcome.value

        return self._store.modify(emp_id, changes)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_employee(self, emp_id: int) -> ServiceResult:
        op = "get"
        emp = self._store.find_by_id(emp_id)
        if emp is None:
            return ServiceResult.failure(
                op, NOT_FOUND, f"Employee not found: {emp_id}", id=emp_id
            )
        return ServiceResult(ok=True, op=op, data=emp.to_row())

    def search_employees(
        self,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        department: str | None = None,
    ) -> ServiceResult:
        """Exact, case-insensitive match on every non-blank criterion."""
        matches = self._store.search(first_name, last_name, department)
        criteria = {
            k: v
            for k, v in (
                ("first_name", first_name),
                ("last_name", last_name),
                ("department", department),
            )
            if not is_blank(v)
        }
        return ServiceResult(
            ok=True,
            op="search",
            data={"items": _items(matches), "count": len(matches), "criteria": criteria},
        )

    def list_employees(self) -> ServiceResult:
        records = self._store.all()
        return ServiceResult(
            ok=True,
            op="list",
            data={"items": _items(records), "count": len(records)},
        )

    def count_employees(self) -> ServiceResult:
        return ServiceResult(ok=True, op="count", data={"count": self._store.count()})

"""RecordStore — the in-memory employee collection and its invariants.

The store owns an ordered list of :class:`Employee` records and the
next-identifier counter.  Mutations (``add``, ``delete``, ``modify``)
return :class:`ServiceResult`; lookups return plain values because a
missing record is not an error for them.

INVARIANT: ids are unique and never reused within a session.
INVARIANT: insertion order is preserved by every operation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Literal

from staffctl.domain.employee import EMPLOYEE_FIELDS, FIELD_LABELS, Employee, EmployeeFields
from staffctl.domain.parsing import is_blank
from staffctl.domain.validation import validate_field, validate_new_employee
from staffctl.services.result import NOT_FOUND, VALIDATION_FAILED, ServiceResult

logger = logging.getLogger(__name__)

NextIdStrategy = Literal["last", "max"]

# Nouns used in "<message> <noun> not updated." modify warnings.
NOT_UPDATED_NOUNS: dict[str, str] = {
    "age": "Age",
    "basic_salary": "Salary",
    "date_of_joining": "Date",
    "phone_number": "Phone number",
}


def derive_next_id(records: list[Employee], strategy: NextIdStrategy = "last") -> int:
    """Compute the first id to assign after loading *records*.

    ``"last"`` follows the id of the final record in insertion order;
    ``"max"`` uses the highest id present.  Both give 1 for an empty list.
    """
    if not records:
        return 1
    if strategy == "max":
        return max(r.id for r in records) + 1
    return records[-1].id + 1


def _matches(value: str, criterion: str | None) -> bool:
    """Case-insensitive full equality; a blank criterion matches anything."""
    if is_blank(criterion):
        return True
    assert criterion is not None
    return value.casefold() == criterion.casefold()


class RecordStore:
    """Ordered collection of employee records with id assignment.

    Usage::

        store = RecordStore()
        result = store.add(fields)
        if result.ok:
            emp = store.find_by_id(result.data["id"])
    """

    def __init__(
        self,
        records: Iterable[Employee] = (),
        *,
        next_id_from: NextIdStrategy = "last",
    ) -> None:
        self._records: list[Employee] = list(records)
        self._next_id = derive_next_id(self._records, next_id_from)
        self._dirty = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def next_id(self) -> int:
        """The id the next successful ``add`` will assign."""
        return self._next_id

    @property
    def dirty(self) -> bool:
        """True once any mutation succeeded since construction or ``mark_clean``."""
        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, fields: EmployeeFields) -> ServiceResult:
        """Validate *fields* and append a new record.

        On failure the store is unchanged and the first failing check is
        reported.
        """
        op = "add"
        issue = validate_new_employee(fields)
        if issue is not None:
            logger.debug("Rejected new employee: %s", issue.message)
            return ServiceResult.failure(
                op, VALIDATION_FAILED, issue.message, field=issue.field
            )

        emp = Employee(id=self._next_id, **fields.model_dump())
        self._records.append(emp)
        self._next_id += 1
        self._dirty = True
        logger.debug("Added employee %d", emp.id)
        return ServiceResult(ok=True, op=op, data={"id": emp.id, "record": emp.to_row()})

    def delete(self, emp_id: int) -> ServiceResult:
        """Remove the record with *emp_id*."""
        op = "delete"
        index = self._index_of(emp_id)
        if index is None:
            return _not_found(op, emp_id)

        removed = self._records.pop(index)
        self._dirty = True
        logger.debug("Deleted employee %d", emp_id)
        return ServiceResult(ok=True, op=op, data={"id": emp_id, "record": removed.to_row()})

    def modify(self, emp_id: int, changes: dict[str, Any]) -> ServiceResult:
        """Apply each non-blank change that passes its own validator.

        Rejected values leave their field untouched and are listed in
        ``fields_rejected``; the remaining changes still apply.
        """
        op = "modify"
        index = self._index_of(emp_id)
        if index is None:
            return _not_found(op, emp_id)

        accepted: dict[str, Any] = {}
        rejected: list[dict[str, str]] = []
        warnings: list[str] = []

        for name, value in changes.items():
            if value is None or (isinstance(value, str) and is_blank(value)):
                continue
            if name not in EMPLOYEE_FIELDS:
                msg = f"Cannot change field: {name}"
                rejected.append({"field": name, "message": msg})
                warnings.append(msg)
                continue
            issue = validate_field(name, value)
            if issue is not None:
                rejected.append({"field": issue.field, "message": issue.message})
                noun = NOT_UPDATED_NOUNS.get(name, FIELD_LABELS[name])
                warnings.append(f"{issue.message} {noun} not updated.")
                continue
            accepted[name] = value

        current = self._records[index]
        if accepted:
            current = current.with_changes(accepted)
            self._records[index] = current
            self._dirty = True
            logger.debug("Modified employee %d: %s", emp_id, ", ".join(accepted))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": emp_id,
                "fields_changed": list(accepted),
                "fields_rejected": rejected,
                "record": current.to_row(),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, emp_id: int) -> Employee | None:
        index = self._index_of(emp_id)
        return None if index is None else self._records[index]

    def search(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        department: str | None = None,
    ) -> list[Employee]:
        """Return records matching every non-blank criterion, in insertion order."""
        return [
            r
            for r in self._records
            if _matches(r.first_name, first_name)
            and _matches(r.last_name, last_name)
            and _matches(r.department, department)
        ]

    def count(self) -> int:
        return len(self._records)

    def all(self) -> list[Employee]:
        """Snapshot of every record in insertion order."""
        return list(self._records)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, emp_id: int) -> int | None:
        for i, record in enumerate(self._records):
            if record.id == emp_id:
                return i
        return None


def _not_found(op: str, emp_id: int) -> ServiceResult:
    return ServiceResult.failure(op, NOT_FOUND, f"Employee not found: {emp_id}", id=emp_id)

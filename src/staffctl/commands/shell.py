"""Command: interactive seven-action menu over the record store.

The menu loop collects raw input with ``click.prompt`` and renders every
outcome through :meth:`AppContext.show`, so a failed action reports and
returns to the menu instead of ending the session.  Choosing *Exit*
saves the record file before leaving, unless the file could not be
loaded and nothing has changed since.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand
from staffctl.domain.employee import EMPLOYEE_FIELDS, FIELD_LABELS, SEARCH_FIELDS
from staffctl.domain.parsing import parse_employee_id
from staffctl.services.records import RecordService
from staffctl.services.result import PARSE_ERROR, ServiceResult

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext

MENU = """\

Employee Record System
1. ADD Employee
2. DELETE Employee
3. MODIFY Employee
4. SEARCH Employee
5. Display All Records
6. COUNT Records
7. Exit"""

EXIT_CHOICE = "7"


def _ask(label: str) -> str:
    return click.prompt(label, default="", show_default=False)


def _ask_id(app: AppContext, op: str, label: str) -> int | None:
    raw = _ask(label)
    outcome = parse_employee_id(raw)
    if not outcome.ok:
        app.show(
            ServiceResult.failure(
                op, PARSE_ERROR, outcome.error or "Bad employee number", field="id", value=raw
            )
        )
        return None
    return outcome.value


def _add(app: AppContext, svc: RecordService) -> None:
    values = {name: _ask(f"Enter {FIELD_LABELS[name]}") for name in EMPLOYEE_FIELDS}
    app.show(svc.add_employee(**values))


def _delete(app: AppContext, svc: RecordService) -> None:
    emp_id = _ask_id(app, "delete", "Enter Employee Number to delete")
    if emp_id is not None:
        app.show(svc.delete_employee(emp_id))


def _modify(app: AppContext, svc: RecordService) -> None:
    emp_id = _ask_id(app, "modify", "Enter Employee Number to modify")
    if emp_id is None:
        return
    found = svc.get_employee(emp_id)
    if not found.ok:
        app.show(found.model_copy(update={"op": "modify"}))
        return
    click.echo("Leave fields blank to keep existing values.")
    values = {name: _ask(f"Enter new {FIELD_LABELS[name]}") for name in EMPLOYEE_FIELDS}
    app.show(svc.modify_employee(emp_id, **values))


def _search(app: AppContext, svc: RecordService) -> None:
    criteria = {name: _ask(f"Enter {FIELD_LABELS[name]} (or leave blank)") for name in SEARCH_FIELDS}
    app.show(svc.search_employees(**criteria))


def _display_all(app: AppContext, svc: RecordService) -> None:
    app.show(svc.list_employees())


def _count(app: AppContext, svc: RecordService) -> None:
    app.show(svc.count_employees())


_ACTIONS: dict[str, Callable[[AppContext, RecordService], None]] = {
    "1": _add,
    "2": _delete,
    "3": _modify,
    "4": _search,
    "5": _display_all,
    "6": _count,
}


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl shell
  staffctl --data-file team.json shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive employee record menu."""
    svc = RecordService(app.workspace)
    while True:
        click.echo(MENU)
        choice = _ask("Enter your choice").strip()
        if choice == EXIT_CHOICE:
            ws = app.workspace
            # An unreadable file is only replaced once the user changed something.
            saved = ws.close() if ws.load_failed else ws.save()
            if saved is not None and not saved.ok:
                app.show(saved)
            click.echo("Exiting...")
            return
        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Please try again.")
            continue
        action(app, svc)

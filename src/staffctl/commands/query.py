"""Commands: get, search, list, and count employee records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand
from staffctl.services.records import RecordService

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl get 1
  staffctl --json get 1""",
)
@click.argument("emp_id", type=int)
@click.pass_obj
def get(app: AppContext, emp_id: int) -> None:
    """Show the employee with number EMP_ID."""
    app.emit(RecordService(app.workspace).get_employee(emp_id))


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl search --department sales
  staffctl search --first-name anna --last-name lee
  staffctl -q search --department Eng   # employee numbers only""",
)
@click.option("--first-name", default=None, help="Exact first name (case-insensitive).")
@click.option("--last-name", default=None, help="Exact last name (case-insensitive).")
@click.option("--department", default=None, help="Exact department (case-insensitive).")
@click.pass_obj
def search(
    app: AppContext,
    first_name: str | None,
    last_name: str | None,
    department: str | None,
) -> None:
    """Find employees matching every given criterion. No criteria lists all."""
    result = RecordService(app.workspace).search_employees(
        first_name=first_name,
        last_name=last_name,
        department=department,
    )
    app.emit(result)


@click.command(
    "list",
    cls=StaffCommand,
    examples="""\
  staffctl list
  staffctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """Display all employee records in insertion order."""
    app.emit(RecordService(app.workspace).list_employees())


@click.command(cls=StaffCommand)
@click.pass_obj
def count(app: AppContext) -> None:
    """Print the number of employee records."""
    app.emit(RecordService(app.workspace).count_employees())

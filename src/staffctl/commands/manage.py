"""Commands: add, delete, and modify employee records.

Numeric options are taken as raw text so the service layer reports
unparsable input as a ``PARSE_ERROR`` result instead of a usage error.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand
from staffctl.domain.employee import EMPLOYEE_FIELDS, FIELD_LABELS
from staffctl.services.records import RecordService

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext


def _is_interactive(app: AppContext) -> bool:
    """Return True when interactive prompts should fire.

    Prompts require: no ``--no-interact``, no ``--json``, and stdin is a TTY.
    """
    return not app.settings.no_interact and not app.settings.json_output and sys.stdin.isatty()


def _field_options(*, blank_help: bool = False):
    """Decorate a command with one ``--<field>`` text option per employee field."""

    def decorator(func):
        for name in reversed(EMPLOYEE_FIELDS):
            label = FIELD_LABELS[name]
            help_text = f"New {label} (omit to keep)." if blank_help else f"{label}."
            func = click.option(f"--{name.replace('_', '-')}", name, default=None, help=help_text)(
                func
            )
        return func

    return decorator


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl add --first-name Anna --last-name Lee --age 30 --basic-salary 50000 \\
      --department Eng --date-of-joining 01-Jan-2020 --address "1 Main St" \\
      --city Metropolis --phone-number 1234567890
  staffctl add                      # prompts for each field
  staffctl --json add ...""",
)
@_field_options()
@click.pass_obj
def add(app: AppContext, **fields: str | None) -> None:
    """Add an employee. Missing fields are prompted for when interactive."""
    interactive = _is_interactive(app)
    values: dict[str, str] = {}
    for name in EMPLOYEE_FIELDS:
        value = fields.get(name)
        if value is None and interactive:
            value = click.prompt(f"Enter {FIELD_LABELS[name]}", default="", show_default=False)
        values[name] = value or ""

    result = RecordService(app.workspace).add_employee(**values)
    app.emit(result)


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl delete 3
  staffctl --json delete 3""",
)
@click.argument("emp_id", type=int)
@click.pass_obj
def delete(app: AppContext, emp_id: int) -> None:
    """Delete the employee with number EMP_ID."""
    result = RecordService(app.workspace).delete_employee(emp_id)
    app.emit(result)


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl modify 3 --department Sales
  staffctl modify 3 --age 41 --phone-number 5550001111""",
)
@click.argument("emp_id", type=int)
@_field_options(blank_help=True)
@click.pass_obj
def modify(app: AppContext, emp_id: int, **fields: str | None) -> None:
    """Modify employee EMP_ID. Omitted or blank fields keep their values."""
    result = RecordService(app.workspace).modify_employee(emp_id, **fields)
    app.emit(result)

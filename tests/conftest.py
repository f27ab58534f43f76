"""Shared pytest fixtures and test helpers for staffctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from staffctl.config.settings import StaffSettings
from staffctl.domain.employee import EmployeeFields
from staffctl.services.store import RecordStore
from staffctl.services.workspace import Workspace


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's STAFFCTL_* environment out of every test."""
    for var in ("STAFFCTL_CONFIG", "STAFFCTL_DATA_FILE", "STAFFCTL_PROJECT_ROOT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory; the record file lands here by default."""
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> StaffSettings:
    return StaffSettings.from_cli(project_root=project_root)


@pytest.fixture
def store() -> RecordStore:
    """Empty in-memory record store."""
    return RecordStore()


@pytest.fixture
def workspace(settings: StaffSettings) -> Workspace:
    """Workspace over the temp project, already loaded (no file yet)."""
    ws = Workspace(settings)
    ws.load()
    return ws


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

ANNA: dict[str, Any] = {
    "first_name": "Anna",
    "last_name": "Lee",
    "age": 30,
    "basic_salary": 50000.0,
    "department": "Eng",
    "date_of_joining": "01-Jan-2020",
    "address": "1 Main St",
    "city": "Metropolis",
    "phone_number": "1234567890",
}


def make_fields(**overrides: Any) -> EmployeeFields:
    """Valid field set based on ANNA with *overrides* applied."""
    return EmployeeFields(**{**ANNA, **overrides})


def raw_fields(**overrides: Any) -> dict[str, str]:
    """ANNA as the raw strings a prompt would deliver."""
    return {k: str(v) for k, v in {**ANNA, **overrides}.items()}


def add_employee(store: RecordStore, **overrides: Any) -> int:
    """Add an employee via the store, asserting success; return its id."""
    result = store.add(make_fields(**overrides))
    assert result.ok, result.error
    return result.data["id"]

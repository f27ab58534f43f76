"""Workspace — one session's record store bound to its record file.

The Workspace is the single dependency injected into every service.  It
loads the record file once when opened and writes it back on orderly
shutdown; nothing is persisted in between.

INVARIANT: A failed load never aborts the session.  The store starts
empty and the failure is reported as an ``IO_ERROR`` result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from staffctl.infrastructure.records_file import RecordFile, RecordFileError
from staffctl.services.result import IO_ERROR, ServiceResult
from staffctl.services.store import RecordStore

if TYPE_CHECKING:
    from pathlib import Path

    from staffctl.config.settings import StaffSettings

logger = logging.getLogger(__name__)

MSG_NEW_FILE = "No existing records found. Starting with a new file."


class Workspace:
    """Owns the :class:`RecordStore` and :class:`RecordFile` for a session.

    Usage::

        ws = Workspace(settings)
        ws.load()
        RecordService(ws).add_employee(...)
        ws.close()  # saves when anything changed
    """

    def __init__(self, settings: StaffSettings) -> None:
        self._settings = settings
        self._file = RecordFile(settings.resolved_data_file, pretty=settings.storage.pretty)
        self._store = RecordStore(next_id_from=settings.store.next_id_from)
        self._load_failed = False

    @property
    def path(self) -> Path:
        return self._file.path

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def load_failed(self) -> bool:
        """True when the last ``load`` could not read the record file."""
        return self._load_failed

    def load(self) -> ServiceResult:
        """Replace the store with the records on disk."""
        op = "load"
        strategy = self._settings.store.next_id_from
        try:
            records = self._file.load()
        except RecordFileError as exc:
            logger.warning("Load failed, starting with an empty store: %s", exc)
            self._store = RecordStore(next_id_from=strategy)
            self._load_failed = True
            return ServiceResult.failure(
                op, IO_ERROR, str(exc), path=str(exc.path), reason=exc.reason
            )

        self._store = RecordStore(records, next_id_from=strategy)
        self._load_failed = False
        warnings: list[str] = []
        if not records and not self._file.exists():
            logger.info("No record file at %s", self.path)
            warnings.append(MSG_NEW_FILE)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(self.path), "count": len(records)},
            warnings=warnings,
        )

    def save(self) -> ServiceResult:
        """Write every record to the record file."""
        op = "save"
        records = self._store.all()
        try:
            self._file.save(records)
        except RecordFileError as exc:
            logger.error("Save failed: %s", exc)
            return ServiceResult.failure(
                op, IO_ERROR, str(exc), path=str(exc.path), reason=exc.reason
            )
        self._store.mark_clean()
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(self.path), "count": len(records)},
        )

    def close(self) -> ServiceResult | None:
        """Save if the store changed since it was loaded; else do nothing."""
        if not self._store.dirty:
            return None
        return self.save()

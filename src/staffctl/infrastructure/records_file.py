"""Record file — JSON persistence for the full employee collection.

The file is a single self-describing document::

    {"format": "staffctl.employees", "version": 1, "records": [...]}

so a missing file, a corrupt file, and a valid empty collection are all
distinguishable.  Writes go to a sibling ``.tmp`` file first and are moved
into place with :func:`os.replace`, so readers never see a partial file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from staffctl.domain.employee import Employee

logger = logging.getLogger(__name__)

FILE_FORMAT = "staffctl.employees"
FILE_VERSION = 1


class RecordFileError(Exception):
    """Raised when the record file cannot be read, decoded, or written."""

    def __init__(self, message: str, *, path: Path, reason: Literal["io", "corrupt"]) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason


class RecordDocument(BaseModel):
    """On-disk envelope around the ordered record list."""

    model_config = {"frozen": True, "extra": "forbid"}

    format: Literal["staffctl.employees"] = FILE_FORMAT
    version: Literal[1] = FILE_VERSION
    records: list[Employee] = Field(default_factory=list)


class RecordFile:
    """Load/save boundary between the record store and durable storage."""

    def __init__(self, path: Path, *, pretty: bool = True) -> None:
        self.path = path
        self.pretty = pretty

    def exists(self) -> bool:
        """True when anything, even a directory, occupies the path."""
        return self.path.exists()

    def load(self) -> list[Employee]:
        """Read every record in stored order.

        Returns an empty list when the file does not exist.

        Raises:
            RecordFileError: ``reason="io"`` if the file cannot be read,
                ``reason="corrupt"`` if its content is not a valid document.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug("No record file at %s", self.path)
            return []
        except OSError as exc:
            raise RecordFileError(
                f"Failed to read record file: {self.path} ({exc!s})",
                path=self.path,
                reason="io",
            ) from exc

        try:
            doc = RecordDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise RecordFileError(
                f"Corrupt record file: {self.path} ({exc.error_count()} errors)",
                path=self.path,
                reason="corrupt",
            ) from exc

        _check_unique_ids(doc.records, self.path)
        logger.debug("Loaded %d records from %s", len(doc.records), self.path)
        return list(doc.records)

    def save(self, records: list[Employee]) -> None:
        """Replace the file content with *records*.

        Raises:
            RecordFileError: ``reason="io"`` on any filesystem failure.
        """
        doc = RecordDocument(records=records)
        payload = doc.model_dump_json(indent=2 if self.pretty else None)

        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(payload)
                handle.write("\n")
            os.replace(temp_path, self.path)
        except OSError as exc:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Failed to remove temp file: %s", temp_path)
            raise RecordFileError(
                f"Failed to write record file: {self.path} ({exc!s})",
                path=self.path,
                reason="io",
            ) from exc
        logger.debug("Saved %d records to %s", len(records), self.path)


def _check_unique_ids(records: list[Employee], path: Path) -> None:
    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise RecordFileError(
                f"Corrupt record file: {path} (duplicate id {record.id})",
                path=path,
                reason="corrupt",
            )
        seen.add(record.id)

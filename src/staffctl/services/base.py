"""BaseService — foundation for shell-facing services.

Every service receives a :class:`Workspace` at construction time.  The
Workspace owns the record store for the session and the file it was
loaded from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staffctl.services.store import RecordStore
    from staffctl.services.workspace import Workspace


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RecordService(BaseService):
            def count_employees(self) -> ServiceResult:
                return ServiceResult(ok=True, op="count", data={"count": self._store.count()})
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _store(self) -> RecordStore:
        return self._workspace.store

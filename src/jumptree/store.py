"""Per-workspace storage of navigation history records."""

import logging
import threading
from contextlib import contextmanager
from typing import Generator

from .history import HistoryRecord

logger = logging.getLogger(__name__)


class TreeStore:
    """Maps workspace identifiers to their history records.

    Records are created lazily on first lookup and live until ``clear()``
    is called at the end of the session.
    """

    def __init__(self) -> None:
        self._records: dict[str, HistoryRecord] = {}
        self._locks: dict[str, threading.Lock] = {}
        # Guards creation of records and per-workspace locks
        self._lock = threading.Lock()

    def get(self, workspace_id: str) -> HistoryRecord:
        """Return the record for a workspace, creating an empty one if needed."""
        with self._lock:
            record = self._records.get(workspace_id)
            if record is None:
                record = HistoryRecord.new()
                self._records[workspace_id] = record
                logger.debug("Created history for workspace %s", workspace_id)
            return record

    def put(self, workspace_id: str, record: HistoryRecord) -> None:
        """Store ``record`` as the latest state for a workspace."""
        with self._lock:
            self._records[workspace_id] = record

    def _workspace_lock(self, workspace_id: str) -> threading.Lock:
        with self._lock:
            lock = self._locks.get(workspace_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[workspace_id] = lock
            return lock

    @contextmanager
    def transaction(self, workspace_id: str) -> Generator[HistoryRecord, None, None]:
        """Hold a workspace's record for a read-modify-write sequence.

        The record is stored back when the block exits, even if it raised.
        Other workspaces are not blocked.
        """
        with self._workspace_lock(workspace_id):
            record = self.get(workspace_id)
            try:
                yield record
            finally:
                self.put(workspace_id, record)

    def workspaces(self) -> list[str]:
        """Get the known workspace ids in the order they were first seen."""
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        """Drop all records (end of session)."""
        with self._lock:
            self._records.clear()
            self._locks.clear()

    def __contains__(self, workspace_id: object) -> bool:
        return workspace_id in self._records

    def __len__(self) -> int:
        return len(self._records)

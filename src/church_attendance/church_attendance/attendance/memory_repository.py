from __future__ import annotations

import threading
from typing import Iterable, Optional

from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    """Process-lifetime store. Nothing survives a restart."""

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: list[AttendanceRecord] = list(records)
        self._lock = threading.Lock()

    def list_all(self) -> list[AttendanceRecord]:
        with self._lock:
            return list(self._records)

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with self._lock:
            for r in self._records:
                if r.record_id == record_id:
                    return r
        return None

    def append(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._records.append(record)

    def replace(self, record: AttendanceRecord) -> bool:
        with self._lock:
            for i, r in enumerate(self._records):
                if r.record_id == record.record_id:
                    self._records[i] = record
                    return True
        return False

    def delete(self, record_id: str) -> bool:
        with self._lock:
            for i, r in enumerate(self._records):
                if r.record_id == record_id:
                    del self._records[i]
                    return True
        return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)

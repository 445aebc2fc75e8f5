from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from ..common.datetime_utils import format_br_date
from ..core.enums import ZeroTotalPolicy
from ..core.exceptions import RecordNotFoundError, ValidationError
from .filters import AttendanceFilter
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

EMPTY_ATTENDANCE_MESSAGE = "Por favor, insira pelo menos uma pessoa na frequência."


def new_record_id() -> str:
    return uuid.uuid4().hex


class AttendanceService:
    """The only component allowed to mutate the attendance store."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        zero_total_policy: ZeroTotalPolicy = ZeroTotalPolicy.REJECT,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._attendance = attendance
        self._zero_total_policy = ZeroTotalPolicy(zero_total_policy)
        self._id_factory = id_factory or new_record_id

    @property
    def zero_total_policy(self) -> ZeroTotalPolicy:
        return self._zero_total_policy

    def _check_entry(self, entry: AttendanceEntry) -> None:
        if entry.total == 0 and self._zero_total_policy == ZeroTotalPolicy.REJECT:
            logger.warning("Rejected empty attendance for %s", entry.service_date.isoformat())
            raise ValidationError(EMPTY_ATTENDANCE_MESSAGE)

    def add(self, entry: AttendanceEntry) -> AttendanceRecord:
        """Append a new record at the end of the store, whatever its date."""
        self._check_entry(entry)

        record = AttendanceRecord.from_entry(self._id_factory(), entry)
        self._attendance.append(record)
        logger.info("Added attendance %s on %s (total=%d)", record.record_id, record.service_date.isoformat(), record.total)
        return record

    def update(self, record_id: str, entry: AttendanceEntry) -> AttendanceRecord:
        if self._attendance.get_by_id(record_id) is None:
            raise RecordNotFoundError("Frequência não encontrada")
        self._check_entry(entry)

        record = AttendanceRecord.from_entry(record_id, entry)
        if not self._attendance.replace(record):
            raise RecordNotFoundError("Frequência não encontrada")
        logger.info("Updated attendance %s on %s (total=%d)", record_id, record.service_date.isoformat(), record.total)
        return record

    def remove(self, record_id: str) -> AttendanceRecord:
        record = self._attendance.get_by_id(record_id)
        if record is None or not self._attendance.delete(record_id):
            raise RecordNotFoundError("Frequência não encontrada")
        logger.info("Removed attendance %s on %s", record_id, record.service_date.isoformat())
        return record

    def get(self, record_id: str) -> AttendanceRecord:
        record = self._attendance.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError("Frequência não encontrada")
        return record

    def record_id_at(self, index: int) -> str:
        """Translate a position in the unfiltered, unsorted store into a record id."""
        records = self._attendance.list_all()
        if index < 0 or index >= len(records):
            raise RecordNotFoundError(f"Posição {index} fora do intervalo")
        return records[index].record_id

    def list_records(self) -> list[AttendanceRecord]:
        return list(self._attendance.list_all())

    def filtered(self, attendance_filter: AttendanceFilter) -> list[AttendanceRecord]:
        return attendance_filter.apply(self._attendance.list_all())

    def success_message(self, record: AttendanceRecord, *, updated: bool = False) -> str:
        title = "Frequência atualizada!" if updated else "Frequência registrada!"
        return f"{title} Total de {record.total} pessoas no culto de {format_br_date(record.service_date)}."

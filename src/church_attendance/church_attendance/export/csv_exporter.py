from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.filters import AttendanceFilter
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_br_date
from ..core.constants import CSV_BASE_FILENAME, CSV_DELIMITER, CSV_ENCODING, CSV_HEADERS
from ..core.enums import ExportPeriod, FilterKind
from ..core.exceptions import NoRecordsToExportError, ValidationError

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {
    ExportPeriod.DAY: "%d-%m-%Y",
    ExportPeriod.MONTH: "%m-%Y",
    ExportPeriod.YEAR: "%Y",
}


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    row_count: int


def export_filename(period: ExportPeriod, reference_date: Optional[date]) -> str:
    """frequencia_igreja[_<period>].csv"""
    fmt = _SUFFIX_FORMATS.get(period)
    if fmt is None or reference_date is None:
        return f"{CSV_BASE_FILENAME}.csv"
    return f"{CSV_BASE_FILENAME}_{reference_date.strftime(fmt)}.csv"


def record_row(record: AttendanceRecord) -> list:
    return [
        format_br_date(record.service_date),
        record.homens,
        record.homens_visitantes,
        record.mulheres,
        record.mulheres_visitantes,
        record.kids,
        record.baby,
        record.total,
    ]


def build_csv(records: Sequence[AttendanceRecord]) -> bytes:
    """Semicolon-separated CSV, UTF-8 with BOM so spreadsheet apps pick the encoding."""
    out = io.StringIO()
    writer = csv.writer(out, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for r in records:
        writer.writerow(record_row(r))
    return out.getvalue().encode(CSV_ENCODING)


def select_records(
    records: Sequence[AttendanceRecord],
    period: ExportPeriod,
    reference_date: Optional[date],
) -> list[AttendanceRecord]:
    if period == ExportPeriod.ALL:
        return list(records)
    return AttendanceFilter(kind=FilterKind(period.value), reference_date=reference_date).apply(records)


class CsvExportService:
    """Exports always start from the full store, independent of the dashboard filter."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def export(self, period: ExportPeriod, reference_date: Optional[date] = None) -> ExportFile:
        period = ExportPeriod(period)
        if period != ExportPeriod.ALL and reference_date is None:
            raise ValidationError("Selecione uma data para exportar.")

        rows = select_records(self._attendance.list_all(), period, reference_date)
        if not rows:
            logger.warning("Nothing to export for period=%s date=%s", period.value, reference_date)
            raise NoRecordsToExportError(
                "Nenhum dado encontrado: não há registros de frequência para o período selecionado."
            )

        filename = export_filename(period, reference_date)
        logger.info("Exported %d records to %s", len(rows), filename)
        return ExportFile(filename=filename, content=build_csv(rows), row_count=len(rows))

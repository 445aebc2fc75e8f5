from __future__ import annotations

from dataclasses import dataclass

from .attendance.memory_repository import InMemoryAttendanceRepository
from .attendance.seed import seed_sample_data
from .attendance.service import AttendanceService
from .core.enums import ZeroTotalPolicy
from .export.csv_exporter import CsvExportService


@dataclass(frozen=True)
class Container:
    attendance_repo: InMemoryAttendanceRepository

    attendance_service: AttendanceService
    export_service: CsvExportService


def build_container(*, zero_total_policy: str = ZeroTotalPolicy.REJECT.value, seed_sample: bool = False) -> Container:
    attendance_repo = InMemoryAttendanceRepository()

    attendance_service = AttendanceService(
        attendance_repo,
        zero_total_policy=ZeroTotalPolicy(str(zero_total_policy).lower()),
    )
    export_service = CsvExportService(attendance_repo)

    if seed_sample:
        seed_sample_data(attendance_service)

    return Container(
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        export_service=export_service,
    )

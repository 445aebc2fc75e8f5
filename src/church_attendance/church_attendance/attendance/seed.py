from __future__ import annotations

from datetime import date

from .model import AttendanceEntry
from .service import AttendanceService

# Quatro cultos de exemplo (janeiro/2024).
SAMPLE_ENTRIES = (
    AttendanceEntry(date(2024, 1, 7), homens=25, homens_visitantes=3, mulheres=35, mulheres_visitantes=5, kids=12, baby=4),
    AttendanceEntry(date(2024, 1, 14), homens=28, homens_visitantes=2, mulheres=32, mulheres_visitantes=4, kids=15, baby=6),
    AttendanceEntry(date(2024, 1, 21), homens=30, homens_visitantes=4, mulheres=38, mulheres_visitantes=6, kids=18, baby=5),
    AttendanceEntry(date(2024, 1, 28), homens=26, homens_visitantes=1, mulheres=34, mulheres_visitantes=3, kids=14, baby=7),
)


def seed_sample_data(service: AttendanceService) -> int:
    """Add the sample services through the normal add path. Returns how many were added."""
    for entry in SAMPLE_ENTRIES:
        service.add(entry)
    return len(SAMPLE_ENTRIES)

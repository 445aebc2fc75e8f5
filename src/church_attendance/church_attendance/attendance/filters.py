from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date_or_none
from ..core.enums import FilterKind
from .model import AttendanceRecord


def same_period(value: date, reference: date, kind: FilterKind) -> bool:
    """True when both dates fall in the same day/month/year."""
    if value.year != reference.year:
        return False
    if kind == FilterKind.YEAR:
        return True
    if value.month != reference.month:
        return False
    if kind == FilterKind.MONTH:
        return True
    return value.day == reference.day


@dataclass(frozen=True)
class AttendanceFilter:
    """Dashboard filter. Without a kind or a reference date it is the identity."""

    kind: Optional[FilterKind] = None
    reference_date: Optional[date] = None

    @classmethod
    def cleared(cls) -> "AttendanceFilter":
        return cls()

    @classmethod
    def from_params(cls, kind: Optional[str], reference: Optional[str]) -> "AttendanceFilter":
        """Build from query-string values; anything unparseable means no filter."""
        try:
            parsed_kind = FilterKind(kind) if kind else None
        except ValueError:
            parsed_kind = None
        parsed_date = parse_iso_date_or_none(reference)
        if parsed_kind is None or parsed_date is None:
            return cls.cleared()
        return cls(kind=parsed_kind, reference_date=parsed_date)

    @property
    def is_active(self) -> bool:
        return self.kind is not None and self.reference_date is not None

    def matches(self, record: AttendanceRecord) -> bool:
        if not self.is_active:
            return True
        return same_period(record.service_date, self.reference_date, self.kind)

    def apply(self, records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
        return [r for r in records if self.matches(r)]


def apply_filter(
    records: Iterable[AttendanceRecord],
    kind: Optional[FilterKind],
    reference_date: Optional[date],
) -> list[AttendanceRecord]:
    return AttendanceFilter(kind=kind, reference_date=reference_date).apply(records)

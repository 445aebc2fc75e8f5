"""Pure aggregation over attendance records.

Nothing here touches the store; every function takes a sequence of records and
returns plain values, so the dashboard can recompute on each request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import month_key, month_label
from ..common.number_utils import round_half_up
from ..core.enums import FilterKind, GrowthTrend
from .filters import same_period
from .model import AttendanceRecord


@dataclass(frozen=True)
class MonthSummary:
    key: str
    label: str
    total: int
    count: int
    average: int
    records: list[AttendanceRecord] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryBreakdown:
    homens: int
    mulheres: int
    criancas: int

    @property
    def total(self) -> int:
        return self.homens + self.mulheres + self.criancas


@dataclass(frozen=True)
class DashboardStats:
    growth: Optional[float]
    average: int
    visitors_this_month: int
    last_service_total: int

    @property
    def growth_trend(self) -> GrowthTrend:
        if self.growth is None or self.growth == 0:
            return GrowthTrend.FLAT
        return GrowthTrend.UP if self.growth > 0 else GrowthTrend.DOWN

    @property
    def growth_label(self) -> str:
        if self.growth is None:
            return "N/A"
        return f"{abs(self.growth):.1f}%"


def total(record: AttendanceRecord) -> int:
    return record.total


def sort_by_date(records: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
    """Ascending by service date; records of the same day keep insertion order."""
    return sorted(records, key=lambda r: r.service_date)


def average_attendance(records: Sequence[AttendanceRecord]) -> int:
    if not records:
        return 0
    return round_half_up(sum(r.total for r in records) / len(records))


def growth(records: Sequence[AttendanceRecord]) -> Optional[float]:
    """Percent change between the two latest services, or None with fewer than two.

    Input order does not matter: records are sorted by date first.
    """
    if len(records) < 2:
        return None

    ordered = sort_by_date(records)
    last_total = ordered[-1].total
    previous_total = ordered[-2].total

    if previous_total > 0:
        return (last_total - previous_total) / previous_total * 100
    return 100.0 if last_total > 0 else 0.0


def group_by_month(records: Sequence[AttendanceRecord]) -> list[MonthSummary]:
    buckets: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        buckets.setdefault(month_key(r.service_date), []).append(r)

    summaries = []
    for key, items in buckets.items():
        month_total = sum(r.total for r in items)
        summaries.append(
            MonthSummary(
                key=key,
                label=month_label(items[0].service_date),
                total=month_total,
                count=len(items),
                average=round_half_up(month_total / len(items)),
                records=sorted(items, key=lambda r: r.service_date, reverse=True),
            )
        )

    summaries.sort(key=lambda s: s.key, reverse=True)
    return summaries


def category_breakdown(records: Sequence[AttendanceRecord]) -> CategoryBreakdown:
    return CategoryBreakdown(
        homens=sum(r.homens + r.homens_visitantes for r in records),
        mulheres=sum(r.mulheres + r.mulheres_visitantes for r in records),
        criancas=sum(r.criancas for r in records),
    )


def visitors_in_month(records: Sequence[AttendanceRecord], today: date) -> int:
    return sum(r.visitantes for r in records if same_period(r.service_date, today, FilterKind.MONTH))


def last_service_total(records: Sequence[AttendanceRecord]) -> int:
    if not records:
        return 0
    return sort_by_date(records)[-1].total


def build_dashboard_stats(
    filtered: Sequence[AttendanceRecord],
    all_records: Sequence[AttendanceRecord],
    *,
    today: date,
) -> DashboardStats:
    """Stat cards. Visitors-this-month always looks at the whole store."""
    return DashboardStats(
        growth=growth(filtered),
        average=average_attendance(filtered),
        visitors_this_month=visitors_in_month(all_records, today),
        last_service_total=last_service_total(filtered),
    )

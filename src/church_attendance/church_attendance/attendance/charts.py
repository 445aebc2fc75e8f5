"""Series for the Chart.js widgets on the dashboard.

Every function returns plain dicts/lists that ``tojson`` can embed directly.
"""
from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_day_month
from ..core.constants import DEFAULT_CHART_RECENT_LIMIT
from .aggregation import category_breakdown, group_by_month
from .model import AttendanceRecord

CATEGORY_COLORS = {
    "Homens": "#3B82F6",
    "Mulheres": "#EC4899",
    "Crianças": "#F97316",
}


def attendance_series(records: Sequence[AttendanceRecord], *, limit: int = DEFAULT_CHART_RECENT_LIMIT) -> list[dict]:
    """Last ``limit`` records, in the order given."""
    rows = [
        {
            "data": format_day_month(r.service_date),
            "total": r.total,
            "membros": r.membros,
            "visitantes": r.visitantes,
            "criancas": r.criancas,
        }
        for r in records
    ]
    return rows[-limit:] if limit > 0 else rows


def monthly_series(records: Sequence[AttendanceRecord]) -> list[dict]:
    """Total and average per month, oldest month first."""
    return [
        {"mes": s.label, "total": s.total, "cultos": s.count, "media": s.average}
        for s in reversed(group_by_month(records))
    ]


def category_series(records: Sequence[AttendanceRecord]) -> list[dict]:
    breakdown = category_breakdown(records)
    values = {
        "Homens": breakdown.homens,
        "Mulheres": breakdown.mulheres,
        "Crianças": breakdown.criancas,
    }
    return [{"name": name, "value": value, "color": CATEGORY_COLORS[name]} for name, value in values.items()]

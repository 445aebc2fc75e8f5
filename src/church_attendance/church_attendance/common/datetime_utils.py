from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import MONTH_NAMES_PT, WEEKDAY_NAMES_PT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_or_none(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def format_br_date(value: date) -> str:
    """dd/mm/aaaa"""
    return value.strftime("%d/%m/%Y")


def format_day_month(value: date) -> str:
    return value.strftime("%d/%m")


def month_key(value: date) -> str:
    """Sortable YYYY-MM key."""
    return value.strftime("%Y-%m")


def month_label(value: date) -> str:
    """'janeiro 2024'"""
    return f"{MONTH_NAMES_PT[value.month - 1]} {value.year}"


def long_date_label(value: date) -> str:
    """'domingo, 07/01/2024'"""
    return f"{WEEKDAY_NAMES_PT[value.weekday()]}, {format_br_date(value)}"

from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import parse_iso_date_or_none
from ..common.validators import coerce_count
from ..core.constants import COUNT_FIELDS
from .model import AttendanceEntry


def entry_from_form(form: Mapping[str, str], *, today: date) -> AttendanceEntry:
    """Build an entry from posted form fields. Counts are coerced, never rejected."""
    service_date = parse_iso_date_or_none(form.get("service_date")) or today
    counts = {name: coerce_count(form.get(name)) for name in COUNT_FIELDS}
    return AttendanceEntry(service_date=service_date, **counts)


def form_values(entry: Optional[AttendanceEntry], *, today: date) -> dict:
    """Values used to (re)fill the form; a blank form starts at today with zeros."""
    entry = entry or AttendanceEntry(service_date=today)
    values = {name: getattr(entry, name) for name in COUNT_FIELDS}
    values["service_date"] = entry.service_date.isoformat()
    values["total"] = entry.total
    return values

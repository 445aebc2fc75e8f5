from datetime import date

import pytest

from src.church_attendance.church_attendance.attendance.forms import entry_from_form, form_values
from src.church_attendance.church_attendance.common.validators import coerce_count


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        ("", 0),
        (None, 0),
        ("abc", 0),
        ("3.7", 3),
        ("12abc", 12),
        ("-4", 0),
        (7, 7),
        (2.9, 2),
        ("1" * 5000, 0),
        ("\u0663", 0),
    ],
)
def test_coerce_count(raw, expected):
    assert coerce_count(raw) == expected


def test_entry_from_form_coerces_counts():
    form = {
        "service_date": "2024-01-07",
        "homens": "25",
        "homens_visitantes": "x",
        "mulheres": "",
        "kids": "3",
    }

    e = entry_from_form(form, today=date(2024, 1, 30))

    assert e.service_date == date(2024, 1, 7)
    assert (e.homens, e.homens_visitantes, e.mulheres, e.mulheres_visitantes, e.kids, e.baby) == (25, 0, 0, 0, 3, 0)


def test_entry_from_form_defaults_date_to_today():
    e = entry_from_form({"service_date": "not-a-date", "baby": "1"}, today=date(2024, 1, 30))

    assert e.service_date == date(2024, 1, 30)


def test_blank_form_values():
    values = form_values(None, today=date(2024, 1, 30))

    assert values["service_date"] == "2024-01-30"
    assert values["total"] == 0
    assert values["homens"] == 0

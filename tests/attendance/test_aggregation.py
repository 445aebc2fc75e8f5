from datetime import date

from src.church_attendance.church_attendance.attendance.aggregation import (
    average_attendance,
    build_dashboard_stats,
    category_breakdown,
    group_by_month,
    growth,
    last_service_total,
    visitors_in_month,
)
from src.church_attendance.church_attendance.core.enums import GrowthTrend


def test_average_of_empty_is_zero():
    assert average_attendance([]) == 0


def test_average_rounds_half_up(make_record):
    records = [make_record(date(2024, 1, 7), homens=2), make_record(date(2024, 1, 14), homens=3)]

    # 2.5 rounds to 3, not to the even 2
    assert average_attendance(records) == 3


def test_average_rounds_down_below_half(make_record):
    records = [
        make_record(date(2024, 1, 7), homens=10),
        make_record(date(2024, 1, 14), homens=10),
        make_record(date(2024, 1, 21), homens=11),
    ]

    assert average_attendance(records) == 10


def test_growth_doubling_is_100(make_record):
    records = [make_record(date(2024, 1, 7), homens=50), make_record(date(2024, 1, 14), homens=100)]
    assert growth(records) == 100


def test_growth_from_zero_is_100(make_record):
    records = [make_record(date(2024, 1, 7)), make_record(date(2024, 1, 14), mulheres=50)]
    assert growth(records) == 100


def test_growth_zero_to_zero_is_0(make_record):
    records = [make_record(date(2024, 1, 7)), make_record(date(2024, 1, 14))]
    assert growth(records) == 0


def test_growth_single_record_is_not_applicable(make_record):
    assert growth([make_record(date(2024, 1, 7), homens=10)]) is None
    assert growth([]) is None


def test_growth_sorts_by_date_before_comparing(make_record):
    newer = make_record(date(2024, 1, 14), homens=100)
    older = make_record(date(2024, 1, 7), homens=50)

    assert growth([newer, older]) == 100


def test_growth_negative(make_record):
    records = [make_record(date(2024, 1, 7), homens=80), make_record(date(2024, 1, 14), homens=60)]
    assert growth(records) == -25


def test_group_by_month_same_month_single_bucket(make_record):
    records = [make_record(date(2024, 1, 7), homens=10), make_record(date(2024, 1, 14), homens=15)]

    months = group_by_month(records)

    assert len(months) == 1
    assert months[0].key == "2024-01"
    assert months[0].label == "janeiro 2024"
    assert months[0].total == 25
    assert months[0].count == 2
    assert months[0].average == 13
    assert [r.service_date.day for r in months[0].records] == [14, 7]


def test_group_by_month_most_recent_first(make_record):
    records = [
        make_record(date(2024, 3, 3), homens=5),
        make_record(date(2023, 12, 31), homens=7),
        make_record(date(2024, 1, 7), homens=9),
    ]

    months = group_by_month(records)

    assert [m.key for m in months] == ["2024-03", "2024-01", "2023-12"]
    assert [m.total for m in months] == [5, 9, 7]


def test_category_breakdown(make_record):
    records = [
        make_record(date(2024, 1, 7), homens=25, homens_visitantes=3, mulheres=35, mulheres_visitantes=5, kids=12, baby=4),
        make_record(date(2024, 1, 14), homens=1, homens_visitantes=1, mulheres=1, mulheres_visitantes=1, kids=1, baby=1),
    ]

    b = category_breakdown(records)

    assert (b.homens, b.mulheres, b.criancas) == (30, 42, 18)
    assert b.total == sum(r.total for r in records)


def test_visitors_in_month_only_counts_current_month(make_record):
    records = [
        make_record(date(2024, 1, 7), homens_visitantes=3, mulheres_visitantes=5),
        make_record(date(2024, 1, 28), homens_visitantes=1),
        make_record(date(2023, 1, 8), homens_visitantes=20),
        make_record(date(2024, 2, 4), mulheres_visitantes=9),
    ]

    assert visitors_in_month(records, date(2024, 1, 30)) == 9


def test_last_service_total_uses_latest_date(make_record):
    records = [make_record(date(2024, 1, 21), homens=70), make_record(date(2024, 1, 7), homens=40)]

    assert last_service_total(records) == 70
    assert last_service_total([]) == 0


def test_dashboard_stats(make_record):
    filtered = [make_record(date(2024, 1, 7), homens=50), make_record(date(2024, 1, 14), homens=40)]
    everything = filtered + [make_record(date(2024, 2, 4), homens_visitantes=6)]

    stats = build_dashboard_stats(filtered, everything, today=date(2024, 2, 10))

    assert stats.growth == -20
    assert stats.growth_trend == GrowthTrend.DOWN
    assert stats.growth_label == "20.0%"
    assert stats.average == 45
    assert stats.visitors_this_month == 6
    assert stats.last_service_total == 40


def test_dashboard_stats_without_data():
    stats = build_dashboard_stats([], [], today=date(2024, 2, 10))

    assert stats.growth is None
    assert stats.growth_label == "N/A"
    assert stats.growth_trend == GrowthTrend.FLAT
    assert stats.average == 0
    assert stats.last_service_total == 0

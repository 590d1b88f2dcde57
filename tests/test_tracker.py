from datetime import datetime

from pooptrack.domains.editor import build_day_entries
from pooptrack.domains.tracker import compute_statistics, counts_for_day, derive_calendar_marks
from pooptrack.models import Statistics
from pooptrack.storage.journal import replace_day

NOW = datetime(2024, 1, 15, 21, 0, 0)


def day(date_key, s=0, a=0, f=0, bristol=None):
    return build_day_entries(date_key, s, a, f, bristol, NOW)


def test_counts_for_missing_day():
    assert counts_for_day({}, "2024-01-15") == (0, 0, 0)


def test_counts_match_replaced_day():
    mapping = {"2024-01-15": day("2024-01-15", 5)}
    for counts in [(0, 0, 0), (1, 0, 0), (0, 3, 2), (4, 1, 7)]:
        updated = replace_day(mapping, "2024-01-15", day("2024-01-15", *counts))
        assert counts_for_day(updated, "2024-01-15") == counts


def test_statistics_empty():
    stats = compute_statistics({})
    assert stats == Statistics()
    assert stats.total_days == 0
    assert stats.successful_percentage == stats.accident_percentage == stats.failed_percentage == 0
    assert stats.avg_successful_per_day == stats.avg_accidents_per_day == stats.avg_failed_per_day == 0


def test_statistics_two_days_split():
    mapping = {
        "2024-01-15": day("2024-01-15", s=1),
        "2024-01-16": day("2024-01-16", a=1),
    }
    stats = compute_statistics(mapping)
    assert stats.total_days == 2
    assert stats.successful_percentage == 50
    assert stats.accident_percentage == 50
    assert stats.failed_percentage == 0


def test_statistics_totals_and_averages():
    mapping = {
        "2024-01-01": day("2024-01-01", s=2, a=1),
        "2024-01-02": day("2024-01-02", s=1, f=2),
        "2024-01-03": day("2024-01-03", s=1),
    }
    stats = compute_statistics(mapping)
    assert (stats.successful_days, stats.accident_days, stats.failed_days) == (3, 1, 1)
    assert (stats.total_successful, stats.total_accidents, stats.total_failed) == (4, 1, 2)
    assert stats.successful_percentage == 100
    assert stats.accident_percentage == 33
    assert stats.avg_successful_per_day == 1.3
    assert stats.avg_failed_per_day == 0.7


def test_statistics_round_half_up():
    mapping = {f"2024-01-0{i}": day(f"2024-01-0{i}", s=1) for i in range(1, 9)}
    mapping["2024-01-01"] = day("2024-01-01", s=1, a=1)
    stats = compute_statistics(mapping)
    # 1 of 8 days -> 12.5%
    assert stats.accident_percentage == 13
    # 1 accident over 4 days -> 0.25 per day
    four = dict(list(mapping.items())[:4])
    assert compute_statistics(four).avg_accidents_per_day == 0.3


def test_empty_day_counts_as_logged():
    mapping = {
        "2024-01-15": day("2024-01-15", s=1),
        "2024-01-16": [],
    }
    stats = compute_statistics(mapping)
    assert stats.total_days == 2
    assert stats.successful_percentage == 50
    assert "2024-01-16" not in derive_calendar_marks(mapping, "2024-01-20")


def test_statistics_camel_case_dump():
    dumped = compute_statistics({"2024-01-15": day("2024-01-15", s=1)}).model_dump(by_alias=True)
    assert dumped["totalDays"] == 1
    assert dumped["successfulPercentage"] == 100
    assert dumped["avgSuccessfulPerDay"] == 1.0


def test_marks_dots_per_entry():
    mapping = {"2024-01-15": day("2024-01-15", s=2, a=1, f=1)}
    marks = derive_calendar_marks(mapping, "2024-01-20")
    mark = marks["2024-01-15"]
    assert mark.marked
    assert not mark.selected
    assert [d.key for d in mark.dots] == ["poop-0", "poop-1", "accident-0", "failed-0"]
    assert [d.color for d in mark.dots] == ["#48bb78", "#48bb78", "#8B4513", "#e53e3e"]


def test_marks_selected_date_highlight():
    mapping = {"2024-01-15": day("2024-01-15", s=1)}
    marks = derive_calendar_marks(mapping, "2024-01-15")
    assert set(marks) == {"2024-01-15"}
    assert marks["2024-01-15"].selected
    assert marks["2024-01-15"].selected_color == "#667eea"
    assert len(marks["2024-01-15"].dots) == 1

    other = derive_calendar_marks(mapping, "2024-02-01")
    assert other["2024-02-01"].selected
    assert other["2024-02-01"].dots == []
    assert not other["2024-02-01"].marked


def test_marks_cap():
    mapping = {"2024-01-15": day("2024-01-15", s=6)}
    marks = derive_calendar_marks(mapping, "2024-01-20", max_dots=3)
    assert len(marks["2024-01-15"].dots) == 3


def test_marks_idempotent():
    mapping = {
        "2024-01-15": day("2024-01-15", s=1, f=1),
        "2024-01-16": day("2024-01-16", a=2),
    }
    snapshot = dict(mapping)
    first = derive_calendar_marks(mapping, "2024-01-16")
    second = derive_calendar_marks(mapping, "2024-01-16")
    assert first == second
    assert mapping == snapshot


def test_average_rounds_exact_quotient_half_up():
    # 23 over 20 days is exactly 1.15; binary-float rounding would give 1.1
    mapping = {f"2024-02-{i:02d}": day(f"2024-02-{i:02d}", s=1) for i in range(1, 21)}
    mapping["2024-02-01"] = day("2024-02-01", s=4)
    stats = compute_statistics(mapping)
    assert stats.total_successful == 23
    assert stats.avg_successful_per_day == 1.2

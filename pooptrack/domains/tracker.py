import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from pooptrack.config import DOT_COLORS, DOT_PREFIX, KINDS, SELECTED_COLOR
from pooptrack.models import DayCounts, Dot, Entry, MarkedDate, Statistics


def counts_for_day(mapping: Dict[str, List[Entry]], date_key: str) -> DayCounts:
    successful = accidents = failed = 0
    for e in mapping.get(date_key, []):
        if e.kind == "Normal":
            successful += 1
        elif e.kind == "Accident":
            accidents += 1
        elif e.kind == "Failed":
            failed += 1
    return DayCounts(successful, accidents, failed)


def derive_calendar_marks(mapping: Dict[str, List[Entry]], selected_date_key: str,
                          max_dots: Optional[int] = None) -> Dict[str, MarkedDate]:
    """Marker descriptors for every day with entries, plus the selected day.

    Dots are ordered successful, accident, failed; ``max_dots`` truncates the
    list for surfaces that can only draw a few per cell.
    """
    marks = {
        selected_date_key: MarkedDate(selected=True, selected_color=SELECTED_COLOR)
    }
    for date_key in sorted(mapping):
        counts = counts_for_day(mapping, date_key)
        if counts.total == 0:
            continue
        dots = []
        for kind, n in zip(KINDS, counts):
            dots.extend(Dot(key=f"{DOT_PREFIX[kind]}-{i}", color=DOT_COLORS[kind]) for i in range(n))
        if max_dots is not None:
            dots = dots[:max_dots]
        base = marks.get(date_key, MarkedDate())
        marks[date_key] = base.model_copy(update={"dots": dots, "marked": True})
    return marks


def _percentage(days: int, total_days: int) -> int:
    if not total_days:
        return 0
    return math.floor(days / total_days * 100 + 0.5)


def _average(total: int, total_days: int) -> float:
    if not total_days:
        return 0
    avg = Decimal(total) / Decimal(total_days)
    return float(avg.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_statistics(mapping: Dict[str, List[Entry]]) -> Statistics:
    total_days = len(mapping)
    days = [0, 0, 0]
    totals = [0, 0, 0]
    for date_key in mapping:
        counts = counts_for_day(mapping, date_key)
        for i, n in enumerate(counts):
            totals[i] += n
            if n > 0:
                days[i] += 1

    return Statistics(
        total_days=total_days,
        successful_days=days[0],
        accident_days=days[1],
        failed_days=days[2],
        total_successful=totals[0],
        total_accidents=totals[1],
        total_failed=totals[2],
        successful_percentage=_percentage(days[0], total_days),
        accident_percentage=_percentage(days[1], total_days),
        failed_percentage=_percentage(days[2], total_days),
        avg_successful_per_day=_average(totals[0], total_days),
        avg_accidents_per_day=_average(totals[1], total_days),
        avg_failed_per_day=_average(totals[2], total_days),
    )

# pooptrack/summary.py
import calendar
from datetime import date

from pooptrack.config import BRISTOL_SCALE, DOT_COLORS, KINDS, LABELS, SYMBOLS

_SYMBOL_BY_COLOR = {DOT_COLORS[k]: SYMBOLS[k] for k in KINDS}


def print_legend():
    print("  ".join(f"{SYMBOLS[k]} {LABELS[k]}" for k in KINDS))


def print_day(date_key, counts, bristol_type=None):
    print(f"{date_key}:")
    for kind, n in zip(KINDS, counts):
        print(f"  {SYMBOLS[kind]} {LABELS[kind]}: {n}")
    if bristol_type is not None:
        print(f"  Bristol type: {bristol_type} ({BRISTOL_SCALE[bristol_type]})")


def print_statistics(stats):
    print("Statistics")
    print(f"  Total days tracked: {stats.total_days}")
    rows = (
        ("Normal", stats.successful_days, stats.total_successful,
         stats.successful_percentage, stats.avg_successful_per_day),
        ("Accident", stats.accident_days, stats.total_accidents,
         stats.accident_percentage, stats.avg_accidents_per_day),
        ("Failed", stats.failed_days, stats.total_failed,
         stats.failed_percentage, stats.avg_failed_per_day),
    )
    for kind, days, total, pct, avg in rows:
        print(f"\n  {SYMBOLS[kind]} {LABELS[kind]}")
        print(f"    Days: {days} ({pct}%)")
        print(f"    Total: {total}")
        print(f"    Per day: {avg:.1f}")


def _cell(day, date_key, marks, width):
    mark = marks.get(date_key)
    text = f"{day:>2}"
    if mark is not None:
        if mark.selected:
            text = f"[{day:>2}]"
        symbols = "".join(_SYMBOL_BY_COLOR.get(d.color, "•") for d in mark.dots[:3])
        text = f"{text}{symbols}"
    return text.ljust(width)


def print_month(year, month, marks, today=None, width=9):
    today = today or date.today()
    print(f"{calendar.month_name[month]} {year}".center(width * 7))
    print("".join(name[:2].ljust(width) for name in calendar.day_abbr))
    for week in calendar.Calendar().monthdayscalendar(year, month):
        line = []
        for day in week:
            if day == 0:
                line.append(" " * width)
                continue
            d = date(year, month, day)
            cell = _cell(day, d.isoformat(), marks, width)
            if d == today:
                cell = (cell.rstrip() + "*").ljust(width)
            line.append(cell)
        print("".join(line).rstrip())
    print()
    print_legend()


def print_bristol_chart():
    print("Bristol Stool Scale")
    for n, desc in BRISTOL_SCALE.items():
        print(f"  Type {n}: {desc}")

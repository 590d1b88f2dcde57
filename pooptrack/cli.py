#!/usr/bin/env python3
"""
pooptrack CLI entry point
Calendar, day view, stepper editor and statistics over the local entry store.
"""
import sys
import logging
from datetime import date, datetime, timedelta
from dateutil import parser as dateparser

from pooptrack import diagnostic_dump
from pooptrack.config import BRISTOL_SCALE, setup_logging
from pooptrack.domains import editor
from pooptrack.domains import tracker as tracker_domain
from pooptrack.storage.journal import EntryStore
from pooptrack.summary import (
    print_bristol_chart, print_day, print_month, print_statistics,
)

logger = logging.getLogger("PoopTrack.CLI")

USAGE = """Usage: pooptrack <action> [args] [--verbose]
  calendar [YYYY-MM]                      month view
  show [DATE]                             counts for one day
  set DATE SUCCESSFUL ACCIDENTS FAILED [BRISTOL]
  edit [DATE]                             interactive stepper
  stats                                   statistics
  bristol                                 Bristol scale reference
  dump                                    raw stored data"""

STEPS = {
    '+s': ('increment', 'successful'), '-s': ('decrement', 'successful'),
    '+a': ('increment', 'accidents'), '-a': ('decrement', 'accidents'),
    '+f': ('increment', 'failed'), '-f': ('decrement', 'failed'),
}

# ---------------- Helper functions -----------------

def alert(title, message):
    print(f"{title}: {message}", file=sys.stderr)


def parse_day(value, today):
    if not value or value.lower() == 'today':
        return today.isoformat()
    if value.lower() == 'yesterday':
        return (today - timedelta(days=1)).isoformat()
    try:
        default = datetime(today.year, today.month, today.day)
        return dateparser.parse(value, default=default).date().isoformat()
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid date: {value}")


def parse_month(value, today):
    if not value:
        return today.year, today.month
    try:
        d = dateparser.parse(value, default=datetime(today.year, today.month, 1))
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid month: {value}")
    return d.year, d.month


def parse_bristol(value):
    if value in (None, '', '-', 'none'):
        return None
    try:
        n = int(value)
    except ValueError:
        raise ValueError(f"Bristol type must be a number from 1 to 7, got {value}")
    if n not in BRISTOL_SCALE:
        raise ValueError(f"Bristol type must be a number from 1 to 7, got {value}")
    return n


def parse_count(value):
    try:
        n = int(value)
    except ValueError:
        raise ValueError(f"Count must be a whole number, got {value}")
    if n < 0:
        raise ValueError(f"Count must be non-negative, got {value}")
    return n


def run_editor(store, date_key):
    session = editor.EditSession(store, date_key)
    print(f"Edit entries for {date_key}")
    print("Commands: +s -s +a -a +f -f, b N (Bristol type, 'b -' clears), save, cancel")
    while session.is_open:
        c = session.counts
        b = session.bristol_type if session.bristol_type is not None else '-'
        print(f"  ✓ {c['successful']}  💩 {c['accidents']}  ✗ {c['failed']}  bristol {b}")
        try:
            cmd = input("> ").strip().lower()
        except EOFError:
            session.cancel()
            break
        if cmd in STEPS:
            op, name = STEPS[cmd]
            getattr(session, op)(name)
        elif cmd.startswith('b'):
            try:
                session.set_bristol_type(parse_bristol(cmd[1:].strip()))
            except ValueError as ex:
                print(str(ex))
        elif cmd == 'save':
            if session.save():
                print(f"✔ saved {date_key}")
            else:
                print("Edits kept. Type 'save' to retry or 'cancel' to discard.")
        elif cmd in ('cancel', 'q', 'quit'):
            session.cancel()
        else:
            print(f"Unknown command: {cmd}")
    return 0

# ---------------- Main -----------------

def main(argv=None, store=None, today=None):
    args = sys.argv[1:] if argv is None else list(argv)
    verbose = '--verbose' in args
    args = [a for a in args if a != '--verbose']
    setup_logging(verbose)

    if not args:
        print(USAGE)
        return 1

    today = today or date.today()
    store = store or EntryStore(notify=alert)
    if store.notify is None:
        store.notify = alert

    act = args[0].lower().replace(' ', '_')
    rest = args[1:]
    # --- Action mapping ---
    if act in ('cal', 'calendar', 'month'):
        act = 'calendar'
    elif act in ('show', 'day', 'read'):
        act = 'show'
    elif act in ('set', 'save', 'log'):
        act = 'set'
    elif act in ('stats', 'statistics', 'summary'):
        act = 'stats'
    logger.debug(f"action={act} args={rest}")

    try:
        if act == 'bristol':
            print_bristol_chart()
            return 0

        if act == 'dump':
            diagnostic_dump.main(store)
            return 0

        store.load()

        if act == 'calendar':
            year, month = parse_month(rest[0] if rest else None, today)
            marks = tracker_domain.derive_calendar_marks(store.entries, today.isoformat())
            print_month(year, month, marks, today)
            return 0

        if act == 'show':
            date_key = parse_day(rest[0] if rest else None, today)
            counts = tracker_domain.counts_for_day(store.entries, date_key)
            print_day(date_key, counts, editor.day_bristol(store.entries, date_key))
            return 0

        if act == 'set':
            if len(rest) < 4:
                print(USAGE)
                return 1
            date_key = parse_day(rest[0], today)
            successful, accidents, failed = (parse_count(v) for v in rest[1:4])
            bristol_type = parse_bristol(rest[4] if len(rest) > 4 else None)
            if not editor.apply_bulk_edit(store, date_key, successful, accidents, failed, bristol_type):
                return 1
            print(f"✔ {date_key}: {successful} successful, {accidents} accidents, {failed} failed")
            return 0

        if act == 'edit':
            date_key = parse_day(rest[0] if rest else None, today)
            return run_editor(store, date_key)

        if act == 'stats':
            print_statistics(tracker_domain.compute_statistics(store.entries))
            return 0

    except ValueError as ex:
        print(f"ERROR: {ex}")
        return 1

    # Fallback
    print('Unrecognized action:', args[0])
    print(USAGE)
    return 1

if __name__ == '__main__':
    sys.exit(main())

"""Pure statistics over a habit's raw log entries.

Nothing in here touches the database: every function takes the habit and its
entries (ORM rows or anything with the same attributes) and returns plain
records, so the numbers can be checked without an app context.

``current_streak`` keeps the historical meaning used by the API since its
first release: the number of completed entries across the whole history, not
a run of consecutive days. The consecutive interpretation is reported
separately as ``longest_streak``.
"""
from datetime import date, timedelta

from schemas import EnrichedHabit, HabitRead, HabitSummary, HistoryDay, LogDay


def day_key(value):
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


def round_half_up(numerator, denominator):
    """Integer division rounded to nearest, halves away from zero (non-negative inputs)."""
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


def completion_rate(completed_count, total_entries):
    return round_half_up(100 * completed_count, total_entries)


def longest_run(days):
    """Length of the longest run of consecutive calendar days in ``days``."""
    best = 0
    current = 0
    prev = None
    for d in sorted(set(days)):
        if prev is not None and (d - prev).days == 1:
            current += 1
        else:
            current = 1
        best = max(best, current)
        prev = d
    return best


def build_logs_map(entries):
    logs = {}
    for entry in entries:
        logs[day_key(entry.log_date)] = LogDay(completed=bool(entry.completed), notes=entry.notes or '')
    return logs


def aggregate(habit, entries):
    entries = list(entries)
    completed_days = [date.fromisoformat(day_key(e.log_date)) for e in entries if e.completed]
    total_entries = len(entries)
    completed_count = len(completed_days)

    base = HabitRead.model_validate(habit)
    return EnrichedHabit(
        **base.model_dump(),
        logs=build_logs_map(entries),
        current_streak=completed_count,
        longest_streak=longest_run(completed_days),
        completion_rate=completion_rate(completed_count, total_entries),
        total_entries=total_entries,
    )


def history(logs, today, days=7):
    """Gap-filled status strip for the ``days`` calendar days ending ``today``, oldest first."""
    strip = []
    for i in range(days - 1, -1, -1):
        d = today - timedelta(days=i)
        entry = logs.get(d.isoformat())
        if entry is None:
            status, notes = 'pending', ''
        else:
            status = 'completed' if entry.completed else 'missed'
            notes = entry.notes
        strip.append(HistoryDay(
            date=d.isoformat(),
            day_name=d.strftime('%a'),
            is_today=(d == today),
            status=status,
            notes=notes,
        ))
    return strip


def summarize(habits, today):
    if not habits:
        return HabitSummary()
    today_key = today.isoformat()
    completed_today = 0
    for h in habits:
        entry = h.logs.get(today_key)
        if entry is not None and entry.completed:
            completed_today += 1
    return HabitSummary(
        total_habits=len(habits),
        completed_today=completed_today,
        best_streak=max(h.current_streak for h in habits),
        average_completion=round_half_up(sum(h.completion_rate for h in habits), len(habits)),
    )

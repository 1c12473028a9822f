"""Read model and write commands behind the /api/habits endpoints."""
from datetime import datetime, timezone
from errors import ValidationError
from schemas import HabitCreate, HabitLogUpdate, validate
from services import habit_store, log_store
from services.aggregation import aggregate, history, summarize

MAX_HISTORY_DAYS = 366


def today_utc():
    return datetime.now(timezone.utc).date()


def list_habits():
    habits = habit_store.list_newest_first()
    logs = log_store.list_for_habits([h.id for h in habits])
    return [aggregate(h, logs.get(h.id, [])) for h in habits]


def get_habit(habit_id):
    habit = habit_store.get(habit_id)
    return aggregate(habit, log_store.list_by_habit(habit_id))


def create_habit(name, frequency, goal):
    payload = validate(HabitCreate, {'name': name, 'frequency': frequency, 'goal': goal})
    habit = habit_store.create(payload.name, payload.frequency.value, payload.goal)
    return aggregate(habit, [])


def delete_habit(habit_id):
    habit_store.delete(habit_id)


def log_habit(habit_id, completed, notes, day=None):
    """Record completion of a habit for one calendar day.

    ``day`` defaults to today's UTC date; a caller-supplied day is used as is.
    Logging the same day again overwrites the existing entry.
    """
    payload = validate(HabitLogUpdate, {'completed': completed, 'notes': notes, 'date': day})
    log_date = payload.log_date or today_utc()
    _, created = log_store.upsert(habit_id, log_date, payload.completed, payload.notes)
    return {'created': created}


def habit_history(habit_id, days, today=None):
    try:
        days = int(days)
    except (TypeError, ValueError):
        days = None
    if days is None or not 1 <= days <= MAX_HISTORY_DAYS:
        raise ValidationError(f'days must be an integer between 1 and {MAX_HISTORY_DAYS}')
    enriched = get_habit(habit_id)
    return history(enriched.logs, today or today_utc(), days)


def summary(today=None):
    return summarize(list_habits(), today or today_utc())

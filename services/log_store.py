import logging
from collections import defaultdict
from sqlalchemy import update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from models import db, Habit, HabitLog
from errors import habit_not_found, storage_errors

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    'sqlite': sqlite_insert,
    'postgresql': postgresql_insert,
}

log_table = HabitLog.__table__


def _insert(values):
    """Insert a new entry for the key in ``values``; returns False if one already exists."""
    dialect = db.session.get_bind().dialect.name
    insert = _ON_CONFLICT_INSERTS.get(dialect)
    if insert is not None:
        stmt = insert(log_table).values(**values).on_conflict_do_nothing(
            index_elements=['habit_id', 'log_date'])
        return db.session.execute(stmt).rowcount == 1

    # Other backends: let the unique constraint decide inside a savepoint
    try:
        with db.session.begin_nested():
            db.session.execute(log_table.insert().values(**values))
        return True
    except IntegrityError:
        return False


def _update(habit_id, day, completed, notes):
    stmt = (update(log_table)
            .where(log_table.c.habit_id == habit_id, log_table.c.log_date == day)
            .values(completed=completed, notes=notes))
    return db.session.execute(stmt).rowcount


def upsert(habit_id, day, completed, notes):
    """Write the single entry for (habit_id, day).

    Returns ``(entry, created)``. Runs as one transaction: the row is either
    inserted or the existing row's ``completed``/``notes`` are overwritten.
    """
    with storage_errors('log habit'):
        if db.session.get(Habit, habit_id) is None:
            raise habit_not_found(habit_id)

        values = {'habit_id': habit_id, 'log_date': day, 'completed': bool(completed), 'notes': notes}
        try:
            created = _insert(values)
            if not created and _update(habit_id, day, bool(completed), notes) == 0:
                # Constraint fired but no row matched: the habit went away under us
                raise habit_not_found(habit_id)
            db.session.commit()
        except IntegrityError as exc:
            # Foreign key rejected the row, the habit was deleted concurrently
            db.session.rollback()
            raise habit_not_found(habit_id) from exc
        except Exception:
            db.session.rollback()
            raise

        entry = HabitLog.query.filter_by(habit_id=habit_id, log_date=day).one()

    logger.info('%s log for habit %s on %s (completed=%s)',
                'Created' if created else 'Updated', habit_id, day.isoformat(), bool(completed))
    return entry, created


def list_by_habit(habit_id):
    with storage_errors('fetch habit logs'):
        return (HabitLog.query.filter_by(habit_id=habit_id)
                .order_by(HabitLog.log_date.asc()).all())


def list_for_habits(habit_ids):
    """Entries for several habits in one query, grouped by habit id, days ascending."""
    grouped = defaultdict(list)
    if not habit_ids:
        return grouped
    with storage_errors('fetch habit logs'):
        entries = (HabitLog.query.filter(HabitLog.habit_id.in_(habit_ids))
                   .order_by(HabitLog.habit_id, HabitLog.log_date.asc()).all())
    for entry in entries:
        grouped[entry.habit_id].append(entry)
    return grouped


def delete_all_for_habit(habit_id):
    """Remove every entry of a habit. Runs in the caller's transaction."""
    with storage_errors('delete habit logs'):
        result = db.session.execute(log_table.delete().where(log_table.c.habit_id == habit_id))
    return result.rowcount

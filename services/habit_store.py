import logging
from models import db, Habit
from errors import habit_not_found, storage_errors
from services import log_store

logger = logging.getLogger(__name__)


def create(name, frequency, goal):
    with storage_errors('create habit'):
        habit = Habit(name=name, frequency=frequency, goal=goal)
        db.session.add(habit)
        db.session.commit()
    logger.info('Habit added with ID: %s', habit.id)
    return habit


def get(habit_id):
    with storage_errors('fetch habit'):
        habit = db.session.get(Habit, habit_id)
    if habit is None:
        raise habit_not_found(habit_id)
    return habit


def list_newest_first():
    with storage_errors('fetch habits'):
        return Habit.query.order_by(Habit.created_at.desc(), Habit.id.desc()).all()


def delete(habit_id):
    """Delete a habit together with its log entries. Returns how many entries went with it."""
    with storage_errors('delete habit'):
        habit = db.session.get(Habit, habit_id)
        if habit is None:
            raise habit_not_found(habit_id)
        removed = log_store.delete_all_for_habit(habit_id)
        db.session.expire(habit, ['logs'])
        db.session.delete(habit)
        db.session.commit()
    logger.info('Deleted habit %s and %s log entries', habit_id, removed)
    return removed

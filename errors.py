import logging
from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class HabitTrackerError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(HabitTrackerError):
    status_code = 400


class NotFoundError(HabitTrackerError):
    status_code = 404


class StorageError(HabitTrackerError):
    status_code = 500


def habit_not_found(habit_id):
    return NotFoundError(f'Habit {habit_id} not found')


@contextmanager
def storage_errors(action):
    """Roll back and re-raise database failures as StorageError."""
    from models import db
    try:
        yield
    except HabitTrackerError:
        raise
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception('Database error while trying to %s', action)
        raise StorageError(f'Failed to {action}') from exc

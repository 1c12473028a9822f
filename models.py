import sqlite3
from datetime import datetime, timezone
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


@event.listens_for(Engine, 'connect')
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES / ON DELETE CASCADE unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


class Habit(db.Model):
    __tablename__ = 'habits'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    frequency = db.Column(db.String(20), nullable=False) # daily, weekly, weekdays, weekends
    goal = db.Column(db.String(200), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    logs = db.relationship('HabitLog', backref='habit', lazy=True, cascade="all, delete-orphan",
                           passive_deletes=True, order_by="HabitLog.log_date")


class HabitLog(db.Model):
    __tablename__ = 'habit_logs'

    id = db.Column(db.Integer, primary_key=True)
    habit_id = db.Column(db.Integer, db.ForeignKey('habits.id', ondelete='CASCADE'), nullable=False, index=True)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    log_date = db.Column(db.Date, nullable=False) # The calendar day the entry counts for
    notes = db.Column(db.Text, nullable=True)

    __table_args__ = (db.UniqueConstraint('habit_id', 'log_date', name='uq_habit_logs_habit_date'),)

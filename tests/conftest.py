import os

os.environ['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'

import pytest
from app import app
from models import db, Habit, HabitLog
from datetime import date

@pytest.fixture
def client():
    app.config['TESTING'] = True

    with app.test_client() as client:
        with app.app_context():
            db.create_all()
            yield client
            db.session.remove()
            db.drop_all()

@pytest.fixture
def habit(client):
    h = Habit(name='Exercise', frequency='daily', goal='30 min')
    db.session.add(h)
    db.session.commit()
    return h

@pytest.fixture
def logged_habit(habit):
    db.session.add_all([
        HabitLog(habit_id=habit.id, log_date=date(2024, 1, 1), completed=True, notes='Ran 5k'),
        HabitLog(habit_id=habit.id, log_date=date(2024, 1, 2), completed=False),
        HabitLog(habit_id=habit.id, log_date=date(2024, 1, 3), completed=True),
    ])
    db.session.commit()
    return habit

@pytest.fixture
def runner(client):
    return app.test_cli_runner()

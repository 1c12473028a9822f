from datetime import date, datetime
from types import SimpleNamespace
from models import Habit, HabitLog
from services.aggregation import aggregate, history, summarize, round_half_up, completion_rate, longest_run

def make_habit(**kwargs):
    fields = dict(id=1, name='Exercise', frequency='daily', goal='30 min', created_at=datetime(2024, 1, 1, 8, 0))
    fields.update(kwargs)
    return Habit(**fields)

def entry(day, completed, notes=None):
    return HabitLog(habit_id=1, log_date=date.fromisoformat(day), completed=completed, notes=notes)

def test_no_entries():
    result = aggregate(make_habit(), [])
    assert result.completion_rate == 0
    assert result.current_streak == 0
    assert result.longest_streak == 0
    assert result.total_entries == 0
    assert result.logs == {}

def test_exercise_scenario():
    result = aggregate(make_habit(), [entry('2024-01-01', True), entry('2024-01-02', False)])
    assert result.total_entries == 2
    assert result.current_streak == 1
    assert result.completion_rate == 50
    assert result.logs['2024-01-01'].completed is True
    assert result.logs['2024-01-02'].completed is False
    assert result.logs['2024-01-02'].notes == ''
    assert result.name == 'Exercise'
    assert result.frequency == 'daily'

def test_relogged_day_drops_rate():
    result = aggregate(make_habit(), [entry('2024-01-01', False), entry('2024-01-02', False)])
    assert result.total_entries == 2
    assert result.completion_rate == 0
    assert result.current_streak == 0

def test_current_streak_counts_all_completed_entries():
    entries = [entry('2024-01-01', True), entry('2024-01-05', True), entry('2024-01-09', True)]
    result = aggregate(make_habit(), entries)
    assert result.current_streak == 3
    assert result.longest_streak == 1

def test_longest_streak_finds_best_run():
    entries = [entry(f'2024-01-0{d}', True) for d in (1, 2, 3, 5, 6)]
    entries.append(entry('2024-01-04', False))
    result = aggregate(make_habit(), entries)
    assert result.longest_streak == 3

def test_longest_run_across_month_boundary():
    assert longest_run([date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 2)]) == 3
    assert longest_run([]) == 0

def test_rate_rounds_half_up():
    # 1 of 8 is 12.5%
    entries = [entry('2024-01-01', True)] + [entry(f'2024-01-0{d}', False) for d in range(2, 9)]
    assert aggregate(make_habit(), entries).completion_rate == 13
    assert round_half_up(5, 2) == 3
    assert round_half_up(1, 0) == 0

def test_rate_rounds_to_nearest():
    assert completion_rate(1, 3) == 33
    assert completion_rate(2, 3) == 67
    assert completion_rate(3, 3) == 100

def test_rate_bounds_hold():
    for total in range(1, 12):
        for done in range(total + 1):
            assert 0 <= completion_rate(done, total) <= 100

def test_accepts_plain_records():
    habit = SimpleNamespace(id=7, name='Read', frequency='weekly', goal='1 book', created_at=None)
    entries = [SimpleNamespace(log_date='2024-03-01', completed=1, notes='Dune')]
    result = aggregate(habit, entries)
    assert result.id == 7
    assert result.logs['2024-03-01'].completed is True
    assert result.logs['2024-03-01'].notes == 'Dune'

def test_history_fills_gaps():
    logs = aggregate(make_habit(), [entry('2024-01-05', True, 'done'), entry('2024-01-06', False)]).logs
    strip = history(logs, date(2024, 1, 7), days=4)
    assert [d.date for d in strip] == ['2024-01-04', '2024-01-05', '2024-01-06', '2024-01-07']
    assert [d.status for d in strip] == ['pending', 'completed', 'missed', 'pending']
    assert strip[1].notes == 'done'
    assert strip[-1].is_today
    assert not strip[0].is_today
    assert strip[-1].day_name == 'Sun'

def test_summarize():
    today = date(2024, 1, 2)
    first = aggregate(make_habit(id=1), [entry('2024-01-01', True), entry('2024-01-02', True)])
    second = aggregate(make_habit(id=2), [entry('2024-01-01', True), entry('2024-01-02', False)])
    third = aggregate(make_habit(id=3), [])
    summary = summarize([first, second, third], today)
    assert summary.total_habits == 3
    assert summary.completed_today == 1
    assert summary.best_streak == 2
    # (100 + 50 + 0) / 3
    assert summary.average_completion == 50

def test_summarize_empty():
    summary = summarize([], date(2024, 1, 1))
    assert summary.total_habits == 0
    assert summary.average_completion == 0

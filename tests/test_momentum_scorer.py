import random
from datetime import datetime, timedelta, timezone

import pytest

from lifestyle.config import MomentumParameters
from lifestyle.scoring import (
    GoalRecord, TaskRecord, TaskLogRecord, LogStatus, MomentumStatus,
    calculate_momentum_score, current_streaks, evaluate_goal,
    calculate_weekly_momentum, flatten_logs
)
from conftest import NOW, TODAY, build_goal


def test_no_tasks_scores_zero():
    goal = GoalRecord(id=1, created_at=NOW - timedelta(days=40), deadline=NOW + timedelta(days=40))
    result = evaluate_goal(goal, NOW)
    assert result.score == 0
    assert result.status == MomentumStatus.MAINTAINING
    assert result.progress_fill == 50


def test_tasks_without_logs_score_zero(goal_factory):
    assert calculate_momentum_score(goal_factory([]), NOW) == 0


# ========== Grace period ==========

def test_grace_one_completion(goal_factory):
    score = calculate_momentum_score(goal_factory(["completed"], age_days=1), NOW)
    assert 0 <= score <= 30
    assert score == 30


def test_grace_zero_logs(goal_factory):
    assert calculate_momentum_score(goal_factory([], age_days=1), NOW) == 0


def test_grace_ratio_rounds_half_up(goal_factory):
    # 1/4 * 30 = 7.5
    goal = goal_factory(["completed", "missed", "missed", "missed"], age_days=2)
    assert calculate_momentum_score(goal, NOW) == 8


def test_grace_misses_only(goal_factory):
    assert calculate_momentum_score(goal_factory(["missed"] * 2, age_days=2), NOW) == -10
    assert calculate_momentum_score(goal_factory(["missed"] * 5, age_days=2), NOW) == -15


def test_grace_pending_only(goal_factory):
    assert calculate_momentum_score(goal_factory(["pending"] * 2, age_days=3), NOW) == 0


# ========== Early stage ==========

def test_early_stage_damped_with_half_streak(goal_factory):
    # base (80 - 50) * 0.6 = 18, streak min(20, 4*3) * 0.5 = 6, trend 0
    goal = goal_factory(["missed"] + ["completed"] * 4, age_days=5)
    assert calculate_momentum_score(goal, NOW) == 24


def test_early_stage_floor(goal_factory):
    # base (57.1 - 50) * 0.6 = 4.3 floored to 5
    goal = goal_factory(["completed", "missed"] * 3 + ["completed"], age_days=5)
    assert calculate_momentum_score(goal, NOW) == 5


# ========== Established ==========

def test_streak_bonus_example(goal_factory):
    # base 0, streak min(20, 5*3) = 15, trend (5/7 - 0.5) * 10 = 2.14
    goal = goal_factory(["missed"] * 5 + ["completed"] * 5)
    score = calculate_momentum_score(goal, NOW)
    assert score == 17
    result = evaluate_goal(goal, NOW)
    assert result.label == "Progressing"
    assert result.completion_rate == 50


def test_all_missed(goal_factory):
    # base -50, miss streak -15, timeline max(-25, -0.7 * 25 * 0.3) = -5.25
    result = evaluate_goal(goal_factory(["missed"] * 10), NOW)
    assert result.score == -70
    assert result.status == MomentumStatus.STRUGGLING
    assert result.label == "Struggling"


def test_past_deadline_perfect_record(goal_factory):
    # base 50, streak 20, timeline min(15, 0.3 * 30) = 9
    goal = goal_factory(["completed"] * 10, age_days=60, length_days=30)
    assert calculate_momentum_score(goal, NOW) == 79


def test_deadline_before_creation_does_not_raise(goal_factory):
    goal = goal_factory(["completed"] * 10, age_days=60, length_days=-10)
    assert calculate_momentum_score(goal, NOW) == 79


def test_defaults_to_current_time(goal_factory):
    score = calculate_momentum_score(goal_factory(["completed"] * 3))
    assert -100 <= score <= 100


# ========== Streaks ==========

def _logs(statuses, end):
    return [
        TaskLogRecord(id=i, task_id=1, due_date=end - timedelta(days=len(statuses) - 1 - i),
                      status=LogStatus(status))
        for i, status in enumerate(statuses)
    ]


def test_current_streaks_completion_run():
    logs = _logs(["missed", "completed", "completed", "completed"], TODAY - timedelta(days=1))
    assert current_streaks(logs, TODAY) == (3, 0)


def test_current_streaks_ignores_pending_due_today():
    logs = _logs(["completed", "completed", "completed", "pending"], TODAY)
    assert current_streaks(logs, TODAY) == (3, 0)


def test_current_streaks_past_due_pending_is_a_miss():
    logs = _logs(["completed", "completed", "pending", "missed"], TODAY - timedelta(days=1))
    assert current_streaks(logs, TODAY) == (0, 2)


def test_current_streaks_empty():
    assert current_streaks([], TODAY) == (0, 0)


def test_logs_flattened_across_tasks_by_due_date():
    first = TaskRecord(id=1, goal_id=1, logs=tuple(_logs(["completed"], TODAY)))
    second = TaskRecord(id=2, goal_id=1, logs=tuple(_logs(["missed"], TODAY - timedelta(days=2))))
    goal = GoalRecord(id=1, created_at=NOW - timedelta(days=10), deadline=NOW, tasks=(first, second))
    assert [log.status for log in flatten_logs(goal)] == [LogStatus.MISSED, LogStatus.COMPLETED]


# ========== Properties ==========

def _random_goal(rng):
    now = NOW + timedelta(hours=rng.randint(0, 23))
    created_at = now - timedelta(days=rng.randint(0, 400), hours=rng.randint(0, 23))
    deadline = created_at + timedelta(days=rng.randint(-30, 400))
    tasks = []
    for task_id in range(rng.randint(0, 4)):
        logs = tuple(
            TaskLogRecord(
                id=None, task_id=task_id,
                due_date=(now - timedelta(days=rng.randint(-3, 120))).date(),
                status=rng.choice(list(LogStatus)),
            )
            for _ in range(rng.randint(0, 60))
        )
        tasks.append(TaskRecord(id=task_id, goal_id=1, logs=logs))
    return GoalRecord(id=1, created_at=created_at, deadline=deadline, tasks=tuple(tasks)), now


def test_score_is_bounded_integer():
    rng = random.Random(20261018)
    for _ in range(500):
        goal, now = _random_goal(rng)
        score = calculate_momentum_score(goal, now)
        assert isinstance(score, int)
        assert -100 <= score <= 100


def test_scoring_is_idempotent():
    rng = random.Random(7)
    for _ in range(100):
        goal, now = _random_goal(rng)
        assert evaluate_goal(goal, now) == evaluate_goal(goal, now)


@pytest.mark.parametrize("seed", range(25))
def test_completing_a_missed_log_never_lowers_score(seed):
    rng = random.Random(seed)
    statuses = [rng.choice(["completed", "missed"]) for _ in range(rng.randint(3, 40))]
    if "missed" not in statuses:
        statuses[0] = "missed"
    age_days = rng.randint(8, 200)
    length_days = rng.randint(1, 300)

    before = calculate_momentum_score(build_goal(statuses, age_days=age_days, length_days=length_days), NOW)
    for i, status in enumerate(statuses):
        if status != "missed":
            continue
        flipped = statuses[:i] + ["completed"] + statuses[i + 1:]
        after = calculate_momentum_score(build_goal(flipped, age_days=age_days, length_days=length_days), NOW)
        assert after >= before


# ========== Weekly ==========

def _weekly_goal():
    logs = (
        TaskLogRecord(id=1, task_id=1, due_date=TODAY - timedelta(days=9), status=LogStatus.MISSED),
        TaskLogRecord(id=2, task_id=1, due_date=TODAY - timedelta(days=2), status=LogStatus.COMPLETED),
        TaskLogRecord(id=3, task_id=1, due_date=TODAY - timedelta(days=1), status=LogStatus.COMPLETED),
        TaskLogRecord(id=4, task_id=1, due_date=TODAY, status=LogStatus.MISSED),
    )
    return GoalRecord(id=5, created_at=NOW - timedelta(days=30), deadline=NOW + timedelta(days=60),
                      tasks=(TaskRecord(id=1, goal_id=5, logs=logs),))


def test_weekly_momentum_counts_current_week_only():
    weekly = calculate_weekly_momentum(_weekly_goal(), NOW)
    assert (weekly.week_start.isoformat(), weekly.week_end.isoformat()) == ("2026-10-12", "2026-10-18")
    assert weekly.completed == 2
    assert weekly.total == 3
    assert weekly.percentage == 67
    assert weekly.goal_id == 5


def test_weekly_momentum_empty_week():
    weekly = calculate_weekly_momentum(_weekly_goal(), NOW + timedelta(days=14))
    assert (weekly.completed, weekly.total, weekly.score) == (0, 0, 0)
    assert weekly.status == MomentumStatus.MAINTAINING


# ========== Offsets ==========

def _goal_with_log_due(due_date, completed_before):
    logs = tuple(
        TaskLogRecord(id=i, task_id=1, due_date=due_date - timedelta(days=completed_before - i),
                      status=LogStatus.COMPLETED)
        for i in range(completed_before)
    ) + (TaskLogRecord(id=completed_before, task_id=1, due_date=due_date, status=LogStatus.PENDING),)
    return GoalRecord(id=1, created_at=NOW - timedelta(days=30), deadline=NOW + timedelta(days=70),
                      tasks=(TaskRecord(id=1, goal_id=1, logs=logs),))


def test_same_instant_scores_the_same_in_any_offset():
    goal = _goal_with_log_due(TODAY, completed_before=9)
    # 2026-10-15 04:30 UTC; the pending log is already past due
    offset_now = datetime(2026, 10, 14, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    utc_now = offset_now.astimezone(timezone.utc)

    assert calculate_momentum_score(goal, offset_now) == calculate_momentum_score(goal, utc_now)
    assert evaluate_goal(goal, offset_now) == evaluate_goal(goal, utc_now)


def test_weekly_window_uses_utc_week():
    # Sunday evening at -05:00 is already Monday in UTC
    offset_now = datetime(2026, 10, 18, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
    weekly = calculate_weekly_momentum(_weekly_goal(), offset_now)
    assert weekly.week_start.isoformat() == "2026-10-19"
    assert weekly == calculate_weekly_momentum(_weekly_goal(), offset_now.astimezone(timezone.utc))


# ========== Gates ==========

def test_timeline_needs_more_than_a_quarter_elapsed(goal_factory):
    # base 50, streak 20; timeline bonus 9 only past 25% of the timeline
    at_quarter = goal_factory(["completed"] * 10, age_days=25, length_days=100)
    past_quarter = goal_factory(["completed"] * 10, age_days=26, length_days=100)
    assert calculate_momentum_score(at_quarter, NOW) == 70
    assert calculate_momentum_score(past_quarter, NOW) == 79


def test_timeline_needs_seven_logs(goal_factory):
    # 6 logs: base 50 + streak 18, no timeline bonus
    assert calculate_momentum_score(goal_factory(["completed"] * 6), NOW) == 68


def test_trend_needs_three_logs(goal_factory):
    params = MomentumParameters()
    params.trend_window = 1

    # 2 logs: base 0, trend skipped
    assert calculate_momentum_score(goal_factory(["missed", "completed"]), NOW, params) == 0
    # 3 logs: base -16.7, trend (1 - 1/3) * 10 = 6.7
    assert calculate_momentum_score(goal_factory(["missed", "missed", "completed"]), NOW, params) == -10

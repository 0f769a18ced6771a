from datetime import date
from types import SimpleNamespace

from lifestyle.scoring import MomentumResult
from lifestyle.services import DashboardService
from conftest import TODAY, add_log


def _log(due_date, status):
    return SimpleNamespace(due_date=due_date, status=status)


def test_current_streak_counts_perfect_days():
    logs = [
        _log(date(2026, 10, 11), "completed"),
        _log(date(2026, 10, 11), "missed"),
        _log(date(2026, 10, 12), "completed"),
        _log(date(2026, 10, 13), "completed"),
        _log(date(2026, 10, 13), "completed"),
    ]
    assert DashboardService.calculate_current_streak(logs) == 2


def test_current_streak_broken_by_latest_day():
    logs = [_log(date(2026, 10, 12), "completed"), _log(date(2026, 10, 13), "pending")]
    assert DashboardService.calculate_current_streak(logs) == 0
    assert DashboardService.calculate_current_streak([]) == 0


def test_weekly_completion_ignores_other_weeks():
    logs = [
        _log(date(2026, 10, 5), "missed"),
        _log(date(2026, 10, 12), "completed"),
        _log(date(2026, 10, 13), "completed"),
        _log(date(2026, 10, 14), "completed"),
        _log(date(2026, 10, 15), "pending"),
    ]
    assert DashboardService.calculate_weekly_completion(logs, TODAY) == 75
    assert DashboardService.calculate_weekly_completion([], TODAY) == 0


def test_get_dashboard(db, seeded_goal):
    task = seeded_goal.tasks[0]
    add_log(db, task, date(2026, 10, 11), status="missed")
    for day in (12, 13, 14):
        add_log(db, task, date(2026, 10, day), status="completed")

    dashboard = DashboardService().get_dashboard(seeded_goal.user_id, today=TODAY)

    assert dashboard["stats"] == {
        "total_goals": 1,
        "completed_today": 1,
        "weekly_completion": 100,
        "current_streak": 3,
    }
    assert len(dashboard["todays_logs"]) == 1

    goal_row = dashboard["goals"][0]
    assert goal_row["title"] == "Run a marathon"
    assert goal_row["progress"] == 75
    assert isinstance(goal_row["momentum"], MomentumResult)
    assert -100 <= goal_row["momentum"].score <= 100

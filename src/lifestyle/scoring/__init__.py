"""
Goal momentum scoring: records, the scorer and storage adapters.
"""
from .models import (
    LogStatus, MomentumStatus, TaskLogRecord, TaskRecord, GoalRecord,
    MomentumResult, WeeklyMomentum
)
from .momentum import (
    flatten_logs, count_statuses, current_streaks, calculate_momentum_score,
    get_momentum_status, get_progress_fill, completion_percentage,
    evaluate_goal, restrict_to_window, calculate_weekly_momentum
)
from .adapters import goal_from_model, goal_from_payload, goal_from_rows


__all__ = [
    # Records
    "LogStatus",
    "MomentumStatus",
    "TaskLogRecord",
    "TaskRecord",
    "GoalRecord",
    "MomentumResult",
    "WeeklyMomentum",

    # Scorer
    "flatten_logs",
    "count_statuses",
    "current_streaks",
    "calculate_momentum_score",
    "get_momentum_status",
    "get_progress_fill",
    "completion_percentage",
    "evaluate_goal",
    "restrict_to_window",
    "calculate_weekly_momentum",

    # Adapters
    "goal_from_model",
    "goal_from_payload",
    "goal_from_rows",
]

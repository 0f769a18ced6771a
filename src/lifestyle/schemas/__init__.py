from .common_schema import DateQuerySchema, ScoringQuerySchema
from .goal_schema import GoalSchema, GoalUpdateSchema, GoalQuerySchema
from .task_schema import TaskSchema, TaskUpdateSchema, TaskQuerySchema
from .task_log_schema import (
    TaskLogSchema, CompleteLogSchema, GenerateLogsResultSchema, MarkOverdueResultSchema
)
from .score_schema import MomentumSchema, WeeklyMomentumSchema
from .dashboard_schema import DashboardSchema
from .review_schema import WeeklyReviewSchema, GoalReviewSchema

__all__ = [
    "DateQuerySchema",
    "ScoringQuerySchema",
    "GoalSchema",
    "GoalUpdateSchema",
    "GoalQuerySchema",
    "TaskSchema",
    "TaskUpdateSchema",
    "TaskQuerySchema",
    "TaskLogSchema",
    "CompleteLogSchema",
    "GenerateLogsResultSchema",
    "MarkOverdueResultSchema",
    "MomentumSchema",
    "WeeklyMomentumSchema",
    "DashboardSchema",
    "WeeklyReviewSchema",
    "GoalReviewSchema",
]

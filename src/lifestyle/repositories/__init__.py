from .goal_repository import GoalRepository
from .task_repository import TaskRepository
from .task_log_repository import TaskLogRepository
from .weekly_review_repository import WeeklyReviewRepository

__all__ = [
    "GoalRepository",
    "TaskRepository",
    "TaskLogRepository",
    "WeeklyReviewRepository",
]

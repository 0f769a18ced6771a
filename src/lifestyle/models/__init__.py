from .goal_model import GoalModel
from .task_model import TaskModel
from .task_log_model import TaskLogModel
from .weekly_review_model import WeeklyReviewModel


__all__ = [
    "GoalModel",
    "TaskModel",
    "TaskLogModel",
    "WeeklyReviewModel",
]

from .momentum_service import MomentumService
from .task_log_service import TaskLogService
from .dashboard_service import DashboardService
from .weekly_review_service import WeeklyReviewService


__all__ = [
    "MomentumService",
    "TaskLogService",
    "DashboardService",
    "WeeklyReviewService",
]

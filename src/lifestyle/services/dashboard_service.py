"""
Dashboard Service - Daily and weekly execution stats

Active goal count, today's completions, this week's completion rate,
perfect-day streak and per-goal progress with momentum.
"""
import pandas as pd
from datetime import date, datetime, time, timezone
from typing import List, Optional

from lifestyle.config import setup_logger
from lifestyle.repositories import GoalRepository, TaskLogRepository
from lifestyle.scoring import completion_percentage
from lifestyle.utils import is_in_week
from .momentum_service import MomentumService

goal_repo = GoalRepository()
log_repo = TaskLogRepository()
logger = setup_logger(name="DashboardService")


class DashboardService:
    """Service for dashboard statistics"""

    def __init__(self, momentum_service: Optional[MomentumService] = None):
        self.momentum_service = momentum_service or MomentumService()

    @staticmethod
    def calculate_weekly_completion(logs: List, today: date) -> int:
        """Completed share of logs due this Monday-Sunday week, in percent"""
        week_logs = [log for log in logs if is_in_week(log.due_date, today)]
        completed = sum(1 for log in week_logs if log.status == 'completed')
        return completion_percentage(completed, len(week_logs))

    @staticmethod
    def calculate_current_streak(logs: List) -> int:
        """
        Count "perfect days": consecutive most recent due dates on which
        every log was completed.

        Parameters:
            logs: Task logs (anything with due_date and status)

        Returns:
            int: Streak length in days
        """
        if not logs:
            return 0

        df = pd.DataFrame([
            {'due_date': log.due_date, 'completed': log.status == 'completed'}
            for log in logs
        ])
        daily_rates = df.groupby('due_date')['completed'].mean().sort_index(ascending=False)

        streak = 0
        for rate in daily_rates:
            if rate == 1:
                streak += 1
            else:
                break
        return streak

    def get_dashboard(self, user_id, today: Optional[date] = None,
                      now: Optional[datetime] = None) -> dict:
        """
        Assemble dashboard stats for a user.

        Parameters:
            user_id: Owner of the goals
            today: Calendar date for today's and this week's figures
            now: Scoring instant (defaults to end of `today` when given)
        """
        today = today or date.today()
        if now is None:
            now = datetime.combine(today, time(23, 59, 59), tzinfo=timezone.utc)

        goals = goal_repo.get_goals_with_logs(user_id)
        todays_logs = log_repo.get_logs_by_due_date(today, user_id)
        all_logs = log_repo.get_all_logs(user_id)

        momentum = self.momentum_service.score_goals(goals, now)
        goal_rows = []
        for goal, result in zip(goals, momentum):
            goal_rows.append({
                'id': goal.id,
                'title': goal.title,
                'category': goal.category,
                'deadline': goal.deadline,
                'progress': result.completion_rate,
                'momentum': result,
            })

        stats = {
            'total_goals': len(goals),
            'completed_today': sum(1 for log in todays_logs if log.status == 'completed'),
            'weekly_completion': self.calculate_weekly_completion(all_logs, today),
            'current_streak': self.calculate_current_streak(all_logs),
        }
        logger.info(f"Dashboard for {user_id} on {today}: {stats}")

        return {
            'date': today,
            'stats': stats,
            'goals': goal_rows,
            'todays_logs': todays_logs,
        }

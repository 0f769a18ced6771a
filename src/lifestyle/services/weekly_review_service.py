"""
Weekly Review Service - Sunday reflection per goal

Weekly completion stats, canned improvement suggestions and review upserts.
"""
from datetime import date, datetime, time, timezone
from typing import Optional

from lifestyle.config import setup_logger, ReviewThresholds
from lifestyle.repositories import GoalRepository, WeeklyReviewRepository
from lifestyle.scoring import calculate_weekly_momentum
from lifestyle.utils import is_review_day
from .momentum_service import to_goal_record

goal_repo = GoalRepository()
review_repo = WeeklyReviewRepository()
logger = setup_logger(name="WeeklyReviewService")


class WeeklyReviewService:
    """Service for weekly reviews"""

    def __init__(self, thresholds: Optional[ReviewThresholds] = None):
        self.thresholds = thresholds or ReviewThresholds()

    @staticmethod
    def is_review_open(review_date: date, sunday_only: bool = True) -> bool:
        return not sunday_only or is_review_day(review_date)

    @staticmethod
    def calculate_weekly_stats(goal, review_date: date):
        """Completed / total / percentage (and weekly momentum) for the week of review_date"""
        now = datetime.combine(review_date, time(23, 59, 59), tzinfo=timezone.utc)
        return calculate_weekly_momentum(to_goal_record(goal), now)

    def generate_suggestions(self, percentage: int) -> str:
        if percentage >= self.thresholds.excellent:
            return "Excellent execution! Consider adding more challenging lead measures or increasing frequency."
        elif percentage >= self.thresholds.good:
            return "Good progress! Look for small optimizations to reach 90%+ consistency."
        elif percentage >= self.thresholds.fair:
            return "Room for improvement. Consider simplifying your lead measures or adjusting frequency."
        else:
            return "Significant improvement needed. You might be overcommitting - try focusing on fewer, simpler tasks."

    def get_weekly_review(self, user_id, review_date: Optional[date] = None):
        """
        Weekly stats, suggestions and any saved review for each active goal.

        Returns:
            List of dicts, one per goal
        """
        review_date = review_date or date.today()
        goals = goal_repo.get_goals_with_logs(user_id)
        reviews = {r.goal_id: r for r in review_repo.get_reviews_by_date(user_id, review_date)}

        result = []
        for goal in goals:
            stats = self.calculate_weekly_stats(goal, review_date)
            review = reviews.get(goal.id)
            result.append({
                'goal_id': goal.id,
                'title': goal.title,
                'category': goal.category,
                'week_start': stats.week_start,
                'week_end': stats.week_end,
                'stats': stats,
                'suggestions': review.auto_suggestions if review and review.auto_suggestions
                else self.generate_suggestions(stats.percentage),
                'review': review,
            })
        return result

    def save_review(self, user_id, goal, review_data: dict, review_date: Optional[date] = None):
        """
        Create or update the review for a goal on a date.

        Parameters:
            user_id: Reviewer
            goal: GoalModel being reviewed
            review_data: stayed_on_track, reflection_text, improvement_notes
            review_date: Day of the review (defaults to today)

        Returns:
            WeeklyReviewModel, or None if saving failed
        """
        review_date = review_date or date.today()
        stats = self.calculate_weekly_stats(goal, review_date)
        payload = {
            'user_id': user_id,
            'goal_id': goal.id,
            'review_date': review_date,
            'stayed_on_track': review_data['stayed_on_track'],
            'reflection_text': review_data.get('reflection_text') or "",
            'improvement_notes': review_data.get('improvement_notes') or "",
            'auto_suggestions': self.generate_suggestions(stats.percentage),
        }
        review = review_repo.upsert_review(payload)
        if review is not None:
            logger.info(f"Saved weekly review for goal {goal.id} on {review_date}")
        return review

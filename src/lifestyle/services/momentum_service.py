"""
Momentum Service - Scores goals with the canonical momentum formula

Every place that displays a score goes through this service so one scoring
pass uses one `now` for all goals.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from lifestyle.config import setup_logger, MomentumParameters
from lifestyle.repositories import GoalRepository
from lifestyle.scoring import (
    GoalRecord, MomentumResult, WeeklyMomentum,
    evaluate_goal, calculate_weekly_momentum, goal_from_model
)

goal_repo = GoalRepository()
logger = setup_logger(name="MomentumService")


def to_goal_record(goal) -> GoalRecord:
    """Accept either a scoring record or an ORM goal"""
    if isinstance(goal, GoalRecord):
        return goal
    return goal_from_model(goal)


class MomentumService:
    """Service for goal momentum scores"""

    def __init__(self, params: Optional[MomentumParameters] = None):
        self.params = params or MomentumParameters()

    def score_goal(self, goal, now: Optional[datetime] = None) -> MomentumResult:
        return evaluate_goal(to_goal_record(goal), now or datetime.now(timezone.utc), self.params)

    def score_goals(self, goals: Iterable, now: Optional[datetime] = None) -> List[MomentumResult]:
        """
        Score several goals against a single captured instant.

        Parameters:
            goals: GoalRecords or GoalModels
            now: Scoring instant (captured once when omitted)

        Returns:
            List of MomentumResult in input order
        """
        now = now or datetime.now(timezone.utc)
        return [evaluate_goal(to_goal_record(goal), now, self.params) for goal in goals]

    def weekly_scores(self, goals: Iterable, now: Optional[datetime] = None) -> List[WeeklyMomentum]:
        now = now or datetime.now(timezone.utc)
        return [calculate_weekly_momentum(to_goal_record(goal), now, self.params) for goal in goals]

    def score_user_goals(self, user_id, now: Optional[datetime] = None, include_archived=False):
        """
        Load a user's goals with their logs and score them.

        Returns:
            List of (GoalModel, MomentumResult) pairs, newest goal first
        """
        goals = goal_repo.get_goals_with_logs(user_id, include_archived=include_archived)
        results = self.score_goals(goals, now)
        logger.info(f"Scored {len(results)} goals for user {user_id}")
        return list(zip(goals, results))

    def weekly_user_scores(self, user_id, now: Optional[datetime] = None):
        goals = goal_repo.get_goals_with_logs(user_id)
        return list(zip(goals, self.weekly_scores(goals, now)))

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from lifestyle.db import db
from lifestyle.config import setup_logger
from lifestyle.models import GoalModel, TaskModel

logger = setup_logger(name="GoalRepository")


class GoalRepository:
    """Repository for goal table operations"""

    @staticmethod
    def get_goals(user_id, include_archived=False):
        """Get goals for a user, newest first"""
        query = GoalModel.query.filter(GoalModel.user_id == user_id)
        if not include_archived:
            query = query.filter(GoalModel.is_archived.is_(False))
        return query.order_by(GoalModel.created_at.desc(), GoalModel.id.desc()).all()

    @staticmethod
    def get_goals_with_logs(user_id, include_archived=False):
        """Get goals with tasks and task logs eagerly loaded (for scoring)"""
        query = GoalModel.query.options(
            selectinload(GoalModel.tasks).selectinload(TaskModel.logs)
        ).filter(GoalModel.user_id == user_id)
        if not include_archived:
            query = query.filter(GoalModel.is_archived.is_(False))
        return query.order_by(GoalModel.created_at.desc(), GoalModel.id.desc()).all()

    @staticmethod
    def get_goal_by_id(goal_id, user_id=None):
        query = GoalModel.query.filter(GoalModel.id == goal_id)
        if user_id is not None:
            query = query.filter(GoalModel.user_id == user_id)
        return query.first()

    @staticmethod
    def create_goal(goal_data):
        """Insert a goal; returns the model or None on failure"""
        try:
            goal = GoalModel(**goal_data)
            db.session.add(goal)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error creating goal: {e}")
            return None
        return goal

    @staticmethod
    def update_goal(goal, goal_data):
        try:
            for key, value in goal_data.items():
                setattr(goal, key, value)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error updating goal {goal.id}: {e}")
            return None
        return goal

    @staticmethod
    def archive_goal(goal):
        return GoalRepository.update_goal(goal, {"is_archived": True})

    @staticmethod
    def delete_goal(goal):
        """Delete a goal with its tasks, task logs and reviews"""
        try:
            db.session.delete(goal)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error deleting goal {goal.id}: {e}")
            return None
        return True

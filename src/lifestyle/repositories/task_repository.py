from sqlalchemy.exc import SQLAlchemyError

from lifestyle.db import db
from lifestyle.config import setup_logger
from lifestyle.models import GoalModel, TaskModel

logger = setup_logger(name="TaskRepository")


class TaskRepository:
    """Repository for task table operations"""

    @staticmethod
    def get_active_tasks(user_id, goal_id=None):
        """Active tasks of a user's goals, newest first"""
        query = TaskModel.query.join(GoalModel).filter(
            TaskModel.is_active.is_(True),
            GoalModel.user_id == user_id
        )
        if goal_id is not None:
            query = query.filter(TaskModel.goal_id == goal_id)
        return query.order_by(TaskModel.created_at.desc(), TaskModel.id.desc()).all()

    @staticmethod
    def get_schedulable_tasks():
        """Active tasks whose goal is not archived (all users)"""
        return TaskModel.query.join(GoalModel).filter(
            TaskModel.is_active.is_(True),
            GoalModel.is_archived.is_(False)
        ).order_by(TaskModel.id).all()

    @staticmethod
    def get_task_by_id(task_id, user_id=None):
        query = TaskModel.query.filter(TaskModel.id == task_id)
        if user_id is not None:
            query = query.join(GoalModel).filter(GoalModel.user_id == user_id)
        return query.first()

    @staticmethod
    def create_task(task_data):
        try:
            task = TaskModel(**task_data)
            db.session.add(task)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error creating task: {e}")
            return None
        return task

    @staticmethod
    def update_task(task, task_data):
        try:
            for key, value in task_data.items():
                setattr(task, key, value)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error updating task {task.id}: {e}")
            return None
        return task

    @staticmethod
    def delete_task(task):
        try:
            db.session.delete(task)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error deleting task {task.id}: {e}")
            return None
        return True

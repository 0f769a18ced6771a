from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from lifestyle.db import db
from lifestyle.config import setup_logger
from lifestyle.models import GoalModel, TaskModel, TaskLogModel

logger = setup_logger(name="TaskLogRepository")


class TaskLogRepository:
    """Repository for task log table operations"""

    @staticmethod
    def get_log_by_id(log_id):
        return TaskLogModel.query.filter(TaskLogModel.id == log_id).first()

    @staticmethod
    def _user_logs(user_id):
        return TaskLogModel.query.join(TaskModel).join(GoalModel).filter(
            GoalModel.user_id == user_id
        )

    @staticmethod
    def get_logs_by_due_date(due_date, user_id):
        """Logs due on a date with task and goal loaded, oldest created first"""
        return TaskLogRepository._user_logs(user_id).options(
            joinedload(TaskLogModel.task).joinedload(TaskModel.goal)
        ).filter(
            TaskLogModel.due_date == due_date
        ).order_by(TaskLogModel.created_at.asc(), TaskLogModel.id.asc()).all()

    @staticmethod
    def get_all_logs(user_id):
        return TaskLogRepository._user_logs(user_id).order_by(
            TaskLogModel.due_date.asc()
        ).all()

    @staticmethod
    def get_task_ids_with_log_on(due_date):
        """Task ids that already have a log for the given date"""
        result = db.session.query(TaskLogModel.task_id).filter(
            TaskLogModel.due_date == due_date
        ).all()
        return {r[0] for r in result}

    @staticmethod
    def bulk_insert(log_records):
        """Bulk insert task log records"""
        try:
            db.session.bulk_insert_mappings(TaskLogModel, log_records)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error inserting task log records: {e}")
            return None
        return log_records

    @staticmethod
    def mark_pending_before_as_missed(before_date):
        """Set every pending log due before a date to missed"""
        try:
            num_updated = TaskLogModel.query.filter(
                TaskLogModel.status == "pending",
                TaskLogModel.due_date < before_date
            ).update({"status": "missed"}, synchronize_session=False)
            db.session.commit()
            return num_updated
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error marking overdue task logs: {e}")
            return -1

    @staticmethod
    def mark_completed(log, completed_at):
        try:
            log.status = "completed"
            log.completed_at = completed_at
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error completing task log {log.id}: {e}")
            return None
        return log

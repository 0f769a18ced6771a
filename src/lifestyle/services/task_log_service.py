"""
Task Log Service - Keeps daily task logs up to date

Generates one pending log per due task and date, turns stale pending logs
into misses and records completions.
"""
from datetime import date, datetime, timezone
from typing import Optional

from lifestyle.config import setup_logger
from lifestyle.repositories import TaskRepository, TaskLogRepository
from lifestyle.utils import is_task_due

task_repo = TaskRepository()
log_repo = TaskLogRepository()
logger = setup_logger(name="TaskLogService")


class TaskLogService:
    """Service for task log generation and completion"""

    def generate_task_logs_for_date(self, target_date: Optional[date] = None) -> Optional[int]:
        """
        Ensure a pending log exists for every active task due on a date.

        Idempotent: tasks that already have a log for the date are skipped.

        Parameters:
            target_date: Date to generate for (defaults to today)

        Returns:
            Number of logs created, or None if the insert failed
        """
        target_date = target_date or date.today()
        existing = log_repo.get_task_ids_with_log_on(target_date)

        records = []
        for task in task_repo.get_schedulable_tasks():
            if task.id in existing:
                continue
            if not is_task_due(task.frequency, task.custom_days, task.start_date, target_date):
                continue
            records.append({
                'task_id': task.id,
                'due_date': target_date,
                'status': 'pending',
                'created_at': datetime.now(timezone.utc),
            })

        if not records:
            logger.info(f"No task logs to generate for {target_date}")
            return 0

        if log_repo.bulk_insert(records) is None:
            return None
        logger.info(f"Generated {len(records)} task logs for {target_date}")
        return len(records)

    def mark_overdue_tasks_as_missed(self, today: Optional[date] = None) -> Optional[int]:
        """
        Mark every pending log due before today as missed.

        Returns:
            Number of logs updated, or None if the update failed
        """
        today = today or date.today()
        num_updated = log_repo.mark_pending_before_as_missed(today)
        if num_updated < 0:
            return None
        logger.info(f"Marked {num_updated} overdue task logs as missed")
        return num_updated

    def ensure_task_logs_up_to_date(self, today: Optional[date] = None) -> dict:
        """
        Generate today's logs and mark overdue ones as missed.

        Failures are logged, never raised, so callers rendering today's
        tasks are not blocked.
        """
        today = today or date.today()
        logger.info(f"Generating task logs for {today} and marking overdue tasks...")

        generated = self.generate_task_logs_for_date(today)
        if generated is None:
            logger.error(f"Failed to generate task logs for {today}")
        missed = self.mark_overdue_tasks_as_missed(today)
        if missed is None:
            logger.error("Failed to mark overdue task logs as missed")

        return {
            'date': today,
            'generated': generated or 0,
            'missed': missed or 0,
            'ok': generated is not None and missed is not None,
        }

    def mark_task_complete(self, log_id: int, completed_at: Optional[datetime] = None):
        """
        Mark one task log completed.

        Returns:
            Updated TaskLogModel, or None if it does not exist or saving failed
        """
        log = log_repo.get_log_by_id(log_id)
        if log is None:
            logger.warning(f"Task log {log_id} not found")
            return None
        return log_repo.mark_completed(log, completed_at or datetime.now(timezone.utc))

    def get_todays_logs(self, user_id, today: Optional[date] = None):
        return log_repo.get_logs_by_due_date(today or date.today(), user_id)

from sqlalchemy import Index, UniqueConstraint

from lifestyle.db import db
from .goal_model import utc_now


class TaskLogModel(db.Model):
    """One scheduled occurrence of a task on a due date"""
    __tablename__ = "task_logs"

    id = db.Column(db.Integer, primary_key=True)
    task_id = db.Column(db.Integer, db.ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="pending")  # pending / completed / missed
    completed_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now)

    task = db.relationship("TaskModel", back_populates="logs")

    __table_args__ = (
        UniqueConstraint("task_id", "due_date", name="uq_task_logs_task_due"),
        Index("idx_task_logs_due_date", "due_date"),
        Index("idx_task_logs_status", "status"),
    )

    def __repr__(self):
        return f"<TaskLog {self.id} task={self.task_id} {self.due_date} {self.status}>"

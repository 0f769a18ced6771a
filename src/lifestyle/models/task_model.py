from sqlalchemy import Index

from lifestyle.db import db
from .goal_model import utc_now


class TaskModel(db.Model):
    """Recurring lead-measure activity under a goal"""
    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)
    goal_id = db.Column(db.Integer, db.ForeignKey("goals.id", ondelete="CASCADE"), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    frequency = db.Column(db.String(20), nullable=False, default="daily")  # daily / every_2_days / weekly / custom
    custom_days = db.Column(db.Integer, nullable=True)  # only for 'custom'
    start_date = db.Column(db.Date, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now)

    goal = db.relationship("GoalModel", back_populates="tasks")
    logs = db.relationship(
        "TaskLogModel", back_populates="task",
        cascade="all, delete-orphan", order_by="TaskLogModel.due_date"
    )

    __table_args__ = (
        Index("idx_tasks_goal_id", "goal_id"),
        Index("idx_tasks_is_active", "is_active"),
    )

    def __repr__(self):
        return f"<Task {self.id} {self.title!r} {self.frequency}>"

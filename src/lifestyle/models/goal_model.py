"""
Goal Model

A long-term outcome with a deadline and category. Tasks hang off a goal and
task logs hang off a task; deleting a goal removes both.
"""
from datetime import datetime, timezone

from sqlalchemy import Index

from lifestyle.db import db


def utc_now():
    return datetime.now(timezone.utc)


class GoalModel(db.Model):
    __tablename__ = "goals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(100), nullable=False)
    deadline = db.Column(db.DateTime, nullable=False)
    is_archived = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now)

    tasks = db.relationship(
        "TaskModel", back_populates="goal",
        cascade="all, delete-orphan", order_by="TaskModel.id"
    )
    reviews = db.relationship(
        "WeeklyReviewModel", back_populates="goal",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_goals_user_archived", "user_id", "is_archived"),
    )

    def __repr__(self):
        return f"<Goal {self.id} {self.title!r} due {self.deadline}>"

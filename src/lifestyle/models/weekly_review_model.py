from sqlalchemy import UniqueConstraint

from lifestyle.db import db


class WeeklyReviewModel(db.Model):
    """Sunday reflection for one goal"""
    __tablename__ = "weekly_reviews"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False)
    goal_id = db.Column(db.Integer, db.ForeignKey("goals.id", ondelete="CASCADE"), nullable=False)
    review_date = db.Column(db.Date, nullable=False)
    stayed_on_track = db.Column(db.Boolean, nullable=False)
    reflection_text = db.Column(db.Text, nullable=True)
    improvement_notes = db.Column(db.Text, nullable=True)
    auto_suggestions = db.Column(db.Text, nullable=True)

    goal = db.relationship("GoalModel", back_populates="reviews")

    __table_args__ = (
        UniqueConstraint("user_id", "goal_id", "review_date", name="uq_weekly_reviews_user_goal_date"),
    )

    def __repr__(self):
        return f"<WeeklyReview goal={self.goal_id} @ {self.review_date}>"

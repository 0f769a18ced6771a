from sqlalchemy.exc import SQLAlchemyError

from lifestyle.db import db
from lifestyle.config import setup_logger
from lifestyle.models import WeeklyReviewModel

logger = setup_logger(name="WeeklyReviewRepository")


class WeeklyReviewRepository:

    @staticmethod
    def get_reviews_by_date(user_id, review_date):
        return WeeklyReviewModel.query.filter(
            WeeklyReviewModel.user_id == user_id,
            WeeklyReviewModel.review_date == review_date
        ).all()

    @staticmethod
    def get_review(user_id, goal_id, review_date):
        return WeeklyReviewModel.query.filter_by(
            user_id=user_id, goal_id=goal_id, review_date=review_date
        ).first()

    @staticmethod
    def upsert_review(review_data):
        """Insert a review or update the one for the same user, goal and date"""
        try:
            review = WeeklyReviewRepository.get_review(
                review_data["user_id"], review_data["goal_id"], review_data["review_date"]
            )
            if review is None:
                review = WeeklyReviewModel(**review_data)
                db.session.add(review)
            else:
                for key, value in review_data.items():
                    setattr(review, key, value)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error saving weekly review: {e}")
            return None
        return review

from datetime import date

from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from lifestyle.repositories import GoalRepository
from lifestyle.services import WeeklyReviewService
from lifestyle.schemas import DateQuerySchema, WeeklyReviewSchema, GoalReviewSchema


blp = Blueprint("Weekly Review", __name__, url_prefix="/api/v1/reviews",
                description="Sunday reflection per goal")
goal_repo = GoalRepository()


def ensure_review_open(review_date):
    if not WeeklyReviewService.is_review_open(review_date, current_app.config["REVIEW_SUNDAY_ONLY"]):
        abort(409, message="Weekly reviews are only available on Sundays.")


@blp.route("/")
class WeeklyReviewList(MethodView):
    @blp.arguments(DateQuerySchema, location="query")
    @blp.response(200, GoalReviewSchema(many=True))
    def get(self, args):
        """Weekly stats, suggestions and saved reviews for every active goal"""
        review_date = args["date"] or date.today()
        ensure_review_open(review_date)
        return WeeklyReviewService().get_weekly_review(current_app.config["DEFAULT_USER_ID"], review_date)


@blp.route("/<int:goal_id>")
class WeeklyReviewResource(MethodView):
    @blp.arguments(WeeklyReviewSchema)
    @blp.arguments(DateQuerySchema, location="query")
    @blp.response(200, WeeklyReviewSchema)
    def put(self, review_data, args, goal_id):
        """Save (or update) this week's review of a goal"""
        user_id = current_app.config["DEFAULT_USER_ID"]
        review_date = args["date"] or date.today()
        ensure_review_open(review_date)

        goal = goal_repo.get_goal_by_id(goal_id, user_id)
        if goal is None:
            abort(404, message=f"Goal {goal_id} not found")

        review = WeeklyReviewService().save_review(user_id, goal, review_data, review_date)
        if review is None:
            abort(500, message="Failed to save review")
        return review

from dataclasses import asdict
from datetime import datetime, timezone

from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from lifestyle.repositories import GoalRepository
from lifestyle.services import MomentumService
from lifestyle.schemas import ScoringQuerySchema, MomentumSchema, WeeklyMomentumSchema


blp = Blueprint("Scores", __name__, url_prefix="/api/v1/scores", description="Goal momentum scores")
goal_repo = GoalRepository()


def momentum_row(goal, result):
    return {**asdict(result), "title": goal.title, "category": goal.category}


@blp.route("/")
class GoalScores(MethodView):
    @blp.arguments(ScoringQuerySchema, location="query")
    @blp.response(200, MomentumSchema(many=True))
    def get(self, args):
        """Momentum score for every active goal"""
        pairs = MomentumService().score_user_goals(
            current_app.config["DEFAULT_USER_ID"],
            now=args["now"],
            include_archived=args["include_archived"]
        )
        return [momentum_row(goal, result) for goal, result in pairs]


@blp.route("/goal/<int:goal_id>")
class GoalScore(MethodView):
    @blp.arguments(ScoringQuerySchema, location="query")
    @blp.response(200, MomentumSchema)
    def get(self, args, goal_id):
        """Momentum score for one goal"""
        goal = goal_repo.get_goal_by_id(goal_id, current_app.config["DEFAULT_USER_ID"])
        if goal is None:
            abort(404, message=f"Goal {goal_id} not found")
        result = MomentumService().score_goal(goal, args["now"] or datetime.now(timezone.utc))
        return momentum_row(goal, result)


@blp.route("/weekly")
class WeeklyScores(MethodView):
    @blp.arguments(ScoringQuerySchema, location="query")
    @blp.response(200, WeeklyMomentumSchema(many=True))
    def get(self, args):
        """Momentum over the current Monday-Sunday week for every active goal"""
        pairs = MomentumService().weekly_user_scores(current_app.config["DEFAULT_USER_ID"], now=args["now"])
        return [{**asdict(weekly), "title": goal.title} for goal, weekly in pairs]

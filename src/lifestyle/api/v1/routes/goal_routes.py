from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from lifestyle.repositories import GoalRepository
from lifestyle.schemas import GoalSchema, GoalUpdateSchema, GoalQuerySchema


blp = Blueprint("Goals", __name__, url_prefix="/api/v1/goals", description="Operations on goals")
goal_repo = GoalRepository()


def get_goal_or_404(goal_id):
    goal = goal_repo.get_goal_by_id(goal_id, current_app.config["DEFAULT_USER_ID"])
    if goal is None:
        abort(404, message=f"Goal {goal_id} not found")
    return goal


@blp.route("/")
class GoalList(MethodView):
    @blp.arguments(GoalQuerySchema, location="query")
    @blp.response(200, GoalSchema(many=True))
    def get(self, args):
        """Get goals, newest first (archived goals only on request)"""
        return goal_repo.get_goals(
            current_app.config["DEFAULT_USER_ID"],
            include_archived=args["include_archived"]
        )

    @blp.arguments(GoalSchema)
    @blp.response(201, GoalSchema)
    def post(self, goal_data):
        """Create a goal"""
        goal_data["user_id"] = current_app.config["DEFAULT_USER_ID"]
        goal = goal_repo.create_goal(goal_data)
        if goal is None:
            abort(500, message="Failed to create goal")
        return goal


@blp.route("/<int:goal_id>")
class GoalResource(MethodView):
    @blp.response(200, GoalSchema)
    def get(self, goal_id):
        """Get a goal by id"""
        return get_goal_or_404(goal_id)

    @blp.arguments(GoalUpdateSchema)
    @blp.response(200, GoalSchema)
    def put(self, goal_data, goal_id):
        """Update title, description, category or deadline"""
        goal = goal_repo.update_goal(get_goal_or_404(goal_id), goal_data)
        if goal is None:
            abort(500, message=f"Failed to update goal {goal_id}")
        return goal

    @blp.response(204)
    def delete(self, goal_id):
        """Delete a goal with its tasks, logs and reviews"""
        if goal_repo.delete_goal(get_goal_or_404(goal_id)) is None:
            abort(500, message=f"Failed to delete goal {goal_id}")


@blp.route("/<int:goal_id>/archive")
class ArchiveGoal(MethodView):
    @blp.response(200, GoalSchema)
    def post(self, goal_id):
        """Archive a goal (hidden from lists and scoring)"""
        goal = goal_repo.archive_goal(get_goal_or_404(goal_id))
        if goal is None:
            abort(500, message=f"Failed to archive goal {goal_id}")
        return goal

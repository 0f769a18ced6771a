from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint

from lifestyle.services import DashboardService
from lifestyle.schemas import DateQuerySchema, DashboardSchema


blp = Blueprint("Dashboard", __name__, url_prefix="/api/v1/dashboard",
                description="Daily and weekly execution stats")


@blp.route("/")
class Dashboard(MethodView):
    @blp.arguments(DateQuerySchema, location="query")
    @blp.response(200, DashboardSchema)
    def get(self, args):
        """Active goals, today's completions, weekly completion and perfect-day streak"""
        return DashboardService().get_dashboard(current_app.config["DEFAULT_USER_ID"], today=args["date"])

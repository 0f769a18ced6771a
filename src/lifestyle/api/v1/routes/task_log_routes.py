from datetime import date

from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from lifestyle.services import TaskLogService
from lifestyle.schemas import (
    DateQuerySchema, TaskLogSchema, CompleteLogSchema,
    GenerateLogsResultSchema, MarkOverdueResultSchema
)


blp = Blueprint("Task Logs", __name__, url_prefix="/api/v1/logs",
                description="Daily task log generation and completion")


@blp.route("/today")
class TodaysLogs(MethodView):
    @blp.arguments(DateQuerySchema, location="query")
    @blp.response(200, TaskLogSchema(many=True))
    def get(self, args):
        """Get task logs due today (brings today's logs up to date first)"""
        log_service = TaskLogService()
        if args["date"] is None:
            log_service.ensure_task_logs_up_to_date()
        return log_service.get_todays_logs(current_app.config["DEFAULT_USER_ID"], args["date"])


@blp.route("/generate")
class GenerateLogs(MethodView):
    @blp.arguments(DateQuerySchema, location="query")
    @blp.response(201, GenerateLogsResultSchema)
    def post(self, args):
        """Create pending logs for every active task due on a date"""
        target_date = args["date"] or date.today()
        generated = TaskLogService().generate_task_logs_for_date(target_date)
        if generated is None:
            abort(500, message=f"Failed to generate task logs for {target_date}")
        return {"date": target_date, "generated": generated}


@blp.route("/mark-overdue")
class MarkOverdue(MethodView):
    @blp.arguments(DateQuerySchema, location="query")
    @blp.response(200, MarkOverdueResultSchema)
    def post(self, args):
        """Mark pending logs due before the date as missed"""
        today = args["date"] or date.today()
        missed = TaskLogService().mark_overdue_tasks_as_missed(today)
        if missed is None:
            abort(500, message="Failed to mark overdue task logs")
        return {"date": today, "missed": missed}


@blp.route("/<int:log_id>/complete")
class CompleteLog(MethodView):
    @blp.arguments(CompleteLogSchema)
    @blp.response(200, TaskLogSchema)
    def post(self, data, log_id):
        """Mark a task log completed"""
        log = TaskLogService().mark_task_complete(log_id, data.get("completed_at"))
        if log is None:
            abort(404, message=f"Task log {log_id} not found")
        return log

from datetime import date

from flask import current_app
from flask.views import MethodView
from flask_smorest import Blueprint, abort

from lifestyle.repositories import GoalRepository, TaskRepository
from lifestyle.schemas import TaskSchema, TaskUpdateSchema, TaskQuerySchema


blp = Blueprint("Tasks", __name__, url_prefix="/api/v1/tasks", description="Operations on recurring tasks")
goal_repo = GoalRepository()
task_repo = TaskRepository()


def get_task_or_404(task_id):
    task = task_repo.get_task_by_id(task_id, current_app.config["DEFAULT_USER_ID"])
    if task is None:
        abort(404, message=f"Task {task_id} not found")
    return task


@blp.route("/")
class TaskList(MethodView):
    @blp.arguments(TaskQuerySchema, location="query")
    @blp.response(200, TaskSchema(many=True))
    def get(self, args):
        """Get active tasks, optionally for one goal"""
        return task_repo.get_active_tasks(current_app.config["DEFAULT_USER_ID"], goal_id=args["goal_id"])

    @blp.arguments(TaskSchema)
    @blp.response(201, TaskSchema)
    def post(self, task_data):
        """Create a recurring task under a goal"""
        goal = goal_repo.get_goal_by_id(task_data["goal_id"], current_app.config["DEFAULT_USER_ID"])
        if goal is None:
            abort(404, message=f"Goal {task_data['goal_id']} not found")

        task_data["start_date"] = task_data.get("start_date") or date.today()
        if task_data["frequency"] != "custom":
            task_data["custom_days"] = None

        task = task_repo.create_task(task_data)
        if task is None:
            abort(500, message="Failed to create task")
        return task


@blp.route("/<int:task_id>")
class TaskResource(MethodView):
    @blp.response(200, TaskSchema)
    def get(self, task_id):
        """Get a task by id"""
        return get_task_or_404(task_id)

    @blp.arguments(TaskUpdateSchema)
    @blp.response(200, TaskSchema)
    def put(self, task_data, task_id):
        """Update a task (set is_active false to pause it)"""
        task = get_task_or_404(task_id)

        frequency = task_data.get("frequency", task.frequency)
        if frequency == "custom":
            if not task_data.get("custom_days", task.custom_days):
                abort(422, message="custom_days is required for custom frequency")
        else:
            task_data["custom_days"] = None

        task = task_repo.update_task(task, task_data)
        if task is None:
            abort(500, message=f"Failed to update task {task_id}")
        return task

    @blp.response(204)
    def delete(self, task_id):
        """Delete a task with its logs"""
        if task_repo.delete_task(get_task_or_404(task_id)) is None:
            abort(500, message=f"Failed to delete task {task_id}")

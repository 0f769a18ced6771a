from marshmallow import Schema, fields, post_load

from lifestyle.utils import to_naive_utc


class TaskLogSchema(Schema):
    """Schema for task log response"""
    id = fields.Int(dump_only=True)
    task_id = fields.Int(dump_only=True)
    due_date = fields.Date(dump_only=True)
    status = fields.Str(dump_only=True)
    completed_at = fields.DateTime(dump_only=True, allow_none=True)
    task_title = fields.Function(lambda log: log.task.title, dump_only=True)
    goal_title = fields.Function(lambda log: log.task.goal.title, dump_only=True)
    goal_category = fields.Function(lambda log: log.task.goal.category, dump_only=True)


class CompleteLogSchema(Schema):
    completed_at = fields.DateTime(load_default=None)

    @post_load
    def normalise_completed_at(self, data, **kwargs):
        if data.get("completed_at") is not None:
            data["completed_at"] = to_naive_utc(data["completed_at"])
        return data


class GenerateLogsResultSchema(Schema):
    date = fields.Date(dump_only=True)
    generated = fields.Int(dump_only=True)


class MarkOverdueResultSchema(Schema):
    date = fields.Date(dump_only=True)
    missed = fields.Int(dump_only=True)

from marshmallow import Schema, fields

from .score_schema import MomentumSchema
from .task_log_schema import TaskLogSchema


class DashboardStatsSchema(Schema):
    total_goals = fields.Int(dump_only=True)
    completed_today = fields.Int(dump_only=True)
    weekly_completion = fields.Int(dump_only=True)
    current_streak = fields.Int(dump_only=True)


class GoalProgressSchema(Schema):
    id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    category = fields.Str(dump_only=True)
    deadline = fields.DateTime(dump_only=True)
    progress = fields.Int(dump_only=True)
    momentum = fields.Nested(MomentumSchema, dump_only=True)


class DashboardSchema(Schema):
    date = fields.Date(dump_only=True)
    stats = fields.Nested(DashboardStatsSchema, dump_only=True)
    goals = fields.List(fields.Nested(GoalProgressSchema), dump_only=True)
    todays_logs = fields.List(fields.Nested(TaskLogSchema), dump_only=True)

from marshmallow import Schema, fields

from lifestyle.scoring import MomentumStatus


class MomentumSchema(Schema):
    """Momentum score of one goal"""
    goal_id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    category = fields.Str(dump_only=True)
    score = fields.Int(dump_only=True)
    status = fields.Enum(MomentumStatus, by_value=True, dump_only=True)
    label = fields.Str(dump_only=True)
    progress_fill = fields.Float(dump_only=True)
    completion_rate = fields.Int(dump_only=True)
    completed_logs = fields.Int(dump_only=True)
    total_logs = fields.Int(dump_only=True)


class WeeklyMomentumSchema(Schema):
    """Momentum restricted to the current Monday-Sunday week"""
    goal_id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    week_start = fields.Date(dump_only=True)
    week_end = fields.Date(dump_only=True)
    completed = fields.Int(dump_only=True)
    total = fields.Int(dump_only=True)
    percentage = fields.Int(dump_only=True)
    score = fields.Int(dump_only=True)
    status = fields.Enum(MomentumStatus, by_value=True, dump_only=True)
    label = fields.Str(dump_only=True)

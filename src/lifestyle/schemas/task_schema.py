from marshmallow import Schema, fields, validate, validates_schema, ValidationError

from lifestyle.utils import get_frequency_text

FREQUENCIES = ["daily", "every_2_days", "weekly", "custom"]


class TaskSchema(Schema):
    """Schema for task create / response"""
    id = fields.Int(dump_only=True)
    goal_id = fields.Int(required=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    frequency = fields.Str(load_default="daily", validate=validate.OneOf(FREQUENCIES))
    custom_days = fields.Int(allow_none=True, load_default=None, validate=validate.Range(min=1))
    start_date = fields.Date(load_default=None, metadata={"example": "2026-01-01"})
    is_active = fields.Bool(dump_only=True)
    created_at = fields.DateTime(dump_only=True)
    frequency_text = fields.Method("dump_frequency_text", dump_only=True)
    goal_title = fields.Function(lambda task: task.goal.title if getattr(task, "goal", None) else None,
                                 dump_only=True)

    def dump_frequency_text(self, task):
        return get_frequency_text(task.frequency, task.custom_days)

    @validates_schema
    def validate_custom_days(self, data, **kwargs):
        if data.get("frequency") == "custom" and not data.get("custom_days"):
            raise ValidationError("custom_days is required for custom frequency", "custom_days")


class TaskUpdateSchema(Schema):
    title = fields.Str(validate=validate.Length(min=1, max=200))
    frequency = fields.Str(validate=validate.OneOf(FREQUENCIES))
    custom_days = fields.Int(allow_none=True, validate=validate.Range(min=1))
    start_date = fields.Date()
    is_active = fields.Bool()


class TaskQuerySchema(Schema):
    goal_id = fields.Int(load_default=None)

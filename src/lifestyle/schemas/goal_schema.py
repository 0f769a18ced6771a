from marshmallow import Schema, fields, validate, validates_schema, post_load, ValidationError

from lifestyle.utils import to_naive_utc


class GoalSchema(Schema):
    """Schema for goal create / response"""
    id = fields.Int(dump_only=True)
    user_id = fields.Str(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(allow_none=True, load_default=None)
    category = fields.Str(
        required=True, validate=validate.Length(min=1, max=100),
        metadata={"example": "Health"}
    )
    deadline = fields.DateTime(required=True, metadata={"example": "2026-12-31T00:00:00"})
    is_archived = fields.Bool(dump_only=True)
    created_at = fields.DateTime(dump_only=True)

    @post_load
    def normalise_deadline(self, data, **kwargs):
        # Stored as naive UTC
        data["deadline"] = to_naive_utc(data["deadline"])
        return data


class GoalUpdateSchema(Schema):
    """Schema for partial goal updates"""
    title = fields.Str(validate=validate.Length(min=1, max=200))
    description = fields.Str(allow_none=True)
    category = fields.Str(validate=validate.Length(min=1, max=100))
    deadline = fields.DateTime()

    @validates_schema
    def validate_not_empty(self, data, **kwargs):
        if not data:
            raise ValidationError("At least one field is required")

    @post_load
    def normalise_deadline(self, data, **kwargs):
        if data.get("deadline") is not None:
            data["deadline"] = to_naive_utc(data["deadline"])
        return data


class GoalQuerySchema(Schema):
    include_archived = fields.Bool(load_default=False)

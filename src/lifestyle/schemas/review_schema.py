from marshmallow import Schema, fields


class WeeklyReviewSchema(Schema):
    """Schema for review upsert / response"""
    id = fields.Int(dump_only=True)
    goal_id = fields.Int(dump_only=True)
    review_date = fields.Date(dump_only=True)
    stayed_on_track = fields.Bool(required=True)
    reflection_text = fields.Str(load_default="")
    improvement_notes = fields.Str(load_default="")
    auto_suggestions = fields.Str(dump_only=True)


class WeeklyStatsSchema(Schema):
    completed = fields.Int(dump_only=True)
    total = fields.Int(dump_only=True)
    percentage = fields.Int(dump_only=True)
    score = fields.Int(dump_only=True)
    label = fields.Str(dump_only=True)


class GoalReviewSchema(Schema):
    """One goal's card on the weekly review page"""
    goal_id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    category = fields.Str(dump_only=True)
    week_start = fields.Date(dump_only=True)
    week_end = fields.Date(dump_only=True)
    stats = fields.Nested(WeeklyStatsSchema, dump_only=True)
    suggestions = fields.Str(dump_only=True)
    review = fields.Nested(WeeklyReviewSchema, dump_only=True, allow_none=True)

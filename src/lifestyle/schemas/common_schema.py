from marshmallow import Schema, fields


class DateQuerySchema(Schema):
    """Optional calendar date override (defaults to today)"""
    date = fields.Date(
        load_default=None,
        metadata={"description": "Date (YYYY-MM-DD)", "example": "2026-01-04"}
    )


class ScoringQuerySchema(Schema):
    """Optional scoring instant override (defaults to now)"""
    now = fields.DateTime(
        load_default=None,
        metadata={"description": "Scoring instant (ISO 8601)", "example": "2026-01-04T12:00:00"}
    )
    include_archived = fields.Boolean(load_default=False)

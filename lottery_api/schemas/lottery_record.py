"""Marshmallow schemas for lottery records and the catalog."""

from __future__ import annotations

from marshmallow import Schema, fields, post_load

from lottery_api.models import HistoricalDraw, LotteryRecord, PrizeDivision


class PrizeDivisionSchema(Schema):
    tier_label = fields.String(required=True)
    match_condition = fields.String(required=True)
    winner_count = fields.Integer(required=True)
    prize_amount = fields.String(required=True)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return PrizeDivision(**data)


class HistoricalDrawSchema(Schema):
    date = fields.Date(required=True)
    numbers = fields.List(fields.Integer(), required=True)
    bonus_number = fields.Integer(allow_none=True, load_default=None)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return HistoricalDraw(**data)


class LotteryRecordSchema(Schema):
    """Serialize a LotteryRecord; loading rebuilds the dataclasses."""

    identifier = fields.String(required=True)
    name = fields.String(required=True)
    logo = fields.String(required=True)
    next_draw_at = fields.AwareDateTime(required=True)
    jackpot_amount = fields.String(required=True)
    last_draw_date = fields.Date(required=True)
    winning_numbers = fields.List(fields.Integer(), required=True)
    bonus_number = fields.Integer(allow_none=True, load_default=None)
    has_bonus_ball = fields.Boolean(required=True)
    prize_divisions = fields.List(fields.Nested(PrizeDivisionSchema), required=True)
    history = fields.List(fields.Nested(HistoricalDrawSchema), required=True)
    source = fields.String(required=True)
    defaulted_fields = fields.List(fields.String(), load_default=list)

    @post_load
    def _make(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return LotteryRecord(**data)


class CatalogEntrySchema(Schema):
    identifier = fields.String(required=True)
    name = fields.String(required=True)
    has_primary = fields.Boolean()
    has_fallback = fields.Boolean()
    draw_days = fields.List(fields.Integer())

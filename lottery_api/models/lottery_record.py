"""In-memory lottery result records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


MAX_HISTORY = 50


@dataclass(frozen=True)
class PrizeDivision:
    tier_label: str
    match_condition: str
    winner_count: int
    prize_amount: str


@dataclass(frozen=True)
class HistoricalDraw:
    date: date
    numbers: list[int]
    bonus_number: int | None = None


@dataclass(frozen=True)
class LotteryRecord:
    """One assembled result for a lottery identifier.

    ``source`` tells which upstream produced the document ("primary" or
    "fallback"); ``defaulted_fields`` lists the fields that hold default or
    synthetic values instead of extracted ones.
    """

    identifier: str
    name: str
    logo: str
    next_draw_at: datetime
    jackpot_amount: str
    last_draw_date: date
    winning_numbers: list[int]
    bonus_number: int | None
    has_bonus_ball: bool
    prize_divisions: list[PrizeDivision]
    history: list[HistoricalDraw]
    source: str = "synthetic"
    defaulted_fields: list[str] = field(default_factory=list)

    @property
    def is_synthetic(self) -> bool:
        return bool(self.defaulted_fields)

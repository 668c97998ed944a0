"""Synthetic draw data used when upstream extraction comes up short."""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone

from lottery_api.catalog import GameRules, default_divisions, default_jackpot, display_name, get_rules
from lottery_api.models import MAX_HISTORY, HistoricalDraw, LotteryRecord, PrizeDivision
from lottery_api.services.schedule_service import ScheduleService


# Every field of a fully synthesized record.
SYNTHETIC_FIELDS = (
    "jackpot_amount",
    "last_draw_date",
    "winning_numbers",
    "bonus_number",
    "prize_divisions",
    "history",
)


def draw_numbers(rules: GameRules, rng: random.Random | None = None) -> tuple[list[int], int | None]:
    """One plausible draw: sorted distinct main balls plus an optional bonus ball."""

    rng = rng or random.Random()
    numbers = sorted(rng.sample(range(1, rules.max_number + 1), rules.main_ball_count))
    bonus = rng.randint(1, rules.max_bonus) if rules.has_bonus_ball else None
    return numbers, bonus


def generate_history(
    identifier: str,
    count: int = MAX_HISTORY,
    today: date | None = None,
    rng: random.Random | None = None,
) -> list[HistoricalDraw]:
    """Generate ``count`` draws, newest first, spaced by the lottery's cadence."""

    if count < 0:
        raise ValueError("count must be >= 0")

    rules = get_rules(identifier)
    today = today or date.today()
    rng = rng or random.Random()

    history: list[HistoricalDraw] = []
    for i in range(count):
        numbers, bonus = draw_numbers(rules, rng)
        history.append(
            HistoricalDraw(
                date=today - timedelta(days=int(i * rules.cadence_days)),
                numbers=numbers,
                bonus_number=bonus,
            )
        )
    return history


def default_prize_divisions(identifier: str) -> list[PrizeDivision]:
    return [
        PrizeDivision(
            tier_label=d.tier_label,
            match_condition=d.match_condition,
            winner_count=d.winner_count,
            prize_amount=d.prize_amount,
        )
        for d in default_divisions(identifier)
    ]


def synthesize_record(
    identifier: str,
    now: datetime | None = None,
    rng: random.Random | None = None,
    schedule_service: ScheduleService | None = None,
) -> LotteryRecord:
    """Build a complete record out of defaults and synthetic draws."""

    now = now or datetime.now(timezone.utc)
    rng = rng or random.Random()
    schedule_service = schedule_service or ScheduleService()
    rules = get_rules(identifier)

    numbers, bonus = draw_numbers(rules, rng)
    name = display_name(identifier)

    return LotteryRecord(
        identifier=identifier,
        name=name,
        logo=name,
        next_draw_at=schedule_service.next_draw(identifier, now),
        jackpot_amount=default_jackpot(identifier),
        last_draw_date=now.date(),
        winning_numbers=numbers,
        bonus_number=bonus,
        has_bonus_ball=rules.has_bonus_ball,
        prize_divisions=default_prize_divisions(identifier),
        history=generate_history(identifier, MAX_HISTORY, today=now.date(), rng=rng),
        # A missing bonus ball is correct, not a default, for single-pool games.
        defaulted_fields=[f for f in SYNTHETIC_FIELDS if f != "bonus_number" or rules.has_bonus_ball],
    )

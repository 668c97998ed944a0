"""Static lottery catalog: source URLs, draw schedules and game rules.

Pure data plus a few lookups. Nothing here touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time


PRIMARY_URLS: dict[str, str] = {
    "sa_lotto": "https://www.nationallottery.co.za/lotto-results",
    "sa_powerball": "https://www.nationallottery.co.za/powerball-results",
    "us_megamillions": "https://www.lottery.net/mega-millions/results",
    "us_powerball": "https://www.lottery.net/powerball/results",
    "uk_lotto": "https://www.national-lottery.co.uk/results/lotto/draw-history",
}

FALLBACK_URLS: dict[str, str] = {
    "sa_lotto": "https://www.africanlottery.net/lotto-results",
    "sa_powerball": "https://www.africanlottery.net/powerball-results",
    "us_megamillions": "https://www.lotteryusa.com/mega-millions/",
    "us_powerball": "https://www.lotteryusa.com/powerball/",
    "euro_jackpot": "https://www.euro-jackpot.net/results",
    "uk_lotto": "https://www.lottery.co.uk/lotto/results",
}

# Lotteries drawn with five main balls; everything else draws six.
FIVE_BALL_LOTTERIES = frozenset({"us_megamillions", "us_powerball", "sa_powerball", "euro_jackpot"})

# Lotteries whose record carries a separate bonus ball (powerball / mega ball).
BONUS_BALL_LOTTERIES = frozenset({"sa_powerball", "us_powerball", "us_megamillions"})

# Weekday numbers follow datetime.weekday(): Monday == 0.
MON, TUE, WED, THU, FRI, SAT, SUN = range(7)


@dataclass(frozen=True)
class DrawSchedule:
    draw_days: frozenset[int]
    draw_time: time
    timezone: str


SCHEDULES: dict[str, DrawSchedule] = {
    "sa_lotto": DrawSchedule(frozenset({WED, SAT}), time(20, 57), "Africa/Johannesburg"),
    "sa_powerball": DrawSchedule(frozenset({TUE, FRI}), time(20, 58), "Africa/Johannesburg"),
    "us_powerball": DrawSchedule(frozenset({MON, WED, SAT}), time(22, 59), "America/New_York"),
    "us_megamillions": DrawSchedule(frozenset({TUE, FRI}), time(23, 0), "America/New_York"),
    "euro_jackpot": DrawSchedule(frozenset({TUE, FRI}), time(20, 0), "Europe/Berlin"),
    "uk_lotto": DrawSchedule(frozenset({WED, SAT}), time(19, 45), "Europe/London"),
}


@dataclass(frozen=True)
class GameRules:
    main_ball_count: int = 6
    max_number: int = 50
    max_bonus: int = 20
    has_bonus_ball: bool = False
    # Days between consecutive draws; 3.5 means twice weekly.
    cadence_days: float = 7.0
    region: str = "default"


_TUNED_RULES: dict[str, dict] = {
    "sa_lotto": {"max_number": 58, "cadence_days": 3.5},
    "sa_powerball": {"max_number": 50, "max_bonus": 20, "cadence_days": 3.5},
    "us_powerball": {"max_number": 69, "max_bonus": 26, "cadence_days": 7 / 3},
    "us_megamillions": {"max_number": 70, "max_bonus": 25, "cadence_days": 3.5},
    "euro_jackpot": {"max_number": 50, "max_bonus": 12, "cadence_days": 3.5},
    "uk_lotto": {"max_number": 59, "cadence_days": 3.5},
}


DEFAULT_JACKPOTS: dict[str, str] = {
    "sa": "R20,000,000",
    "us": "$50,000,000",
    "euro": "€10,000,000",
    "uk": "£2,000,000",
    "default": "$50,000,000",
}


@dataclass(frozen=True)
class DivisionTemplate:
    tier_label: str
    match_condition: str
    winner_count: int
    prize_amount: str


DEFAULT_DIVISIONS: dict[str, list[DivisionTemplate]] = {
    "sa": [
        DivisionTemplate("Division 1", "All numbers", 0, "No winners"),
        DivisionTemplate("Division 2", "5 numbers + bonus", 1, "R150,000"),
        DivisionTemplate("Division 3", "5 numbers", 42, "R5,000"),
        DivisionTemplate("Division 4", "4 numbers", 1850, "R150"),
    ],
    "us": [
        DivisionTemplate("Jackpot", "5 numbers + bonus", 0, "No winners"),
        DivisionTemplate("Match 5", "5 numbers", 3, "$1,000,000"),
        DivisionTemplate("Match 4 + bonus", "4 numbers + bonus", 25, "$50,000"),
        DivisionTemplate("Match 4", "4 numbers", 420, "$100"),
    ],
    "euro": [
        DivisionTemplate("Tier 1", "5 numbers + 2 euro numbers", 0, "No winners"),
        DivisionTemplate("Tier 2", "5 numbers + 1 euro number", 2, "€500,000"),
        DivisionTemplate("Tier 3", "5 numbers", 6, "€100,000"),
    ],
    "uk": [
        DivisionTemplate("Match 6", "All numbers", 0, "No winners"),
        DivisionTemplate("Match 5 + bonus", "5 numbers + bonus", 2, "£1,000,000"),
        DivisionTemplate("Match 5", "5 numbers", 80, "£1,750"),
        DivisionTemplate("Match 4", "4 numbers", 4200, "£140"),
    ],
    "default": [
        DivisionTemplate("Division 1", "All numbers", 0, "No winners"),
        DivisionTemplate("Division 2", "5 numbers", 3, "$10,000"),
        DivisionTemplate("Division 3", "4 numbers", 150, "$100"),
    ],
}


def region_of(identifier: str) -> str:
    prefix = identifier.split("_", 1)[0].lower()
    return prefix if prefix in DEFAULT_JACKPOTS else "default"


def get_rules(identifier: str) -> GameRules:
    """Resolve number-range and format rules for an identifier.

    Unknown identifiers still get a usable rule set (6 balls up to 50, bonus up to 20).
    """

    tuned = _TUNED_RULES.get(identifier, {})
    return GameRules(
        main_ball_count=5 if identifier in FIVE_BALL_LOTTERIES else 6,
        has_bonus_ball=identifier in BONUS_BALL_LOTTERIES,
        region=region_of(identifier),
        **tuned,
    )


def default_jackpot(identifier: str) -> str:
    return DEFAULT_JACKPOTS[region_of(identifier)]


def default_divisions(identifier: str) -> list[DivisionTemplate]:
    return list(DEFAULT_DIVISIONS[region_of(identifier)])


def display_name(identifier: str) -> str:
    return identifier.replace("_", " ").upper()


@dataclass(frozen=True)
class CatalogEntry:
    identifier: str
    name: str
    has_primary: bool
    has_fallback: bool
    draw_days: list[int] = field(default_factory=list)


def list_catalog(
    primary_urls: dict[str, str] | None = None,
    fallback_urls: dict[str, str] | None = None,
) -> list[CatalogEntry]:
    """Every identifier with at least one mapped source, primary order first."""

    primary = PRIMARY_URLS if primary_urls is None else primary_urls
    fallback = FALLBACK_URLS if fallback_urls is None else fallback_urls

    identifiers = list(primary)
    identifiers.extend(k for k in fallback if k not in primary)

    entries: list[CatalogEntry] = []
    for identifier in identifiers:
        schedule = SCHEDULES.get(identifier)
        entries.append(
            CatalogEntry(
                identifier=identifier,
                name=display_name(identifier),
                has_primary=identifier in primary,
                has_fallback=identifier in fallback,
                draw_days=sorted(schedule.draw_days) if schedule else [],
            )
        )
    return entries

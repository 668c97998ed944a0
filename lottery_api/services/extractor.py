"""Heuristic field extraction from upstream result pages.

Upstream sites publish results as plain HTML with no stable structure, so
each field is located by its own small pattern-matching function. A function
that finds nothing returns ``Extracted.missing()`` and the record keeps its
seeded default; only a genuine fault surfaces, as ``ExtractionError``.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import Generic, Iterator, TypeVar

from bs4 import BeautifulSoup
from dateutil import parser as dateparser

from lottery_api.catalog import GameRules, get_rules
from lottery_api.errors import ExtractionError
from lottery_api.models import MAX_HISTORY, HistoricalDraw, LotteryRecord, PrizeDivision
from lottery_api.services.schedule_service import ScheduleService
from lottery_api.services.synthetic_service import SYNTHETIC_FIELDS, synthesize_record

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Characters of visible text after a section phrase that may hold the balls.
SECTION_WINDOW = 500
JACKPOT_WINDOW = 200
DATE_WINDOW = 80

# Ball numbers are one or two digits; longer runs are years, amounts or ids.
BALL_TOKEN = re.compile(r"(?<!\d)\d{1,2}(?!\d)")

JACKPOT_PATTERN = re.compile(
    r"(?i:jackpot).{0,%d}?"
    r"((?:A\$|(?<![A-Za-z])R|[$€£])\s?\d[\d,.]*(?:\s*(?i:million|billion|bn|m)\b)?)" % JACKPOT_WINDOW,
    re.S,
)

_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"
DATE_TOKEN = re.compile(
    r"\d{4}[/.\-]\d{1,2}[/.\-]\d{1,2}"
    r"|\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}"
    rf"|\d{{1,2}}(?:st|nd|rd|th)?\s+{_MONTH},?\s+\d{{4}}"
    rf"|{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{4}}",
    re.I,
)
_ORDINAL = re.compile(r"(\d)(?:st|nd|rd|th)\b", re.I)


@dataclass(frozen=True)
class Extracted(Generic[T]):
    value: T | None
    found: bool

    @classmethod
    def missing(cls) -> "Extracted[T]":
        return cls(None, False)


@dataclass(frozen=True)
class SourceProfile:
    """Per-source tuning of the shared extraction pipeline."""

    name: str
    section_pattern: re.Pattern[str]
    date_pattern: re.Pattern[str]
    parse_divisions: bool


PRIMARY_PROFILE = SourceProfile(
    name="primary",
    section_pattern=re.compile(r"winning numbers|latest results|draw results", re.I),
    date_pattern=re.compile(r"draw date|drawn on", re.I),
    parse_divisions=True,
)

# The fallback sites never expose a reliable prize table.
FALLBACK_PROFILE = SourceProfile(
    name="fallback",
    section_pattern=re.compile(r"latest (?:draw|results)|winning numbers|numbers drawn", re.I),
    date_pattern=re.compile(r"draw date|drawn on|draw held on|results for", re.I),
    parse_divisions=False,
)


def parse_date(text: str, region: str = "default") -> date | None:
    """Parse the first date-like token in ``text``; None when absent or invalid."""

    match = DATE_TOKEN.search(text or "")
    if not match:
        return None
    token = _ORDINAL.sub(r"\1", match.group(0))
    # dayfirst would swap month and day of an ISO date
    iso = token[:4].isdigit()
    try:
        return dateparser.parse(token, dayfirst=not iso and region != "us", yearfirst=iso).date()
    except (ValueError, OverflowError):
        return None


def _ball_numbers(text: str) -> list[int]:
    return [n for n in (int(t) for t in BALL_TOKEN.findall(text)) if n > 0]


def _split_balls(values: list[int], rules: GameRules) -> tuple[list[int], int | None] | None:
    n = rules.main_ball_count
    if len(values) < n:
        return None
    bonus = values[n] if rules.has_bonus_ball and len(values) > n else None
    return values[:n], bonus


def _is_header(cell: str, keywords: tuple[str, ...]) -> bool:
    low = cell.lower()
    return not any(ch.isdigit() for ch in low) and any(k in low for k in keywords)


def _parse_count(cell: str) -> int:
    digits = re.sub(r"[^\d]", "", cell)
    return int(digits) if digits else 0


def _table_rows(soup: BeautifulSoup, min_cells: int) -> Iterator[list[str]]:
    for row in soup.find_all("tr"):
        cells = [c.get_text(" ", strip=True) for c in row.find_all(["td", "th"], recursive=False)]
        if len(cells) >= min_cells:
            yield cells


def visible_text(soup: BeautifulSoup) -> str:
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text(" ", strip=True)


def extract_winning_numbers(
    text: str,
    rules: GameRules,
    section_pattern: re.Pattern[str],
) -> Extracted[tuple[list[int], int | None]]:
    """Main balls (and bonus) from the text following a results phrase."""

    match = section_pattern.search(text)
    if not match:
        return Extracted.missing()

    values = _ball_numbers(text[match.end() : match.end() + SECTION_WINDOW])
    if len(values) < 5:
        return Extracted.missing()

    split = _split_balls(values, rules)
    if split is None:
        return Extracted.missing()
    return Extracted(split, True)


def extract_jackpot(text: str) -> Extracted[str]:
    match = JACKPOT_PATTERN.search(text)
    if not match:
        return Extracted.missing()
    amount = match.group(1).strip().rstrip(".,")
    return Extracted(amount, True)


def extract_draw_date(text: str, date_pattern: re.Pattern[str], region: str) -> Extracted[date]:
    for anchor in date_pattern.finditer(text):
        parsed = parse_date(text[anchor.end() : anchor.end() + DATE_WINDOW], region)
        if parsed is not None:
            return Extracted(parsed, True)
    return Extracted.missing()


def extract_divisions(soup: BeautifulSoup, region: str = "default") -> Extracted[list[PrizeDivision]]:
    """Prize tiers from table rows with at least four cells.

    Header rows and rows that start with a date (draw history tables) are skipped.
    """

    divisions: list[PrizeDivision] = []
    for cells in _table_rows(soup, min_cells=4):
        label = cells[0]
        if not label or _is_header(label, ("division", "tier", "prize", "match", "date", "draw")):
            continue
        if parse_date(label, region) is not None:
            continue
        divisions.append(
            PrizeDivision(
                tier_label=label,
                match_condition=cells[1],
                winner_count=_parse_count(cells[2]),
                prize_amount=cells[3],
            )
        )
    if not divisions:
        return Extracted.missing()
    return Extracted(divisions, True)


def extract_history(soup: BeautifulSoup, rules: GameRules) -> Extracted[list[HistoricalDraw]]:
    """Past draws from table rows whose first cell is a date, newest first."""

    draws: list[HistoricalDraw] = []
    for cells in _table_rows(soup, min_cells=2):
        if _is_header(cells[0], ("date", "draw")):
            continue
        draw_date = parse_date(cells[0], rules.region)
        if draw_date is None:
            continue
        split = _split_balls(_ball_numbers(" ".join(cells[1:])), rules)
        if split is None:
            continue
        numbers, bonus = split
        draws.append(HistoricalDraw(date=draw_date, numbers=numbers, bonus_number=bonus))

    if not draws:
        return Extracted.missing()

    draws.sort(key=lambda d: d.date, reverse=True)
    return Extracted(draws[:MAX_HISTORY], True)


class LotteryExtractor:
    """Turn a raw result page into a complete ``LotteryRecord``."""

    def __init__(
        self,
        schedule_service: ScheduleService | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._schedule = schedule_service or ScheduleService()
        self._rng = rng or random.Random()

    def extract(
        self,
        html: str,
        identifier: str,
        profile: SourceProfile = PRIMARY_PROFILE,
        now: datetime | None = None,
    ) -> LotteryRecord:
        try:
            return self._extract(html, identifier, profile, now or datetime.now(timezone.utc))
        except Exception as exc:
            raise ExtractionError(f"Failed to extract {identifier} from {profile.name} document") from exc

    def _extract(self, html: str, identifier: str, profile: SourceProfile, now: datetime) -> LotteryRecord:
        rules = get_rules(identifier)
        seed = synthesize_record(identifier, now, rng=self._rng, schedule_service=self._schedule)
        defaulted = set(seed.defaulted_fields)
        updates: dict = {}

        soup = BeautifulSoup(html or "", "html.parser")
        text = visible_text(soup)

        numbers = extract_winning_numbers(text, rules, profile.section_pattern)
        if numbers.found:
            main, bonus = numbers.value
            updates["winning_numbers"] = main
            defaulted.discard("winning_numbers")
            if bonus is not None:
                updates["bonus_number"] = bonus
                defaulted.discard("bonus_number")

        jackpot = extract_jackpot(text)
        if jackpot.found:
            updates["jackpot_amount"] = jackpot.value
            defaulted.discard("jackpot_amount")

        draw_date = extract_draw_date(text, profile.date_pattern, rules.region)
        if draw_date.found:
            updates["last_draw_date"] = draw_date.value
            defaulted.discard("last_draw_date")

        if profile.parse_divisions:
            divisions = extract_divisions(soup, rules.region)
            if divisions.found:
                updates["prize_divisions"] = divisions.value
                defaulted.discard("prize_divisions")

        history = extract_history(soup, rules)
        if history.found:
            updates["history"] = history.value
            defaulted.discard("history")

        record = replace(
            seed,
            source=profile.name,
            defaulted_fields=[f for f in SYNTHETIC_FIELDS if f in defaulted],
            **updates,
        )
        logger.debug("Extracted %s from %s source (defaulted: %s)", identifier, profile.name, record.defaulted_fields)
        return record

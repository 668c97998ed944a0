"""Next-draw calculation from the static draw schedule."""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from lottery_api.catalog import SCHEDULES, DrawSchedule


PLACEHOLDER_DAYS = 3
PLACEHOLDER_TIME = time(20, 0)


class ScheduleService:
    """Compute the next draw timestamp for an identifier."""

    def __init__(self, schedules: dict[str, DrawSchedule] | None = None) -> None:
        self._schedules = SCHEDULES if schedules is None else schedules

    def next_draw(self, identifier: str, now: datetime | None = None) -> datetime:
        """Return the next draw as an aware datetime.

        Unscheduled identifiers get ``now + 3 days`` at 20:00 as a placeholder.
        A naive ``now`` is read in the schedule's own time zone (UTC when the
        identifier has no schedule).
        """

        schedule = self._schedules.get(identifier)
        if schedule is None or not schedule.draw_days:
            local_now = _localize(now, timezone.utc)
            day = local_now.date() + timedelta(days=PLACEHOLDER_DAYS)
            return datetime.combine(day, PLACEHOLDER_TIME, tzinfo=local_now.tzinfo)

        tz = ZoneInfo(schedule.timezone)
        local_now = _localize(now, tz)
        today = local_now.date()

        candidate = datetime.combine(today, schedule.draw_time, tzinfo=tz)
        if today.weekday() in schedule.draw_days and local_now <= candidate:
            return candidate

        offset = None
        for d in range(1, 8):
            if (today.weekday() + d) % 7 in schedule.draw_days:
                offset = d
                break

        if offset is None:
            # Unreachable with a non-empty schedule; land on next week's first draw day.
            first_day = min(schedule.draw_days)
            offset = 7 - today.weekday() + first_day

        return datetime.combine(today + timedelta(days=offset), schedule.draw_time, tzinfo=tz)


def _localize(now: datetime | None, tz) -> datetime:  # type: ignore[no-untyped-def]
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now.astimezone(tz)

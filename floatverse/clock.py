"""Alarm clock entries: persistence and next-alarm computation."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import IntEnum
from typing import Any, Callable, Mapping

log = logging.getLogger(__name__)


class AlarmType(IntEnum):
    """How an alarm draws attention when it fires."""

    NONE = 0
    STAR = 1  # shake inside the panel
    MOON = 2  # show the panel and shake
    SUNS = 3  # full-screen animation


class TimeUnit(IntEnum):
    """Units for fixed times and repeat intervals."""

    NONE = 0
    SECOND = 1
    MINUTE = 2
    HOUR = 3
    DAY = 4
    MONTH = 5
    YEAR = 6
    WEEK = 7


_FIXED_FIELDS = ("second", "minute", "hour", "day", "month", "year")


def _add_months(moment: datetime, months: int) -> datetime:
    years, month_index = divmod(moment.month - 1 + months, 12)
    year = moment.year + years
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


_STEPS: dict[TimeUnit, Callable[[datetime], datetime]] = {
    TimeUnit.DAY: lambda moment: moment + timedelta(days=1),
    TimeUnit.WEEK: lambda moment: moment + timedelta(days=7),
    TimeUnit.MONTH: lambda moment: _add_months(moment, 1),
    TimeUnit.YEAR: lambda moment: _add_months(moment, 12),
}


@dataclass
class ClockBean:
    """One alarm: a fixed date or weekday set, a time of day and a repeat rule.

    ``weeks`` is a bit mask where bit ``n`` (1 = Monday … 7 = Sunday) selects
    that weekday.
    """

    second: int = 0
    minute: int = 0
    hour: int = 0
    day: int = 0
    month: int = 0
    year: int = 0
    weeks: int = 0
    interval_unit: TimeUnit = TimeUnit.NONE
    interval_count: int = 0
    enabled: bool = False
    note: str = ""
    alarm: AlarmType = AlarmType.NONE
    single_shot: bool = True
    overdue: bool = False
    alarm_time: datetime | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ClockBean":
        """Build an entry from its stored JSON object."""
        fixed = {name: int(data[name]) for name in _FIXED_FIELDS if name in data}
        return cls(
            **fixed,
            weeks=int(data.get("weeks", 0)),
            note=str(data.get("note", "")),
            interval_unit=TimeUnit(int(data.get("intervalUnit", 0))),
            interval_count=int(data.get("intervalCount", 0)),
            alarm=AlarmType(int(data.get("alarm", 0))),
            enabled=bool(data.get("enabled", False)),
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this entry, omitting unset values."""
        result: dict[str, Any] = {}
        for name in _FIXED_FIELDS:
            value = getattr(self, name)
            if value:
                result[name] = value
        if self.weeks:
            result["weeks"] = self.weeks
        if self.note:
            result["note"] = self.note
        if self.interval_count:
            result["intervalCount"] = self.interval_count
            result["intervalUnit"] = int(self.interval_unit)
        result["alarm"] = int(self.alarm)
        result["enabled"] = self.enabled
        return result

    def next_alarm(self, now: datetime | None = None) -> datetime | None:
        """Compute the next time this alarm fires, or None if it cannot.

        A single-shot alarm whose time has passed is marked overdue.
        """
        if now is None:
            now = datetime.now()

        clock = time(self.hour, self.minute)
        next_day = clock >= now.time()

        if self.day:
            alarm_date = date(self.year or now.year, self.month or now.month, self.day)
        elif self.weeks:
            alarm_date = now.date()
            weekday = alarm_date.isoweekday()
            if next_day:
                alarm_date += timedelta(days=1)
                weekday += 1
            for _ in range(7):
                if weekday > 7:
                    weekday = 1
                if self.weeks & (1 << weekday):
                    break
                weekday += 1
                alarm_date += timedelta(days=1)
        else:
            return None

        alarm = datetime.combine(alarm_date, clock)
        self.alarm_time = alarm
        if (alarm - now.replace(microsecond=0)).total_seconds() > 0:
            return alarm

        if self.single_shot:
            self.overdue = True
            log.info("alarm is overdue")
            return None

        step = _STEPS.get(self.interval_unit)
        if step is None:
            log.warning("no repeat interval set")
            return None
        while alarm <= now:
            alarm = step(alarm)
        self.alarm_time = alarm
        return alarm

    def on_timeout(self) -> None:
        """Update the entry after its alarm has fired."""
        if self.single_shot:
            self.overdue = True
            return
        if self.alarm_time is None:
            raise RuntimeError("no alarm has been scheduled")
        self.year = self.alarm_time.year
        self.month = self.alarm_time.month
        self.day = self.alarm_time.day
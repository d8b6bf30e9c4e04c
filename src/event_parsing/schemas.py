"""Schema definitions for parsed events.

Provides the immutable Event record built from a single markdown event
line, plus its JSON-friendly serialization.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

DATE_FORMAT = "%d %b %Y"
TIME_FORMAT = "%I:%M %p"


@dataclass(frozen=True)
class Event:
    """
    A calendar event parsed from a markdown task list line.

    Attributes:
        start_date: First day of the event.
        end_date: Last day of the event (equal to start_date for one-day events).
        start_time: Start time-of-day, None for all-day events.
        end_time: End time-of-day, only set together with start_time.
        place: Free-text location, may be empty.
        title: Event title, never empty.
    """

    start_date: date
    end_date: date
    start_time: time | None = None
    end_time: time | None = None
    place: str = ""
    title: str = ""

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Event title must not be empty")
        if self.end_time is not None and self.start_time is None:
            raise ValueError("Event end_time requires a start_time")

    @property
    def is_all_day(self) -> bool:
        return self.start_time is None and self.end_time is None

    @property
    def is_multi_day(self) -> bool:
        return self.end_date != self.start_date

    def to_dict(
        self,
        date_format: str = DATE_FORMAT,
        time_format: str = TIME_FORMAT,
    ) -> dict[str, Any]:
        """
        Convert event to dictionary for JSON serialization.

        Dates render as "03 Nov 2023" and times as "06:00 pm". end_date is
        always present; absent times are omitted.
        """
        data: dict[str, Any] = {
            "start_date": self.start_date.strftime(date_format),
            "end_date": self.end_date.strftime(date_format),
        }
        if self.start_time is not None:
            data["start_time"] = self.start_time.strftime(time_format).lower()
        if self.end_time is not None:
            data["end_time"] = self.end_time.strftime(time_format).lower()
        data["place"] = self.place
        data["title"] = self.title
        return data

    def to_json(self, **kwargs: Any) -> str:
        """Serialize event to a JSON string (kwargs go to json.dumps)."""
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        date_format: str = DATE_FORMAT,
        time_format: str = TIME_FORMAT,
    ) -> "Event":
        """
        Create Event from a dictionary produced by to_dict().

        Args:
            data: Dictionary with rendered event fields.

        Returns:
            Event instance.
        """
        start_date = datetime.strptime(data["start_date"], date_format).date()
        end_date = data.get("end_date")

        def _time(key: str) -> time | None:
            value = data.get(key)
            if value is None:
                return None
            return datetime.strptime(value, time_format).time()

        return cls(
            start_date=start_date,
            end_date=(
                datetime.strptime(end_date, date_format).date()
                if end_date
                else start_date
            ),
            start_time=_time("start_time"),
            end_time=_time("end_time"),
            place=data.get("place", ""),
            title=data["title"],
        )

"""Event builder: turns a single markdown line into an Event.

Runs the line classifier, the field extractor and the date/time
normalizers in order. Any failure aborts the line; no partial Event is
ever returned.
"""

from __future__ import annotations

import logging

from src.event_parsing.config import EventParsingConfig, get_parsing_config
from src.event_parsing.dates import DateNormalizer
from src.event_parsing.errors import EmptyTitle, InvalidDateOrder, NotAnEventLine
from src.event_parsing.lines import extract_fields, is_event_line
from src.event_parsing.schemas import Event
from src.event_parsing.times import TimeNormalizer

logger = logging.getLogger(__name__)


class EventBuilder:
    """
    Builds Event records from markdown event lines.

    Usage:
        builder = EventBuilder(current_year=2024)
        event = builder.build("- [ ] (19 Nov) (7-10PM) (Houston) Trapt")

    Args:
        config: Parsing configuration.
        date_normalizer: Date normalizer (defaults to one using current_year).
        time_normalizer: Time normalizer.
        current_year: Year used for dates written without one.
    """

    def __init__(
        self,
        config: EventParsingConfig | None = None,
        date_normalizer: DateNormalizer | None = None,
        time_normalizer: TimeNormalizer | None = None,
        current_year: int | None = None,
    ):
        self._config = config or EventParsingConfig()
        self._dates = date_normalizer or DateNormalizer(
            current_year=current_year, config=self._config
        )
        self._times = time_normalizer or TimeNormalizer(config=self._config)

    @property
    def config(self) -> EventParsingConfig:
        return self._config

    def build(self, line: str) -> Event:
        """
        Build an Event from one line.

        Args:
            line: A single markdown line.

        Returns:
            The parsed Event.

        Raises:
            EventParseError: Subclass describing the first failure.
        """
        if not is_event_line(line):
            raise NotAnEventLine(f"Line is not an event: {line!r}")

        fields = extract_fields(line)

        start_date, end_date = self._dates.parse(fields.date_text)
        if end_date is None:
            end_date = start_date
        elif self._config.validate_date_order and end_date < start_date:
            raise InvalidDateOrder(
                f"End date {end_date} precedes start date {start_date}"
            )

        start_time, end_time = self._times.parse(fields.time_text)
        if start_time is None and end_time is not None:
            logger.warning(
                f"Dropping end time {end_time} without a start time: {line!r}"
            )
            end_time = None

        title = fields.title_text.strip()
        if not title:
            raise EmptyTitle(f"Event line has an empty title: {line!r}")

        return Event(
            start_date=start_date,
            end_date=end_date,
            start_time=start_time,
            end_time=end_time,
            place=fields.place_text,
            title=title,
        )


def build_event(line: str, current_year: int | None = None) -> Event:
    """Build an Event from one line with the cached default configuration."""
    return EventBuilder(config=get_parsing_config(), current_year=current_year).build(line)

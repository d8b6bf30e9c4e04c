"""Time field normalizer for event lines.

Converts the hand-written time text of an event line ("6 PM", "6:30 PM",
"6-7:30 PM", "5:30PM-10PM") into an optional start and end time-of-day.
Missing minutes become ":00" and a range start without a meridiem borrows
the end's, so "6-7:30 PM" means 6:00 PM to 7:30 PM.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from datetime import datetime, time

from src.event_parsing.config import EventParsingConfig, get_parsing_config
from src.event_parsing.errors import TimeParseFailure, UnrecognizedTimeShape

logger = logging.getLogger(__name__)

_CLOCK_FORMAT = "%I:%M %p"

# Reusable pattern fragments
_HOUR = r"[0-9]{1,2}"
_MINUTE = r"[0-9]{2}"
_MERIDIEM = r"[AP]M"

_QUALIFIED_TIME_RE = re.compile(
    rf"(?P<hour>{_HOUR}):(?P<minute>{_MINUTE}) ?(?P<meridiem>{_MERIDIEM})",
    re.IGNORECASE,
)
_BARE_HOUR_RE = re.compile(
    rf"(?P<hour>{_HOUR}) ?(?P<meridiem>{_MERIDIEM})",
    re.IGNORECASE,
)
_TIME_RANGE_RE = re.compile(
    rf"(?P<start_hour>{_HOUR})(?::(?P<start_minute>{_MINUTE}))? ?(?P<start_meridiem>{_MERIDIEM})?"
    rf" ?- ?"
    rf"(?P<end_hour>{_HOUR})(?::(?P<end_minute>{_MINUTE}))? ?(?P<end_meridiem>{_MERIDIEM})",
    re.IGNORECASE,
)


class TimeShape(str, enum.Enum):
    """Textual shapes a time field may take."""

    QUALIFIED_TIME = "qualified_time"
    BARE_HOUR = "bare_hour"
    TIME_RANGE = "time_range"


@dataclass(frozen=True)
class ClockParts:
    """Hour, minute and meridiem of one side of a time field, as written."""

    hour: str
    minute: str | None
    meridiem: str

    def canonical(self) -> str:
        """Render as "H:MM AM|PM", defaulting missing minutes to 00."""
        return f"{self.hour}:{self.minute or '00'} {self.meridiem.upper()}"


@dataclass(frozen=True)
class TimeMatch:
    """Components captured from a time field."""

    shape: TimeShape
    start: ClockParts
    end: ClockParts | None = None


def parse_canonical_time(canonical: str) -> time:
    """
    Parse a canonical "H:MM AM|PM" string.

    Raises:
        TimeParseFailure: If the string is not a valid 12-hour clock time.
    """
    try:
        return datetime.strptime(canonical, _CLOCK_FORMAT).time()
    except ValueError as e:
        raise TimeParseFailure(
            f"Could not parse time {canonical!r}: {e}",
            reason=str(e),
            canonical=canonical,
        ) from e


class TimeNormalizer:
    """
    Stateless normalizer for event time fields.

    Args:
        config: Parsing configuration (strict_time_ranges policy).
    """

    def __init__(self, config: EventParsingConfig | None = None):
        self._config = config or EventParsingConfig()

    def match(self, time_text: str) -> TimeMatch | None:
        """
        Identify the shape of a time field.

        Returns:
            TimeMatch for the first shape that matches, or None.
        """
        text = time_text.strip()

        # Try each shape in priority order
        for fn in (
            self._try_qualified_time,
            self._try_bare_hour,
            self._try_time_range,
        ):
            result = fn(text)
            if result is not None:
                return result
        return None

    def parse(self, time_text: str) -> tuple[time | None, time | None]:
        """
        Parse a time field into an optional start and end time.

        Empty text means an all-day event and yields (None, None).

        Args:
            time_text: Raw time text from an event line.

        Returns:
            Tuple of (start_time, end_time).

        Raises:
            UnrecognizedTimeShape: If non-empty text matches no time shape.
            TimeParseFailure: If a single time is not a valid clock time, or a
                range side is invalid and strict_time_ranges is enabled.
        """
        if not time_text.strip():
            return None, None

        m = self.match(time_text)
        if m is None:
            raise UnrecognizedTimeShape(f"Unrecognized time: {time_text!r}")

        logger.debug(f"Time {time_text!r} matched shape {m.shape.value}")

        if m.end is None:
            return parse_canonical_time(m.start.canonical()), None

        return self._parse_range_side(m.start), self._parse_range_side(m.end)

    def _parse_range_side(self, parts: ClockParts) -> time | None:
        """Parse one side of a range, dropping it to None unless strict."""
        try:
            return parse_canonical_time(parts.canonical())
        except TimeParseFailure as e:
            if self._config.strict_time_ranges:
                raise
            logger.warning(f"Dropping invalid time range side: {e}")
            return None

    @staticmethod
    def _try_qualified_time(text: str) -> TimeMatch | None:
        """Match 'H:MM AM|PM': '6:00 PM', '11:45am'."""
        m = _QUALIFIED_TIME_RE.fullmatch(text)
        if not m:
            return None
        return TimeMatch(
            shape=TimeShape.QUALIFIED_TIME,
            start=ClockParts(m.group("hour"), m.group("minute"), m.group("meridiem")),
        )

    @staticmethod
    def _try_bare_hour(text: str) -> TimeMatch | None:
        """Match 'H AM|PM': '6 PM', '10AM'."""
        m = _BARE_HOUR_RE.fullmatch(text)
        if not m:
            return None
        return TimeMatch(
            shape=TimeShape.BARE_HOUR,
            start=ClockParts(m.group("hour"), None, m.group("meridiem")),
        )

    @staticmethod
    def _try_time_range(text: str) -> TimeMatch | None:
        """Match 'H1[:MM1][AM|PM]-H2[:MM2] AM|PM': '6-7 AM', '5:30PM-10PM'."""
        m = _TIME_RANGE_RE.fullmatch(text)
        if not m:
            return None
        end_meridiem = m.group("end_meridiem")
        # A start without a meridiem shares the end's
        start_meridiem = m.group("start_meridiem") or end_meridiem
        return TimeMatch(
            shape=TimeShape.TIME_RANGE,
            start=ClockParts(m.group("start_hour"), m.group("start_minute"), start_meridiem),
            end=ClockParts(m.group("end_hour"), m.group("end_minute"), end_meridiem),
        )


def parse_time(time_text: str) -> tuple[time | None, time | None]:
    """Parse a time field with the cached default configuration."""
    return TimeNormalizer(config=get_parsing_config()).parse(time_text)

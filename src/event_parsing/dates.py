"""Date field normalizer for event lines.

Converts the hand-written date text of an event line ("25 Feb",
"24-25 Feb 2023", "24Jan-25Feb2023") into a start date and an optional
end date. Each shape is reassembled into a canonical "D Mon YYYY" string
before being handed to the calendar parser.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from src.event_parsing.config import EventParsingConfig, get_parsing_config
from src.event_parsing.errors import DateParseFailure, UnrecognizedDateShape

logger = logging.getLogger(__name__)

# Reusable pattern fragments
_DAY = r"[0-9]{1,2}"
_MONTH = r"[a-zA-Z]{3,9}"
_YEAR = r"(?P<year>[0-9]{4}|[0-9]{2}|)"

_SINGLE_DATE_RE = re.compile(rf"(?P<day>{_DAY}) ?(?P<month>{_MONTH}) ?{_YEAR}")
_SAME_MONTH_RANGE_RE = re.compile(
    rf"(?P<start_day>{_DAY}) ?- ?(?P<end_day>{_DAY}) ?(?P<month>{_MONTH}) ?{_YEAR}"
)
_CROSS_MONTH_RANGE_RE = re.compile(
    rf"(?P<start_day>{_DAY}) ?(?P<start_month>{_MONTH}) ?- ?"
    rf"(?P<end_day>{_DAY}) ?(?P<end_month>{_MONTH}) ?{_YEAR}"
)

# Abbreviated month names first, then full names ("April", "November")
_DATE_PARSE_FORMATS = ("%d %b %Y", "%d %B %Y")


class DateShape(str, enum.Enum):
    """Textual shapes a date field may take."""

    SINGLE_DATE = "single_date"
    SAME_MONTH_RANGE = "same_month_range"
    CROSS_MONTH_RANGE = "cross_month_range"


@dataclass(frozen=True)
class DateMatch:
    """
    Components captured from a date field.

    Attributes:
        shape: Which shape matched.
        start_day: Day number of the start date, as written.
        start_month: Month name of the start date, as written.
        end_day: Day number of the end date (ranges only).
        end_month: Month name of the end date (ranges only).
        year: Year as written, or None when omitted.
    """

    shape: DateShape
    start_day: str
    start_month: str
    end_day: str | None = None
    end_month: str | None = None
    year: str | None = None

    @property
    def is_range(self) -> bool:
        return self.shape is not DateShape.SINGLE_DATE


def parse_canonical_date(canonical: str) -> date:
    """
    Parse a canonical "D Mon YYYY" string.

    Raises:
        DateParseFailure: If the string is not a valid calendar date.
    """
    reason = ""
    for fmt in _DATE_PARSE_FORMATS:
        try:
            return datetime.strptime(canonical, fmt).date()
        except ValueError as e:
            reason = reason or str(e)
    raise DateParseFailure(
        f"Could not parse date {canonical!r}: {reason}",
        reason=reason,
        canonical=canonical,
    )


class DateNormalizer:
    """
    Stateless normalizer for event date fields.

    Args:
        current_year: Year substituted when the text omits one.
            Defaults to the clock year at parse time.
        config: Parsing configuration (century for two-digit years).
    """

    def __init__(
        self,
        current_year: int | None = None,
        config: EventParsingConfig | None = None,
    ):
        self._current_year = current_year
        self._config = config or EventParsingConfig()

    @property
    def current_year(self) -> int:
        return self._current_year or date.today().year

    def match(self, date_text: str) -> DateMatch | None:
        """
        Identify the shape of a date field.

        Args:
            date_text: Raw date text from an event line.

        Returns:
            DateMatch for the first shape that matches, or None.
        """
        text = date_text.strip()

        # Try each shape in priority order
        for fn in (
            self._try_single_date,
            self._try_same_month_range,
            self._try_cross_month_range,
        ):
            result = fn(text)
            if result is not None:
                return result
        return None

    def parse(self, date_text: str) -> tuple[date, date | None]:
        """
        Parse a date field into a start date and an optional end date.

        Args:
            date_text: Raw date text from an event line.

        Returns:
            Tuple of (start_date, end_date); end_date is None for single dates.

        Raises:
            UnrecognizedDateShape: If no date shape matches.
            DateParseFailure: If a reconstructed date is not a valid date.
        """
        m = self.match(date_text)
        if m is None:
            raise UnrecognizedDateShape(f"Unrecognized date: {date_text!r}")

        logger.debug(f"Date {date_text!r} matched shape {m.shape.value}")
        year = self._resolve_year(m.year)

        start = parse_canonical_date(f"{m.start_day} {m.start_month} {year}")
        if not m.is_range:
            return start, None

        end = parse_canonical_date(f"{m.end_day} {m.end_month} {year}")
        return start, end

    def _resolve_year(self, year: str | None) -> int:
        """Fill in a missing year and expand two-digit years."""
        if not year:
            return self.current_year
        if len(year) == 2:
            return self._config.century + int(year)
        return int(year)

    @staticmethod
    def _try_single_date(text: str) -> DateMatch | None:
        """Match 'D Mon [Year]': '25 Feb', '25Feb2023', '25 Feb 23'."""
        m = _SINGLE_DATE_RE.fullmatch(text)
        if not m:
            return None
        return DateMatch(
            shape=DateShape.SINGLE_DATE,
            start_day=m.group("day"),
            start_month=m.group("month"),
            year=m.group("year") or None,
        )

    @staticmethod
    def _try_same_month_range(text: str) -> DateMatch | None:
        """Match 'D1-D2 Mon [Year]': '24-25 Feb', '24 - 25Feb2023'."""
        m = _SAME_MONTH_RANGE_RE.fullmatch(text)
        if not m:
            return None
        month = m.group("month")
        return DateMatch(
            shape=DateShape.SAME_MONTH_RANGE,
            start_day=m.group("start_day"),
            start_month=month,
            end_day=m.group("end_day"),
            end_month=month,
            year=m.group("year") or None,
        )

    @staticmethod
    def _try_cross_month_range(text: str) -> DateMatch | None:
        """Match 'D1 Mon1 - D2 Mon2 [Year]': '28 Feb - 2 April', '24Jan-25Feb2023'."""
        m = _CROSS_MONTH_RANGE_RE.fullmatch(text)
        if not m:
            return None
        return DateMatch(
            shape=DateShape.CROSS_MONTH_RANGE,
            start_day=m.group("start_day"),
            start_month=m.group("start_month"),
            end_day=m.group("end_day"),
            end_month=m.group("end_month"),
            year=m.group("year") or None,
        )


def parse_date(
    date_text: str,
    current_year: int | None = None,
) -> tuple[date, date | None]:
    """Parse a date field with the cached default configuration."""
    return DateNormalizer(current_year=current_year, config=get_parsing_config()).parse(date_text)

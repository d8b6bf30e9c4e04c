"""Exception hierarchy for event line parsing.

Every failure raised while turning a markdown line into an Event derives
from EventParseError and exposes a stable ``kind`` string, used for metrics
labels and JSON failure reports.
"""


class EventParseError(Exception):
    """Base exception for event parsing errors."""

    kind = "event_parse_error"


class NotAnEventLine(EventParseError):
    """Raised when a line does not have the shape of an event entry."""

    kind = "not_an_event_line"


class FieldExtractionFailed(EventParseError):
    """Raised when the four event fields cannot be captured from a line."""

    kind = "field_extraction_failed"


class UnrecognizedDateShape(EventParseError):
    """Raised when date text matches none of the known date shapes."""

    kind = "unrecognized_date_shape"


class UnrecognizedTimeShape(EventParseError):
    """Raised when non-empty time text matches none of the known time shapes."""

    kind = "unrecognized_time_shape"


class EmptyTitle(EventParseError):
    """Raised when the title of an event line is blank."""

    kind = "empty_title"


class InvalidDateOrder(EventParseError):
    """Raised when an end date precedes its start date (opt-in check)."""

    kind = "invalid_date_order"


class _CanonicalParseError(EventParseError):
    """Failure of the underlying date/time parser on a reconstructed string."""

    def __init__(self, message: str, reason: str, canonical: str):
        super().__init__(message)
        self.reason = reason
        self.canonical = canonical


class DateParseFailure(_CanonicalParseError):
    """Raised when a canonical ``D Mon YYYY`` string is not a valid date."""

    kind = "date_parse_failure"


class TimeParseFailure(_CanonicalParseError):
    """Raised when a canonical ``H:MM AM|PM`` string is not a valid time."""

    kind = "time_parse_failure"

"""
Event parsing for markdown task lists.

Turns lines such as
``- [ ] (21 Nov) (5:30PM-10PM) (713 Music Hall, Houston) Pierce the Veil``
into structured Event records.

Components:
- EventParsingConfig: Configuration for parsing and rendering
- Event: Immutable parsed event record
- EventBuilder: Line -> Event pipeline
- DateNormalizer / TimeNormalizer: Date and time field normalizers
- EventScanner: File-level scanning with per-line failure reports
"""

from src.event_parsing.builder import EventBuilder, build_event
from src.event_parsing.config import EventParsingConfig, get_parsing_config
from src.event_parsing.dates import DateNormalizer, DateShape, parse_date
from src.event_parsing.errors import (
    DateParseFailure,
    EmptyTitle,
    EventParseError,
    FieldExtractionFailed,
    InvalidDateOrder,
    NotAnEventLine,
    TimeParseFailure,
    UnrecognizedDateShape,
    UnrecognizedTimeShape,
)
from src.event_parsing.lines import LineFields, extract_fields, is_event_line
from src.event_parsing.scanner import EventScanner, ScanResult, file_is_event
from src.event_parsing.schemas import Event
from src.event_parsing.times import TimeNormalizer, TimeShape, parse_time

__all__ = [
    "DateNormalizer",
    "DateParseFailure",
    "DateShape",
    "EmptyTitle",
    "Event",
    "EventBuilder",
    "EventParseError",
    "EventParsingConfig",
    "get_parsing_config",
    "EventScanner",
    "FieldExtractionFailed",
    "InvalidDateOrder",
    "LineFields",
    "NotAnEventLine",
    "ScanResult",
    "TimeNormalizer",
    "TimeParseFailure",
    "TimeShape",
    "UnrecognizedDateShape",
    "UnrecognizedTimeShape",
    "build_event",
    "extract_fields",
    "file_is_event",
    "is_event_line",
    "parse_date",
    "parse_time",
]

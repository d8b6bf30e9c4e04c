"""Line-shape matching for markdown event entries.

An event entry is a checkbox list item followed by three parenthesized
groups and a free-text title:

    - [ ] (21 Nov) (5:30PM-10PM) (713 Music Hall, Houston) Pierce the Veil & Dayseeker

Classification and extraction use separate patterns on purpose: a line the
classifier accepts can still be rejected by the extractor.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from src.event_parsing.errors import FieldExtractionFailed

# "- [ ]", "- [x]" or "- [,]"
_CHECKBOX = r"- \[[ ,x]\]"

_EVENT_LINE_RE = re.compile(rf"{_CHECKBOX} +\(.*\) +\(.*\) +\(.*\)")

# Date and time groups stop at the first ")"; the place group ends at the
# first ")" followed by whitespace or end of line, so titles keep parentheses.
_EVENT_FIELDS_RE = re.compile(
    rf"{_CHECKBOX} +"
    r"\((?P<date>[^)]*)\) +"
    r"\((?P<time>[^)]*)\) +"
    r"\((?P<place>.*?)\)(?=\s|$) *"
    r"(?P<title>.*)$"
)


class LineFields(NamedTuple):
    """Raw text fields captured from an event line."""

    date_text: str
    time_text: str
    place_text: str
    title_text: str


def is_event_line(line: str) -> bool:
    """Check whether a line has the shape of an event entry."""
    return _EVENT_LINE_RE.search(line.strip()) is not None


def extract_fields(line: str) -> LineFields:
    """
    Split an event line into its date, time, place and title text.

    Group contents are returned verbatim with the parentheses removed.

    Args:
        line: A single markdown line.

    Returns:
        LineFields with the four captured strings.

    Raises:
        FieldExtractionFailed: If the line does not conform to the event shape.
    """
    match = _EVENT_FIELDS_RE.search(line)
    if match is None:
        raise FieldExtractionFailed(f"Line does not match the event shape: {line!r}")
    return LineFields(
        date_text=match.group("date"),
        time_text=match.group("time"),
        place_text=match.group("place"),
        title_text=match.group("title"),
    )

"""File-level scanning of markdown event lists.

A file is an event list when one of its lines carries the event tag
("Tags: #event"). Scanning builds every event-shaped line independently;
a failing line is recorded and the scan moves on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.event_parsing.builder import EventBuilder
from src.event_parsing.config import EventParsingConfig
from src.event_parsing.errors import EventParseError
from src.event_parsing.lines import is_event_line
from src.event_parsing.schemas import DATE_FORMAT, TIME_FORMAT, Event
from src.observability.metrics import ParserMetrics

logger = logging.getLogger(__name__)


def file_is_event(text: str, tag: str = "Tags: #event", max_lines: int = 0) -> bool:
    """
    Check whether file content is tagged as an event list.

    Args:
        text: Whole file content.
        tag: Literal tag marker to look for.
        max_lines: Only inspect the first N lines (0 = all lines).

    Returns:
        True if any inspected line contains the tag.
    """
    lines = text.splitlines()
    if max_lines:
        lines = lines[:max_lines]
    return any(tag in line for line in lines)


@dataclass(frozen=True)
class LineFailure:
    """An event-shaped line that could not be built."""

    line_number: int
    line: str
    kind: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "line_number": self.line_number,
            "line": self.line,
            "kind": self.kind,
            "message": self.message,
        }


@dataclass
class ScanResult:
    """Events and failures collected from one text."""

    events: list[Event] = field(default_factory=list)
    failures: list[LineFailure] = field(default_factory=list)

    def to_dict(
        self,
        date_format: str = DATE_FORMAT,
        time_format: str = TIME_FORMAT,
    ) -> dict[str, Any]:
        """Convert scan result to dictionary for JSON serialization."""
        return {
            "events": [e.to_dict(date_format, time_format) for e in self.events],
            "failures": [f.to_dict() for f in self.failures],
        }


class EventScanner:
    """
    Scans markdown text for event lines and builds Events from them.

    Usage:
        scanner = EventScanner(builder=EventBuilder(current_year=2024))
        result = scanner.scan_file("concerts.md")

    Args:
        builder: Event builder used for each line.
        config: Parsing configuration (tag and tag scan window).
        metrics: Optional metrics collector.
    """

    def __init__(
        self,
        builder: EventBuilder | None = None,
        config: EventParsingConfig | None = None,
        metrics: ParserMetrics | None = None,
    ):
        self._config = config or (builder.config if builder else EventParsingConfig())
        self._builder = builder or EventBuilder(config=self._config)
        self._metrics = metrics

    def is_event_file(self, text: str) -> bool:
        """Check text for the configured event tag."""
        tagged = file_is_event(
            text,
            tag=self._config.event_tag,
            max_lines=self._config.tag_scan_lines,
        )
        if self._metrics is not None:
            self._metrics.record_file(tagged)
        return tagged

    def scan_text(self, text: str) -> ScanResult:
        """
        Build events from every event-shaped line of a text.

        Args:
            text: Markdown content.

        Returns:
            ScanResult with built events in line order and per-line failures.
        """
        result = ScanResult()
        lines = text.splitlines()

        for number, line in enumerate(lines, start=1):
            if not is_event_line(line):
                continue
            try:
                event = self._builder.build(line)
            except EventParseError as e:
                logger.warning(f"Line {number} skipped ({e.kind}): {e}")
                result.failures.append(
                    LineFailure(line_number=number, line=line, kind=e.kind, message=str(e))
                )
                if self._metrics is not None:
                    self._metrics.record_failure(e.kind)
                continue

            result.events.append(event)
            if self._metrics is not None:
                self._metrics.record_event(success=True)

        if self._metrics is not None:
            self._metrics.record_lines(len(lines))

        logger.debug(
            f"Scanned {len(lines)} lines: {len(result.events)} events, "
            f"{len(result.failures)} failures"
        )
        return result

    def scan_file(self, path: str | Path) -> ScanResult:
        """Read a UTF-8 markdown file and scan it."""
        text = Path(path).read_text(encoding="utf-8")
        return self.scan_text(text)

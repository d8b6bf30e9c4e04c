"""Tests for file-level scanning."""

from datetime import date

import pytest
from prometheus_client import CollectorRegistry

from src.event_parsing.config import EventParsingConfig
from src.event_parsing.scanner import EventScanner, LineFailure, file_is_event
from src.observability.metrics import ParserMetrics


@pytest.fixture
def registry():
    """Isolated Prometheus registry per test."""
    return CollectorRegistry()


@pytest.fixture
def scanner(event_builder, registry):
    """EventScanner with a fixed-year builder and isolated metrics."""
    return EventScanner(builder=event_builder, metrics=ParserMetrics(registry=registry))


class TestFileIsEvent:
    """Tests for file_is_event()."""

    def test_tagged_file(self, sample_markdown):
        assert file_is_event(sample_markdown)

    def test_untagged_file(self):
        assert not file_is_event("# Groceries\n- [ ] milk\n")

    def test_tag_inside_line(self):
        assert file_is_event("Created 2024-01-01 Tags: #event #music")

    def test_other_tag(self):
        assert not file_is_event("Tags: #todo")

    def test_max_lines(self):
        text = "# Title\n\nTags: #event\n"
        assert file_is_event(text, max_lines=3)
        assert not file_is_event(text, max_lines=2)

    def test_custom_tag(self):
        assert file_is_event("tags: concert", tag="tags: concert")


class TestEventScanner:
    """Tests for EventScanner."""

    def test_scan_collects_events_in_order(self, scanner, sample_markdown):
        result = scanner.scan_text(sample_markdown)
        assert [e.title for e in result.events] == [
            "Excision",
            "The Plot in You & Beartooth",
            "Trapt",
            "Pierce the Veil & Dayseeker",
            "Freaky Deaky '23",
        ]
        assert result.events[2].start_date == date(2024, 11, 19)

    def test_scan_reports_failures(self, scanner, sample_markdown):
        result = scanner.scan_text(sample_markdown)
        assert result.failures == [
            LineFailure(
                line_number=7,
                line="- [ ] (Feb 30th) () () Bad Date Shape",
                kind="unrecognized_date_shape",
                message=result.failures[0].message,
            ),
            LineFailure(
                line_number=10,
                line="- [ ] (2 Nov) (evening) (Houston) Polyphia",
                kind="unrecognized_time_shape",
                message=result.failures[1].message,
            ),
        ]

    def test_non_event_lines_ignored(self, scanner):
        result = scanner.scan_text("# Notes\n- [ ] buy tickets\nplain text\n")
        assert result.events == []
        assert result.failures == []

    def test_to_dict(self, scanner, sample_markdown):
        d = scanner.scan_text(sample_markdown).to_dict()
        assert len(d["events"]) == 5
        assert d["events"][0]["start_date"] == "24 Feb 2024"
        assert d["failures"][0]["kind"] == "unrecognized_date_shape"
        assert d["failures"][0]["line_number"] == 7

    def test_scan_file(self, scanner, sample_markdown, tmp_path):
        path = tmp_path / "concerts.md"
        path.write_text(sample_markdown, encoding="utf-8")
        result = scanner.scan_file(path)
        assert len(result.events) == 5

    def test_scan_missing_file(self, scanner, tmp_path):
        with pytest.raises(OSError):
            scanner.scan_file(tmp_path / "missing.md")

    def test_is_event_file_uses_config(self, event_builder):
        scanner = EventScanner(
            builder=event_builder,
            config=EventParsingConfig(event_tag="#gig", tag_scan_lines=1),
        )
        assert scanner.is_event_file("#gig\n")
        assert not scanner.is_event_file("\n#gig\n")

    def test_default_builder(self):
        scanner = EventScanner()
        result = scanner.scan_text("- [ ] (1 Jan 2025) () () New Year")
        assert result.events[0].start_date == date(2025, 1, 1)


class TestScannerMetrics:
    """Scanner outcomes are counted in Prometheus metrics."""

    def test_counts(self, scanner, registry, sample_markdown):
        scanner.is_event_file(sample_markdown)
        scanner.scan_text(sample_markdown)

        assert registry.get_sample_value(
            "md_events_files_scanned_total", {"tagged": "true"}
        ) == 1.0
        assert registry.get_sample_value("md_events_lines_scanned_total") == 11.0
        assert registry.get_sample_value(
            "md_events_events_built_total", {"status": "success"}
        ) == 5.0
        assert registry.get_sample_value(
            "md_events_events_built_total", {"status": "error"}
        ) == 2.0
        assert registry.get_sample_value(
            "md_events_parse_failures_total", {"kind": "unrecognized_time_shape"}
        ) == 1.0

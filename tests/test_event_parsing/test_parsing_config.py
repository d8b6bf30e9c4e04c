"""Tests for EventParsingConfig."""

import pytest
from pydantic import ValidationError

from src.event_parsing.builder import build_event
from src.event_parsing.config import EventParsingConfig, get_parsing_config
from src.event_parsing.dates import parse_date
from src.event_parsing.times import parse_time


class TestEventParsingConfig:
    """Tests for defaults and environment overrides."""

    def test_defaults(self):
        config = EventParsingConfig()
        assert config.event_tag == "Tags: #event"
        assert config.tag_scan_lines == 0
        assert config.date_format == "%d %b %Y"
        assert config.time_format == "%I:%M %p"
        assert config.century == 2000
        assert config.strict_time_ranges is False
        assert config.validate_date_order is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EVENTS_STRICT_TIME_RANGES", "true")
        monkeypatch.setenv("EVENTS_TAG_SCAN_LINES", "10")
        monkeypatch.setenv("EVENTS_EVENT_TAG", "#gig")
        config = EventParsingConfig()
        assert config.strict_time_ranges is True
        assert config.tag_scan_lines == 10
        assert config.event_tag == "#gig"

    def test_negative_scan_window_rejected(self):
        with pytest.raises(ValidationError):
            EventParsingConfig(tag_scan_lines=-1)

    def test_empty_tag_rejected(self):
        with pytest.raises(ValidationError):
            EventParsingConfig(event_tag="")


class TestGetParsingConfig:
    """Tests for the cached default configuration."""

    def test_cached(self):
        get_parsing_config.cache_clear()
        try:
            assert get_parsing_config() is get_parsing_config()
        finally:
            get_parsing_config.cache_clear()

    def test_module_helpers_read_environment_once(self):
        get_parsing_config.cache_clear()
        try:
            for _ in range(3):
                parse_date("25 Feb", current_year=2024)
                parse_time("6 PM")
                build_event("- [ ] (25 Feb) (6 PM) () Excision", current_year=2024)
            info = get_parsing_config.cache_info()
            assert info.misses == 1
            assert info.hits == 8
        finally:
            get_parsing_config.cache_clear()

"""Configuration for event line parsing.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other configs in the project.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EventParsingConfig(BaseSettings):
    """
    Configuration for the event line parser.

    All settings can be overridden via environment variables with EVENTS_ prefix.
    Example: EVENTS_STRICT_TIME_RANGES=true

    Attributes:
        event_tag: Literal marker identifying a file as an event list.
        tag_scan_lines: Number of leading lines inspected for the tag (0 = all).
        date_format: strftime format used when rendering dates.
        time_format: strftime format used when rendering times.
        century: Value added to two-digit years.
        strict_time_ranges: Raise on an invalid time range side instead of dropping it.
        validate_date_order: Reject events whose end date precedes the start date.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    event_tag: str = Field(
        default="Tags: #event",
        min_length=1,
        description="Literal marker identifying a file as an event list.",
    )
    tag_scan_lines: int = Field(
        default=0,
        ge=0,
        description="Number of leading lines inspected for the event tag (0 = whole file).",
    )

    # Rendering
    date_format: str = Field(
        default="%d %b %Y",
        description="strftime format used when serializing dates.",
    )
    time_format: str = Field(
        default="%I:%M %p",
        description="strftime format used when serializing times (rendered lower-case).",
    )

    # Normalization policy
    century: int = Field(
        default=2000,
        ge=0,
        description="Century added to two-digit years ('24' -> 2024).",
    )
    strict_time_ranges: bool = Field(
        default=False,
        description="Raise TimeParseFailure when a time range side is invalid.",
    )
    validate_date_order: bool = Field(
        default=False,
        description="Raise InvalidDateOrder when end_date precedes start_date.",
    )


@lru_cache
def get_parsing_config() -> EventParsingConfig:
    """
    Get cached default parsing configuration.

    Used by the module-level helpers so the environment is read once.
    Clear cache with get_parsing_config.cache_clear() if needed.
    """
    return EventParsingConfig()

"""Shared fixtures for event parsing tests."""

import pytest

from src.event_parsing.builder import EventBuilder
from src.event_parsing.config import EventParsingConfig
from src.event_parsing.dates import DateNormalizer
from src.event_parsing.times import TimeNormalizer


@pytest.fixture
def parsing_config():
    """Default event parsing config."""
    return EventParsingConfig()


@pytest.fixture
def date_normalizer(parsing_config, fixed_year):
    """DateNormalizer with a fixed current year."""
    return DateNormalizer(current_year=fixed_year, config=parsing_config)


@pytest.fixture
def time_normalizer(parsing_config):
    """TimeNormalizer with default config."""
    return TimeNormalizer(config=parsing_config)


@pytest.fixture
def event_builder(parsing_config, fixed_year):
    """EventBuilder with a fixed current year."""
    return EventBuilder(config=parsing_config, current_year=fixed_year)


@pytest.fixture
def sample_event_lines():
    """Real-world event lines that must all build successfully."""
    return [
        "- [ ] (24-25 Feb 24) () () Excision",
        "- [ ] (15 Feb 2024) (6-10PM) (White Oak Music Hall, Houston) The Plot in You & Beartooth",
        "- [ ] (19 Nov) (7-10PM) (Acadia Bar & Grill, Houston) Trapt",
        "- [ ] (21 Nov) (5:30PM-10PM) (713 Music Hall, Houston) Pierce the Veil & Dayseeker",
        "- [ ] (7 Nov) (6PM-10PM) (House of Blues, Houston) Of Mice & Men and Bullet for My Valentine",
        "- [ ] (30 Oct) (6PM-10PM) (White Oak Music Hall, Houston) Currents & Polaris",
        "- [ ] (21 Oct) (6PM-10PM) (The Secret Group, Houston) Iamjakehill",
        "- [ ] (28-29 Oct) () (Austin) Freaky Deaky '23 ",
        "- [ ] (20 Oct) () () Drowning Pool & Adelitas Way",
        "- [ ] (2 Nov) () (Houston) Polyphia",
    ]

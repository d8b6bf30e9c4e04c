"""Pytest fixtures for md-events tests."""

import pytest

from src.config.settings import Settings

FIXED_YEAR = 2024


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(environment="development", log_level="DEBUG")


@pytest.fixture
def fixed_year() -> int:
    """Year injected wherever a date omits one."""
    return FIXED_YEAR


@pytest.fixture
def sample_markdown() -> str:
    """A tagged event list mixing valid, invalid and non-event lines."""
    return "\n".join([
        "# Concerts",
        "Tags: #event",
        "",
        "- [ ] (24-25 Feb 24) () () Excision",
        "- [ ] (15 Feb 2024) (6-10PM) (White Oak Music Hall, Houston) The Plot in You & Beartooth",
        "- [x] (19 Nov) (7-10PM) (Acadia Bar & Grill, Houston) Trapt",
        "- [ ] (Feb 30th) () () Bad Date Shape",
        "- [ ] buy tickets",
        "- [ ] (21 Nov) (5:30PM-10PM) (713 Music Hall, Houston) Pierce the Veil & Dayseeker",
        "- [ ] (2 Nov) (evening) (Houston) Polyphia",
        "- [ ] (28-29 Oct) () (Austin) Freaky Deaky '23 ",
    ])

"""
Pytest configuration and fixtures for tweetstore tests.
"""

from datetime import datetime, timezone

import pytest

from tweetstore.config import DatabaseConfig
from tweetstore.persistence import StatusDatabase, StatusRecord


@pytest.fixture
def sqlite_config():
    return DatabaseConfig(driver="sqlite")


@pytest.fixture
def db(tmp_path, sqlite_config):
    """A StatusDatabase on a fresh SQLite file."""
    return StatusDatabase(str(tmp_path / "archive.db"), sqlite_config)


@pytest.fixture
def unreachable_db(tmp_path, sqlite_config):
    """A StatusDatabase whose file cannot be opened (parent directory missing)."""
    return StatusDatabase(str(tmp_path / "missing" / "archive.db"), sqlite_config)


def _make_status(status_id: int, **kwargs) -> StatusRecord:
    """Helper to create a StatusRecord with minimal required fields."""
    defaults = dict(
        id=status_id,
        created_at=datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc),
        user_screen_name="archivist",
        text=f"status number {status_id}",
        source="Twitter Web App",
        lang="en",
        user_location="Athens",
    )
    defaults.update(kwargs)
    return StatusRecord(**defaults)


@pytest.fixture
def make_status():
    return _make_status


@pytest.fixture
def sample_payload():
    """A Twitter API v1.1 status object."""
    return {
        "id": 1850000000000000001,
        "created_at": "Wed Jan 15 10:00:05 +0000 2026",
        "full_text": "Morning coffee at the café ☕ #coffee #Monday https://t.co/xyz",
        "source": '<a href="https://mobile.twitter.com" rel="nofollow">Twitter Web App</a>',
        "lang": "en",
        "favorite_count": 12,
        "retweet_count": 3,
        "user": {"screen_name": "barista", "location": "Thessaloniki"},
        "place": {"name": "Thessaloniki"},
        "coordinates": {"type": "Point", "coordinates": [22.9444, 40.6401]},
        "entities": {"hashtags": [{"text": "coffee"}, {"text": "Monday"}]},
    }

import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
TESTS_PATH = Path(__file__).resolve().parent
for path in (SRC_PATH, TESTS_PATH):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from feedwords.config import reset_config  # noqa: E402
from feedwords.container import reset_container  # noqa: E402
from feedwords.models.article import FeedSource  # noqa: E402
from feed_samples import ATOM_FEED, FakeFetcher  # noqa: E402

CONFIG_ENV_VARS = [
    "FEED_TIMEOUT", "FEED_USER_AGENT", "MAX_CONCURRENT_FEEDS", "DEFAULT_TOP_N",
    "MAX_ARTICLES_PER_FEED", "MAX_SOURCES_PER_WORD", "SETTINGS_FILE",
    "LOG_LEVEL", "VERBOSE_LOGGING",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove analyzer settings from the environment and reset global singletons."""
    for key in CONFIG_ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    reset_config()
    reset_container()
    yield monkeypatch
    reset_config()
    reset_container()


@pytest.fixture
def fake_fetcher_factory():
    def _factory(payloads=None) -> FakeFetcher:
        return FakeFetcher(payloads)

    return _factory


@pytest.fixture
def two_feed_sources() -> List[FeedSource]:
    return [
        FeedSource(name="Feed1", url="https://feed1.example.com/rss"),
        FeedSource(name="Feed2", url="https://feed2.example.com/rss"),
    ]


@pytest.fixture
def atom_payload() -> bytes:
    return ATOM_FEED

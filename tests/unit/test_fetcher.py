import pytest
import requests

from feed_samples import FakeResponse, FakeSession
from feedwords.exceptions import FetchError, FetchTimeoutError
from feedwords.fetcher import FeedFetcher


def test_fetch_returns_body_and_sets_headers():
    session = FakeSession(FakeResponse(b"<rss/>"))
    fetcher = FeedFetcher(timeout=12, user_agent="TestAgent/1.0", session=session)

    assert fetcher.fetch("https://example.com/rss", feed_name="Example") == b"<rss/>"
    assert session.requests == [("https://example.com/rss", 12)]
    assert session.headers["User-Agent"] == "TestAgent/1.0"
    assert "application/rss+xml" in session.headers["Accept"]


def test_timeout_raises_fetch_timeout():
    fetcher = FeedFetcher(timeout=5, session=FakeSession(requests.Timeout("slow")))

    with pytest.raises(FetchTimeoutError) as exc_info:
        fetcher.fetch("https://example.com/rss", feed_name="Slow")
    assert exc_info.value.timeout_seconds == 5
    assert isinstance(exc_info.value, FetchError)


def test_http_error_reports_status():
    fetcher = FeedFetcher(session=FakeSession(FakeResponse(b"gone", status_code=404)))

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch("https://example.com/missing", feed_name="Missing")
    assert exc_info.value.reason == "HTTP 404"
    assert exc_info.value.feed_name == "Missing"


def test_connection_error_raises_fetch_error():
    fetcher = FeedFetcher(session=FakeSession(requests.ConnectionError("refused")))

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch("https://unreachable.example.com/rss")
    assert "refused" in exc_info.value.reason


def test_empty_body_is_returned_not_raised(caplog):
    """A reachable feed with no content is not a transport failure."""
    fetcher = FeedFetcher(session=FakeSession(FakeResponse(b"")))

    assert fetcher.fetch("https://example.com/empty", feed_name="Empty") == b""
    assert "Empty response body" in caplog.text


def test_close_closes_session():
    session = FakeSession(FakeResponse(b"x"))
    FeedFetcher(session=session).close()
    assert session.closed

#!/usr/bin/env python3
"""
Feed fetcher.

Thin I/O boundary: retrieves raw feed bytes and reports transport failures.
Malformed XML is not its concern; the parsers deal with that.
"""

import logging
from typing import Optional

import requests

from .exceptions import FetchError, FetchTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'Mozilla/5.0 (compatible; FeedWordAnalyzer/1.0)'
ACCEPT_HEADER = 'application/rss+xml, application/atom+xml, application/xml, text/xml'


class FeedFetcher:
    """Fetches raw feed payloads over HTTP, one attempt per call."""

    def __init__(self, timeout: float = 30, user_agent: str = DEFAULT_USER_AGENT,
                 session: Optional[requests.Session] = None):
        """
        Initialize feed fetcher.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            session: Optional pre-configured session (used by tests)
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept': ACCEPT_HEADER
        })

    def fetch(self, url: str, feed_name: str = "") -> bytes:
        """
        Fetch raw payload bytes for a feed URL.

        Args:
            url: Feed URL
            feed_name: Name used in log messages and errors

        Returns:
            Response body (possibly empty; parsers treat that as no articles)

        Raises:
            FetchTimeoutError: If the request timed out
            FetchError: On connection failure or non-2xx status
        """
        logger.info(f"Fetching feed {feed_name or url} from: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.content
        except requests.Timeout as e:
            logger.error(f"Timeout fetching feed {url}: {e}")
            raise FetchTimeoutError(feed_name, url, self.timeout) from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 'error'
            logger.error(f"Bad response for feed {url}: {e}")
            raise FetchError(feed_name, url, f"HTTP {status}") from e
        except requests.RequestException as e:
            logger.error(f"Failed to fetch feed {url}: {e}")
            raise FetchError(feed_name, url, str(e)) from e

        if not payload:
            logger.warning(f"Empty response body for feed {url}")

        logger.debug(f"Fetched {len(payload)} bytes for {feed_name or url}")
        return payload

    def close(self) -> None:
        self.session.close()

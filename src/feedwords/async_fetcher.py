#!/usr/bin/env python3
"""
Async feed fetcher.

Fetches several feeds in parallel with aiohttp. One ClientSession is shared
by all requests of a batch on a single event loop; a semaphore bounds the
number of requests in flight.
"""

import asyncio
import logging
import time
from typing import List, Sequence, Union

import aiohttp

from .exceptions import FetchError, FetchTimeoutError
from .fetcher import ACCEPT_HEADER, DEFAULT_USER_AGENT
from .models.article import FeedSource

logger = logging.getLogger(__name__)

FetchOutcome = Union[bytes, FetchError]


class AsyncFeedFetcher:
    """Parallel feed fetching, one attempt per feed."""

    def __init__(self, timeout: float = 30, user_agent: str = DEFAULT_USER_AGENT,
                 max_concurrent: int = 5):
        """
        Initialize async feed fetcher.

        Args:
            timeout: Total request timeout in seconds
            user_agent: User-Agent header sent with every request
            max_concurrent: Default limit on requests in flight
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.max_concurrent = max_concurrent

    async def fetch(self, session: aiohttp.ClientSession, source: FeedSource) -> bytes:
        """
        Fetch raw payload bytes for one feed.

        Raises:
            FetchTimeoutError: If the request timed out
            FetchError: On connection failure or non-2xx status
        """
        url = source.url
        logger.info(f"Fetching feed {source.name} from: {url}")

        try:
            async with session.get(url) as response:
                response.raise_for_status()
                payload = await response.read()
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout fetching feed {url}")
            raise FetchTimeoutError(source.name, url, self.timeout) from e
        except aiohttp.ClientResponseError as e:
            logger.error(f"Bad response for feed {url}: {e.status}")
            raise FetchError(source.name, url, f"HTTP {e.status}") from e
        except aiohttp.ClientError as e:
            logger.error(f"HTTP error fetching feed {url}: {e}")
            raise FetchError(source.name, url, str(e) or e.__class__.__name__) from e

        if not payload:
            logger.warning(f"Empty response body for feed {url}")
        return payload

    async def fetch_all(self, sources: Sequence[FeedSource],
                        max_concurrent: int = None) -> List[FetchOutcome]:
        """
        Fetch feeds in parallel.

        Args:
            sources: Feeds to fetch
            max_concurrent: Requests in flight (defaults to the instance limit)

        Returns:
            One payload or FetchError per source, in the order given
        """
        limit = max(1, max_concurrent or self.max_concurrent)
        logger.info(f"Fetching {len(sources)} feeds in parallel (max {limit} at once)")
        start_time = time.time()

        semaphore = asyncio.Semaphore(limit)

        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers={'User-Agent': self.user_agent, 'Accept': ACCEPT_HEADER}
        ) as session:

            async def fetch_with_semaphore(source: FeedSource) -> bytes:
                async with semaphore:
                    return await self.fetch(session, source)

            results = await asyncio.gather(
                *(fetch_with_semaphore(source) for source in sources),
                return_exceptions=True
            )

        outcomes: List[FetchOutcome] = []
        for source, result in zip(sources, results):
            if isinstance(result, FetchError):
                outcomes.append(result)
            elif isinstance(result, Exception):
                logger.error(f"Unexpected error fetching feed {source.url}: {result}")
                outcomes.append(FetchError(source.name, source.url, str(result) or result.__class__.__name__))
            else:
                outcomes.append(result)

        duration = time.time() - start_time
        successful = sum(1 for outcome in outcomes if not isinstance(outcome, FetchError))
        logger.info(f"Fetched {successful}/{len(sources)} feeds in {duration:.2f}s")
        return outcomes


def run_coroutine(coroutine):
    """Run a coroutine to completion from synchronous code."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coroutine)

    # Called from inside a running loop: run on a fresh loop in a worker thread
    import concurrent.futures
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, coroutine).result()

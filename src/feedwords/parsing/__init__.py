#!/usr/bin/env python3
"""
Feed payload parsing.

Strategies are tried in order; the first one that yields articles wins.
"""

import logging
from typing import List, Optional, Sequence

from .base import FeedParserStrategy, MAX_ARTICLES_PER_FEED
from .structured import StructuredFeedStrategy
from .pattern import PatternFeedStrategy
from ..exceptions import ParseError
from ..models.article import Article

logger = logging.getLogger(__name__)


class FeedPayloadParser:
    """Strategy chain: structured XML parse first, pattern fallback second."""

    def __init__(self, strategies: Optional[Sequence[FeedParserStrategy]] = None,
                 max_articles: int = MAX_ARTICLES_PER_FEED):
        """
        Args:
            strategies: Ordered strategies (defaults to structured, then pattern)
            max_articles: Per-feed article cap for the default strategies
        """
        if strategies is None:
            strategies = [
                StructuredFeedStrategy(max_articles=max_articles),
                PatternFeedStrategy(max_articles=max_articles),
            ]
        self.strategies = list(strategies)

    def parse(self, payload: bytes, feed_name: str) -> List[Article]:
        """
        Parse a payload into articles, never raising.

        Returns:
            Articles from the first successful strategy, or [] if none succeeds
        """
        for strategy in self.strategies:
            try:
                articles = strategy.parse(payload, feed_name)
            except ParseError as e:
                logger.warning(f"{strategy.get_name()} parser failed for {feed_name}: {e}")
                continue
            except Exception as e:
                logger.error(f"Unexpected error in {strategy.get_name()} parser for {feed_name}: {e}",
                             exc_info=True)
                continue

            if articles:
                logger.debug(f"{strategy.get_name()} parser produced {len(articles)} articles for {feed_name}")
                return articles

            logger.info(f"{strategy.get_name()} parser found no usable articles for {feed_name}")

        logger.error(f"No articles could be parsed for {feed_name}")
        return []


def parse_feed_payload(payload: bytes, feed_name: str) -> List[Article]:
    """Parse a payload with the default strategy chain."""
    return FeedPayloadParser().parse(payload, feed_name)


__all__ = [
    'FeedParserStrategy', 'StructuredFeedStrategy', 'PatternFeedStrategy',
    'FeedPayloadParser', 'parse_feed_payload', 'MAX_ARTICLES_PER_FEED'
]

#!/usr/bin/env python3
"""
Base class for feed parsing strategies.

Each strategy turns a raw payload into articles or raises ParseError so the
next strategy in the chain gets a chance.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Iterable, Dict

from ..models.article import Article
from ..text_sanitizer import clean_text

logger = logging.getLogger(__name__)

MAX_ARTICLES_PER_FEED = 25


class FeedParserStrategy(ABC):
    """Abstract base class for payload parsing strategies."""

    def __init__(self, max_articles: int = MAX_ARTICLES_PER_FEED):
        """
        Args:
            max_articles: Maximum articles kept per feed (earliest first)
        """
        self.max_articles = max_articles

    @abstractmethod
    def parse(self, payload: bytes, feed_name: str) -> List[Article]:
        """
        Parse a raw feed payload.

        Args:
            payload: Raw feed bytes
            feed_name: Name of the feed that owns the payload

        Returns:
            Articles in document order (may be empty)

        Raises:
            ParseError: If this strategy cannot handle the payload
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this strategy."""
        pass

    def build_articles(self, entries: Iterable[Dict[str, str]], feed_name: str) -> List[Article]:
        """
        Clean raw entry fields into Articles.

        Entries without a usable title are dropped before the per-feed cap
        is applied.
        """
        articles: List[Article] = []
        skipped = 0

        for fields in entries:
            if len(articles) >= self.max_articles:
                break

            title = clean_text(fields.get('title', ''))
            if not title:
                skipped += 1
                continue

            articles.append(Article(
                title=title,
                description=clean_text(fields.get('description', '')),
                content=clean_text(fields.get('content', '')),
                link=clean_text(fields.get('link', '')),
                published=clean_text(fields.get('published', '')),
                feed_name=feed_name
            ))

        if skipped:
            logger.debug(f"Skipped {skipped} untitled entries in {feed_name}")
        return articles

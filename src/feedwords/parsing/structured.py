#!/usr/bin/env python3
"""
Structured RSS/Atom parsing with feedparser.

feedparser normalizes RSS 2.0 items and Atom entries to one entry shape.
A document that is not well-formed XML counts as a failure here so the
pattern-based strategy can take over.
"""

import io
import logging
from typing import List, Dict, Any

import feedparser

from .base import FeedParserStrategy
from ..exceptions import ParseError
from ..models.article import Article

logger = logging.getLogger(__name__)

# bozo exceptions that still mean the document was parsed as XML
BENIGN_BOZO_EXCEPTIONS = (
    feedparser.CharacterEncodingOverride,
    feedparser.NonXMLContentType,
)


class StructuredFeedStrategy(FeedParserStrategy):
    """Parses well-formed RSS 2.0 and Atom documents."""

    def parse(self, payload: bytes, feed_name: str) -> List[Article]:
        feed = feedparser.parse(io.BytesIO(payload))

        if feed.bozo and not isinstance(feed.get('bozo_exception'), BENIGN_BOZO_EXCEPTIONS):
            raise ParseError(feed_name, 'XML document', feed.get('bozo_exception'))

        entries = feed.get('entries', [])
        if not entries:
            raise ParseError(feed_name, 'feed entries')

        logger.info(f"Found {len(entries)} entries in {feed_name} feed")
        return self.build_articles((self._entry_fields(entry) for entry in entries), feed_name)

    def _entry_fields(self, entry: Dict[str, Any]) -> Dict[str, str]:
        """Pick the raw fields of one feedparser entry."""
        content = ''
        for item in entry.get('content') or []:
            if item.get('value'):
                content = item['value']
                break

        return {
            'title': entry.get('title', ''),
            # feedparser maps RSS <description> and Atom <summary> to summary
            'description': entry.get('summary', ''),
            'content': content,
            'link': entry.get('link', ''),
            'published': entry.get('published') or entry.get('updated', ''),
        }

    def get_name(self) -> str:
        return "Structured XML"

#!/usr/bin/env python3
"""
Article and feed source data models.

Articles are produced by the feed parsers and never modified afterwards.
"""

from datetime import datetime
from typing import Dict, Any, Optional, List, Mapping
from dataclasses import dataclass

from dateutil import parser as date_parser


@dataclass(frozen=True)
class FeedSource:
    """A named feed URL selected for analysis."""
    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'url': self.url}


def parse_published(raw: str) -> Optional[datetime]:
    """Parse a raw feed date string, None if missing or unparseable."""
    if not raw:
        return None
    try:
        return date_parser.parse(raw)
    except (ValueError, OverflowError):
        return None


def feeds_from_mapping(feeds: Mapping[str, str]) -> List[FeedSource]:
    """Build an ordered FeedSource list from a name -> URL mapping."""
    return [FeedSource(name=name, url=url) for name, url in feeds.items()]


@dataclass(frozen=True)
class Article:
    """
    Represents a single feed entry.

    `published` keeps the raw date text exactly as the feed supplied it;
    use published_at() for a parsed value.
    """
    title: str
    link: str = ""
    feed_name: str = ""
    description: str = ""
    content: str = ""
    published: str = ""

    @property
    def body(self) -> str:
        """Descriptive text used for word extraction."""
        return self.description or self.content

    def published_at(self) -> Optional[datetime]:
        return parse_published(self.published)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'title': self.title,
            'description': self.description,
            'content': self.content,
            'link': self.link,
            'published': self.published,
            'feed_name': self.feed_name
        }

    def __repr__(self):
        return f"Article(title='{self.title[:50]}...', feed_name='{self.feed_name}')"

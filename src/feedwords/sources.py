#!/usr/bin/env python3
"""
Feed catalogue.

Built-in default feeds plus the user's selection, including custom feeds
added by URL. Selection order is processing order.
"""

import logging
from typing import Dict, List, Mapping, Optional, Iterable

from .models.article import FeedSource, feeds_from_mapping
from .security import validate_feed_name, validate_feed_url

logger = logging.getLogger(__name__)

DEFAULT_FEEDS: Dict[str, str] = {
    'BBC News': 'http://feeds.bbci.co.uk/news/rss.xml',
    'Reuters': 'http://feeds.reuters.com/reuters/topNews',
    'CNN': 'http://rss.cnn.com/rss/edition.rss',
    'TechCrunch': 'http://feeds.feedburner.com/TechCrunch',
    'Hacker News': 'https://hnrss.org/frontpage',
    'Ars Technica': 'http://arstechnica.com/feed/',
    'The Register': 'http://www.theregister.co.uk/headlines.atom',
    'Slashdot': 'http://rss.slashdot.org/Slashdot/slashdotMain',
}


class FeedCatalog:
    """Known feeds and the current selection."""

    def __init__(self, selected: Optional[Mapping[str, str]] = None,
                 defaults: Optional[Mapping[str, str]] = None):
        """
        Args:
            selected: Currently selected feeds (name -> URL); defaults if None
            defaults: Built-in feeds offered for selection
        """
        self.defaults: Dict[str, str] = dict(DEFAULT_FEEDS if defaults is None else defaults)
        self.selected: Dict[str, str] = dict(self.defaults if selected is None else selected)

    def available(self) -> Dict[str, str]:
        """Defaults plus any custom feeds currently selected."""
        feeds = dict(self.defaults)
        for name, url in self.selected.items():
            feeds.setdefault(name, url)
        return feeds

    def select(self, names: Iterable[str]) -> List[str]:
        """
        Replace the selection with the named feeds, in the given order.

        Returns:
            Names that are not known and were ignored
        """
        available = self.available()
        selected: Dict[str, str] = {}
        unknown: List[str] = []
        for name in names:
            if name in available:
                selected[name] = available[name]
            else:
                unknown.append(name)

        if unknown:
            logger.warning(f"Ignoring unknown feeds: {', '.join(unknown)}")
        self.selected = selected
        return unknown

    def add_custom(self, name: str, url: str) -> FeedSource:
        """Validate and select a user-supplied feed."""
        source = FeedSource(name=validate_feed_name(name), url=validate_feed_url(url))
        self.selected[source.name] = source.url
        logger.info(f"Added custom feed {source.name}: {source.url}")
        return source

    def remove(self, name: str) -> bool:
        if name not in self.selected:
            return False
        del self.selected[name]
        return True

    def reset(self) -> None:
        self.selected = dict(self.defaults)

    def selected_sources(self, only: Optional[Iterable[str]] = None) -> List[FeedSource]:
        """Selected feeds as FeedSource objects, optionally restricted by name."""
        sources = feeds_from_mapping(self.selected)
        if only is None:
            return sources
        wanted = set(only)
        return [source for source in sources if source.name in wanted]

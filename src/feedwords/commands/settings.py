#!/usr/bin/env python3
"""
Settings commands: manage selected feeds and custom stopwords.
"""

import logging
from argparse import Namespace

from .base import BaseCommand
from ..sources import FeedCatalog
from ..stopwords import StopwordSet

logger = logging.getLogger(__name__)


class FeedsCommand(BaseCommand):
    """Show and change the feed selection."""

    name = 'feeds'
    subcommands = ['list', 'select', 'add', 'remove', 'reset']

    def _catalog(self):
        settings = self.load_settings()
        return settings, FeedCatalog(selected=settings.selected_feeds)

    def _store(self, settings, catalog: FeedCatalog) -> None:
        settings.selected_feeds = dict(catalog.selected)
        self.save_settings(settings)

    def list(self, args: Namespace) -> int:
        _settings, catalog = self._catalog()
        print("=== Feeds ===")
        for name, url in catalog.available().items():
            marker = '[x]' if name in catalog.selected else '[ ]'
            print(f"{marker} {name}: {url}")
        return 0

    def select(self, args: Namespace) -> int:
        settings, catalog = self._catalog()
        unknown = catalog.select(args.names)
        self._store(settings, catalog)
        print(f"Selected {len(catalog.selected)} feeds")
        return 1 if unknown else 0

    def add(self, args: Namespace) -> int:
        settings, catalog = self._catalog()
        source = catalog.add_custom(args.name, args.url)
        self._store(settings, catalog)
        print(f"Added feed {source.name}")
        return 0

    def remove(self, args: Namespace) -> int:
        settings, catalog = self._catalog()
        if not catalog.remove(args.name):
            self.logger.error(f"Feed '{args.name}' is not selected")
            return 1
        self._store(settings, catalog)
        print(f"Removed feed {args.name}")
        return 0

    def reset(self, args: Namespace) -> int:
        settings, catalog = self._catalog()
        catalog.reset()
        self._store(settings, catalog)
        print(f"Restored {len(catalog.selected)} default feeds")
        return 0


class StopwordsCommand(BaseCommand):
    """Show and change custom stopwords."""

    name = 'stopwords'
    subcommands = ['list', 'add', 'remove', 'clear']

    def list(self, args: Namespace) -> int:
        settings = self.load_settings()
        stopwords = StopwordSet.from_custom(settings.custom_stopwords)
        print(f"Default stopwords: {stopwords.default_count}")
        print(f"Custom stopwords ({len(stopwords.custom)}):")
        for word in sorted(stopwords.custom):
            print(f"  {word}")
        return 0

    def add(self, args: Namespace) -> int:
        settings = self.load_settings()
        existing = {word.lower() for word in settings.custom_stopwords}
        for word in args.words:
            word = word.strip().lower()
            if word and word not in existing:
                settings.custom_stopwords.append(word)
                existing.add(word)
        self.save_settings(settings)
        print(f"{len(settings.custom_stopwords)} custom stopwords")
        return 0

    def remove(self, args: Namespace) -> int:
        settings = self.load_settings()
        removing = {word.strip().lower() for word in args.words}
        settings.custom_stopwords = [
            word for word in settings.custom_stopwords if word.lower() not in removing
        ]
        self.save_settings(settings)
        print(f"{len(settings.custom_stopwords)} custom stopwords")
        return 0

    def clear(self, args: Namespace) -> int:
        settings = self.load_settings()
        settings.custom_stopwords = []
        self.save_settings(settings)
        print("Cleared custom stopwords")
        return 0

#!/usr/bin/env python3
"""
Analyze command: run a word frequency analysis over the selected feeds.
"""

import json
import logging
from argparse import Namespace

from .base import BaseCommand
from ..config import clamp_top_n
from ..formatters import format_analysis, format_sources
from ..models.analysis import AnalysisRequest
from ..sources import FeedCatalog
from ..stopwords import StopwordSet

logger = logging.getLogger(__name__)


class AnalyzeCommand(BaseCommand):
    """Fetch selected feeds and rank word frequencies."""

    name = 'analyze'
    subcommands = ['run']

    def run(self, args: Namespace) -> int:
        settings = self.load_settings()
        catalog = FeedCatalog(selected=settings.selected_feeds)

        only = getattr(args, 'feed', None)
        feeds = catalog.selected_sources(only=only)
        if only:
            missing = sorted(set(only) - {source.name for source in feeds})
            if missing:
                self.logger.warning(f"Feeds not selected in settings: {', '.join(missing)}")

        top = getattr(args, 'top', None)
        top_n = clamp_top_n(top if top is not None else self.config.app.default_top_n)

        workers = getattr(args, 'workers', None)
        analyzer = self.analyzer
        if workers:
            analyzer.max_workers = max(1, workers)

        request = AnalysisRequest(
            feeds=feeds,
            stopwords=StopwordSet.from_custom(settings.custom_stopwords),
            top_n=top_n
        )
        result = analyzer.analyze(request)

        if getattr(args, 'json', False):
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(format_analysis(result))

        word = getattr(args, 'sources', None)
        if word:
            feed_name = getattr(args, 'source_feed', None)
            sources = analyzer.get_word_sources(word, feed_name=feed_name)
            print()
            print(format_sources(word.lower(), sources, feed_name))

        return 0

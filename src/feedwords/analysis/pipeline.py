#!/usr/bin/env python3
"""
Analysis pipeline orchestration.

One run fetches and parses every selected feed, then aggregates word counts
and the source index feed by feed in selection order. Fetching may run in
parallel with aiohttp; parsing and aggregation stay sequential.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple, Union

import pytz

from ..aggregation import FrequencyAggregator
from ..async_fetcher import AsyncFeedFetcher, run_coroutine
from ..exceptions import EmptyResultWarning, FetchError, NoFeedsSelectedError
from ..fetcher import FeedFetcher
from ..models.analysis import AnalysisRequest, AnalysisResult, FeedReport, SourceReference
from ..models.article import Article, FeedSource
from ..parsing import FeedPayloadParser
from ..source_index import SourceIndex, MAX_SOURCES_PER_WORD
from ..tokenizer import TokenFilter

logger = logging.getLogger(__name__)

FeedLoad = Tuple[FeedSource, List[Article], Optional[str]]


class FeedWordAnalyzer:
    """
    Runs word frequency analyses over a selection of feeds.

    Keeps the most recent result so source lookups can be answered without
    recomputation.
    """

    def __init__(self, fetcher: Optional[FeedFetcher] = None, parser: Optional[FeedPayloadParser] = None,
                 max_workers: int = 1, max_sources_per_word: int = MAX_SOURCES_PER_WORD,
                 async_fetcher: Optional[AsyncFeedFetcher] = None):
        """
        Initialize analyzer.

        Args:
            fetcher: Feed fetcher (default: FeedFetcher with default timeout)
            parser: Payload parser (default: structured + pattern chain)
            max_workers: Concurrent feed downloads; 1 fetches sequentially
            max_sources_per_word: Source references kept per word
            async_fetcher: Parallel fetcher used when max_workers > 1
        """
        self.fetcher = fetcher or FeedFetcher()
        self.parser = parser or FeedPayloadParser()
        self.async_fetcher = async_fetcher or AsyncFeedFetcher()
        self.max_workers = max(1, max_workers)
        self.max_sources_per_word = max_sources_per_word
        self._last_result: Optional[AnalysisResult] = None

    @property
    def last_result(self) -> Optional[AnalysisResult]:
        return self._last_result

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Run one analysis.

        Args:
            request: Feeds, stopwords and top-N bound

        Returns:
            Fresh AnalysisResult (possibly annotated with EmptyResultWarning)

        Raises:
            NoFeedsSelectedError: If the request selects no feeds
        """
        if not request.feeds:
            logger.error("No feeds selected")
            raise NoFeedsSelectedError()

        logger.info(f"Starting feed analysis of {len(request.feeds)} feeds (top {request.top_n})")
        start = datetime.now()

        loads = self._load_feeds(request.feeds)

        token_filter = TokenFilter(request.stopwords)
        aggregator = FrequencyAggregator(top_n=request.top_n)
        source_index = SourceIndex(capacity=self.max_sources_per_word)
        all_articles: List[Article] = []
        reports: List[FeedReport] = []

        for source, articles, error in loads:
            report = FeedReport(name=source.name, url=source.url, article_count=len(articles), error=error)
            reports.append(report)

            if not articles:
                logger.info(f"No articles found for {source.name}")
                continue

            all_articles.extend(articles)
            feed_tokens: List[str] = []
            for article in articles:
                words = token_filter.extract(article.title, article.body)
                feed_tokens.extend(words)
                source_index.record_article(article, words)

            report.word_counts = aggregator.add_feed(source.name, feed_tokens)
            if report.word_counts:
                logger.info(f"Successfully processed {source.name} with "
                            f"{len(aggregator.feed_counts(source.name))} unique words")
            else:
                logger.info(f"No words remaining after filtering stopwords for {source.name}")

        word_frequency = aggregator.global_ranking()
        warning = None
        if not all_articles:
            warning = EmptyResultWarning(EmptyResultWarning.NO_ARTICLES)
        elif not word_frequency:
            warning = EmptyResultWarning(EmptyResultWarning.NO_WORDS)
        if warning:
            logger.warning(warning.message)

        result = AnalysisResult(
            word_frequency=word_frequency,
            feed_reports=reports,
            source_index=source_index,
            articles=all_articles,
            total_unique_words=aggregator.total_unique_words,
            timestamp=datetime.now(pytz.utc),
            warning=warning
        )
        self._last_result = result

        duration = (datetime.now() - start).total_seconds()
        logger.info(f"Analysis completed in {duration:.2f}s: {result.total_articles} articles, "
                    f"{len(word_frequency)} top words")
        return result

    def get_word_sources(self, word: str, feed_name: Optional[str] = None) -> List[SourceReference]:
        """Sources for a word from the most recent run ([] before any run)."""
        if self._last_result is None:
            logger.debug(f"No analysis has been run yet; no sources for '{word}'")
            return []
        return self._last_result.sources_for(word, feed_name=feed_name)

    def _load_feeds(self, feeds: List[FeedSource]) -> List[FeedLoad]:
        """Fetch and parse every feed, returning results in selection order."""
        if self.max_workers == 1 or len(feeds) == 1:
            return [self._load_feed(source) for source in feeds]

        payloads = run_coroutine(self.async_fetcher.fetch_all(feeds, max_concurrent=self.max_workers))
        return [self._parse_outcome(source, payload) for source, payload in zip(feeds, payloads)]

    def _load_feed(self, source: FeedSource) -> FeedLoad:
        """Fetch and parse one feed; failures yield zero articles."""
        logger.info(f"Processing feed: {source.name}")
        try:
            payload = self.fetcher.fetch(source.url, feed_name=source.name)
        except FetchError as e:
            payload = e
        return self._parse_outcome(source, payload)

    def _parse_outcome(self, source: FeedSource, payload: Union[bytes, FetchError]) -> FeedLoad:
        if isinstance(payload, FetchError):
            logger.error(f"Error processing feed {source.name}: {payload}")
            return source, [], payload.reason

        articles = self.parser.parse(payload, source.name)
        logger.info(f"Fetched {len(articles)} articles from {source.name}")
        return source, articles, None

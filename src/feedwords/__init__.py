#!/usr/bin/env python3
"""
RSS/Atom word frequency analyzer.

Fetches feeds, extracts article text and ranks word frequencies with
backlinks to the articles each word came from.
"""

from .analysis import FeedWordAnalyzer
from .exceptions import (
    FeedAnalyzerError, FetchError, FetchTimeoutError, ParseError,
    NoFeedsSelectedError, EmptyResultWarning
)
from .async_fetcher import AsyncFeedFetcher
from .fetcher import FeedFetcher
from .models import (
    Article, FeedSource, WordCount, SourceReference, AnalysisRequest, AnalysisResult
)
from .parsing import FeedPayloadParser, parse_feed_payload
from .stopwords import StopwordSet

__version__ = '1.0.0'

__all__ = [
    'FeedWordAnalyzer', 'FeedFetcher', 'AsyncFeedFetcher', 'FeedPayloadParser', 'parse_feed_payload',
    'StopwordSet', 'Article', 'FeedSource', 'WordCount', 'SourceReference',
    'AnalysisRequest', 'AnalysisResult', 'FeedAnalyzerError', 'FetchError',
    'FetchTimeoutError', 'ParseError', 'NoFeedsSelectedError', 'EmptyResultWarning'
]

#!/usr/bin/env python3
"""
Core data models for feed word analysis.

Contains all data structures used throughout the application.
"""

from .article import Article, FeedSource, feeds_from_mapping
from .analysis import WordCount, SourceReference, AnalysisRequest, FeedReport, AnalysisResult

__all__ = [
    'Article', 'FeedSource', 'feeds_from_mapping', 'WordCount', 'SourceReference',
    'AnalysisRequest', 'FeedReport', 'AnalysisResult'
]

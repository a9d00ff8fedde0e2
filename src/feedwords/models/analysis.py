#!/usr/bin/env python3
"""
Analysis result data models.

Contains the word counts, source references and per-feed reports that make
up one analysis run.
"""

from datetime import datetime
from typing import List, Dict, Any, Optional, TYPE_CHECKING
from dataclasses import dataclass, field

from .article import Article, FeedSource
from ..exceptions import EmptyResultWarning, ValidationError

if TYPE_CHECKING:
    from ..source_index import SourceIndex
    from ..stopwords import StopwordSet


@dataclass(frozen=True)
class WordCount:
    """Frequency of one distinct word within a scope (feed or global)."""
    word: str
    frequency: int

    def to_dict(self) -> Dict[str, Any]:
        return {'word': self.word, 'frequency': self.frequency}


@dataclass(frozen=True)
class SourceReference:
    """Attribution record linking a word back to an article."""
    title: str
    link: str
    published: str
    feed_name: str

    @classmethod
    def from_article(cls, article: Article) -> 'SourceReference':
        return cls(
            title=article.title or 'Untitled',
            link=article.link,
            published=article.published,
            feed_name=article.feed_name
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'title': self.title,
            'link': self.link,
            'published': self.published,
            'feed_name': self.feed_name
        }


@dataclass
class AnalysisRequest:
    """Inputs for one analysis run, already validated by the caller."""
    feeds: List[FeedSource]
    stopwords: 'StopwordSet'
    top_n: int = 100

    def __post_init__(self):
        """Validate request values."""
        self.feeds = list(self.feeds)
        if isinstance(self.top_n, bool) or not isinstance(self.top_n, int) or self.top_n < 1:
            raise ValidationError('top_n', self.top_n, 'positive integer')

        seen = set()
        for source in self.feeds:
            if source.name in seen:
                raise ValidationError('feeds', source.name, 'unique feed names')
            seen.add(source.name)


@dataclass
class FeedReport:
    """Per-feed outcome of an analysis run."""
    name: str
    url: str
    article_count: int = 0
    word_counts: List[WordCount] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.error:
            return 'failed'
        if not self.article_count:
            return 'empty'
        return 'ok'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'url': self.url,
            'status': self.status,
            'article_count': self.article_count,
            'unique_words': len(self.word_counts),
            'error': self.error
        }


@dataclass
class AnalysisResult:
    """Aggregate output of one analysis run."""
    word_frequency: List[WordCount]
    feed_reports: List[FeedReport]
    source_index: 'SourceIndex'
    articles: List[Article]
    total_unique_words: int
    timestamp: datetime
    warning: Optional[EmptyResultWarning] = None

    @property
    def total_articles(self) -> int:
        return len(self.articles)

    @property
    def is_empty(self) -> bool:
        return not self.word_frequency

    @property
    def feed_word_counts(self) -> Dict[str, List[WordCount]]:
        """Ranked word lists for feeds that contributed words, in feed order."""
        return {
            report.name: report.word_counts
            for report in self.feed_reports
            if report.word_counts
        }

    def get_feed_report(self, feed_name: str) -> Optional[FeedReport]:
        for report in self.feed_reports:
            if report.name == feed_name:
                return report
        return None

    def sources_for(self, word: str, feed_name: Optional[str] = None) -> List[SourceReference]:
        """Source references recorded for a word, optionally for one feed."""
        return self.source_index.sources_for(word, feed_name=feed_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            'word_frequency': [wc.to_dict() for wc in self.word_frequency],
            'feed_word_counts': {
                name: [wc.to_dict() for wc in counts]
                for name, counts in self.feed_word_counts.items()
            },
            'word_sources': self.source_index.to_dict(),
            'feeds': [report.to_dict() for report in self.feed_reports],
            'articles': [article.to_dict() for article in self.articles],
            'total_articles': self.total_articles,
            'total_unique_words': self.total_unique_words,
            'timestamp': self.timestamp.isoformat(),
            'warning': self.warning.to_dict() if self.warning else None
        }

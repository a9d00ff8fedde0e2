#!/usr/bin/env python3
"""
Per-word source index.

Maps each retained word to a bounded list of articles that contained it, in
first-seen order. Reaching capacity is normal and silently ignored.
"""

import logging
from typing import Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from .models.article import Article
from .models.analysis import SourceReference

logger = logging.getLogger(__name__)

T = TypeVar('T')

MAX_SOURCES_PER_WORD = 5


class BoundedBuffer(Generic[T]):
    """Append-only list that stops accepting items once full."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[T] = []

    def append(self, item: T) -> bool:
        """Append item if there is room; returns whether it was stored."""
        if self.is_full:
            return False
        self._items.append(item)
        return True

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def to_list(self) -> List[T]:
        return list(self._items)


class SourceIndex:
    """Word -> bounded SourceReference buffer, keyed globally by word."""

    def __init__(self, capacity: int = MAX_SOURCES_PER_WORD):
        self.capacity = capacity
        self._buffers: Dict[str, BoundedBuffer[SourceReference]] = {}

    def record(self, word: str, reference: SourceReference) -> bool:
        buffer = self._buffers.get(word)
        if buffer is None:
            buffer = self._buffers[word] = BoundedBuffer(self.capacity)
        return buffer.append(reference)

    def record_article(self, article: Article, words: Iterable[str]) -> int:
        """
        Attribute each distinct word of an article to that article.

        Returns:
            Number of references stored
        """
        reference = SourceReference.from_article(article)
        stored = 0
        for word in dict.fromkeys(words):
            if self.record(word, reference):
                stored += 1
        return stored

    def sources_for(self, word: str, feed_name: Optional[str] = None) -> List[SourceReference]:
        """
        References recorded for a word.

        Filtering by feed scans the already-bounded list, so a feed may see
        fewer references than it contributed occurrences.
        """
        buffer = self._buffers.get(word.lower()) if word else None
        if buffer is None:
            return []

        references = buffer.to_list()
        if feed_name is not None:
            references = [ref for ref in references if ref.feed_name == feed_name]
        return references

    def __contains__(self, word: object) -> bool:
        return word in self._buffers

    def __len__(self) -> int:
        return len(self._buffers)

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            word: [ref.to_dict() for ref in buffer]
            for word, buffer in self._buffers.items()
        }

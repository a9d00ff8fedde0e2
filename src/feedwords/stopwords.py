#!/usr/bin/env python3
"""
Stopword sets for word frequency analysis.

The active set is the union of the built-in English list and the user's
custom words. Membership is case-insensitive.
"""

from typing import Iterable, FrozenSet

DEFAULT_STOPWORDS: FrozenSet[str] = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'as', 'is', 'are', 'was', 'were', 'be',
    'been', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'could', 'should', 'may', 'might', 'must', 'can', 'this', 'that',
    'these', 'those', 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me',
    'him', 'her', 'us', 'them', 'my', 'your', 'his', 'its', 'our',
    'their', 'am', 'said', 'says', 'say', 'get', 'go', 'going', 'went',
    'come', 'came', 'time', 'people', 'way', 'day', 'man', 'new', 'first',
    'last', 'long', 'great', 'little', 'own', 'other', 'old', 'right',
    'big', 'high', 'different', 'small', 'large', 'next', 'early', 'young',
    'important', 'few', 'public', 'bad', 'same', 'able', 'also', 'back',
    'after', 'use', 'than', 'now', 'look', 'only', 'think', 'see',
    'know', 'take', 'work', 'life', 'become', 'here', 'how', 'so',
    'want', 'make', 'give', 'hand', 'part', 'place', 'where', 'turn',
    'put', 'end', 'why', 'try', 'good', 'woman', 'through', 'down',
    'up', 'out', 'many', 'then', 'some', 'like', 'into', 'two', 'more',
    'very', 'what', 'just', 'over', 'still', 'being', 'made',
    'before', 'when', 'much', 'too', 'any', 'well', 'such',
])


class StopwordSet:
    """Immutable union of default and custom stopwords."""

    def __init__(self, custom: Iterable[str] = (), include_defaults: bool = True):
        """
        Args:
            custom: User-supplied stopwords (any case, blanks ignored)
            include_defaults: Whether to merge the built-in list
        """
        self._custom = frozenset(
            word.strip().lower() for word in custom if word and word.strip()
        )
        self._defaults = DEFAULT_STOPWORDS if include_defaults else frozenset()
        self._words = self._defaults | self._custom

    @classmethod
    def from_custom(cls, words: Iterable[str]) -> 'StopwordSet':
        return cls(custom=words)

    @property
    def custom(self) -> FrozenSet[str]:
        return self._custom

    @property
    def default_count(self) -> int:
        return len(self._defaults)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(sorted(self._words))

    def __repr__(self):
        return f"StopwordSet(default={self.default_count}, custom={len(self._custom)})"

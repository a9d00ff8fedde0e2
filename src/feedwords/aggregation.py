#!/usr/bin/env python3
"""
Word frequency aggregation.

Counts are kept for every occurrence; top-N truncation only happens when a
ranking is produced, both per feed and globally.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Union

from .models.analysis import WordCount

logger = logging.getLogger(__name__)

CountsInput = Union[Mapping[str, int], Iterable[WordCount]]


def rank_word_counts(counts: CountsInput, top_n: int) -> List[WordCount]:
    """
    Rank words by descending frequency and keep the first top_n.

    Ties keep the order in which the words were first encountered, which
    is the iteration order of the input (Counter and dict preserve insertion
    order; an already ranked list is left as is).

    Args:
        counts: word -> frequency mapping, or WordCount entries
        top_n: Maximum number of entries to return

    Returns:
        Ranked WordCount list, never padded
    """
    if isinstance(counts, Mapping):
        entries = [WordCount(word=word, frequency=freq) for word, freq in counts.items()]
    else:
        entries = list(counts)

    ranked = sorted(entries, key=lambda entry: -entry.frequency)
    return ranked[:max(top_n, 0)]


class FrequencyAggregator:
    """Per-feed and global word counts for one analysis run."""

    def __init__(self, top_n: int = 100):
        self.top_n = top_n
        self._feed_counts: Dict[str, Counter] = {}
        self._global_counts: Counter = Counter()

    def add_feed(self, feed_name: str, tokens: Iterable[str]) -> List[WordCount]:
        """
        Count a feed's full token multiset and merge it into the global counts.

        Calling add_feed again for the same feed extends its counts.

        Returns:
            The feed's ranked, truncated word list
        """
        counts = self._feed_counts.setdefault(feed_name, Counter())
        feed_tokens = list(tokens)
        counts.update(feed_tokens)
        self._global_counts.update(feed_tokens)

        logger.debug(f"Aggregated {len(feed_tokens)} tokens ({len(counts)} unique) for {feed_name}")
        return self.feed_ranking(feed_name)

    def feed_counts(self, feed_name: str) -> Dict[str, int]:
        return dict(self._feed_counts.get(feed_name, {}))

    def global_counts(self) -> Dict[str, int]:
        return dict(self._global_counts)

    def feed_ranking(self, feed_name: str) -> List[WordCount]:
        return rank_word_counts(self._feed_counts.get(feed_name, Counter()), self.top_n)

    def global_ranking(self) -> List[WordCount]:
        return rank_word_counts(self._global_counts, self.top_n)

    @property
    def feed_names(self) -> List[str]:
        return list(self._feed_counts)

    @property
    def total_unique_words(self) -> int:
        return len(self._global_counts)

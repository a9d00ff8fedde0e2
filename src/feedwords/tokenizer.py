#!/usr/bin/env python3
"""
Tokenization and stopword filtering.

A token is a maximal run of word characters. Only runs made purely of ASCII
letters are candidates: mixed runs such as "covid19", "5g" or "foo_bar" are
dropped entirely rather than split into an alphabetic remainder.
"""

import re
import logging
from typing import List, Iterable, Optional

from .stopwords import StopwordSet

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3

WORD_RUN_PATTERN = re.compile(r'\w+')


def is_alphabetic(token: str) -> bool:
    """True for non-empty tokens made only of ASCII letters."""
    return token.isascii() and token.isalpha()


def tokenize(text: str) -> List[str]:
    """Lower-case text and return its purely alphabetic word runs in order."""
    if not text:
        return []

    return [run for run in WORD_RUN_PATTERN.findall(text.lower()) if is_alphabetic(run)]


class TokenFilter:
    """Applies the token retention rule against a stopword set."""

    def __init__(self, stopwords: Optional[StopwordSet] = None, min_length: int = MIN_WORD_LENGTH):
        self.stopwords = stopwords if stopwords is not None else StopwordSet()
        self.min_length = min_length

    def is_retained(self, token: str) -> bool:
        return (
            len(token) >= self.min_length
            and is_alphabetic(token)
            and token not in self.stopwords
        )

    def filter(self, tokens: Iterable[str]) -> List[str]:
        return [token.lower() for token in tokens if self.is_retained(token)]

    def extract(self, *texts: str) -> List[str]:
        """Tokenize and filter several texts, preserving their order."""
        words: List[str] = []
        for text in texts:
            words.extend(self.filter(tokenize(text)))
        return words


def extract_words(text: str, stopwords: Optional[StopwordSet] = None) -> List[str]:
    """Retained tokens of a single text."""
    return TokenFilter(stopwords).extract(text)

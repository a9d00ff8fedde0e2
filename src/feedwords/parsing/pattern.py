#!/usr/bin/env python3
"""
Pattern-based fallback parsing.

Best-effort text matching over the raw payload for feeds that a strict XML
parser rejects: unescaped control characters, broken nesting, truncated
documents. This is not markup parsing; only complete <item> or <entry>
blocks are recognized.
"""

import re
import logging
from functools import lru_cache
from typing import List, Dict, Sequence, Pattern, Tuple

from .base import FeedParserStrategy
from ..exceptions import ParseError
from ..models.article import Article
from ..text_sanitizer import strip_control_characters

logger = logging.getLogger(__name__)

ITEM_PATTERNS: Tuple[Pattern, ...] = (
    # RSS 2.0 items
    re.compile(r'<item\b[^>]*>(.*?)</item\s*>', re.IGNORECASE | re.DOTALL),
    # Atom entries
    re.compile(r'<entry\b[^>]*>(.*?)</entry\s*>', re.IGNORECASE | re.DOTALL),
)

TITLE_FIELDS = ('title',)
DESCRIPTION_FIELDS = ('description', 'summary', 'content', 'content:encoded')
DATE_FIELDS = ('pubDate', 'published', 'updated', 'dc:date')

LINK_TAG_PATTERN = re.compile(r'<link\b([^>]*)>', re.IGNORECASE)
ATTRIBUTE_PATTERN = re.compile(r'([\w:-]+)\s*=\s*["\']([^"\']*)["\']')


@lru_cache(maxsize=None)
def _tag_pattern(tag: str) -> Pattern:
    """
    Pattern for the text of <tag ...>text</tag>.

    The opening tag must be followed by whitespace or '>' so that "content"
    does not match "content:encoded", and must not be self-closing.
    """
    name = re.escape(tag)
    return re.compile(
        r'<' + name + r'(?:\s[^>]*)?(?<!/)>(.*?)</' + name + r'\s*>',
        re.IGNORECASE | re.DOTALL
    )


def extract_tag(block: str, tag: str) -> str:
    """Raw text of the first <tag> element in block, '' if absent or empty."""
    match = _tag_pattern(tag).search(block)
    if not match:
        return ''
    return match.group(1).strip()


def extract_first(block: str, tags: Sequence[str]) -> str:
    """First non-empty value among candidate tags, in order."""
    for tag in tags:
        value = extract_tag(block, tag)
        if value:
            return value
    return ''


def extract_link(block: str) -> str:
    """
    Article link of an item or entry.

    Preference order: an href on a <link> whose rel is "alternate" or absent,
    the <link> element text, then an href on any other <link> (self, enclosure).
    """
    other_href = ''
    for match in LINK_TAG_PATTERN.finditer(block):
        attributes = {
            name.lower(): value.strip()
            for name, value in ATTRIBUTE_PATTERN.findall(match.group(1))
        }
        href = attributes.get('href')
        if not href:
            continue
        if attributes.get('rel', 'alternate').lower() == 'alternate':
            return href
        other_href = other_href or href

    return extract_tag(block, 'link') or other_href


class PatternFeedStrategy(FeedParserStrategy):
    """Regex extraction of <item>/<entry> blocks from a raw payload."""

    def parse(self, payload: bytes, feed_name: str) -> List[Article]:
        text = strip_control_characters(self._decode(payload))

        blocks: List[str] = []
        for pattern in ITEM_PATTERNS:
            blocks = pattern.findall(text)
            if blocks:
                logger.info(f"Found {len(blocks)} items using pattern for {feed_name}")
                break

        if not blocks:
            logger.debug(f"Content preview for {feed_name}: {text[:500]!r}")
            raise ParseError(feed_name, 'item blocks')

        articles = self.build_articles((self._block_fields(block) for block in blocks), feed_name)
        logger.info(f"Successfully parsed {len(articles)} articles for {feed_name}")
        return articles

    def _block_fields(self, block: str) -> Dict[str, str]:
        return {
            'title': extract_first(block, TITLE_FIELDS),
            'description': extract_first(block, DESCRIPTION_FIELDS),
            'link': extract_link(block),
            'published': extract_first(block, DATE_FIELDS),
        }

    def _decode(self, payload: bytes) -> str:
        if isinstance(payload, str):
            return payload
        return payload.decode('utf-8', errors='replace')

    def get_name(self) -> str:
        return "Pattern fallback"

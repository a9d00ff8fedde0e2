#!/usr/bin/env python3
"""
Text normalization utilities for raw feed fragments.

Feed fields arrive as CDATA-wrapped, entity-encoded HTML snippets. Everything
extracted by the feed parsers passes through clean_text() before it becomes
part of an Article.
"""

import html
import re
import logging

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Typographic quotation marks that break naive word splitting
QUOTES_MAP = {
    "“": '"',  # Left double quotation mark
    "”": '"',  # Right double quotation mark
    "‘": "'",  # Left single quotation mark
    "’": "'",  # Right single quotation mark
}

QUOTES_TRANSLATION = str.maketrans(QUOTES_MAP)

CDATA_PATTERN = re.compile(r'<!\[CDATA\[(.*?)\]\]>', re.DOTALL)
CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_quotes(text: str) -> str:
    """
    Normalize typographic quotation marks to ASCII equivalents.

    Args:
        text: Input text that may contain curly quotes

    Returns:
        Text with normalized ASCII quotes
    """
    if not text:
        return text

    return text.translate(QUOTES_TRANSLATION)


def strip_cdata(text: str) -> str:
    """Remove CDATA markers, keeping the wrapped content."""
    if not text:
        return ""

    text = CDATA_PATTERN.sub(lambda match: match.group(1), text)
    # Unbalanced markers left over from truncated payloads
    return text.replace('<![CDATA[', '').replace(']]>', '')


def strip_control_characters(text: str) -> str:
    """Drop ASCII control characters that strict XML parsers reject."""
    if not text:
        return ""

    return CONTROL_CHARS_PATTERN.sub('', text)


def strip_markup(text: str) -> str:
    """Remove HTML/XML tags, leaving their text content."""
    if not text or '<' not in text:
        return text or ""

    soup = BeautifulSoup(text, 'html.parser')
    return soup.get_text(' ')


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""

    return WHITESPACE_PATTERN.sub(' ', text).strip()


def clean_text(raw: str) -> str:
    """
    Turn a raw feed fragment into plain text.

    Steps:
    - Strip CDATA markers (content preserved)
    - Decode HTML entities, so entity-encoded markup is removed too
    - Remove markup tags
    - Normalize typographic quotes
    - Collapse whitespace

    Args:
        raw: Fragment that may contain markup, CDATA and entities

    Returns:
        Clean plain text; empty string for empty input
    """
    if not raw:
        return ""

    text = strip_cdata(raw)
    text = html.unescape(text)
    text = strip_markup(text)
    text = normalize_quotes(text)
    return collapse_whitespace(text)

#!/usr/bin/env python3
"""
Input validation for user-supplied feeds.

Feed names and URLs entered by the user are validated before they are
saved to settings or fetched.
"""

import re
import urllib.parse
import logging

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_URL_LENGTH = 2048
MAX_FEED_NAME_LENGTH = 100

ALLOWED_SCHEMES = {'http', 'https'}

CONTROL_CHARS = re.compile(r'[\x00-\x1F\x7F]')


def is_valid_feed_url(url: str) -> bool:
    """
    Check that a URL is an absolute http(s) URL of acceptable length.

    Returns:
        True if URL is valid, False otherwise
    """
    if not url or len(url) > MAX_URL_LENGTH or CONTROL_CHARS.search(url):
        return False

    try:
        parsed = urllib.parse.urlparse(url)
    except ValueError as e:
        logger.error(f"Error parsing URL {url}: {e}")
        return False

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        logger.warning(f"Blocked URL with invalid scheme: {parsed.scheme}")
        return False

    if not parsed.netloc:
        logger.warning(f"Blocked URL without host: {url}")
        return False

    return True


def validate_feed_url(url: str) -> str:
    """Return the stripped URL or raise ValidationError."""
    url = (url or '').strip()
    if not is_valid_feed_url(url):
        raise ValidationError('url', url, 'absolute http(s) URL')
    return url


def validate_feed_name(name: str) -> str:
    """Return the stripped feed name or raise ValidationError."""
    name = (name or '').strip()
    if not name or len(name) > MAX_FEED_NAME_LENGTH or CONTROL_CHARS.search(name):
        raise ValidationError('name', name, f'1-{MAX_FEED_NAME_LENGTH} printable characters')
    return name

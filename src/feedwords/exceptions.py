#!/usr/bin/env python3
"""
Standardized exception hierarchy for the feed word analyzer.

Per-feed problems (fetch and parse failures) are contained by the analysis
pipeline; only run-level problems propagate to callers.
"""

from typing import Optional, Dict, Any


class FeedAnalyzerError(Exception):
    """Base exception for all feed word analyzer errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'context': self.context
        }


# Source-related exceptions
class SourceError(FeedAnalyzerError):
    """Base exception for feed source errors."""
    pass


class FetchError(SourceError):
    """Transport-level failure while retrieving a feed payload."""

    def __init__(self, feed_name: str, url: str, reason: str):
        message = f"Failed to fetch {feed_name or url}: {reason}"
        context = {
            'feed_name': feed_name,
            'url': url,
            'reason': reason
        }
        super().__init__(message, context=context)
        self.feed_name = feed_name
        self.url = url
        self.reason = reason


class FetchTimeoutError(FetchError):
    """Feed request timed out."""

    def __init__(self, feed_name: str, url: str, timeout_seconds: float):
        super().__init__(feed_name, url, f"timed out after {timeout_seconds}s")
        self.context['timeout_seconds'] = timeout_seconds
        self.timeout_seconds = timeout_seconds


class ParseError(SourceError):
    """A parsing strategy could not extract articles from a payload."""

    def __init__(self, feed_name: str, parse_stage: str, original_error: Optional[Exception] = None):
        message = f"Failed to parse {parse_stage} from {feed_name}"
        if original_error is not None:
            message += f": {original_error}"
        context = {
            'feed_name': feed_name,
            'parse_stage': parse_stage,
            'original_error': str(original_error) if original_error is not None else None
        }
        super().__init__(message, context=context)
        self.feed_name = feed_name
        self.parse_stage = parse_stage


# Analysis-related exceptions
class AnalysisError(FeedAnalyzerError):
    """Base exception for analysis errors."""
    pass


class NoFeedsSelectedError(AnalysisError):
    """An analysis run was requested without any feeds."""

    def __init__(self):
        super().__init__("No feeds selected for analysis")


# Configuration-related exceptions
class ConfigurationError(FeedAnalyzerError):
    """Configuration is invalid or missing."""

    def __init__(self, config_key: str, issue: str):
        message = f"Configuration error for {config_key}: {issue}"
        context = {
            'config_key': config_key,
            'issue': issue
        }
        super().__init__(message, context=context)


class SettingsError(FeedAnalyzerError):
    """Settings file could not be written."""

    def __init__(self, path: str, original_error: Exception):
        message = f"Failed to save settings to {path}"
        context = {
            'path': path,
            'original_error': str(original_error)
        }
        super().__init__(message, context=context)


# Validation-related exceptions
class ValidationError(FeedAnalyzerError, ValueError):
    """Data validation failed."""

    def __init__(self, field: str, value: Any, expected: str):
        message = f"Validation failed for {field}: expected {expected}, got {value!r}"
        context = {
            'field': field,
            'value': str(value),
            'expected': expected,
            'actual_type': type(value).__name__
        }
        super().__init__(message, context=context)


class EmptyResultWarning(UserWarning):
    """
    Annotation for a completed run that produced no ranked words.

    Attached to the analysis result rather than raised, so callers can tell
    "nothing found" apart from "not run".
    """

    NO_ARTICLES = 'no_articles'
    NO_WORDS = 'no_words'

    _MESSAGES = {
        NO_ARTICLES: 'No articles found from any selected feeds',
        NO_WORDS: 'No words remaining after stopword filtering',
    }

    def __init__(self, reason: str):
        self.reason = reason
        self.message = self._MESSAGES.get(reason, reason)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {'reason': self.reason, 'message': self.message}

#!/usr/bin/env python3
"""
JSON settings persistence.

Stores the user's custom stopwords and selected feeds as a small key-value
JSON document. The analysis core never reads this directly; callers load
settings and pass them into each run.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any

from .exceptions import SettingsError
from .sources import DEFAULT_FEEDS

logger = logging.getLogger(__name__)


@dataclass
class AnalyzerSettings:
    """User settings: custom stopwords and selected feeds."""
    custom_stopwords: List[str] = field(default_factory=list)
    selected_feeds: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FEEDS))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'custom_stopwords': list(self.custom_stopwords),
            'selected_feeds': dict(self.selected_feeds)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalyzerSettings':
        stopwords = data.get('custom_stopwords') or []
        feeds = data.get('selected_feeds')
        if not isinstance(feeds, dict):
            feeds = dict(DEFAULT_FEEDS)
        return cls(
            custom_stopwords=[str(word) for word in stopwords if isinstance(word, str) and word.strip()],
            selected_feeds={str(name): str(url) for name, url in feeds.items()}
        )


class JsonSettingsStore:
    """Loads and saves AnalyzerSettings in a JSON file."""

    def __init__(self, path: str = 'settings.json'):
        self.path = Path(path)

    def load(self) -> AnalyzerSettings:
        """
        Load settings, falling back to defaults.

        A missing, unreadable or malformed file yields default settings.
        """
        if not self.path.exists():
            logger.debug(f"No settings file found at {self.path}")
            return AnalyzerSettings()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings from {self.path}: {e}")
            return AnalyzerSettings()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings file {self.path}: expected a JSON object")
            return AnalyzerSettings()

        return AnalyzerSettings.from_dict(data)

    def save(self, settings: AnalyzerSettings) -> None:
        """Write settings as pretty-printed JSON."""
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving settings to {self.path}: {e}")
            raise SettingsError(str(self.path), e) from e

        logger.info(f"Saved settings to {self.path}")

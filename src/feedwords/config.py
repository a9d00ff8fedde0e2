#!/usr/bin/env python3
"""
Centralized Configuration Manager

Provides a single source of truth for application configuration built from
environment variables, with defaults and validation.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .env_loader import get_env_var, load_env_file
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

MIN_TOP_N = 10
MAX_TOP_N = 1000

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def clamp_top_n(value: int) -> int:
    """Clamp a requested top-N bound to the supported range."""
    return max(MIN_TOP_N, min(MAX_TOP_N, int(value)))


@dataclass
class ApplicationConfig:
    """Core application configuration."""
    # Feed fetching
    feed_timeout: int = 30
    feed_user_agent: str = "Mozilla/5.0 (compatible; FeedWordAnalyzer/1.0)"
    max_concurrent_feeds: int = 1

    # Analysis
    default_top_n: int = 100
    max_articles_per_feed: int = 25
    max_sources_per_word: int = 5

    # Settings persistence
    settings_file: str = "settings.json"

    # Logging
    log_level: str = "INFO"
    verbose_logging: bool = False


@dataclass
class Config:
    """Master configuration container."""
    app: ApplicationConfig


class ConfigManager:
    """Manages application configuration with validation and environment loading."""

    def __init__(self, env_file_path: Optional[str] = ".env"):
        """
        Initialize configuration manager.

        Args:
            env_file_path: Path to .env file relative to project root, None to skip
        """
        self._config: Optional[Config] = None
        if env_file_path:
            load_env_file(env_file_path)

    def get_config(self, force_reload: bool = False) -> Config:
        """
        Get application configuration.

        Args:
            force_reload: Force reloading configuration from environment

        Returns:
            Complete configuration object
        """
        if self._config is None or force_reload:
            self._config = self._build_config()
        return self._config

    def _build_config(self) -> Config:
        """Build configuration from environment variables."""
        app_config = ApplicationConfig(
            feed_timeout=self._get_int('FEED_TIMEOUT', 30),
            feed_user_agent=get_env_var('FEED_USER_AGENT', 'Mozilla/5.0 (compatible; FeedWordAnalyzer/1.0)'),
            max_concurrent_feeds=self._get_int('MAX_CONCURRENT_FEEDS', 1),
            default_top_n=self._get_int('DEFAULT_TOP_N', 100),
            max_articles_per_feed=self._get_int('MAX_ARTICLES_PER_FEED', 25),
            max_sources_per_word=self._get_int('MAX_SOURCES_PER_WORD', 5),
            settings_file=get_env_var('SETTINGS_FILE', 'settings.json'),
            log_level=get_env_var('LOG_LEVEL', 'INFO').upper(),
            verbose_logging=get_env_var('VERBOSE_LOGGING', 'false').lower() == 'true'
        )

        config = Config(app=app_config)
        self._validate_config(config)
        return config

    def _get_int(self, key: str, default: int) -> int:
        raw = get_env_var(key, str(default))
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(key, f"expected an integer, got {raw!r}")

    def _validate_config(self, config: Config) -> None:
        """Validate configuration values."""
        errors = []

        if config.app.feed_timeout < 1:
            errors.append("FEED_TIMEOUT must be at least 1 second")

        if config.app.max_concurrent_feeds < 1 or config.app.max_concurrent_feeds > 20:
            errors.append("MAX_CONCURRENT_FEEDS must be between 1 and 20")

        if not MIN_TOP_N <= config.app.default_top_n <= MAX_TOP_N:
            errors.append(f"DEFAULT_TOP_N must be between {MIN_TOP_N} and {MAX_TOP_N}")

        if config.app.max_articles_per_feed < 1:
            errors.append("MAX_ARTICLES_PER_FEED must be at least 1")

        if config.app.max_sources_per_word < 1:
            errors.append("MAX_SOURCES_PER_WORD must be at least 1")

        if config.app.log_level not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        if errors:
            raise ConfigurationError('environment', '; '.join(errors))

        logger.debug("Configuration validation passed")

    def update_logging(self) -> None:
        """Configure logging based on current configuration."""
        config = self.get_config()

        numeric_level = getattr(logging, config.app.log_level)
        logging.getLogger().setLevel(numeric_level)

        if config.app.verbose_logging:
            format_str = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
        else:
            format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        for handler in logging.getLogger().handlers:
            handler.setLevel(numeric_level)
            formatter = logging.Formatter(format_str, datefmt='%Y-%m-%d %H:%M:%S')
            handler.setFormatter(formatter)


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_config() -> Config:
    """Get application configuration."""
    return get_config_manager().get_config()


def reset_config() -> None:
    """Reset configuration manager (useful for testing)."""
    global _config_manager
    _config_manager = None

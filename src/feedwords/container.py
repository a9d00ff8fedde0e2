#!/usr/bin/env python3
"""
Dependency Injection Container

Central place where the analyzer's collaborators (configuration, settings
store, fetcher, parser, analyzer) are created and shared. Commands resolve
services by name so tests can register fakes instead.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional, Set

logger = logging.getLogger(__name__)


class Container:
    """Simple dependency injection container with singleton and factory services."""

    def __init__(self):
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._singleton_names: Set[str] = set()
        self._instances: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def register_singleton(self, service_name: str, factory: Callable[[], Any]) -> None:
        """Register a service created once on first use and then reused."""
        with self._lock:
            self._factories[service_name] = factory
            self._singleton_names.add(service_name)
            self._instances.pop(service_name, None)

    def register_factory(self, service_name: str, factory: Callable[[], Any]) -> None:
        """Register a service created anew on every get()."""
        with self._lock:
            self._factories[service_name] = factory
            self._singleton_names.discard(service_name)
            self._instances.pop(service_name, None)

    def register_instance(self, service_name: str, instance: Any) -> None:
        """Register a pre-built instance."""
        with self._lock:
            self._instances[service_name] = instance

    def get(self, service_name: str) -> Any:
        """
        Get service instance by name.

        Raises:
            KeyError: If service is not registered
        """
        if service_name in self._instances:
            return self._instances[service_name]

        if service_name not in self._factories:
            raise KeyError(f"Service '{service_name}' not registered")

        with self._lock:
            if service_name in self._singleton_names:
                if service_name not in self._instances:
                    self._instances[service_name] = self._factories[service_name]()
                    logger.debug(f"Created singleton instance for '{service_name}'")
                return self._instances[service_name]

        logger.debug(f"Created new instance for '{service_name}'")
        return self._factories[service_name]()

    def has(self, service_name: str) -> bool:
        return service_name in self._factories or service_name in self._instances

    def clear(self) -> None:
        with self._lock:
            self._factories.clear()
            self._singleton_names.clear()
            self._instances.clear()


# Global container instance
_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get global container instance (thread-safe singleton)."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = Container()
                _setup_default_services(_container)
    return _container


def reset_container() -> None:
    """Reset global container (useful for testing)."""
    global _container
    with _container_lock:
        if _container:
            _container.clear()
        _container = None


def _setup_default_services(container: Container) -> None:
    """Set up default service registrations with configuration injection."""

    def create_config():
        from .config import get_config
        return get_config()

    def create_settings_store():
        from .settings_store import JsonSettingsStore
        config = container.get('config')
        return JsonSettingsStore(config.app.settings_file)

    def create_feed_fetcher():
        from .fetcher import FeedFetcher
        config = container.get('config')
        return FeedFetcher(timeout=config.app.feed_timeout, user_agent=config.app.feed_user_agent)

    def create_feed_parser():
        from .parsing import FeedPayloadParser
        config = container.get('config')
        return FeedPayloadParser(max_articles=config.app.max_articles_per_feed)

    def create_async_fetcher():
        from .async_fetcher import AsyncFeedFetcher
        config = container.get('config')
        return AsyncFeedFetcher(
            timeout=config.app.feed_timeout,
            user_agent=config.app.feed_user_agent,
            max_concurrent=config.app.max_concurrent_feeds
        )

    def create_analyzer():
        from .analysis import FeedWordAnalyzer
        config = container.get('config')
        return FeedWordAnalyzer(
            fetcher=container.get('feed_fetcher'),
            parser=container.get('feed_parser'),
            max_workers=config.app.max_concurrent_feeds,
            max_sources_per_word=config.app.max_sources_per_word,
            async_fetcher=container.get('async_fetcher')
        )

    container.register_singleton('config', create_config)
    container.register_singleton('settings_store', create_settings_store)
    container.register_singleton('feed_fetcher', create_feed_fetcher)
    container.register_singleton('async_fetcher', create_async_fetcher)
    container.register_singleton('feed_parser', create_feed_parser)
    container.register_singleton('analyzer', create_analyzer)

    logger.debug("Default services registered in container")

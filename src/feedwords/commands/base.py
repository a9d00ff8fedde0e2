#!/usr/bin/env python3
"""
Base command class for the modular command architecture.

Provides common functionality and interface that all commands inherit.
Uses dependency injection for better testability.
"""

import logging
from abc import ABC, abstractmethod
from argparse import Namespace
from typing import List

from ..container import get_container
from ..exceptions import FeedAnalyzerError, NoFeedsSelectedError
from ..settings_store import AnalyzerSettings

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """Base class for all command endpoints."""

    subcommands: List[str] = []

    def __init__(self, container=None):
        """
        Initialize base command with dependency injection container.

        Args:
            container: Optional container instance. If None, uses global container.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self._container = container or get_container()

    @property
    def config(self):
        return self._container.get('config')

    @property
    def settings_store(self):
        return self._container.get('settings_store')

    @property
    def analyzer(self):
        return self._container.get('analyzer')

    def load_settings(self) -> AnalyzerSettings:
        return self.settings_store.load()

    def save_settings(self, settings: AnalyzerSettings) -> None:
        self.settings_store.save(settings)

    def execute(self, subcommand: str, args: Namespace) -> int:
        """
        Dispatch to the method named after the subcommand.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if subcommand not in self.subcommands:
            available = ", ".join(self.subcommands)
            self.logger.error(f"Unknown subcommand '{subcommand}'. Available: {available}")
            return 1

        try:
            return getattr(self, subcommand)(args)
        except Exception as e:
            return self.handle_error(e, f"{self.name} {subcommand}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name used on the command line."""
        pass

    def handle_error(self, error: Exception, context: str = "") -> int:
        """
        Standard error handling for commands.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            Appropriate exit code
        """
        error_msg = f"{context}: {error}" if context else str(error)

        if isinstance(error, NoFeedsSelectedError):
            self.logger.error(error_msg)
            return 3
        elif isinstance(error, ValueError):
            self.logger.error(error_msg)
            return 22
        elif isinstance(error, FeedAnalyzerError):
            self.logger.error(error_msg)
            return 1
        elif isinstance(error, KeyboardInterrupt):
            self.logger.info("Command interrupted by user")
            return 130

        self.logger.error(error_msg, exc_info=True)
        return 1

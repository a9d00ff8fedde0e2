#!/usr/bin/env python3
"""
Command endpoints for the feed word analyzer.

Each top-level CLI command is handled by a dedicated command class.
"""

from typing import Dict, Type
from .base import BaseCommand
from .analyze import AnalyzeCommand
from .settings import FeedsCommand, StopwordsCommand

# Command registry for easy extension
COMMANDS: Dict[str, Type[BaseCommand]] = {
    'analyze': AnalyzeCommand,
    'feeds': FeedsCommand,
    'stopwords': StopwordsCommand,
}


def get_command(command_name: str, container=None) -> BaseCommand:
    """Get a command instance by name."""
    if command_name not in COMMANDS:
        available = ', '.join(COMMANDS.keys())
        raise ValueError(f"Unknown command '{command_name}'. Available: {available}")

    return COMMANDS[command_name](container=container)


def list_commands() -> Dict[str, str]:
    """Get list of available commands with descriptions."""
    return {
        name: (command_class.__doc__ or 'No description available').strip()
        for name, command_class in COMMANDS.items()
    }

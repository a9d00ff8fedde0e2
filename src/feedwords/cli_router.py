#!/usr/bin/env python3
"""
CLI Router for the feed word analyzer.

Command structure:
- feedwords analyze run --top 50 --sources economy
- feedwords feeds list
- feedwords stopwords add trump biden
"""

import argparse
import logging
import sys
from typing import Optional, List

from .commands import get_command, COMMANDS
from .config import MIN_TOP_N, MAX_TOP_N, get_config_manager
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CLIRouter:
    """Routes command line arguments to command classes."""

    def __init__(self, container=None):
        """
        Initialize CLI router.

        Args:
            container: Optional DI container handed to commands
        """
        self._container = container
        self._command_parsers = {}
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        parser = argparse.ArgumentParser(
            prog='feedwords',
            description="RSS/Atom word frequency analyzer",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_examples_text()
        )

        subparsers = parser.add_subparsers(
            dest='command',
            help='Available commands',
            metavar='{command}'
        )

        self._add_analyze_parser(subparsers)
        self._add_feeds_parser(subparsers)
        self._add_stopwords_parser(subparsers)

        return parser

    def _add_analyze_parser(self, subparsers):
        """Add analyze command parser."""
        analyze_parser = subparsers.add_parser('analyze', help='Word frequency analysis')
        self._command_parsers['analyze'] = analyze_parser
        analyze_subparsers = analyze_parser.add_subparsers(
            dest='subcommand',
            help='Analysis operations',
            metavar='{run}'
        )

        run_parser = analyze_subparsers.add_parser('run', help='Fetch selected feeds and rank words')
        run_parser.add_argument('--top', type=int, default=None,
                                help=f'Number of ranked words to keep ({MIN_TOP_N}-{MAX_TOP_N})')
        run_parser.add_argument('--feed', nargs='+', default=None, metavar='NAME',
                                help='Only analyze these selected feeds')
        run_parser.add_argument('--workers', type=int, default=None,
                                help='Concurrent feed downloads (default from MAX_CONCURRENT_FEEDS)')
        run_parser.add_argument('--json', action='store_true', help='Print the result as JSON')
        run_parser.add_argument('--sources', metavar='WORD', default=None,
                                help='Show source articles for a word after the run')
        run_parser.add_argument('--source-feed', metavar='NAME', default=None,
                                help='Restrict --sources to one feed')

    def _add_feeds_parser(self, subparsers):
        """Add feeds command parser."""
        feeds_parser = subparsers.add_parser('feeds', help='Feed selection management')
        self._command_parsers['feeds'] = feeds_parser
        feeds_subparsers = feeds_parser.add_subparsers(
            dest='subcommand',
            help='Feed operations',
            metavar='{list,select,add,remove,reset}'
        )

        feeds_subparsers.add_parser('list', help='Show available and selected feeds')

        select_parser = feeds_subparsers.add_parser('select', help='Replace the selection')
        select_parser.add_argument('names', nargs='+', metavar='NAME')

        add_parser = feeds_subparsers.add_parser('add', help='Add and select a custom feed')
        add_parser.add_argument('name')
        add_parser.add_argument('url')

        remove_parser = feeds_subparsers.add_parser('remove', help='Deselect a feed')
        remove_parser.add_argument('name')

        feeds_subparsers.add_parser('reset', help='Select the default feeds again')

    def _add_stopwords_parser(self, subparsers):
        """Add stopwords command parser."""
        stopwords_parser = subparsers.add_parser('stopwords', help='Custom stopword management')
        self._command_parsers['stopwords'] = stopwords_parser
        stopwords_subparsers = stopwords_parser.add_subparsers(
            dest='subcommand',
            help='Stopword operations',
            metavar='{list,add,remove,clear}'
        )

        stopwords_subparsers.add_parser('list', help='Show custom stopwords')

        add_parser = stopwords_subparsers.add_parser('add', help='Add custom stopwords')
        add_parser.add_argument('words', nargs='+', metavar='WORD')

        remove_parser = stopwords_subparsers.add_parser('remove', help='Remove custom stopwords')
        remove_parser.add_argument('words', nargs='+', metavar='WORD')

        stopwords_subparsers.add_parser('clear', help='Remove all custom stopwords')

    def _get_examples_text(self) -> str:
        """Get examples text for help."""
        return """
Examples:
  feedwords analyze run
  feedwords analyze run --top 50 --sources economy --source-feed "BBC News"
  feedwords analyze run --feed "Hacker News" "Ars Technica" --json

  feedwords feeds list
  feedwords feeds add "My Blog" https://example.com/feed.xml
  feedwords stopwords add trump biden
"""

    def route_command(self, args: Optional[List[str]] = None) -> int:
        """
        Route command to appropriate handler.

        Args:
            args: Command line arguments (uses sys.argv if None)

        Returns:
            Exit code
        """
        try:
            if args is None:
                args = sys.argv[1:]

            parsed_args = self.parser.parse_args(args)

            if not parsed_args.command:
                self.parser.print_help()
                return 1

            return self._handle_command(parsed_args)

        except SystemExit as e:
            # argparse calls sys.exit() on error or help
            return e.code if e.code is not None else 0

    def _handle_command(self, args: argparse.Namespace) -> int:
        """Handle command structure."""
        logger.debug(f"Handling command: {args.command}")

        if args.command not in COMMANDS:
            available = ', '.join(COMMANDS.keys())
            logger.error(f"Unknown command '{args.command}'. Available: {available}")
            return 1

        subcommand = getattr(args, 'subcommand', None)
        if not subcommand:
            logger.error(f"No subcommand specified for '{args.command}'")
            self._command_parsers[args.command].print_help()
            return 1

        command = get_command(args.command, container=self._container)
        return command.execute(subcommand, args)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        get_config_manager().update_logging()
    except ConfigurationError as e:
        logger.error(str(e))
        return 78

    router = CLIRouter()
    return router.route_command(args)


if __name__ == '__main__':
    sys.exit(main())

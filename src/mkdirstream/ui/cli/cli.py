"""Command line interface for mkdirstream."""

import sys
from typing import final

from mkdirstream.platform.logging import logger
from mkdirstream.ui.cli.args import ArgumentParser
from mkdirstream.ui.cli.commands import EnsureCommand
from mkdirstream.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            results = EnsureCommand(args).execute()
            ResultDisplay().show_results(results, quiet=args.quiet)
            if any(not result.success for result in results):
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` before this returns.
    """
    CommandProcessor.process_command()
    return 0

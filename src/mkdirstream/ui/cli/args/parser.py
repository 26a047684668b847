"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from mkdirstream.config.config import Config
from mkdirstream.features.ensure import parse_mode
from mkdirstream.platform.logging import setup_logger
from mkdirstream.ui.cli.args.options import EnsureArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="mkdirstream",
            description="Create directories (and missing parents), reconciling their mode.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                "With --stdin, newline-separated paths are read from standard input,\n"
                "each directory is created, and the path is echoed once it exists."
            ),
        )
        _ = parser.add_argument(
            "directories",
            nargs="*",
            metavar="DIR",
            help="Directories to create",
        )
        _ = parser.add_argument(
            "-m",
            "--mode",
            type=str,
            metavar="MODE",
            help=(
                "Octal mode for the target directories (parents keep the default mode); "
                "defaults to default_mode from config.toml"
            ),
        )
        _ = parser.add_argument(
            "--stdin",
            action="store_true",
            dest="read_stdin",
            help="Read directory paths from standard input and echo each once created",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show every directory event",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> EnsureArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            EnsureArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors (exit code 2).
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_log_level

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if not parsed_args.directories and not parsed_args.read_stdin:
            parser.error("at least one DIR or --stdin is required")

        raw_mode = parsed_args.mode if parsed_args.mode is not None else configuration.default_mode
        try:
            mode = parse_mode(raw_mode)
        except ValueError as exc:
            parser.error(str(exc))

        return EnsureArgs(
            directories=[Path(directory) for directory in parsed_args.directories],
            mode=mode,
            read_stdin=parsed_args.read_stdin,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser"]

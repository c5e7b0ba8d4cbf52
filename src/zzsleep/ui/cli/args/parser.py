"""Command line argument parser.

Time expressions may start with ``-`` (``-5m``), so the raw arguments are
not handed to ``argparse``. The quiet flag is removed by a membership test
and everything else is passed on untouched. ``argparse`` only renders the
usage text.
"""

import argparse
import sys
from collections.abc import Sequence
from typing import final

from zzsleep.config.config import Config
from zzsleep.config.settings import PROGRAM_NAME, QUIET_FLAGS
from zzsleep.platform.logging import logger, setup_logger
from zzsleep.ui.cli.args.options import CountdownArgs

EXAMPLES = """\
examples:
  zz 10                      # 10 seconds
  zz 2h                      # 2 hours
  zz 5m                      # 5 minutes
  zz 30s                     # 30 seconds
  zz 2h 5m                   # 2 hours 5 minutes
  zz 5m 30s                  # 5 minutes 30 seconds
  zz 1h 30m 45s              # 1 hour 30 minutes 45 seconds
  zz 12:30                   # until 12:30 today (tomorrow if past)
  zz 12:30:45                # until 12:30:45 today (tomorrow if past)
  zz 20260220T123000+0900    # ISO 8601 with timezone
  zz 20260220T123000Z        # ISO 8601 UTC
  zz -q 5m                   # wait 5 minutes without a progress bar
"""


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the parser used to render usage text.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog=PROGRAM_NAME,
            usage="%(prog)s [-q|--quiet] <time-expression...>",
            description="Sleep until a duration has passed or a clock time is reached.",
            epilog=EXAMPLES,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Wait without showing the progress bar (may appear anywhere)",
        )
        _ = parser.add_argument(
            "time_expression",
            nargs="+",
            metavar="TIME",
            help="Seconds, <int>h/m/s durations, HH:MM[:SS], or a compact ISO 8601 timestamp",
        )
        return parser

    @staticmethod
    def split_args(raw_args: Sequence[str]) -> CountdownArgs:
        """Separate the quiet flag from the time tokens.

        Args:
            raw_args: Arguments without the program name.

        Returns:
            CountdownArgs: Quiet flag and the remaining tokens in order.
        """
        quiet = any(arg in QUIET_FLAGS for arg in raw_args)
        time_tokens = tuple(arg for arg in raw_args if arg not in QUIET_FLAGS)
        return CountdownArgs(quiet=quiet, time_tokens=time_tokens)

    @staticmethod
    def print_usage() -> None:
        """Write the usage text to stderr."""

        ArgumentParser.create_parser().print_help(file=sys.stderr)

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CountdownArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CountdownArgs: Processed command line arguments.

        Raises:
            SystemExit: With code 1 when no arguments were given.
        """
        raw_args = list(sys.argv[1:] if args_list is None else args_list)

        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file,
            console_level=configuration.console_level,
        )

        if not raw_args:
            ArgumentParser.print_usage()
            sys.exit(1)

        args = ArgumentParser.split_args(raw_args)
        logger.debug("Arguments: quiet=%s tokens=%s", args.quiet, list(args.time_tokens))
        return args

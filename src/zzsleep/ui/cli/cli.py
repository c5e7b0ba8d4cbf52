"""Command line interface for zzsleep."""

import sys
from typing import final

from rich.console import Console

from zzsleep.features.timeexpr import TimeExpressionError, parse_end_time
from zzsleep.features.waiting import wait_until
from zzsleep.platform.logging import console_for, logger
from zzsleep.shared.clock import local_now
from zzsleep.ui.cli.args import ArgumentParser
from zzsleep.ui.cli.display import CountdownProgressDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Parse the time expression and wait for it.

        Args:
            args_list: List of command line arguments (for testing).
        """
        args = ArgumentParser.process_args(args_list)

        try:
            end = parse_end_time(args.time_tokens, local_now())
        except TimeExpressionError as e:
            logger.debug(
                "Rejected time expression: %s",
                e,
                extra={"countdown_event": "countdown.parse.error", "tokens": args.time_tokens},
            )
            CommandProcessor._error_console().print(
                f"error: {e}", markup=False, highlight=False
            )
            sys.exit(1)

        logger.debug(
            "Parsed end time %s",
            end.isoformat(),
            extra={"countdown_event": "countdown.parse.success", "end_time": end},
        )

        try:
            display = None if args.quiet else CountdownProgressDisplay()
            wait_until(end, args.quiet, display)
        except KeyboardInterrupt:
            logger.warning(
                "Operation cancelled by user",
                extra={"countdown_event": "countdown.wait.cancelled"},
            )
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _error_console() -> Console:
        return console_for(logger) or Console(stderr=True, soft_wrap=True)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command(argv)
    return 0

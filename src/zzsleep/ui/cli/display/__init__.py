"""Display management for CLI interface."""

from zzsleep.ui.cli.display.progress import CountdownProgressDisplay

__all__ = ["CountdownProgressDisplay"]

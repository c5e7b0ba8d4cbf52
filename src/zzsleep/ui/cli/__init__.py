"""Command line interface package."""

from zzsleep.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]

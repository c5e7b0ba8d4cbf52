"""Command line argument handling package."""

from zzsleep.ui.cli.args.parser import ArgumentParser
from zzsleep.ui.cli.args.options import CountdownArgs

__all__ = ["ArgumentParser", "CountdownArgs"]

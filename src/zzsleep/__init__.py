"""zzsleep: sleep until a duration or clock time, with a live countdown."""

__version__ = "0.1.0"

"""Courier command-line interface."""

from courier import __version__

__all__ = ["__version__"]

"""Pomotimer CLI - terminal work/break interval timer."""

__version__ = "0.3.0"

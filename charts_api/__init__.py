"""Tick log chart service."""

__version__ = "0.1.0"

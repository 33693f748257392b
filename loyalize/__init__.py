"""Loyalize restaurant loyalty back-office server."""

__version__ = "0.3.0"

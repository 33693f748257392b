"""Loyalty tiers."""

from .exceptions import TierNotFoundError

__all__ = ["TierNotFoundError"]

"""Customer activity (visits, rewards, sign-ups)."""

from .exceptions import InvalidActivityError

__all__ = ["InvalidActivityError"]

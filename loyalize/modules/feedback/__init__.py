"""Guest feedback."""

from .models import ChannelCount, FeedbackStats, RatingCount

__all__ = ["ChannelCount", "FeedbackStats", "RatingCount"]

"""Aggregates computed over guest feedback."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ChannelCount:
    channel: str
    count: int


@dataclass(slots=True)
class RatingCount:
    rating: int
    count: int


@dataclass(slots=True)
class FeedbackStats:
    avg_rating: float
    total_reviews: int
    positive_percent: int
    by_channel: list[ChannelCount] = field(default_factory=list)
    by_rating: list[RatingCount] = field(default_factory=list)

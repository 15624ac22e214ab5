"""Configuration module using Pydantic Settings.

Provides typed configuration for replay, scoring and highlighting with
environment variable support.

Usage:
    from trafficreplay.config import ChallengeSettings, ReplaySettings

    settings = ChallengeSettings(margin=30.0)
    replay = ReplaySettings(car_speed=10.0)
"""

from trafficreplay.config.settings import ChallengeSettings, HighlightSettings, ReplaySettings

__all__ = [
    "ReplaySettings",
    "ChallengeSettings",
    "HighlightSettings",
]

"""Configuration settings using Pydantic Settings.

Provides typed, tunable product constants with environment variable support.

Usage:
    from trafficreplay.config import ChallengeSettings, ReplaySettings

    # Load from environment variables (REPLAY_*, CHALLENGE_*, HIGHLIGHT_*)
    replay = ReplaySettings()

    # Or override with explicit values
    challenge = ChallengeSettings(margin=45.0, statistic=Statistic.P90)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from trafficreplay.core.stats import Statistic


class ReplaySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the synthetic replay population.

    Attributes:
        car_speed: Constant driving speed in meters per second.
        spawn_interval: Seconds between consecutive car departures.
        max_cars: Cap on the synthetic population (one car per driving lane).
        max_route_hops: Cap on lanes followed when deriving a car's route.

    Environment Variables:
        REPLAY_CAR_SPEED
        REPLAY_SPAWN_INTERVAL
        REPLAY_MAX_CARS
        REPLAY_MAX_ROUTE_HOPS
    """

    model_config = SettingsConfigDict(
        env_prefix="REPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    car_speed: float = Field(default=8.0, gt=0)
    spawn_interval: float = Field(default=2.0, ge=0)
    max_cars: int = Field(default=100, ge=0)
    max_route_hops: int = Field(default=32, ge=1)


class ChallengeSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for challenge scoring.

    Attributes:
        margin: Seconds the statistic must improve by to complete the challenge.
        statistic: Which statistic of trip times is compared.
        end_of_day: Simulated time (seconds) at which final results are due.
        tie_tolerance: Deltas within this many seconds count as unchanged.

    Environment Variables:
        CHALLENGE_MARGIN
        CHALLENGE_STATISTIC (min, mean, p50, p90, p99, max)
        CHALLENGE_END_OF_DAY
        CHALLENGE_TIE_TOLERANCE
    """

    model_config = SettingsConfigDict(
        env_prefix="CHALLENGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    margin: float = Field(default=30.0, ge=0)
    statistic: Statistic = Statistic.P50
    end_of_day: float = Field(default=24.0 * 3600.0, gt=0)
    tie_tolerance: float = Field(default=1e-6, ge=0)


class HighlightSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for selection highlighting.

    Attributes:
        turn_alpha: Opacity applied to turns when showing a whole lane.
        timer_width: Width of the signal countdown bar.
        timer_height: Full height of the signal countdown bar.

    Environment Variables:
        HIGHLIGHT_TURN_ALPHA
        HIGHLIGHT_TIMER_WIDTH
        HIGHLIGHT_TIMER_HEIGHT
    """

    model_config = SettingsConfigDict(
        env_prefix="HIGHLIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    turn_alpha: float = Field(default=0.5, ge=0, le=1)
    timer_width: float = Field(default=50.0, gt=0)
    timer_height: float = Field(default=100.0, gt=0)

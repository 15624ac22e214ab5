"""Playback modes, user actions and per-frame results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PlaybackMode(Enum):
    """Whether the replay clock advances on its own."""

    OFF = auto()  # Only explicit rewind/step actions move the tick
    FORWARD = auto()  # One tick forward per animation frame
    BACKWARD = auto()  # One tick back per animation frame, stops at zero


class PlaybackAction(Enum):
    """User actions the controller understands."""

    REWIND = auto()
    STEP_FORWARD = auto()
    TOGGLE_FORWARD = auto()
    TOGGLE_BACKWARD = auto()
    TOGGLE_TOOLTIPS = auto()
    QUIT = auto()


class EventLoopMode(Enum):
    """Scheduling request returned to the host loop after every event."""

    IDLE = auto()
    """Wait for the next input event."""

    ANIMATION = auto()
    """Deliver an animation frame as soon as possible."""


@dataclass(frozen=True, slots=True)
class PlaybackUpdate:
    """Outcome of one controller event.

    Attributes:
        schedule: Whether the host should keep animating.
        still_open: False once the controller has quit and may be destroyed.
        prompt: Status line for the host's mode banner.
    """

    schedule: EventLoopMode
    still_open: bool
    prompt: str

    @property
    def wants_redraw(self) -> bool:
        return self.schedule is EventLoopMode.ANIMATION

"""Playback state machine, camera interpolation and trail runner."""

from trail_replay.playback.controller import (
    ARRIVAL_THRESHOLD,
    PLAYBACK_SECONDS_PER_STEP,
    PlaybackController,
    StepResult,
    reset,
    select_checkpoint,
    step,
    toggle_play,
)
from trail_replay.playback.models import CameraPose, PlaybackMode, PlaybackState
from trail_replay.playback.runner import TrailRunner, closest_trail_index, position_on_trail

__all__ = [
    "ARRIVAL_THRESHOLD",
    "PLAYBACK_SECONDS_PER_STEP",
    "CameraPose",
    "PlaybackController",
    "PlaybackMode",
    "PlaybackState",
    "StepResult",
    "TrailRunner",
    "closest_trail_index",
    "position_on_trail",
    "reset",
    "select_checkpoint",
    "step",
    "toggle_play",
]

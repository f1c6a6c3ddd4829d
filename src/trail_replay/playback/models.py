"""Playback state for the camera controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from trail_replay.track.models import NormalizedPoint

INITIAL_CAMERA_POSITION: NormalizedPoint = (6.0, 6.0, 10.0)


class PlaybackMode(str, Enum):
    IDLE = "idle"
    """Paused with the camera settled on the active checkpoint."""

    ARRIVING = "arriving"
    """Camera animating toward the active checkpoint."""

    PLAYING = "playing"
    """Auto-advancing through checkpoints on a fixed per-step timer."""


@dataclass(frozen=True)
class CameraPose:
    position: NormalizedPoint
    look_at: NormalizedPoint | None = None


@dataclass(frozen=True)
class PlaybackState:
    """Runtime playback state, replaced (never mutated) by every transition.

    ``arriving`` and ``is_playing`` can both be true: pressing play while the
    camera is still travelling keeps the animation going.
    """

    active_index: int = 0
    is_playing: bool = False
    elapsed_in_step_s: float = 0.0
    arriving: bool = True
    camera: CameraPose = CameraPose(position=INITIAL_CAMERA_POSITION)

    @property
    def mode(self) -> PlaybackMode:
        if self.arriving:
            return PlaybackMode.ARRIVING
        if self.is_playing:
            return PlaybackMode.PLAYING
        return PlaybackMode.IDLE

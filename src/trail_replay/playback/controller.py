"""Frame-driven playback / camera interpolation.

The state machine is a set of pure functions over :class:`PlaybackState`:
user actions (:func:`select_checkpoint`, :func:`toggle_play`, :func:`reset`)
and the per-frame :func:`step`. :class:`PlaybackController` holds the current
state for callers that want an object with an auto-advance callback.

Anomalies (empty timeline, stale index) are absorbed: a stalled camera is
preferable to a crashed scene.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from trail_replay.playback.models import CameraPose, PlaybackState
from trail_replay.timeline.models import TimelineEntry
from trail_replay.track.models import NormalizedPoint

CAMERA_OFFSET: NormalizedPoint = (1.6, 1.2, 1.6)
LOOK_AT_LIFT = 0.3
SMOOTHING = 0.04
"""Fraction of the remaining distance covered per frame."""
ARRIVAL_THRESHOLD = 0.05
PLAYBACK_SECONDS_PER_STEP = 2.0


@dataclass(frozen=True)
class StepResult:
    state: PlaybackState
    advanced_to: int | None = None
    """New active index when auto-advance fired on this frame."""


def _clamp_index(index: int, count: int) -> int:
    return min(max(index, 0), count - 1)


def camera_target(checkpoint: NormalizedPoint) -> NormalizedPoint:
    """Camera destination for a checkpoint (fixed offset above and behind it)."""
    x, y, z = checkpoint
    ox, oy, oz = CAMERA_OFFSET
    return (x + ox, y + oy, z + oz)


def select_checkpoint(state: PlaybackState, index: int, count: int) -> PlaybackState:
    """User picked checkpoint *index*: pause and fly the camera there."""
    if count > 0:
        index = _clamp_index(index, count)
    return dataclasses.replace(
        state,
        active_index=index,
        is_playing=False,
        elapsed_in_step_s=0.0,
        arriving=True,
    )


def toggle_play(state: PlaybackState) -> PlaybackState:
    """Flip play/pause. Playing keeps the current view; pausing re-centers on the active checkpoint."""
    playing = not state.is_playing
    return dataclasses.replace(
        state,
        is_playing=playing,
        elapsed_in_step_s=0.0,
        arriving=state.arriving or not playing,
    )


def reset(state: PlaybackState) -> PlaybackState:
    """Jump back to the first checkpoint without changing play/pause."""
    return dataclasses.replace(
        state,
        active_index=0,
        elapsed_in_step_s=0.0,
        arriving=state.arriving or not state.is_playing,
    )


def step(state: PlaybackState, dt: float, timeline: Sequence[TimelineEntry]) -> StepResult:
    """Advance the controller by one rendered frame of *dt* seconds."""
    if not timeline:
        return StepResult(state)

    index = _clamp_index(state.active_index, len(timeline))
    camera = state.camera
    arriving = state.arriving

    if arriving:
        cx, cy, cz = timeline[index].position
        target = camera_target((cx, cy, cz))
        position = tuple(p + (t - p) * SMOOTHING for p, t in zip(camera.position, target))
        camera = CameraPose(position=position, look_at=(cx, cy + LOOK_AT_LIFT, cz))
        if math.dist(position, target) < ARRIVAL_THRESHOLD:
            arriving = False

    is_playing = state.is_playing
    elapsed = state.elapsed_in_step_s
    advanced_to: int | None = None

    if is_playing:
        elapsed += dt
        if elapsed >= PLAYBACK_SECONDS_PER_STEP:
            elapsed = 0.0
            if index + 1 < len(timeline):
                index += 1
                advanced_to = index
            else:
                # Terminal checkpoint: stop and settle the camera on it.
                is_playing = False
                arriving = True

    new_state = dataclasses.replace(
        state,
        active_index=index,
        is_playing=is_playing,
        elapsed_in_step_s=elapsed,
        arriving=arriving,
        camera=camera,
    )
    return StepResult(new_state, advanced_to)


class PlaybackController:
    """Stateful wrapper around :func:`step` for a single scene.

    Args:
        timeline: Checkpoints to play through.
        on_auto_advance: Called with the new index whenever playback advances.
        state: Initial state (index 0, paused, flying to the first checkpoint).
    """

    def __init__(
        self,
        timeline: Sequence[TimelineEntry],
        on_auto_advance: Callable[[int], None] | None = None,
        state: PlaybackState | None = None,
    ) -> None:
        self._timeline = list(timeline)
        self._on_auto_advance = on_auto_advance
        self.state = state or PlaybackState()

    @property
    def timeline(self) -> list[TimelineEntry]:
        return self._timeline

    def select(self, index: int) -> None:
        self.state = select_checkpoint(self.state, index, len(self._timeline))

    def toggle_play(self) -> None:
        self.state = toggle_play(self.state)

    def reset(self) -> None:
        self.state = reset(self.state)

    def tick(self, dt: float) -> int | None:
        """Run one frame; returns the new index if playback advanced."""
        result = step(self.state, dt, self._timeline)
        self.state = result.state
        if result.advanced_to is not None and self._on_auto_advance is not None:
            self._on_auto_advance(result.advanced_to)
        return result.advanced_to

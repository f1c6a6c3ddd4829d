"""Trail runner: a marker that travels along the trail during playback.

Instead of jumping between checkpoints, the marker moves from the active
checkpoint's place on the trail toward the next one over the playback step.
"""

from __future__ import annotations

from collections.abc import Sequence

from trail_replay.playback.controller import PLAYBACK_SECONDS_PER_STEP
from trail_replay.playback.models import PlaybackState
from trail_replay.timeline.models import TimelineEntry
from trail_replay.track.models import NormalizedPoint

RUNNER_LIFT = 0.02
"""Vertical offset so the marker sits just above the trail line."""


def closest_trail_index(points: Sequence[NormalizedPoint], position: NormalizedPoint) -> int:
    """Index of the trail point closest to *position* in 3D (first on ties)."""
    best = 0
    best_sq = float("inf")
    px, py, pz = position
    for i, (x, y, z) in enumerate(points):
        d_sq = (x - px) ** 2 + (y - py) ** 2 + (z - pz) ** 2
        if d_sq < best_sq:
            best_sq = d_sq
            best = i
    return best


def position_on_trail(points: Sequence[NormalizedPoint], fraction: float) -> NormalizedPoint:
    """Linear interpolation along the trail: 0 = first point, 1 = last point."""
    if not points:
        return (0.0, 0.0, 0.0)
    if len(points) == 1:
        return points[0]
    n = len(points) - 1
    f = max(0.0, min(fraction * n, float(n)))
    i0 = int(f)
    i1 = min(i0 + 1, n)
    t = f - i0
    a, b = points[i0], points[i1]
    return (
        a[0] + t * (b[0] - a[0]),
        a[1] + t * (b[1] - a[1]),
        a[2] + t * (b[2] - a[2]),
    )


def checkpoint_fractions(
    points: Sequence[NormalizedPoint],
    timeline: Sequence[TimelineEntry],
) -> list[float]:
    """Fraction of the trail at which each checkpoint sits."""
    if len(points) <= 1:
        return [0.0 for _ in timeline]
    n = len(points) - 1
    return [
        min(1.0, max(0.0, closest_trail_index(points, entry.position) / n))
        for entry in timeline
    ]


class TrailRunner:
    """Compute the runner marker position for a playback state.

    Checkpoint fractions are computed once per trail/timeline pair.
    """

    def __init__(
        self,
        points: Sequence[NormalizedPoint],
        timeline: Sequence[TimelineEntry],
    ) -> None:
        self._points = list(points)
        self._fractions = checkpoint_fractions(self._points, timeline)

    @property
    def fractions(self) -> list[float]:
        return list(self._fractions)

    def position(self, state: PlaybackState) -> NormalizedPoint:
        """Marker position for *state*, lifted :data:`RUNNER_LIFT` above the trail."""
        if not self._fractions:
            x, y, z = position_on_trail(self._points, 0.0)
            return (x, y + RUNNER_LIFT, z)

        last = len(self._fractions) - 1
        index = min(max(state.active_index, 0), last)
        frac_start = self._fractions[index]
        if state.is_playing:
            frac_end = self._fractions[min(index + 1, last)]
            progress = min(1.0, state.elapsed_in_step_s / PLAYBACK_SECONDS_PER_STEP)
            fraction = frac_start + progress * (frac_end - frac_start)
        else:
            fraction = frac_start
        x, y, z = position_on_trail(self._points, fraction)
        return (x, y + RUNNER_LIFT, z)

"""Checkpoint snapping: place named points of interest on the trail.

Each definition is matched against recorded time when it carries an elapsed
time and the track has timestamps; otherwise it is placed by fraction of the
trail length. Every resulting position is one of the trail's own points.
"""

from __future__ import annotations

import math

from trail_replay.timeline.models import CheckpointDefinition, TimelineEntry
from trail_replay.track.models import NormalizedPoint


def format_elapsed(seconds: float) -> str:
    """Format *seconds* as ``MM:SS`` (floor-truncated, negative → ``00:00``).

    Minutes are not wrapped into hours: 75 minutes is ``"75:00"``.
    """
    total = max(0, math.floor(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def nearest_time_index(timestamps: list[float], target: float) -> int | None:
    """Index of the finite timestamp closest to *target*, first on ties.

    Returns None when no timestamp is finite.
    """
    best: int | None = None
    best_diff = math.inf
    for i, ts in enumerate(timestamps):
        if not math.isfinite(ts):
            continue
        diff = abs(ts - target)
        if diff < best_diff:
            best_diff = diff
            best = i
    return best


def fraction_index(fraction: float, point_count: int) -> int:
    """``floor(fraction * (point_count - 1))`` clamped into the valid range."""
    idx = math.floor(fraction * (point_count - 1))
    return min(max(idx, 0), point_count - 1)


class CheckpointSnapper:
    """Map :class:`CheckpointDefinition` objects onto trail points.

    Selection (first rule that applies):

    1. ``elapsed_seconds`` / ``elapsed_minutes`` set and at least one finite
       timestamp: the point recorded closest to
       ``min(timestamps) + elapsed * 1000``.
    2. ``fraction`` if set, else ``index / max(1, count - 1)``, mapped with
       :func:`fraction_index`.

    Label time: the explicit ``time``, else ``MM:SS`` of the elapsed time when
    rule 1 placed the checkpoint, else ``00:<index * 10>``.
    """

    def snap(
        self,
        points: list[NormalizedPoint],
        timestamps: list[float],
        definitions: list[CheckpointDefinition],
    ) -> list[TimelineEntry]:
        """Return one :class:`TimelineEntry` per definition, in input order.

        Args:
            points: Normalized trail points.
            timestamps: Epoch-millisecond timestamp per point (NaN when unknown).
            definitions: Ordered checkpoint definitions.

        Raises:
            ValueError: If *points* and *timestamps* differ in length, or if
                there are definitions but no points.
        """
        if len(points) != len(timestamps):
            raise ValueError(
                f"points ({len(points)}) and timestamps ({len(timestamps)}) must align"
            )
        if not definitions:
            return []
        if not points:
            raise ValueError("Cannot place checkpoints on an empty trail")

        finite = [ts for ts in timestamps if math.isfinite(ts)]
        start_ms = min(finite) if finite else None
        count = len(definitions)

        timeline: list[TimelineEntry] = []
        for index, definition in enumerate(definitions):
            elapsed = definition.resolved_elapsed_seconds()
            point_idx: int | None = None
            if elapsed is not None and start_ms is not None:
                point_idx = nearest_time_index(timestamps, start_ms + elapsed * 1000.0)

            used_elapsed = point_idx is not None
            if point_idx is None:
                fraction = definition.fraction
                if fraction is None:
                    fraction = index / max(1, count - 1)
                point_idx = fraction_index(fraction, len(points))

            if definition.time is not None:
                label_time = definition.time
            elif used_elapsed:
                label_time = format_elapsed(elapsed)
            else:
                label_time = f"00:{index * 10:02d}"

            timeline.append(TimelineEntry(
                time=label_time,
                label=definition.name,
                position=points[point_idx],
            ))

        return timeline

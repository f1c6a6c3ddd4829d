"""GPX track loading via :mod:`gpxpy`."""

from __future__ import annotations

import logging
import math
from datetime import timezone
from pathlib import Path

import gpxpy
import gpxpy.gpx

from trail_replay.track.models import RawSample

_logger = logging.getLogger(__name__)


class TrackLoadError(ValueError):
    """The track file is missing, unparsable or holds no samples."""


def _to_sample(point: gpxpy.gpx.GPXTrackPoint) -> RawSample:
    elevation = point.elevation if point.elevation is not None else 0.0
    timestamp_ms = math.nan
    if point.time is not None:
        # zone-less <time> values are UTC, never host-local
        t = point.time if point.time.tzinfo else point.time.replace(tzinfo=timezone.utc)
        timestamp_ms = t.timestamp() * 1000.0
    return RawSample(
        lat=float(point.latitude),
        lon=float(point.longitude),
        elevation=float(elevation),
        timestamp_ms=timestamp_ms,
    )


class GpxTrackLoader:
    """Read the first track of a GPX document as an ordered list of samples.

    All segments of that track are concatenated in document order. Points
    without elevation get ``0``; points without time get a NaN timestamp.
    """

    def parse(self, text: str) -> list[RawSample]:
        """Parse GPX *text*.

        Raises:
            TrackLoadError: If the document is malformed or holds no track points.
        """
        try:
            gpx = gpxpy.parse(text)
        except gpxpy.gpx.GPXException as exc:
            raise TrackLoadError(f"Malformed GPX document: {exc}") from exc

        if not gpx.tracks:
            raise TrackLoadError("No <trk> found in GPX document")

        samples = [
            _to_sample(point)
            for segment in gpx.tracks[0].segments
            for point in segment.points
        ]
        if not samples:
            raise TrackLoadError("No <trkpt> points found in GPX document")

        untimed = sum(1 for s in samples if not s.has_time())
        if untimed:
            _logger.warning(
                "%d of %d track points have no timestamp; they are ignored for elapsed-time matching",
                untimed,
                len(samples),
            )
        return samples

    def load(self, path: str | Path) -> list[RawSample]:
        """Read and parse the GPX file at *path* (UTF-8).

        Raises:
            TrackLoadError: If the file does not exist or cannot be parsed.
        """
        path = Path(path)
        if not path.is_file():
            raise TrackLoadError(f"Track file not found: {path}")
        _logger.info("Reading GPX from %s", path)
        return self.parse(path.read_text(encoding="utf-8"))

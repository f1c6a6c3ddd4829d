"""Raw GPS samples → bounded local Cartesian frame.

Equirectangular local-plane approximation: latitude and longitude are treated
as planar coordinates around the track center. Horizontal axes share one scale
so the real aspect ratio survives; elevation has its own scale so relief stays
legible.
"""

from __future__ import annotations

from dataclasses import dataclass

from trail_replay.track.models import BoundingBox, NormalizedPoint, RawSample

HORIZONTAL_EXTENT = 4.0
"""The larger horizontal span maps onto ``[-2, 2]``."""

ELEVATION_EXTENT = 0.8
"""Elevation maps onto ``[0, 0.8]``."""


@dataclass
class NormalizedTrack:
    """Result of a normalization pass."""

    points: list[NormalizedPoint]
    bbox: BoundingBox
    horizontal_scale: float
    elevation_scale: float


def _span(lo: float, hi: float) -> float:
    # A zero span (single distinct coordinate) is replaced by 1.
    return (hi - lo) or 1.0


class CoordinateNormalizer:
    """Map raw samples into the local frame used by the 3D scene.

    * ``x = -(lon - center_lon) * horizontal_scale`` (east–west mirrored)
    * ``z = (lat - center_lat) * horizontal_scale``
    * ``y = (elevation - min_elevation) * elevation_scale``
    """

    def normalize(self, samples: list[RawSample]) -> NormalizedTrack:
        """Normalize *samples*.

        Raises:
            ValueError: If *samples* is empty.
        """
        if not samples:
            raise ValueError("At least one sample is required")

        bbox = BoundingBox.from_samples(samples)
        center_lat, center_lon = bbox.center

        max_span = max(
            _span(bbox.min_lat, bbox.max_lat),
            _span(bbox.min_lon, bbox.max_lon),
        )
        horizontal_scale = HORIZONTAL_EXTENT / max_span
        elevation_scale = ELEVATION_EXTENT / _span(bbox.min_elevation, bbox.max_elevation)

        points: list[NormalizedPoint] = [
            (
                -(s.lon - center_lon) * horizontal_scale,
                (s.elevation - bbox.min_elevation) * elevation_scale,
                (s.lat - center_lat) * horizontal_scale,
            )
            for s in samples
        ]
        return NormalizedTrack(
            points=points,
            bbox=bbox,
            horizontal_scale=horizontal_scale,
            elevation_scale=elevation_scale,
        )

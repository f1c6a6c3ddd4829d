"""Track data structures."""

from __future__ import annotations

import math
from dataclasses import dataclass

NormalizedPoint = tuple[float, float, float]
"""``(x, y, z)`` in the local Cartesian frame (``y`` is up)."""


@dataclass(frozen=True)
class RawSample:
    """A single GPS sample as read from the track file."""

    lat: float
    """Latitude in degrees."""

    lon: float
    """Longitude in degrees."""

    elevation: float
    """Elevation in metres (0 when the source sample had none)."""

    timestamp_ms: float = math.nan
    """Acquisition time in epoch milliseconds, NaN when unknown."""

    def has_time(self) -> bool:
        """Return True if the sample carries a finite timestamp."""
        return math.isfinite(self.timestamp_ms)


@dataclass(frozen=True)
class BoundingBox:
    """Extremal values across a sample sequence.

    Serialized with the camelCase names the rendering client reads
    (``minLat``, ``maxElevation``, ...).
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    min_elevation: float
    max_elevation: float

    @classmethod
    def from_samples(cls, samples: list[RawSample]) -> BoundingBox:
        """Compute the box enclosing *samples*.

        Raises:
            ValueError: If *samples* is empty.
        """
        if not samples:
            raise ValueError("Cannot compute a bounding box of zero samples")
        lats = [s.lat for s in samples]
        lons = [s.lon for s in samples]
        eles = [s.elevation for s in samples]
        return cls(
            min_lat=min(lats),
            max_lat=max(lats),
            min_lon=min(lons),
            max_lon=max(lons),
            min_elevation=min(eles),
            max_elevation=max(eles),
        )

    @property
    def center(self) -> tuple[float, float]:
        """``(center_lat, center_lon)`` midpoint of the box."""
        return (
            (self.min_lat + self.max_lat) / 2,
            (self.min_lon + self.max_lon) / 2,
        )

    def to_dict(self) -> dict:
        return {
            "minLat": self.min_lat,
            "maxLat": self.max_lat,
            "minLon": self.min_lon,
            "maxLon": self.max_lon,
            "minElevation": self.min_elevation,
            "maxElevation": self.max_elevation,
        }

    @classmethod
    def from_dict(cls, d: dict) -> BoundingBox:
        return cls(
            min_lat=float(d["minLat"]),
            max_lat=float(d["maxLat"]),
            min_lon=float(d["minLon"]),
            max_lon=float(d["maxLon"]),
            min_elevation=float(d["minElevation"]),
            max_elevation=float(d["maxElevation"]),
        )

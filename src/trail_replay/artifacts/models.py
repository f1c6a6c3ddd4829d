"""Artifact payloads consumed by the rendering client.

Field names in :meth:`to_dict` are the wire contract; renaming one breaks the
client.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from trail_replay.timeline.models import TimelineEntry
from trail_replay.track.models import BoundingBox, NormalizedPoint

COORDINATE_SYSTEM = "local-cartesian"


@dataclass(frozen=True)
class TrailArtifact:
    """Canonical trail geometry for all downstream consumers."""

    name: str
    source: str
    bbox: BoundingBox
    points: list[NormalizedPoint]
    coordinate_system: str = COORDINATE_SYSTEM

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "source": self.source,
            "coordinateSystem": self.coordinate_system,
            "bbox": self.bbox.to_dict(),
            "points": [list(p) for p in self.points],
        }

    @classmethod
    def from_dict(cls, d: dict) -> TrailArtifact:
        return cls(
            name=str(d["name"]),
            source=str(d["source"]),
            coordinate_system=str(d["coordinateSystem"]),
            bbox=BoundingBox.from_dict(d["bbox"]),
            points=[(float(x), float(y), float(z)) for x, y, z in d["points"]],
        )


@dataclass(frozen=True)
class TerrainArtifact:
    """Square heightfield; ``heights[j][i]`` is column ``i`` (x), row ``j`` (z)."""

    name: str
    source: str
    size: float
    resolution: int
    bbox: BoundingBox
    heights: list[list[float]] = field(repr=False)
    coordinate_system: str = COORDINATE_SYSTEM

    def validate(self) -> None:
        """Check the grid is exactly ``resolution × resolution``.

        Raises:
            ValueError: On any row or column count mismatch.
        """
        if len(self.heights) != self.resolution:
            raise ValueError(
                f"Terrain has {len(self.heights)} rows, expected {self.resolution}"
            )
        for j, row in enumerate(self.heights):
            if len(row) != self.resolution:
                raise ValueError(
                    f"Terrain row {j} has {len(row)} columns, expected {self.resolution}"
                )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "source": self.source,
            "coordinateSystem": self.coordinate_system,
            "size": self.size,
            "resolution": self.resolution,
            "bbox": self.bbox.to_dict(),
            "heights": [list(row) for row in self.heights],
        }

    @classmethod
    def from_dict(cls, d: dict) -> TerrainArtifact:
        """Build and validate a terrain artifact from its wire form.

        Raises:
            ValueError: If the grid does not match ``resolution``.
        """
        terrain = cls(
            name=str(d["name"]),
            source=str(d["source"]),
            coordinate_system=str(d["coordinateSystem"]),
            size=d["size"],
            resolution=int(d["resolution"]),
            bbox=BoundingBox.from_dict(d["bbox"]),
            heights=[[float(h) for h in row] for row in d["heights"]],
        )
        terrain.validate()
        return terrain


def timeline_to_list(timeline: list[TimelineEntry]) -> list[dict]:
    """Wire form of a timeline: a bare JSON array of entries."""
    return [entry.to_dict() for entry in timeline]

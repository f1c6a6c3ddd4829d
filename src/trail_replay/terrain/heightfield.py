"""Synthetic terrain heightfield from trail geometry.

The trail's elevation is "inflated" into a ridge: every grid cell takes the
elevation of its nearest trail point in the x/z plane, attenuated by an
isotropic Gaussian of the planar distance. There is no real elevation model
behind it; the result only has to look like a mountain around the path.
"""

from __future__ import annotations

import math

from trail_replay.artifacts.models import TerrainArtifact
from trail_replay.track.models import BoundingBox, NormalizedPoint

RESOLUTION = 64
SIZE = 8
"""Edge length of the grid in local units; matches the horizontal extent of the scene plane."""
SIGMA = 1.2


def nearest_planar(points: list[NormalizedPoint], u: float, v: float) -> tuple[float, float]:
    """Return ``(dist_sq, y)`` of the point nearest to ``(u, v)`` in the x/z plane.

    Full linear scan; the lowest index wins on equal distance. An empty
    *points* list gives ``(inf, 0.0)``.
    """
    best_sq = math.inf
    best_y = 0.0
    for x, y, z in points:
        dx = u - x
        dz = v - z
        d_sq = dx * dx + dz * dz
        if d_sq < best_sq:
            best_sq = d_sq
            best_y = y
    return best_sq, best_y


class HeightfieldSynthesizer:
    """Generate a ``resolution × resolution`` heightfield around a trail.

    Cost is ``O(resolution² × len(points))``, which is fine for 64² cells and
    ~500 points. Raising either bound needs a spatial index first.

    Args:
        resolution: Grid samples per side (>= 2).
        size: Physical edge length; the grid spans ``[-size/2, size/2]``.
        sigma: Standard deviation of the Gaussian falloff.
    """

    def __init__(self, resolution: int = RESOLUTION, size: float = SIZE, sigma: float = SIGMA) -> None:
        if resolution < 2:
            raise ValueError("resolution must be >= 2")
        if sigma <= 0:
            raise ValueError("sigma must be > 0")
        self.resolution = resolution
        self.size = size
        self.sigma = sigma

    def grid_coordinate(self, index: int) -> float:
        """Local coordinate of grid column/row *index*."""
        return (index / (self.resolution - 1)) * self.size - self.size / 2

    def synthesize(self, points: list[NormalizedPoint]) -> list[list[float]]:
        """Return ``heights[j][i]`` for columns ``i`` (x axis) and rows ``j`` (z axis).

        An empty trail yields an all-zero grid.
        """
        two_sigma_sq = 2 * self.sigma * self.sigma
        coords = [self.grid_coordinate(k) for k in range(self.resolution)]

        heights: list[list[float]] = []
        for v in coords:
            row: list[float] = []
            for u in coords:
                d_sq, y = nearest_planar(points, u, v)
                if math.isinf(d_sq):
                    row.append(0.0)
                    continue
                row.append(y * math.exp(-d_sq / two_sigma_sq))
            heights.append(row)
        return heights

    def build(
        self,
        points: list[NormalizedPoint],
        bbox: BoundingBox,
        name: str,
        source: str,
    ) -> TerrainArtifact:
        """Synthesize the grid and wrap it in a :class:`TerrainArtifact`."""
        return TerrainArtifact(
            name=name,
            source=source,
            size=self.size,
            resolution=self.resolution,
            bbox=bbox,
            heights=self.synthesize(points),
        )

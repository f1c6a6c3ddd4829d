"""Trail / timeline / terrain artifact models and JSON writer."""

from trail_replay.artifacts.models import (
    COORDINATE_SYSTEM,
    TerrainArtifact,
    TrailArtifact,
    timeline_to_list,
)
from trail_replay.artifacts.writer import ArtifactWriter, to_json

__all__ = [
    "COORDINATE_SYSTEM",
    "ArtifactWriter",
    "TerrainArtifact",
    "TrailArtifact",
    "timeline_to_list",
    "to_json",
]

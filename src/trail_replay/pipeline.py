"""TrailPipeline: GPX track → trail, timeline and terrain artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from trail_replay.artifacts.models import TerrainArtifact, TrailArtifact, timeline_to_list
from trail_replay.artifacts.writer import ArtifactWriter
from trail_replay.config import PipelineConfig
from trail_replay.terrain.heightfield import HeightfieldSynthesizer
from trail_replay.timeline.definitions import load_definitions
from trail_replay.timeline.models import CheckpointDefinition, TimelineEntry
from trail_replay.timeline.snapper import CheckpointSnapper
from trail_replay.track.downsample import Downsampler
from trail_replay.track.loader import GpxTrackLoader, TrackLoadError
from trail_replay.track.models import RawSample
from trail_replay.track.normalizer import CoordinateNormalizer

_logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    trail: TrailArtifact
    timeline: list[TimelineEntry]
    terrain: TerrainArtifact
    raw_count: int
    written: list[Path]


class TrailPipeline:
    """Run the offline conversion end to end.

    Nothing is written until every artifact has been computed, so a failure
    leaves the outputs of a previous run untouched.

    Args:
        config: Paths, names and size limits.
        loader: Track loader; a :class:`GpxTrackLoader` by default.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        loader: GpxTrackLoader | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self._loader = loader or GpxTrackLoader()

    def build(
        self,
        samples: list[RawSample],
        definitions: list[CheckpointDefinition],
        source: str,
    ) -> tuple[TrailArtifact, list[TimelineEntry], TerrainArtifact]:
        """Compute all three artifacts in memory.

        Raises:
            TrackLoadError: If *samples* is empty.
        """
        if not samples:
            raise TrackLoadError("Track contains no samples")

        sampled = Downsampler(self.config.max_points).downsample(samples)
        _logger.info("Downsampled %d samples to %d", len(samples), len(sampled))

        normalized = CoordinateNormalizer().normalize(sampled)
        trail = TrailArtifact(
            name=self.config.trail_name,
            source=source,
            bbox=normalized.bbox,
            points=normalized.points,
        )

        timestamps = [s.timestamp_ms for s in sampled]
        timeline = CheckpointSnapper().snap(normalized.points, timestamps, definitions)
        _logger.info("Placed %d checkpoints", len(timeline))

        terrain = HeightfieldSynthesizer(resolution=self.config.terrain_resolution).build(
            normalized.points,
            normalized.bbox,
            name=self.config.terrain_name,
            source=source,
        )
        terrain.validate()
        return trail, timeline, terrain

    def run(
        self,
        track_path: str | Path | None = None,
        checkpoints_path: str | Path | None = None,
        output_dir: str | Path | None = None,
    ) -> PipelineResult:
        """Load inputs, build the artifacts and write them as JSON.

        Paths default to the configured data directory.
        """
        cfg = self.config
        track_path = Path(track_path) if track_path else cfg.track_path
        checkpoints_path = Path(checkpoints_path) if checkpoints_path else cfg.checkpoints_path
        out = Path(output_dir) if output_dir else cfg.data_dir

        samples = self._loader.load(track_path)
        definitions = load_definitions(checkpoints_path)
        trail, timeline, terrain = self.build(samples, definitions, source=track_path.name)
        written = self.write(out, trail, timeline, terrain)
        return PipelineResult(
            trail=trail,
            timeline=timeline,
            terrain=terrain,
            raw_count=len(samples),
            written=written,
        )

    def write(
        self,
        output_dir: str | Path,
        trail: TrailArtifact,
        timeline: list[TimelineEntry],
        terrain: TerrainArtifact,
    ) -> list[Path]:
        """Write the three artifacts into *output_dir*, all or nothing."""
        out = Path(output_dir)
        cfg = self.config
        return ArtifactWriter().write_all({
            out / cfg.trail_path.name: trail.to_dict(),
            out / cfg.timeline_path.name: timeline_to_list(timeline),
            out / cfg.terrain_path.name: terrain.to_dict(),
        })

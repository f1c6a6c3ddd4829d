"""Pipeline configuration read from the environment.

Entry points call :func:`dotenv.load_dotenv` first so a project ``.env`` can
override the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from trail_replay.terrain.heightfield import RESOLUTION
from trail_replay.track.downsample import MAX_POINTS

TRACK_FILENAME = "track.gpx"
CHECKPOINTS_FILENAME = "checkpoints.json"
TRAIL_FILENAME = "trail.json"
TIMELINE_FILENAME = "timeline.json"
TERRAIN_FILENAME = "terrain.json"


@dataclass(frozen=True)
class PipelineConfig:
    data_dir: Path = Path("data/trail")
    trail_name: str = "Mt. Batulao Summit Trail"
    terrain_name: str = "Mt. Batulao Heightfield"
    max_points: int = MAX_POINTS
    terrain_resolution: int = RESOLUTION

    @property
    def track_path(self) -> Path:
        return self.data_dir / TRACK_FILENAME

    @property
    def checkpoints_path(self) -> Path:
        return self.data_dir / CHECKPOINTS_FILENAME

    @property
    def trail_path(self) -> Path:
        return self.data_dir / TRAIL_FILENAME

    @property
    def timeline_path(self) -> Path:
        return self.data_dir / TIMELINE_FILENAME

    @property
    def terrain_path(self) -> Path:
        return self.data_dir / TERRAIN_FILENAME

    @classmethod
    def from_env(cls) -> PipelineConfig:
        """Read ``TRAIL_REPLAY_*`` variables, falling back to the defaults."""
        defaults = cls()
        return cls(
            data_dir=Path(os.environ.get("TRAIL_REPLAY_DATA_DIR", str(defaults.data_dir))),
            trail_name=os.environ.get("TRAIL_REPLAY_TRAIL_NAME", defaults.trail_name),
            terrain_name=os.environ.get("TRAIL_REPLAY_TERRAIN_NAME", defaults.terrain_name),
            max_points=int(os.environ.get("TRAIL_REPLAY_MAX_POINTS", defaults.max_points)),
            terrain_resolution=int(
                os.environ.get("TRAIL_REPLAY_TERRAIN_RESOLUTION", defaults.terrain_resolution)
            ),
        )

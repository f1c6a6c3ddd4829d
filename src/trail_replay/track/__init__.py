"""Track loading, downsampling and normalization."""

from trail_replay.track.downsample import Downsampler
from trail_replay.track.loader import GpxTrackLoader, TrackLoadError
from trail_replay.track.models import BoundingBox, NormalizedPoint, RawSample
from trail_replay.track.normalizer import CoordinateNormalizer, NormalizedTrack

__all__ = [
    "BoundingBox",
    "CoordinateNormalizer",
    "Downsampler",
    "GpxTrackLoader",
    "NormalizedPoint",
    "NormalizedTrack",
    "RawSample",
    "TrackLoadError",
]

"""Checkpoint definitions and timeline snapping."""

from trail_replay.timeline.definitions import (
    CheckpointDefinitionError,
    default_definitions,
    load_definitions,
    parse_definitions,
)
from trail_replay.timeline.models import CheckpointDefinition, TimelineEntry
from trail_replay.timeline.snapper import CheckpointSnapper, format_elapsed

__all__ = [
    "CheckpointDefinition",
    "CheckpointDefinitionError",
    "CheckpointSnapper",
    "TimelineEntry",
    "default_definitions",
    "format_elapsed",
    "load_definitions",
    "parse_definitions",
]

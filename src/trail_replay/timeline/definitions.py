"""Checkpoint definitions file (JSON list of :class:`CheckpointDefinition`)."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from trail_replay.timeline.models import CheckpointDefinition

_logger = logging.getLogger(__name__)

DEFAULT_CHECKPOINT_NAMES: tuple[str, ...] = (
    "Trailhead",
    "Camp 1",
    "Balagbag Ridge",
    "Peak 9",
    "Summit",
)

_DEFINITIONS_ADAPTER = TypeAdapter(list[CheckpointDefinition])


class CheckpointDefinitionError(ValueError):
    """The checkpoint definitions file is not valid JSON or fails validation."""


def default_definitions() -> list[CheckpointDefinition]:
    """Evenly spaced default points of interest (placed by list position)."""
    return [CheckpointDefinition(name=name) for name in DEFAULT_CHECKPOINT_NAMES]


def parse_definitions(text: str) -> list[CheckpointDefinition]:
    """Parse and validate a JSON array of checkpoint definitions.

    Raises:
        CheckpointDefinitionError: On malformed JSON or a schema violation.
    """
    try:
        return _DEFINITIONS_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise CheckpointDefinitionError(f"Invalid checkpoint definitions: {exc}") from exc


def load_definitions(path: str | Path) -> list[CheckpointDefinition]:
    """Load definitions from *path*; fall back to the defaults when it is absent."""
    path = Path(path)
    if not path.is_file():
        _logger.info("No checkpoint file at %s, using %d default checkpoints", path, len(DEFAULT_CHECKPOINT_NAMES))
        return default_definitions()
    return parse_definitions(path.read_text(encoding="utf-8"))

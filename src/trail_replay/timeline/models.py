"""Timeline data structures."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

from trail_replay.track.models import NormalizedPoint


class CheckpointDefinition(BaseModel):
    """A named point of interest to place on the trail.

    At most one of the time-selection fields is expected to drive placement:
    ``elapsed_seconds`` (or ``elapsed_minutes``) snaps to recorded time,
    otherwise ``fraction`` (or the checkpoint's position in the list) picks a
    point along the trail.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    time: str | None = None
    elapsed_seconds: FiniteFloat | None = Field(default=None, alias="elapsedSeconds")
    elapsed_minutes: FiniteFloat | None = Field(default=None, alias="elapsedMinutes")
    fraction: FiniteFloat | None = None

    def resolved_elapsed_seconds(self) -> float | None:
        """Elapsed seconds from ``elapsed_seconds``, else ``elapsed_minutes * 60``."""
        if self.elapsed_seconds is not None:
            return self.elapsed_seconds
        if self.elapsed_minutes is not None:
            return self.elapsed_minutes * 60.0
        return None


@dataclass(frozen=True)
class TimelineEntry:
    """A labeled checkpoint snapped onto the trail."""

    time: str
    """Display time, e.g. ``"10:00"``."""

    label: str

    position: NormalizedPoint
    """One of the trail's normalized points."""

    def to_dict(self) -> dict:
        return {"time": self.time, "label": self.label, "position": list(self.position)}

    @classmethod
    def from_dict(cls, d: dict) -> TimelineEntry:
        x, y, z = d["position"]
        return cls(time=str(d["time"]), label=str(d["label"]), position=(float(x), float(y), float(z)))

"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


class ConvertRequest(BaseModel):
    track_path: str
    checkpoints_path: str | None = None
    output_dir: str | None = None


class ConvertResponse(BaseModel):
    raw_count: int
    point_count: int
    checkpoint_count: int
    resolution: int
    written: list[str]

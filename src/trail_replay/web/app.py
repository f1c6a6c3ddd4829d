"""FastAPI application serving the generated scene artifacts."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from trail_replay import __version__
from trail_replay.artifacts.models import TerrainArtifact
from trail_replay.config import PipelineConfig
from trail_replay.pipeline import TrailPipeline
from trail_replay.web.schemas import ConvertRequest, ConvertResponse, HealthResponse

load_dotenv()  # loads .env from project root; must run before env vars are consumed

app = FastAPI(title="Trail Replay", version=__version__)


def _config(data_dir: str | None = None) -> PipelineConfig:
    config = PipelineConfig.from_env()
    if data_dir:
        config = dataclasses.replace(config, data_dir=Path(data_dir))
    return config


def _read_artifact(path: Path):
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"{path.name} has not been generated")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=500, detail=f"{path.name} is not valid JSON") from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/trail")
def get_trail(data_dir: str | None = None) -> dict:
    return _read_artifact(_config(data_dir).trail_path)


@app.get("/api/timeline")
def get_timeline(data_dir: str | None = None) -> list:
    return _read_artifact(_config(data_dir).timeline_path)


@app.get("/api/terrain")
def get_terrain(data_dir: str | None = None) -> dict:
    """Return the heightfield; a grid that does not match its resolution is rejected."""
    data = _read_artifact(_config(data_dir).terrain_path)
    try:
        TerrainArtifact.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise HTTPException(status_code=500, detail=f"Invalid terrain artifact: {exc}") from exc
    return data


@app.post("/api/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    """Run the conversion pipeline and write the artifacts."""
    pipeline = TrailPipeline(_config())
    try:
        result = pipeline.run(req.track_path, req.checkpoints_path, req.output_dir)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except OSError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return ConvertResponse(
        raw_count=result.raw_count,
        point_count=len(result.trail.points),
        checkpoint_count=len(result.timeline),
        resolution=result.terrain.resolution,
        written=[str(p) for p in result.written],
    )

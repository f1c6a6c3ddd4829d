"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from trail_replay.config import PipelineConfig
from trail_replay.pipeline import TrailPipeline
from trail_replay.web.app import app


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def data_dir(tmp_path, scenario_gpx, monkeypatch):
    """A data directory holding freshly generated artifacts (and set as the default)."""
    TrailPipeline(PipelineConfig(data_dir=tmp_path, terrain_resolution=16)).run()
    monkeypatch.setenv("TRAIL_REPLAY_DATA_DIR", str(tmp_path))
    return tmp_path

"""POST /api/convert."""

from __future__ import annotations

import json


def test_convert_writes_artifacts(client, tmp_path, scenario_gpx):
    checkpoints = tmp_path / "cps.json"
    checkpoints.write_text(json.dumps([{"name": "Camp", "elapsedSeconds": 600}]), encoding="utf-8")
    out = tmp_path / "out"

    resp = client.post("/api/convert", json={
        "track_path": str(scenario_gpx),
        "checkpoints_path": str(checkpoints),
        "output_dir": str(out),
    })

    assert resp.status_code == 200
    data = resp.json()
    assert data["raw_count"] == 3
    assert data["point_count"] == 3
    assert data["checkpoint_count"] == 1
    assert data["resolution"] == 64
    assert len(data["written"]) == 3
    timeline = json.loads((out / "timeline.json").read_text(encoding="utf-8"))
    assert timeline[0]["time"] == "10:00"


def test_convert_missing_track_422(client, tmp_path):
    resp = client.post("/api/convert", json={"track_path": str(tmp_path / "none.gpx")})
    assert resp.status_code == 422
    assert "not found" in resp.json()["detail"]

"""End-to-end tests for the conversion pipeline and CLI script."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

from trail_replay.config import PipelineConfig
from trail_replay.pipeline import TrailPipeline
from trail_replay.timeline.models import CheckpointDefinition
from trail_replay.track.loader import TrackLoadError
from trail_replay.track.models import RawSample

_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "convert_track.py"

OUTPUTS = ("trail.json", "timeline.json", "terrain.json")


def _write_checkpoints(path: Path, defs: list[dict]) -> Path:
    path.write_text(json.dumps(defs), encoding="utf-8")
    return path


def _load_script():
    spec = importlib.util.spec_from_file_location("convert_track", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestTrailPipeline:
    def test_run_writes_three_artifacts(self, tmp_path, scenario_gpx):
        _write_checkpoints(tmp_path / "checkpoints.json", [
            {"name": "Trailhead", "elapsedSeconds": 0},
            {"name": "Camp", "elapsedSeconds": 600},
            {"name": "Summit", "elapsedMinutes": 20},
        ])
        result = TrailPipeline(PipelineConfig(data_dir=tmp_path)).run()

        assert [p.name for p in result.written] == list(OUTPUTS)
        trail = json.loads((tmp_path / "trail.json").read_text(encoding="utf-8"))
        timeline = json.loads((tmp_path / "timeline.json").read_text(encoding="utf-8"))
        terrain = json.loads((tmp_path / "terrain.json").read_text(encoding="utf-8"))

        assert trail["source"] == "track.gpx"
        assert trail["coordinateSystem"] == "local-cartesian"
        assert len(trail["points"]) == 3
        assert trail["bbox"]["minElevation"] == 0.0
        assert trail["bbox"]["maxElevation"] == 800.0

        assert [e["time"] for e in timeline] == ["00:00", "10:00", "20:00"]
        assert [e["position"] for e in timeline] == trail["points"]

        assert terrain["resolution"] == 64
        assert len(terrain["heights"]) == 64
        assert terrain["bbox"] == trail["bbox"]

    def test_output_is_byte_identical_across_runs(self, tmp_path, scenario_gpx):
        pipeline = TrailPipeline(PipelineConfig(data_dir=tmp_path))
        pipeline.run()
        first = {name: (tmp_path / name).read_bytes() for name in OUTPUTS}
        pipeline.run()
        assert {name: (tmp_path / name).read_bytes() for name in OUTPUTS} == first

    def test_default_checkpoints_when_file_missing(self, tmp_path, scenario_gpx):
        result = TrailPipeline(PipelineConfig(data_dir=tmp_path)).run()
        assert [e.label for e in result.timeline] == [
            "Trailhead", "Camp 1", "Balagbag Ridge", "Peak 9", "Summit",
        ]
        assert result.timeline[0].time == "00:00"
        assert result.timeline[-1].time == "00:40"

    def test_empty_track_writes_nothing(self, tmp_path, gpx_builder):
        (tmp_path / "track.gpx").write_text(gpx_builder([]), encoding="utf-8")
        with pytest.raises(TrackLoadError):
            TrailPipeline(PipelineConfig(data_dir=tmp_path)).run()
        assert not any((tmp_path / name).exists() for name in OUTPUTS)

    def test_bad_checkpoints_keep_previous_outputs(self, tmp_path, scenario_gpx):
        pipeline = TrailPipeline(PipelineConfig(data_dir=tmp_path))
        pipeline.run()
        before = (tmp_path / "trail.json").read_bytes()

        (tmp_path / "checkpoints.json").write_text("not json", encoding="utf-8")
        with pytest.raises(ValueError):
            pipeline.run()
        assert (tmp_path / "trail.json").read_bytes() == before

    def test_build_downsamples_long_tracks(self):
        samples = [
            RawSample(14.0 + i * 1e-5, 120.9 + i * 1e-5, float(i % 300), float(i * 1000))
            for i in range(2000)
        ]
        config = PipelineConfig(terrain_resolution=8)
        trail, timeline, terrain = TrailPipeline(config).build(
            samples, [CheckpointDefinition(name="half", elapsed_seconds=1000)], source="x.gpx"
        )
        assert len(trail.points) == 500
        assert timeline[0].position == trail.points[250]
        assert terrain.resolution == 8

    def test_build_rejects_empty_samples(self):
        with pytest.raises(TrackLoadError):
            TrailPipeline().build([], [], source="x.gpx")


class TestConfig:
    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TRAIL_REPLAY_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("TRAIL_REPLAY_TRAIL_NAME", "Test Trail")
        monkeypatch.setenv("TRAIL_REPLAY_MAX_POINTS", "100")
        config = PipelineConfig.from_env()
        assert config.track_path == tmp_path / "track.gpx"
        assert config.terrain_path == tmp_path / "terrain.json"
        assert config.trail_name == "Test Trail"
        assert config.max_points == 100
        assert config.terrain_resolution == 64


class TestConvertScript:
    def test_main_succeeds_with_no_flags(self, monkeypatch, tmp_path, scenario_gpx, capsys):
        monkeypatch.setenv("TRAIL_REPLAY_DATA_DIR", str(tmp_path))
        assert _load_script().main([]) == 0
        assert all((tmp_path / name).is_file() for name in OUTPUTS)
        assert "Wrote" in capsys.readouterr().out

    def test_main_fails_on_missing_track(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setenv("TRAIL_REPLAY_DATA_DIR", str(tmp_path))
        assert _load_script().main([]) == 1
        assert "not found" in capsys.readouterr().err

    def test_flags_override_paths(self, tmp_path, scenario_gpx):
        out = tmp_path / "out"
        code = _load_script().main(["--track", str(scenario_gpx), "--output-dir", str(out)])
        assert code == 0
        assert all((out / name).is_file() for name in OUTPUTS)

    def test_main_prints_numbered_steps(self, monkeypatch, tmp_path, scenario_gpx, capsys):
        monkeypatch.setenv("TRAIL_REPLAY_DATA_DIR", str(tmp_path))
        assert _load_script().main([]) == 0
        out = capsys.readouterr().out
        for step in ("1/4", "2/4", "3/4", "4/4"):
            assert step in out
        assert "3 samples" in out
        assert "[OK]" in out

    def test_bad_env_value_is_reported_not_raised(self, monkeypatch, tmp_path, scenario_gpx, capsys):
        monkeypatch.setenv("TRAIL_REPLAY_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("TRAIL_REPLAY_MAX_POINTS", "many")
        assert _load_script().main([]) == 1
        assert "[!]" in capsys.readouterr().err
        assert not (tmp_path / "trail.json").exists()

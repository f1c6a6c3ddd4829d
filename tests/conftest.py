"""Shared fixtures: GPX documents built from plain tuples."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

_GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
)


def _trkpt(lat: float, lon: float, ele: float | None, t_ms: float | None) -> str:
    parts = [f'<trkpt lat="{lat}" lon="{lon}">']
    if ele is not None:
        parts.append(f"<ele>{ele}</ele>")
    if t_ms is not None:
        stamp = datetime.fromtimestamp(t_ms / 1000.0, tz=timezone.utc)
        parts.append(f"<time>{stamp.strftime('%Y-%m-%dT%H:%M:%SZ')}</time>")
    parts.append("</trkpt>")
    return "".join(parts)


def build_gpx(*segments: list[tuple]) -> str:
    """Return GPX text with one track holding *segments*.

    Each point is ``(lat, lon, ele, t_ms)``; ``ele`` / ``t_ms`` may be None.
    """
    body = ["<trk><name>test</name>"]
    for seg in segments:
        body.append("<trkseg>")
        body.extend(_trkpt(*pt) for pt in seg)
        body.append("</trkseg>")
    body.append("</trk>")
    return _GPX_HEADER + "".join(body) + "\n</gpx>\n"


SCENARIO_POINTS = [
    (14.00, 120.90, 0.0, 1_700_000_000_000),
    (14.01, 120.91, 400.0, 1_700_000_600_000),
    (14.02, 120.92, 800.0, 1_700_001_200_000),
]
"""Three samples 600 s apart climbing 800 m."""


@pytest.fixture
def gpx_builder():
    return build_gpx


@pytest.fixture
def scenario_gpx(tmp_path):
    """Write the three-sample scenario track to ``tmp_path/track.gpx``."""
    path = tmp_path / "track.gpx"
    path.write_text(build_gpx(SCENARIO_POINTS), encoding="utf-8")
    return path

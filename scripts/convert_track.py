"""Convert a GPX hiking track into trail / timeline / terrain JSON.

Usage:
  uv run python scripts/convert_track.py

Reads ``<data dir>/track.gpx`` and ``<data dir>/checkpoints.json`` and writes
``trail.json``, ``timeline.json`` and ``terrain.json`` next to them. The data
directory comes from ``TRAIL_REPLAY_DATA_DIR`` (``.env`` is honoured);
the optional flags below override individual paths.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from trail_replay.config import PipelineConfig
from trail_replay.pipeline import TrailPipeline
from trail_replay.timeline.definitions import load_definitions
from trail_replay.track.loader import GpxTrackLoader

load_dotenv()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Convert a GPX track into 3D scene artifacts")
    ap.add_argument("--track", default=None, help="GPX file (default: <data dir>/track.gpx)")
    ap.add_argument(
        "--checkpoints",
        default=None,
        help="Checkpoint definitions JSON (default: <data dir>/checkpoints.json)",
    )
    ap.add_argument("--output-dir", default=None, help="Output directory (default: <data dir>)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log pipeline progress")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = PipelineConfig.from_env()
        pipeline = TrailPipeline(config)
        track_path = Path(args.track) if args.track else config.track_path
        checkpoints_path = Path(args.checkpoints) if args.checkpoints else config.checkpoints_path
        output_dir = Path(args.output_dir) if args.output_dir else config.data_dir

        print(f"1/4  Loading track {track_path} ...")
        samples = GpxTrackLoader().load(track_path)
        print(f"     {len(samples)} samples")

        print("2/4  Loading checkpoint definitions ...")
        definitions = load_definitions(checkpoints_path)
        print(f"     {len(definitions)} checkpoints")

        print("3/4  Building trail, timeline and terrain ...")
        trail, timeline, terrain = pipeline.build(samples, definitions, source=track_path.name)
        print(f"     {len(trail.points)} points kept, terrain {terrain.resolution}x{terrain.resolution}")

        print(f"4/4  Writing artifacts → {output_dir}")
        written = pipeline.write(output_dir, trail, timeline, terrain)
    except (ValueError, OSError) as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        return 1

    for path in written:
        print(f"     Wrote {path}")
    print(f"\n[OK] {len(timeline)} checkpoints placed")
    return 0


if __name__ == "__main__":
    sys.exit(main())

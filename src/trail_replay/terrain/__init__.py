"""Terrain heightfield synthesis."""

from trail_replay.terrain.heightfield import HeightfieldSynthesizer, nearest_planar

__all__ = ["HeightfieldSynthesizer", "nearest_planar"]

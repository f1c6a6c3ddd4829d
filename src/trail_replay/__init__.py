"""Trail replay: GPX track → trail, timeline and terrain artifacts + playback camera."""

__version__ = "0.1.0"

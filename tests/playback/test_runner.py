"""Tests for the trail runner marker."""

from __future__ import annotations

import pytest

from trail_replay.playback.models import PlaybackState
from trail_replay.playback.runner import (
    RUNNER_LIFT,
    TrailRunner,
    closest_trail_index,
    position_on_trail,
)
from trail_replay.timeline.models import TimelineEntry

TRAIL = [(0.0, 0.0, 0.0), (1.0, 0.1, 0.0), (2.0, 0.2, 0.0), (3.0, 0.3, 0.0), (4.0, 0.4, 0.0)]


def entry(position) -> TimelineEntry:
    return TimelineEntry(time="00:00", label="x", position=position)


def test_closest_index_exact_match():
    assert closest_trail_index(TRAIL, (2.0, 0.2, 0.0)) == 2


def test_closest_index_ties_use_first():
    assert closest_trail_index([(0.0, 0.0, 0.0), (2.0, 0.0, 0.0)], (1.0, 0.0, 0.0)) == 0


@pytest.mark.parametrize(
    "fraction, expected",
    [
        (0.0, (0.0, 0.0, 0.0)),
        (1.0, (4.0, 0.4, 0.0)),
        (0.5, (2.0, 0.2, 0.0)),
        (0.125, (0.5, 0.05, 0.0)),
        (-1.0, (0.0, 0.0, 0.0)),
        (3.0, (4.0, 0.4, 0.0)),
    ],
)
def test_position_on_trail(fraction, expected):
    assert position_on_trail(TRAIL, fraction) == pytest.approx(expected)


def test_position_on_degenerate_trails():
    assert position_on_trail([], 0.5) == (0.0, 0.0, 0.0)
    assert position_on_trail([(1.0, 2.0, 3.0)], 0.5) == (1.0, 2.0, 3.0)


def test_runner_rests_on_active_checkpoint_when_paused():
    runner = TrailRunner(TRAIL, [entry(TRAIL[0]), entry(TRAIL[4])])
    assert runner.fractions == [0.0, 1.0]
    pos = runner.position(PlaybackState(active_index=1))
    assert pos == pytest.approx((4.0, 0.4 + RUNNER_LIFT, 0.0))


def test_runner_moves_between_checkpoints_while_playing():
    runner = TrailRunner(TRAIL, [entry(TRAIL[0]), entry(TRAIL[4])])
    state = PlaybackState(active_index=0, is_playing=True, elapsed_in_step_s=1.0)
    assert runner.position(state) == pytest.approx((2.0, 0.2 + RUNNER_LIFT, 0.0))


def test_runner_holds_at_last_checkpoint():
    runner = TrailRunner(TRAIL, [entry(TRAIL[1]), entry(TRAIL[3])])
    state = PlaybackState(active_index=1, is_playing=True, elapsed_in_step_s=1.9)
    assert runner.position(state) == pytest.approx((3.0, 0.3 + RUNNER_LIFT, 0.0))


def test_runner_without_timeline_sits_at_trail_start():
    runner = TrailRunner(TRAIL, [])
    assert runner.position(PlaybackState()) == pytest.approx((0.0, RUNNER_LIFT, 0.0))

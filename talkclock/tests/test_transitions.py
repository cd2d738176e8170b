"""Elastic easing and the rotation frame scheduler."""
from __future__ import annotations

import pytest

from talkclock.logic.easing import elastic_out, linear
from talkclock.logic.transitions import RotationTransitions
from talkclock.tests.fakes import FakeScheduler


def test_elastic_starts_and_ends_on_target() -> None:
    ease = elastic_out(1.0, 0.5)
    assert ease(0.0) == pytest.approx(0.0)
    assert ease(1.0) == pytest.approx(1.0)


def test_elastic_overshoots_then_settles() -> None:
    ease = elastic_out(1.0, 0.5)
    assert ease(0.25) > 1.0
    assert max(ease(i / 100) for i in range(101)) > 1.1
    assert ease(0.95) == pytest.approx(1.0, abs=0.02)


def test_elastic_amplitude_below_one_is_raised_to_one() -> None:
    assert elastic_out(0.2, 0.5)(0.3) == pytest.approx(elastic_out(1.0, 0.5)(0.3))


def _recorder():
    applied = {}

    def apply(item: int, degrees: float) -> None:
        applied[item] = degrees

    return applied, apply


def test_transition_reaches_target_and_goes_idle() -> None:
    sched = FakeScheduler()
    applied, apply = _recorder()
    tr = RotationTransitions(sched, apply, frame_interval_ms=10, clock=sched.now)

    tr.start(1, 0.0, 90.0, duration_ms=100, easing=linear)
    assert tr.active
    sched.advance(50)
    assert applied[1] == pytest.approx(45.0)
    sched.advance(60)
    assert applied[1] == pytest.approx(90.0)
    assert not tr.active
    assert sched.pending == 0


def test_latest_request_wins() -> None:
    sched = FakeScheduler()
    applied, apply = _recorder()
    tr = RotationTransitions(sched, apply, frame_interval_ms=10, clock=sched.now)

    tr.start(1, 0.0, 90.0, duration_ms=100, easing=elastic_out(1.0, 0.5))
    sched.advance(30)
    tr.start(1, applied[1], 180.0, duration_ms=100, easing=elastic_out(1.0, 0.5))
    sched.advance(500)
    assert applied[1] == pytest.approx(180.0)
    assert not tr.active


def test_wraps_the_short_way_and_normalises() -> None:
    sched = FakeScheduler()
    seen = []
    tr = RotationTransitions(sched, lambda item, deg: seen.append(deg), frame_interval_ms=10, clock=sched.now)

    tr.start(7, 354.0, 0.0, duration_ms=100, easing=linear)
    sched.advance(200)
    assert all(354.0 <= d <= 360.0 for d in seen[:-1])
    assert seen[-1] == pytest.approx(0.0)


def test_zero_duration_applies_immediately() -> None:
    sched = FakeScheduler()
    applied, apply = _recorder()
    tr = RotationTransitions(sched, apply, clock=sched.now)
    tr.start(3, 10.0, 20.0, duration_ms=0, easing=linear)
    assert applied[3] == 20.0
    assert sched.pending == 0


def test_cancel_all_stops_frames() -> None:
    sched = FakeScheduler()
    applied, apply = _recorder()
    tr = RotationTransitions(sched, apply, frame_interval_ms=10, clock=sched.now)
    tr.start(1, 0.0, 90.0, duration_ms=100, easing=linear)
    tr.cancel_all()
    sched.advance(500)
    assert applied == {}
    assert not tr.active

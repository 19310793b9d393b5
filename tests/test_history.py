import math

import pytest

from double_pendulum_sim import HistoryPoint, HistorySampler, PendulumState


def test_record_rounds_time_and_converts_to_degrees():
    sampler = HistorySampler()
    point = sampler.record(PendulumState(math.pi / 3, 1.0, -math.pi / 4, 0.0, time=1.23456))
    assert point == HistoryPoint(time=1.23, theta1=60.0, theta2=-45.0)
    assert sampler.points() == [point]


def test_angles_are_not_wrapped():
    point = HistorySampler().record(PendulumState(3 * math.pi, 0.0, -5.0, 0.0, time=0.05))
    assert point.theta1 == 540.0
    assert point.theta2 == round(math.degrees(-5.0), 1)


def test_oldest_points_evicted_first():
    sampler = HistorySampler(capacity=3)
    for i in range(5):
        sampler.record(PendulumState(0.0, 0.0, 0.0, 0.0, time=i * 0.05))

    assert len(sampler) == 3
    assert [p.time for p in sampler] == [0.1, 0.15, 0.2]


def test_default_capacity_is_one_hundred():
    sampler = HistorySampler()
    for i in range(250):
        sampler.record(PendulumState(0.0, 0.0, 0.0, 0.0, time=i * 0.05))
    assert len(sampler) == 100
    assert sampler.points()[0].time == round(150 * 0.05, 2)


def test_clear():
    sampler = HistorySampler()
    sampler.record(PendulumState(0.1, 0.0, 0.2, 0.0, time=0.05))
    sampler.clear()
    assert sampler.points() == []


def test_points_returns_a_copy():
    sampler = HistorySampler()
    sampler.record(PendulumState(0.1, 0.0, 0.2, 0.0, time=0.05))
    sampler.points().clear()
    assert len(sampler) == 1


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        HistorySampler(capacity=0)

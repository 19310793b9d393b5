import math
import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from double_pendulum_sim import PendulumConfig, PendulumState


@pytest.fixture
def undamped_config():
    return PendulumConfig(L1=1.2, L2=1.0, m1=1.5, m2=1.0, g=9.81, damping=0.0)


@pytest.fixture
def damped_config():
    return PendulumConfig(L1=1.2, L2=1.0, m1=1.5, m2=1.0, g=9.81, damping=0.5)


@pytest.fixture
def initial_state():
    return PendulumState(theta1=math.pi / 3, omega1=0.0, theta2=math.pi / 4, omega2=0.0, time=0.0)


@pytest.fixture
def rest_state():
    return PendulumState(0.0, 0.0, 0.0, 0.0, 0.0)

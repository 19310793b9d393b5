import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from .energy import compute_energy
from .history import HistoryPoint, HistorySampler
from .physics import INITIAL_STATE, PendulumConfig, PendulumState, bob_positions, integrate_step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriverSettings:
    """Frame-to-step reconciliation constants.

    ``substeps`` RK4 steps are taken per frame, each ``frame_dt / substeps``
    long, and ``frame_dt`` is capped at ``max_frame_dt`` seconds so a stalled
    display loop cannot inject a huge step.
    """
    substeps: int = 10
    max_frame_dt: float = 0.032
    samples_per_second: int = 20
    history_capacity: int = 100
    trace_capacity: int = 200

    def validate(self):
        if self.substeps < 1:
            raise ValueError(f"substeps must be >= 1, got {self.substeps}")
        for name in ("max_frame_dt", "samples_per_second", "history_capacity", "trace_capacity"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        return self


class TickResult(NamedTuple):
    state: PendulumState
    history_point: Optional[HistoryPoint]


class SimulationDriver:
    """Turns irregular frame callbacks into fixed RK4 sub-steps.

    The frame scheduler calls :meth:`tick` once per refresh with a wall-clock
    timestamp in milliseconds. The driver owns the state, the history and the
    trace; the config is read at the start of every tick and may be swapped
    between ticks with :meth:`set_config`.
    """

    def __init__(self, config=None, initial_state=None, settings=None):
        self.settings = (settings or DriverSettings()).validate()
        self._config = config or PendulumConfig()
        self._initial_state = initial_state or INITIAL_STATE
        self._history = HistorySampler(self.settings.history_capacity)
        self._trace = []
        self.reset(self._initial_state)

    # --- queries ---
    @property
    def state(self):
        return self._state

    @property
    def config(self):
        return self._config

    @property
    def history(self):
        return self._history.points()

    @property
    def trace(self):
        return list(self._trace)

    def energy(self):
        return compute_energy(self._state, self._config)

    # --- commands ---
    def set_config(self, config):
        logger.debug("config replaced: %s", config)
        self._config = config

    def reset(self, initial_state=None):
        if initial_state is not None:
            self._initial_state = initial_state
        self._state = self._initial_state
        self._history.clear()
        self._trace.clear()
        self._last_ms = None
        self._diverged = False
        logger.debug("reset to %s", self._state)

    def tick(self, wall_clock_ms, running):
        if self._last_ms is None:
            self._last_ms = wall_clock_ms
            return TickResult(self._state, None)

        frame_dt = min((wall_clock_ms - self._last_ms) / 1000.0, self.settings.max_frame_dt)
        self._last_ms = wall_clock_ms
        if not running:
            return TickResult(self._state, None)

        config = self._config
        sub_dt = frame_dt / self.settings.substeps
        previous = self._state
        current = previous
        for _ in range(self.settings.substeps):
            current = integrate_step(current, config, sub_dt)
        self._state = current

        _, _, x2, y2 = bob_positions(current, config)
        self._trace.append((float(x2), float(y2)))
        if len(self._trace) > self.settings.trace_capacity:
            del self._trace[0]

        point = None
        rate = self.settings.samples_per_second
        if np.floor(current.time * rate) > np.floor(previous.time * rate):
            point = self._history.record(current)

        if not self._diverged and not np.all(np.isfinite(current.as_vector())):
            self._diverged = True
            logger.warning("state diverged at t=%.4f s: %s", current.time, current)

        return TickResult(current, point)

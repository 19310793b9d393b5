import math
from dataclasses import dataclass, fields

import numpy as np
from scipy.integrate import solve_ivp


# ------------------------------------------------------------
# Parameters and state
# ------------------------------------------------------------
@dataclass(frozen=True)
class PendulumConfig:
    """Physical parameters of the double pendulum.

    Lengths and masses must be strictly positive, ``g`` and ``damping``
    non-negative, and everything finite. The integration path trusts these
    preconditions; call :meth:`validate` where a config is produced.
    """
    L1: float = 1.2        # rod-1 length (m)
    L2: float = 1.0        # rod-2 length (m)
    m1: float = 1.5        # bob-1 mass (kg)
    m2: float = 1.0        # bob-2 mass (kg)
    g: float = 9.81        # gravity (m/s^2)
    damping: float = 0.02  # linear drag on angular velocity (1/s)

    def validate(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
        for name in ("L1", "L2", "m1", "m2"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        for name in ("g", "damping"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        return self


@dataclass(frozen=True)
class PendulumState:
    """Angles (rad, unwrapped), angular velocities (rad/s) and sim time (s)."""
    theta1: float
    omega1: float
    theta2: float
    omega2: float
    time: float = 0.0

    def as_vector(self):
        return np.array([self.theta1, self.omega1, self.theta2, self.omega2], dtype=float)

    @classmethod
    def from_vector(cls, y, time=0.0):
        θ1, ω1, θ2, ω2 = (float(v) for v in y)
        return cls(θ1, ω1, θ2, ω2, float(time))


INITIAL_STATE = PendulumState(theta1=math.pi / 3, omega1=0.0,
                              theta2=math.pi / 4, omega2=0.0, time=0.0)


# ------------------------------------------------------------
# Equations of motion (mass 2 hangs from mass 1)
# ------------------------------------------------------------
def evaluate_derivatives(y, config):
    """Rates ``(dθ1, dω1, dθ2, dω2)`` for the state vector ``(θ1, ω1, θ2, ω2)``.

    Damping is a linear drag subtracted from the Lagrangian accelerations.
    The degenerate case ``den == 0`` yields non-finite rates, which are
    returned as-is.
    """
    θ1, ω1, θ2, ω2 = np.asarray(y, dtype=float)
    L1, L2, m1, m2, g = config.L1, config.L2, config.m1, config.m2, config.g
    Δ = θ1 - θ2

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        den = 2 * m1 + m2 - m2 * np.cos(2 * θ1 - 2 * θ2)

        a1 = (-g * (2 * m1 + m2) * np.sin(θ1)
              - m2 * g * np.sin(θ1 - 2 * θ2)
              - 2 * np.sin(Δ) * m2 * (ω2**2 * L2 + ω1**2 * L1 * np.cos(Δ))) / (L1 * den)

        a2 = (2 * np.sin(Δ) * (ω1**2 * L1 * (m1 + m2)
                               + g * (m1 + m2) * np.cos(θ1)
                               + ω2**2 * L2 * m2 * np.cos(Δ))) / (L2 * den)

        a1 -= config.damping * ω1
        a2 -= config.damping * ω2

    return np.array([ω1, a1, ω2, a2], dtype=float)


def integrate_step(state, config, dt):
    """Advance ``state`` by one RK4 step of ``dt`` seconds (``dt >= 0``)."""
    s = state.as_vector()
    k1 = evaluate_derivatives(s, config)
    k2 = evaluate_derivatives(s + 0.5 * dt * k1, config)
    k3 = evaluate_derivatives(s + 0.5 * dt * k2, config)
    k4 = evaluate_derivatives(s + dt * k3, config)
    return PendulumState.from_vector(s + (dt / 6.0) * (k1 + 2*k2 + 2*k3 + k4),
                                     state.time + dt)


def bob_positions(state, config):
    """Cartesian bob coordinates; pivot at the origin, +y up."""
    x1 = config.L1 * np.sin(state.theta1)
    y1 = -config.L1 * np.cos(state.theta1)
    x2 = x1 + config.L2 * np.sin(state.theta2)
    y2 = y1 - config.L2 * np.cos(state.theta2)
    return x1, y1, x2, y2


# ------------------------------------------------------------
# High-accuracy reference (scipy)
# ------------------------------------------------------------
def reference_trajectory(state, config, t_eval, rtol=1e-11, atol=1e-11):
    """Integrate from ``state`` with DOP853 and sample at absolute times ``t_eval``.

    Returns an array of shape ``(len(t_eval), 4)`` ordered like
    :meth:`PendulumState.as_vector`.
    """
    t_eval = np.asarray(t_eval, dtype=float)
    sol = solve_ivp(
        lambda t, y: evaluate_derivatives(y, config),
        [state.time, float(t_eval[-1])],
        state.as_vector(),
        method="DOP853",
        t_eval=t_eval,
        rtol=rtol,
        atol=atol,
    )
    if not sol.success:
        raise RuntimeError(f"reference integration failed: {sol.message}")
    return sol.y.T

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class EnergySnapshot:
    pe: float     # potential energy (J), zero at the pivot height
    ke: float     # kinetic energy (J)
    total: float


def compute_energy(state, config):
    """Mechanical energy of ``state``; diagnostic only, never fed back into integration."""
    L1, L2, m1, m2, g = config.L1, config.L2, config.m1, config.m2, config.g
    θ1, ω1, θ2, ω2 = state.theta1, state.omega1, state.theta2, state.omega2

    pe = -m1 * g * L1 * np.cos(θ1) - m2 * g * (L1 * np.cos(θ1) + L2 * np.cos(θ2))
    ke = (0.5 * m1 * (L1 * ω1)**2
          + 0.5 * m2 * ((L1 * ω1)**2 + (L2 * ω2)**2
                        + 2 * L1 * L2 * ω1 * ω2 * np.cos(θ1 - θ2)))

    return EnergySnapshot(pe=float(pe), ke=float(ke), total=float(pe + ke))

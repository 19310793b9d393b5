from .driver import DriverSettings, SimulationDriver, TickResult
from .energy import EnergySnapshot, compute_energy
from .history import HistoryPoint, HistorySampler
from .physics import (
    INITIAL_STATE,
    PendulumConfig,
    PendulumState,
    bob_positions,
    evaluate_derivatives,
    integrate_step,
    reference_trajectory,
)

__all__ = [
    "DriverSettings",
    "EnergySnapshot",
    "HistoryPoint",
    "HistorySampler",
    "INITIAL_STATE",
    "PendulumConfig",
    "PendulumState",
    "SimulationDriver",
    "TickResult",
    "bob_positions",
    "compute_energy",
    "evaluate_derivatives",
    "integrate_step",
    "reference_trajectory",
]

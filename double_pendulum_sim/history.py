import math
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryPoint:
    time: float    # s, 2 decimals
    theta1: float  # degrees, 1 decimal
    theta2: float  # degrees, 1 decimal


class HistorySampler:
    """Bounded, time-ordered record of decimated samples (oldest evicted first)."""

    def __init__(self, capacity=100):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._points = deque(maxlen=capacity)

    def record(self, state):
        point = HistoryPoint(
            time=round(state.time, 2),
            theta1=round(math.degrees(state.theta1), 1),
            theta2=round(math.degrees(state.theta2), 1),
        )
        self._points.append(point)
        return point

    def points(self):
        return list(self._points)

    def clear(self):
        self._points.clear()

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(list(self._points))

from __future__ import annotations

from typing import Optional


class FrameClock:
    """Turns driver timestamps (ms) into simulation-time deltas.

    One simulation unit is one nominal 60 Hz frame. The first frame yields 0.
    Deltas are uncapped unless ``max_delta`` is set.
    """

    def __init__(self, frame_ms: float = 16.67, max_delta: Optional[float] = None):
        if frame_ms <= 0:
            raise ValueError("frame_ms must be positive")
        self.frame_ms = frame_ms
        self.max_delta = max_delta
        self._last_timestamp: Optional[float] = None

    def reset(self) -> None:
        self._last_timestamp = None

    def tick(self, timestamp_ms: float) -> float:
        if self._last_timestamp is None:
            self._last_timestamp = timestamp_ms
        dt = (timestamp_ms - self._last_timestamp) / self.frame_ms
        self._last_timestamp = timestamp_ms
        if self.max_delta is not None and dt > self.max_delta:
            return self.max_delta
        return dt

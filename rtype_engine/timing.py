"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable


class DeltaTime:
    """Measures the time elapsed between two calls to :meth:`update`."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._last_time = self._clock()
        self._delta_time = 0.0

    def update(self) -> None:
        now = self._clock()
        self._delta_time = now - self._last_time
        self._last_time = now

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta_time
"""A start/stop timer for measuring frame time."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Stopwatch:
    """Measures seconds between start() and stop()."""

    clock: Callable[[], float] = field(default=time.perf_counter, repr=False)
    start_time: float = 0.0
    is_running: bool = False

    def start(self) -> None:
        """Begin timing; has no effect while already running."""
        if not self.is_running:
            self.start_time = self.clock()
            self.is_running = True

    def stop(self) -> float:
        """Stop timing and return the elapsed seconds, or 0.0 if not running."""
        if not self.is_running:
            return 0.0
        end_time = self.clock()
        self.is_running = False
        return end_time - self.start_time
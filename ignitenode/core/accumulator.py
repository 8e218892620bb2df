import threading
from typing import Tuple

from ignitenode.core.delta import Delta


class Accumulator:
    def __init__(self):
        self._lock = threading.Lock()
        self._up = 0
        self._down = 0

    def add(self, delta: Delta):
        with self._lock:
            self._up += delta.bytes_out
            self._down += delta.bytes_in

    def snapshot(self) -> Tuple[int, int]:
        """Return (total_bytes_up, total_bytes_down) read together."""
        with self._lock:
            return self._up, self._down

    @property
    def total_bytes_up(self) -> int:
        return self.snapshot()[0]

    @property
    def total_bytes_down(self) -> int:
        return self.snapshot()[1]

from dataclasses import dataclass
from typing import Optional

from ignitenode.collectors.network import RawSample, Sampler


@dataclass(frozen=True)
class Delta:
    bytes_in: int
    bytes_out: int


ZERO_DELTA = Delta(0, 0)
# dikirim kalau counter OS tidak bisa dibaca
PLACEHOLDER_DELTA = Delta(1024, 512)


class DeltaEngine:
    """Turns cumulative interface counters into per-interval deltas."""

    def __init__(self, sampler: Sampler):
        self.sampler = sampler
        self.previous: Optional[RawSample] = None

    def next_delta(self) -> Delta:
        current = self.sampler.sample()
        if current is None:
            return PLACEHOLDER_DELTA
        return self.update(current)

    def update(self, current: RawSample) -> Delta:
        previous = self.previous
        self.previous = current

        if previous is None:
            return ZERO_DELTA

        delta_in = current.bytes_in - previous.bytes_in
        delta_out = current.bytes_out - previous.bytes_out

        # counter reset (adapter restart, sleep/wake)
        if delta_in < 0 or delta_out < 0:
            return ZERO_DELTA

        return Delta(max(0, delta_in), max(0, delta_out))

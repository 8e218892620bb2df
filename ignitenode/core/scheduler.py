import asyncio
import logging
import time
from datetime import datetime

from ignitenode.core.accumulator import Accumulator
from ignitenode.core.client import TransportError
from ignitenode.core.delta import Delta, DeltaEngine
from ignitenode.core.status import print_status
from ignitenode.utils.units import format_bytes

logger = logging.getLogger(__name__)

REPORT_INTERVAL = 30  # detik
WARMUP_DELAY = 2
STATUS_INTERVAL = 60


class ReportScheduler:
    def __init__(
        self,
        engine: DeltaEngine,
        accumulator: Accumulator,
        transport,
        report_interval: float = REPORT_INTERVAL,
        warmup_delay: float = WARMUP_DELAY,
        status_interval: float = STATUS_INTERVAL,
        status_display=print_status,
    ):
        self.engine = engine
        self.accumulator = accumulator
        self.transport = transport
        self.report_interval = report_interval
        self.warmup_delay = warmup_delay
        self.status_interval = status_interval
        self.status_display = status_display
        self.started_at = time.monotonic()

    def uptime(self) -> float:
        return time.monotonic() - self.started_at

    def baseline(self):
        """Prime the delta engine; the first delta is never reported."""
        self.started_at = time.monotonic()
        self.engine.next_delta()

    def report_cycle(self) -> Delta:
        delta = self.engine.next_delta()
        self.accumulator.add(delta)

        try:
            self.transport.send_bandwidth(delta)
        except TransportError as e:
            logger.error(f"Failed to report bandwidth: {e}")
        else:
            stamp = datetime.now().strftime("%H:%M:%S")
            logger.info(
                f"[{stamp}] Reported: {format_bytes(delta.bytes_in)} down, "
                f"{format_bytes(delta.bytes_out)} up"
            )

        return delta

    def show_status(self):
        self.status_display(self.accumulator, self.uptime())

    async def report_loop(self):
        await asyncio.sleep(self.warmup_delay)
        while True:
            try:
                await asyncio.to_thread(self.report_cycle)
            except Exception as e:
                logger.error(f"Report cycle failed: {e}")
            await asyncio.sleep(self.report_interval)

    async def status_loop(self):
        while True:
            await asyncio.sleep(self.status_interval)
            self.show_status()

    async def run(self):
        self.baseline()
        await asyncio.gather(
            self.report_loop(),
            self.status_loop(),
        )

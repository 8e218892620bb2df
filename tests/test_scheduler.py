import asyncio
import logging

import pytest

from ignitenode.collectors.network import RawSample
from ignitenode.core.accumulator import Accumulator
from ignitenode.core.client import TransportError
from ignitenode.core.delta import Delta, DeltaEngine
from ignitenode.core.scheduler import ReportScheduler


class _Sampler:
    def __init__(self, *samples):
        self.samples = list(samples)

    def sample(self):
        if len(self.samples) > 1:
            return self.samples.pop(0)
        return self.samples[0]


class _Transport:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    def send_bandwidth(self, delta):
        if self.fail:
            raise TransportError("HTTP 500")
        self.sent.append(delta)


def _scheduler(sampler, transport, **kwargs):
    return ReportScheduler(DeltaEngine(sampler), Accumulator(), transport, **kwargs)


def test_baseline_is_not_reported():
    transport = _Transport()
    sched = _scheduler(_Sampler(RawSample(100, 50), RawSample(150, 60)), transport)

    sched.baseline()

    assert transport.sent == []
    assert sched.accumulator.snapshot() == (0, 0)
    assert sched.report_cycle() == Delta(50, 10)
    assert transport.sent == [Delta(50, 10)]


def test_transport_failure_still_accumulates(caplog):
    sched = _scheduler(
        _Sampler(RawSample(0, 0), RawSample(10, 5), RawSample(30, 20), RawSample(30, 20)),
        _Transport(fail=True),
    )
    sched.baseline()

    with caplog.at_level(logging.ERROR):
        for _ in range(3):
            sched.report_cycle()

    assert sched.accumulator.total_bytes_down == 30
    assert sched.accumulator.total_bytes_up == 20
    assert "Failed to report bandwidth: HTTP 500" in caplog.text


def test_status_display_reads_accumulator():
    seen = []
    sched = _scheduler(
        _Sampler(RawSample(0, 0), RawSample(2048, 1024)),
        _Transport(),
        status_display=lambda acc, uptime: seen.append((acc.snapshot(), uptime)),
    )
    sched.baseline()
    sched.report_cycle()
    sched.show_status()

    assert seen[0][0] == (1024, 2048)
    assert seen[0][1] >= 0


@pytest.mark.asyncio
async def test_run_reports_periodically():
    transport = _Transport()
    statuses = []
    sched = _scheduler(
        _Sampler(RawSample(0, 0), RawSample(100, 10), RawSample(200, 20)),
        transport,
        report_interval=0.01,
        warmup_delay=0.01,
        status_interval=0.02,
        status_display=lambda acc, uptime: statuses.append(acc.snapshot()),
    )

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(sched.run(), timeout=0.2)

    assert transport.sent[:2] == [Delta(100, 10), Delta(100, 10)]
    assert all(d == Delta(0, 0) for d in transport.sent[2:])
    assert statuses


class _BrokenSampler:
    def __init__(self):
        self.calls = 0

    def sample(self):
        self.calls += 1
        if self.calls == 1:
            return RawSample(0, 0)
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


@pytest.mark.asyncio
async def test_cycle_failure_does_not_stop_reporting(caplog):
    sampler = _BrokenSampler()
    sched = _scheduler(
        sampler,
        _Transport(),
        report_interval=0.01,
        warmup_delay=0,
        status_display=lambda acc, uptime: None,
    )
    sched.baseline()

    with caplog.at_level(logging.ERROR):
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(sched.report_loop(), timeout=0.1)

    assert sampler.calls > 2
    assert "Report cycle failed" in caplog.text

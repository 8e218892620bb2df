# ignitenode/collectors/network.py
import json
import logging
import platform
import subprocess
from dataclasses import dataclass
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

HELPER_TIMEOUT = 5  # detik
PROC_NET_DEV = "/proc/net/dev"
LOOPBACK = "lo"
BSD_PREFIXES = ("en", "wl")

POWERSHELL_CMD = [
    "powershell",
    "-Command",
    "Get-NetAdapterStatistics | Select-Object -Property ReceivedBytes,SentBytes | ConvertTo-Json",
]
NETSTAT_E_CMD = ["netstat", "-e"]
NETSTAT_IB_CMD = ["netstat", "-ib"]


@dataclass(frozen=True)
class RawSample:
    bytes_in: int
    bytes_out: int


def _to_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def run_helper(cmd: List[str], timeout: int = HELPER_TIMEOUT) -> str:
    """
    Run an external counter helper and return its stdout.

    subprocess.run kills the child on timeout and closes its pipes before
    raising, so nothing is left behind for the caller.
    """
    result = subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        timeout=timeout,
        check=True,
    )
    return result.stdout


class Sampler:
    name = "unknown"

    def sample(self) -> Optional[RawSample]:
        return None


class WindowsSampler(Sampler):
    name = "Windows"

    def __init__(self, runner=run_helper):
        self._run = runner

    def _from_adapter_statistics(self) -> RawSample:
        stats = json.loads(self._run(POWERSHELL_CMD))
        adapters = stats if isinstance(stats, list) else [stats]

        received = 0
        sent = 0
        for adapter in adapters:
            received += _to_int(adapter.get("ReceivedBytes"))
            sent += _to_int(adapter.get("SentBytes"))

        return RawSample(received, sent)

    def _from_netstat(self) -> Optional[RawSample]:
        for line in self._run(NETSTAT_E_CMD).splitlines():
            if "Bytes" not in line:
                continue
            parts = line.split()
            if len(parts) >= 3:
                return RawSample(_to_int(parts[1]), _to_int(parts[2]))
        return None

    def sample(self) -> Optional[RawSample]:
        try:
            return self._from_adapter_statistics()
        except (OSError, subprocess.SubprocessError, ValueError, AttributeError) as e:
            logger.debug(f"Get-NetAdapterStatistics unavailable: {e}")

        try:
            return self._from_netstat()
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            logger.debug(f"netstat -e unavailable: {e}")
            return None


def parse_proc_net_dev(lines: Iterable[str]) -> RawSample:
    received = 0
    sent = 0

    for line in lines:
        if ":" not in line:
            continue
        name, counters = line.split(":", 1)
        if name.strip() == LOOPBACK:
            continue

        parts = counters.split()
        if len(parts) < 9:
            continue

        # receive bytes = kolom 0, transmit bytes = kolom 8
        received += _to_int(parts[0])
        sent += _to_int(parts[8])

    return RawSample(received, sent)


class ProcNetDevSampler(Sampler):
    name = "Linux"

    def __init__(self, path: str = PROC_NET_DEV):
        self.path = path

    def sample(self) -> Optional[RawSample]:
        try:
            with open(self.path) as f:
                return parse_proc_net_dev(f)
        except (OSError, ValueError) as e:
            logger.debug(f"Could not read {self.path}: {e}")
            return None


def parse_netstat_ib(output: str) -> RawSample:
    received = 0
    sent = 0

    for line in output.splitlines():
        if not line.startswith(BSD_PREFIXES):
            continue
        parts = line.split()
        if len(parts) < 10:
            continue
        received += _to_int(parts[6])
        sent += _to_int(parts[9])

    return RawSample(received, sent)


class NetstatSampler(Sampler):
    name = "macOS"

    def __init__(self, runner=run_helper):
        self._run = runner

    def sample(self) -> Optional[RawSample]:
        try:
            return parse_netstat_ib(self._run(NETSTAT_IB_CMD))
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            logger.debug(f"netstat -ib unavailable: {e}")
            return None


def get_sampler(system: Optional[str] = None) -> Sampler:
    system = system or platform.system()

    if system == "Windows":
        return WindowsSampler()
    if system == "Linux":
        return ProcNetDevSampler()
    if system == "Darwin":
        return NetstatSampler()
    return Sampler()

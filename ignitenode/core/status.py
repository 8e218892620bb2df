from ignitenode.core.accumulator import Accumulator
from ignitenode.utils.units import format_bytes, format_uptime

RULE = "=" * 40


def render_status(accumulator: Accumulator, uptime_seconds: float) -> str:
    up, down = accumulator.snapshot()
    return "\n".join([
        "",
        RULE,
        "       IGNITE NETWORK NODE STATUS",
        RULE,
        f"Total Uploaded:   {format_bytes(up)}",
        f"Total Downloaded: {format_bytes(down)}",
        f"Uptime:           {format_uptime(uptime_seconds)}",
        RULE,
        "",
    ])


def print_status(accumulator: Accumulator, uptime_seconds: float):
    print(render_status(accumulator, uptime_seconds))

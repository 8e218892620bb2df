import os
from dotenv import load_dotenv

DEFAULT_API_URL = "https://ignitedepin.xyz"


def _float(key, default, allow_zero=False):
    value = os.getenv(key)
    if not value:
        return default
    try:
        number = float(value)
    except ValueError:
        raise RuntimeError(f"Invalid value for {key}: {value!r}")

    if number < 0 or (number == 0 and not allow_zero):
        raise RuntimeError(f"Invalid value for {key}: {value!r}")
    return number


def load_config():
    if os.getenv("ENV") == "development":
        load_dotenv(".env")
    else:
        load_dotenv("/etc/ignite-node/config.env")

    return {
        "API_URL": os.getenv("IGNITE_API_URL") or DEFAULT_API_URL,
        "EMAIL": os.getenv("IGNITE_EMAIL", ""),
        "PASSWORD": os.getenv("IGNITE_PASSWORD", ""),
        "REPORT_INTERVAL": _float("IGNITE_REPORT_INTERVAL", 30),
        "WARMUP_DELAY": _float("IGNITE_WARMUP_DELAY", 2, allow_zero=True),
        "STATUS_INTERVAL": _float("IGNITE_STATUS_INTERVAL", 60),
        "REQUEST_TIMEOUT": _float("IGNITE_REQUEST_TIMEOUT", 10),
        "LOG_LEVEL": os.getenv("IGNITE_LOG_LEVEL", "INFO").upper(),
    }

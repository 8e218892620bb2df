SIZES = ["B", "KB", "MB", "GB"]


def format_bytes(num: int) -> str:
    if num <= 0:
        return "0 B"

    value = float(num)
    i = 0
    while value >= 1024 and i < len(SIZES) - 1:
        value /= 1024
        i += 1

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZES[i]}"


def format_uptime(seconds: float) -> str:
    seconds = int(seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m {seconds % 60}s"

"""Live status helpers: uptime formatting, timestamps, host identity."""

from __future__ import annotations

import socket
import time
from datetime import datetime, timezone
from typing import Optional


def format_uptime(seconds: float) -> str:
    """Format seconds as `<d>d <h>h <m>m <s>s`, dropping leading zero units.

    >>> format_uptime(65)
    '1m 5s'
    """
    total = max(0, int(seconds))
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if days or hours:
        parts.append(f"{hours}h")
    if days or hours or minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


def iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def hostname() -> str:
    # inside a Pod this is the Pod name
    return socket.gethostname()


class UptimeClock:
    """Monotonic clock started when the application is built."""

    def __init__(self) -> None:
        self._started = time.monotonic()

    def elapsed(self) -> float:
        return time.monotonic() - self._started

"""Process-level figures reported by the health and overview routes."""

import gc
import resource
import time
from typing import Any

_STARTED = time.monotonic()


def uptime() -> float:
    """Seconds since this module was imported (i.e. since process start)."""
    return round(time.monotonic() - _STARTED, 3)


def memory_usage() -> dict[str, Any]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {
        "maxRssKb": usage.ru_maxrss,
        "objects": len(gc.get_objects()),
    }

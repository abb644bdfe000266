"""Explicit result type for best-effort collaborator calls.

Fatal call sites await the collaborator directly and let errors propagate.
Best-effort call sites go through :func:`best_effort`, which always returns
an :class:`Outcome` so the degraded path is visible at the call site.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Value of a best-effort call, or the default it fell back to."""

    value: T
    error: str | None = None

    @property
    def degraded(self) -> bool:
        return self.error is not None


async def best_effort(label: str, call: Awaitable[T], default: T) -> Outcome[T]:
    """Await *call*; on any exception log a warning and return *default*."""
    try:
        return Outcome(await call)
    except Exception as exc:
        logger.warning("%s failed: %s", label, exc)
        return Outcome(default, error=str(exc))

"""Tests for the best-effort outcome helper."""

import logging

from src.outcome import Outcome, best_effort


async def _value():
    return 42


async def _broken():
    raise RuntimeError("collaborator down")


async def test_success_is_not_degraded() -> None:
    outcome = await best_effort("Probe", _value(), default=0)
    assert outcome == Outcome(42)
    assert outcome.degraded is False


async def test_failure_returns_default(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="src.outcome"):
        outcome = await best_effort("Properties count", _broken(), default=0)

    assert outcome.value == 0
    assert outcome.degraded is True
    assert outcome.error == "collaborator down"
    assert "Properties count failed: collaborator down" in caplog.text

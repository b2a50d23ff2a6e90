"""
Best-effort operation results.

Hydration and cleanup are allowed to fail silently. Instead of hiding those
failures behind bare try/except blocks, each step returns an Outcome and the
steps of one pass are collected in a SyncReport the caller may inspect.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Outcome:
    """Result of a single best-effort step."""

    operation: str
    ok: bool
    value: Any = None
    error: Exception | None = None


@dataclass
class SyncReport:
    """Ordered outcomes of a hydration or cleanup pass."""

    outcomes: list[Outcome] = field(default_factory=list)

    def add(self, outcome: Outcome) -> Outcome:
        self.outcomes.append(outcome)
        return outcome

    @property
    def ok(self) -> bool:
        """True if every recorded step succeeded."""
        return all(o.ok for o in self.outcomes)

    @property
    def failures(self) -> list[Outcome]:
        return [o for o in self.outcomes if not o.ok]

    def operations(self) -> list[str]:
        return [o.operation for o in self.outcomes]


async def best_effort(operation: str, func: Callable[[], Awaitable[Any]]) -> Outcome:
    """Run ``func`` and capture its result or failure without raising.

    Args:
        operation: Name of the step, recorded on the outcome
        func: Zero-argument callable returning an awaitable

    Returns:
        Outcome with ``value`` set on success, ``error`` set on failure
    """
    try:
        value = await func()
    except Exception as e:
        return Outcome(operation=operation, ok=False, error=e)
    return Outcome(operation=operation, ok=True, value=value)

"""Reveal animation handle and duration policy."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DurationPolicy:
    """Run length scales with the number of cells, bounded on both sides."""

    per_unit_ms: float = 14.0
    min_ms: float = 1800.0
    max_ms: float = 4800.0

    def __post_init__(self) -> None:
        if self.per_unit_ms < 0:
            raise ValueError("per_unit_ms must not be negative")
        if self.min_ms <= 0:
            raise ValueError("min_ms must be positive")
        if self.min_ms > self.max_ms:
            raise ValueError("min_ms must not exceed max_ms")

    def duration_for(self, target: int) -> float:
        return min(self.max_ms, max(self.min_ms, target * self.per_unit_ms))


STAGED_DURATION = DurationPolicy(per_unit_ms=14.0, min_ms=1800.0, max_ms=4800.0)
QUICK_DURATION = DurationPolicy(per_unit_ms=6.0, min_ms=1200.0, max_ms=4000.0)


@dataclass
class RevealAnimation:
    """One in-flight run. ``start_time`` is fixed by the first sample."""

    start_value: int
    target: int
    duration: float
    run: int
    start_time: float | None = None
    cancelled: bool = False

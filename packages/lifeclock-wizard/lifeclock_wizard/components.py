"""Timer token."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """One-shot countdown in milliseconds.

    Owned by exactly one controller. A cancelled timer keeps
    ``cancelled=True`` so a stale reference can never fire.
    """

    name: str
    remaining: float
    seq: int = 0
    cancelled: bool = False

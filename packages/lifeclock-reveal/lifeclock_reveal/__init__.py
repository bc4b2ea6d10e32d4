"""lifeclock-reveal - Progressive fill animation for the week grid."""
from __future__ import annotations

from lifeclock_reveal.animator import RevealAnimator
from lifeclock_reveal.components import (
    QUICK_DURATION,
    STAGED_DURATION,
    DurationPolicy,
    RevealAnimation,
)
from lifeclock_reveal.systems import make_reveal_system

__all__ = [
    "RevealAnimator",
    "RevealAnimation",
    "DurationPolicy",
    "STAGED_DURATION",
    "QUICK_DURATION",
    "make_reveal_system",
]

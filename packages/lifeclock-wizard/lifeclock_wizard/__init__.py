"""lifeclock-wizard - Timed step sequencing for the birth date wizard."""
from __future__ import annotations

from lifeclock_wizard.components import Timer
from lifeclock_wizard.controller import WizardController
from lifeclock_wizard.policy import (
    COLLECTING,
    DAY,
    IMMEDIATE,
    MONTH,
    POLICIES,
    PREP,
    STAGED,
    VISUAL,
    YEAR,
    WizardPolicy,
    policy_named,
)
from lifeclock_wizard.systems import make_wizard_system

__all__ = [
    "WizardController",
    "WizardPolicy",
    "Timer",
    "STAGED",
    "IMMEDIATE",
    "POLICIES",
    "policy_named",
    "YEAR",
    "MONTH",
    "DAY",
    "PREP",
    "VISUAL",
    "COLLECTING",
    "make_wizard_system",
]

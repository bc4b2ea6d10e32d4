"""Step cards for the birth date form and the prep message."""
from __future__ import annotations

import calendar

import pygame

from lifeclock_wizard import DAY, MONTH, YEAR, WizardController
from lifeclock_wizard.controller import (
    ENTER_TIMER,
    ENTERING,
    LEAVE_TIMER,
    LEAVING,
    PREP_ADVANCE_TIMER,
    PREP_HIDDEN,
    PREP_OUT,
)

from ui.constants import (
    ACCENT,
    BORDER,
    CARD_BG,
    CARD_H,
    CARD_SLIDE,
    CARD_W,
    CONTENT_H,
    GRID_W,
    LABEL_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)

TITLES = {
    YEAR: "Year of birth",
    MONTH: "Month of birth",
    DAY: "Day of birth",
}


def _fraction(wizard: WizardController, timer: str, total_ms: float) -> float:
    """Share of ``timer`` already elapsed, 1.0 when it is not running."""
    if total_ms <= 0 or timer not in wizard.pending_timers():
        return 1.0
    return 1.0 - wizard.time_remaining(timer) / total_ms


def card_motion(wizard: WizardController) -> tuple[int, int]:
    """(alpha, y offset) of the current step's card."""
    policy = wizard.policy
    if wizard.phase == LEAVING:
        t = _fraction(wizard, LEAVE_TIMER, policy.leave_ms)
        return int(255 * (1.0 - t)), -int(CARD_SLIDE * t)
    if wizard.phase == ENTERING:
        t = _fraction(wizard, ENTER_TIMER, policy.enter_ms)
        return int(255 * t), int(CARD_SLIDE * (1.0 - t))
    return 255, 0


def _value_text(field: str, picker) -> str:
    if field == YEAR:
        return str(picker.year)
    if field == MONTH:
        return calendar.month_name[picker.month]
    return str(picker.day)


def draw_form_card(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    wizard: WizardController,
    picker,
    editing: str,
    combined: bool,
) -> None:
    """Draw the card for the field under edit, faded by the wizard phase."""
    alpha, dy = card_motion(wizard)
    card = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
    pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=8)
    pygame.draw.rect(card, BORDER, card.get_rect(), width=1, border_radius=8)

    title = fonts["small"].render(TITLES[editing], True, LABEL_COLOR)
    card.blit(title, (16, 14))

    value = fonts["large"].render(_value_text(editing, picker), True, ACCENT)
    card.blit(value, (CARD_W // 2 - value.get_width() // 2, CARD_H // 2 - value.get_height() // 2))

    if combined:
        summary = f"{picker.year:04d}-{picker.month:02d}-{picker.day:02d}"
        hint = fonts["small"].render(f"{summary}   [Tab] next field", True, TEXT_DIM)
    else:
        hint = fonts["small"].render("[Up/Down] change   [Enter] next", True, TEXT_DIM)
    card.blit(hint, (16, CARD_H - hint.get_height() - 12))

    card.set_alpha(alpha)
    x = GRID_W // 2 - CARD_W // 2
    y = CONTENT_H // 2 - CARD_H // 2 + dy
    surface.blit(card, (x, y))


def draw_prep(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    wizard: WizardController,
) -> None:
    """Draw the waypoint message; it fades out once the fade timer fires."""
    if wizard.prep_phase == PREP_HIDDEN:
        return
    alpha = 255
    if wizard.prep_phase == PREP_OUT:
        policy = wizard.policy
        span = policy.prep_advance_ms - policy.prep_fade_ms
        left = wizard.time_remaining(PREP_ADVANCE_TIMER)
        alpha = int(255 * (left / span)) if span > 0 else 0

    text = fonts["medium"].render("Counting your weeks...", True, TEXT_COLOR)
    text.set_alpha(max(0, min(255, alpha)))
    surface.blit(
        text,
        (GRID_W // 2 - text.get_width() // 2, CONTENT_H // 2 - text.get_height() // 2),
    )

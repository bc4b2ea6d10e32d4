"""Week grid: one cell per week of the expected lifespan."""
from __future__ import annotations

import math

import pygame

from lifeclock_stats import week_cells
from lifeclock_wizard import WizardController
from lifeclock_wizard.controller import GRID_REVEALING, GRID_TIMER

from ui.constants import (
    CELL_EMPTY,
    CELL_FILLED,
    CELL_GAP,
    CONTENT_H,
    GRID_COLUMNS,
    GRID_PAD,
    GRID_W,
    MAX_CELL,
    TEXT_DIM,
)


def cell_size(total_weeks: int) -> int:
    """Largest cell that fits every row in the grid area."""
    rows = max(1, math.ceil(total_weeks / GRID_COLUMNS))
    by_height = (CONTENT_H - 2 * GRID_PAD - 24) // rows - CELL_GAP
    by_width = (GRID_W - 2 * GRID_PAD) // GRID_COLUMNS - CELL_GAP
    return max(1, min(MAX_CELL, by_height, by_width))


def grid_alpha(wizard: WizardController) -> int:
    """Grid opacity during its entrance."""
    if wizard.grid_phase != GRID_REVEALING:
        return 255
    delay = wizard.policy.grid_delay_ms
    if delay <= 0:
        return 255
    return int(255 * (1.0 - wizard.time_remaining(GRID_TIMER) / delay))


def draw_grid(
    surface: pygame.Surface,
    font: pygame.font.Font,
    wizard: WizardController,
    total_weeks: int,
    displayed: int,
) -> None:
    cells = week_cells(total_weeks, displayed)
    size = cell_size(total_weeks)
    pitch = size + CELL_GAP
    width = GRID_COLUMNS * pitch
    x0 = GRID_W // 2 - width // 2
    y0 = GRID_PAD + 24

    layer = pygame.Surface((GRID_W, CONTENT_H), pygame.SRCALPHA)
    caption = font.render("Each square is one week", True, TEXT_DIM)
    layer.blit(caption, (x0, GRID_PAD))
    for i, filled in enumerate(cells):
        row, col = divmod(i, GRID_COLUMNS)
        rect = (x0 + col * pitch, y0 + row * pitch, size, size)
        pygame.draw.rect(layer, CELL_FILLED if filled else CELL_EMPTY, rect)

    layer.set_alpha(max(0, min(255, grid_alpha(wizard))))
    surface.blit(layer, (0, 0))

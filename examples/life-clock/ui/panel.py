"""Statistics panel on the right-hand side."""
from __future__ import annotations

import pygame

from lifeclock_stats import StatsView

from ui.constants import (
    ACCENT,
    BAR_BG,
    BORDER,
    CONTENT_H,
    GRID_W,
    LABEL_COLOR,
    PANEL_BG,
    PANEL_W,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_panel(
    surface: pygame.Surface,
    font: pygame.font.Font,
    view: StatsView,
    progress: float,
    expectancy: float,
    birth: str,
    policy: str,
    log_entries: list[str],
) -> None:
    x = GRID_W
    pygame.draw.rect(surface, PANEL_BG, (x, 0, PANEL_W, CONTENT_H))
    pygame.draw.line(surface, BORDER, (x, 0), (x, CONTENT_H))

    pad = 14
    line_h = 22
    cx = x + pad
    cy = 12

    surface.blit(font.render("LIFE CLOCK", True, LABEL_COLOR), (cx, cy))
    cy += line_h + 6

    surface.blit(font.render(f"Born:     {birth}", True, TEXT_COLOR), (cx, cy))
    cy += line_h
    surface.blit(font.render(f"Expect:   {expectancy:g} y", True, TEXT_COLOR), (cx, cy))
    cy += line_h + 8

    rows = (
        ("Age", view.age),
        ("Left", view.left),
        ("Lived", view.percent),
        ("Weeks", view.weeks),
    )
    for label, value in rows:
        surface.blit(font.render(f"{label + ':':<10}{value}", True, TEXT_COLOR), (cx, cy))
        cy += line_h

    cy += 6
    bar_w = PANEL_W - 2 * pad
    pygame.draw.rect(surface, BAR_BG, (cx, cy, bar_w, 10))
    fill = int(bar_w * max(0.0, min(1.0, progress)))
    if fill:
        pygame.draw.rect(surface, ACCENT, (cx, cy, fill, 10))
    cy += 22

    surface.blit(font.render("Countdown", True, TEXT_DIM), (cx, cy))
    cy += line_h
    surface.blit(font.render(view.countdown, True, ACCENT), (cx, cy))
    cy += line_h + 12

    surface.blit(font.render(f"Policy: {policy}", True, TEXT_DIM), (cx, cy))
    cy += line_h + 8

    surface.blit(font.render("Log", True, TEXT_DIM), (cx, cy))
    cy += line_h
    for entry in log_entries:
        surface.blit(font.render(entry, True, TEXT_DIM), (cx, cy))
        cy += line_h - 4

"""Bottom key-bindings bar."""
from __future__ import annotations

import pygame

from ui.constants import BORDER, CONTENT_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_DIM


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, step: str, combined: bool) -> None:
    y = CONTENT_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, BORDER, (0, y), (SCREEN_W, y))

    if step == "visual":
        text = "[1/2/3] Edit year/month/day  [</>] Expectancy  [Esc] Quit"
    elif combined:
        text = "[Up/Down] Change  [Tab] Field  [Enter] Show  [</>] Expectancy  [Esc] Quit"
    else:
        text = "[Up/Down] Change  [Enter] Next  [Bksp] Back  [</>] Expectancy  [Esc] Quit"

    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))

"""Life Clock: your life drawn as a grid of weeks.

Exercises lifeclock, lifeclock-stats, lifeclock-wizard, and lifeclock-reveal.

Controls:
  Up/Down     Change the year, month, or day being picked
  Tab         Next field (immediate policy)
  Enter       Confirm the current step
  Backspace   Previous step
  1/2/3       Edit year/month/day from the grid
  Left/Right  Adjust life expectancy
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from lifeclock_stats import PLACEHOLDER, parse_date, progress_fraction
from lifeclock_wizard import DAY, MONTH, POLICIES, YEAR

from game.app import AppState
from ui.cards import draw_form_card, draw_prep
from ui.constants import BG_COLOR, ENGINE_FPS, EXPECTANCY_STEP, FPS, SCREEN_H, SCREEN_W
from ui.grid import draw_grid
from ui.panel import draw_panel
from ui.status import draw_status_bar


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Life Clock: weeks-of-life visual demo")
    p.add_argument("--link", type=str, default=None,
                   help="Deep-link query string, e.g. 'dob=1990-05-17&exp=85'")
    p.add_argument("--dob", type=str, default=None, metavar="YYYY-MM-DD",
                   help="Birth date; skips the form when valid")
    p.add_argument("--exp", type=float, default=None, help="Life expectancy in years (default: 82)")
    p.add_argument("--policy", choices=sorted(POLICIES), default="staged",
                   help="Wizard flow (default: staged)")
    p.add_argument("--reduced-motion", action="store_true", help="Fill the grid without animating")
    p.add_argument("--fps", type=int, default=ENGINE_FPS, help=f"Engine frames per second (default: {ENGINE_FPS})")
    p.add_argument("--verbose", action="store_true", help="Log step changes and animation runs")
    args = p.parse_args()
    args.fps = max(1, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    state = AppState(
        policy=args.policy,
        link=args.link,
        dob=parse_date(args.dob),
        expectancy=args.exp,
        reduced_motion=args.reduced_motion,
        fps=args.fps,
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Life Clock")
    clock = pygame.time.Clock()
    fonts = {
        "small": pygame.font.SysFont("monospace", 13),
        "medium": pygame.font.SysFont("monospace", 20),
        "large": pygame.font.SysFont("monospace", 44, bold=True),
    }

    frame_interval = 1.0 / args.fps
    accumulator = 0.0
    state.engine.start()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_UP:
                    state.adjust(+1)
                elif event.key == pygame.K_DOWN:
                    state.adjust(-1)
                elif event.key == pygame.K_TAB:
                    state.next_field()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    state.confirm()
                elif event.key == pygame.K_BACKSPACE:
                    state.back()
                elif event.key == pygame.K_LEFT:
                    state.change_expectancy(-EXPECTANCY_STEP)
                elif event.key == pygame.K_RIGHT:
                    state.change_expectancy(+EXPECTANCY_STEP)
                elif event.key == pygame.K_1:
                    state.jump(YEAR)
                elif event.key == pygame.K_2:
                    state.jump(MONTH)
                elif event.key == pygame.K_3:
                    state.jump(DAY)

        # --- Frames ---
        while accumulator >= frame_interval:
            state.engine.step()
            accumulator -= frame_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        wizard = state.wizard
        combined = wizard.policy.prep is None
        stats = state.stats

        if wizard.is_visual and stats is not None:
            draw_grid(screen, fonts["small"], wizard, stats.total_weeks, state.animator.displayed)
        elif state.editing is not None:
            draw_form_card(screen, fonts, wizard, state.picker, state.editing, combined)
        draw_prep(screen, fonts, wizard)

        birth = state.picker.date.isoformat() if state.confirmed else PLACEHOLDER
        draw_panel(
            screen,
            fonts["small"],
            view=state.view,
            progress=progress_fraction(stats),
            expectancy=state.expectancy,
            birth=birth,
            policy=wizard.policy.name,
            log_entries=state.log_entries,
        )
        draw_status_bar(screen, fonts["small"], wizard.step, combined)

        pygame.display.flip()

    state.engine.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

"""Integration tests: stats → wizard → reveal systems on one engine."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from lifeclock import Engine, ManualWall
from lifeclock_stats import LifeStats, Parameters, make_stats_system
from lifeclock_wizard import COLLECTING, IMMEDIATE, STAGED, VISUAL, YEAR, WizardController, make_wizard_system

from lifeclock_reveal import STAGED_DURATION, RevealAnimator, make_reveal_system

_NOW = datetime(2020, 1, 1, tzinfo=timezone.utc)
_BIRTH = date(2000, 1, 1)  # 1040 of 4264 weeks lived at _NOW


def _pipeline(
    policy=IMMEDIATE,
    wall: ManualWall | None = None,
    reduced_motion: bool = False,
    birth: date | None = _BIRTH,
) -> tuple[Engine, WizardController, RevealAnimator, list[int]]:
    """100 fps engine (10 ms frames) starting on the visual step."""
    engine = Engine(fps=100, wall=wall or ManualWall(_NOW))
    wizard = WizardController(policy, initial=VISUAL)
    animator = RevealAnimator(STAGED_DURATION, reduced_motion=reduced_motion)
    completions: list[int] = []
    engine.add_system(make_stats_system())
    engine.add_system(make_wizard_system(wizard))
    engine.add_system(
        make_reveal_system(
            animator,
            lambda: wizard.reveal_ready,
            on_complete=lambda w, c, n: completions.append(n),
        )
    )
    engine.world.insert(Parameters.of(birth, 82))
    return engine, wizard, animator, completions


def _frames(engine: Engine, n: int, animator: RevealAnimator | None = None) -> list[int]:
    seen = []
    for _ in range(n):
        engine.step()
        if animator is not None:
            seen.append(animator.displayed)
    return seen


class TestReveal:
    def test_fills_to_lived_weeks(self) -> None:
        engine, _, animator, completions = _pipeline()
        values = _frames(engine, 480, animator)
        assert values[0] == 0
        assert values == sorted(values)
        assert values[-1] < 1040
        engine.step()
        assert animator.displayed == 1040
        assert completions == [1040]

    def test_completion_reported_once(self) -> None:
        engine, _, animator, completions = _pipeline()
        _frames(engine, 800)
        assert completions == [1040]
        assert animator.displayed == 1040

    def test_no_birth_no_animation(self) -> None:
        engine, _, animator, completions = _pipeline(birth=None)
        _frames(engine, 50)
        assert not engine.world.has(LifeStats)
        assert not animator.engaged
        assert animator.displayed == 0
        assert completions == []

    def test_reduced_motion_has_no_intermediate_samples(self) -> None:
        engine, _, animator, completions = _pipeline(reduced_motion=True)
        values = _frames(engine, 5, animator)
        assert values == [1040] * 5
        assert completions == [1040]


class TestRestartPolicy:
    def test_parameter_change_restarts_from_zero(self) -> None:
        engine, _, animator, completions = _pipeline()
        _frames(engine, 200)
        assert animator.displayed > 0
        old = animator.handle
        engine.world.insert(Parameters.of(_BIRTH, 90))
        engine.step()
        assert old is not None and old.cancelled
        assert animator.handle is not old
        assert animator.displayed == 0
        _frames(engine, 481)
        assert animator.displayed == 1040
        assert completions == [1040]

    def test_birth_change_restarts(self) -> None:
        engine, _, animator, _ = _pipeline()
        _frames(engine, 100)
        engine.world.insert(Parameters.of(date(1990, 1, 1), 82))
        engine.step()
        assert animator.displayed == 0
        assert animator.context == (date(1990, 1, 1), 82.0)

    def test_live_clock_does_not_restart(self) -> None:
        wall = ManualWall.ticking(_NOW, timedelta(days=1))
        engine, _, animator, completions = _pipeline(wall=wall)
        engine.step()
        first = animator.handle
        values = _frames(engine, 700, animator)
        assert values == sorted(values)
        assert first is not None and not first.cancelled
        assert completions and len(completions) == 1
        stats = engine.world.get(LifeStats)
        assert stats.lived_weeks > 1040
        assert animator.displayed == stats.lived_weeks

    def test_clock_stepping_back_mid_run_stays_monotonic(self) -> None:
        wall = ManualWall(_NOW)
        engine, _, animator, completions = _pipeline(wall=wall)
        values = _frames(engine, 200, animator)
        wall.advance(-timedelta(days=15))
        values += _frames(engine, 400, animator)
        assert values == sorted(values)
        lived = engine.world.get(LifeStats).lived_weeks
        assert lived < 1040
        assert animator.displayed == lived
        assert completions == [lived]

    def test_finished_grid_follows_week_boundary(self) -> None:
        wall = ManualWall(_NOW)
        engine, _, animator, _ = _pipeline(wall=wall)
        _frames(engine, 500)
        assert animator.displayed == 1040
        wall.advance(timedelta(days=8))
        engine.step()
        assert animator.displayed == 1041
        assert not animator.animating


class TestWizardGate:
    def test_waits_for_grid_entrance(self) -> None:
        engine, wizard, animator, _ = _pipeline(policy=STAGED)
        _frames(engine, 139)
        assert not wizard.reveal_ready
        assert not animator.engaged
        engine.step()
        assert animator.engaged
        assert animator.animating

    def test_leaving_visual_discards_animation(self) -> None:
        engine, wizard, animator, _ = _pipeline()
        _frames(engine, 100)
        handle = animator.handle
        wizard.go_to_step(COLLECTING)
        engine.step()
        assert handle is not None and handle.cancelled
        assert not animator.engaged
        assert animator.displayed == 0

    def test_reentry_restarts(self) -> None:
        engine, wizard, animator, completions = _pipeline()
        _frames(engine, 600)
        assert completions == [1040]
        wizard.go_to_step(COLLECTING)
        engine.step()
        wizard.go_to_step(VISUAL)
        engine.step()
        assert animator.animating
        assert animator.displayed == 0
        _frames(engine, 481)
        assert completions == [1040, 1040]

    def test_staged_back_navigation_keeps_reveal_during_leave(self) -> None:
        engine, wizard, animator, _ = _pipeline(policy=STAGED)
        _frames(engine, 300)
        assert wizard.go_to_step(YEAR)
        _frames(engine, 69)
        assert animator.engaged
        engine.step()
        assert wizard.step == YEAR
        assert not animator.engaged

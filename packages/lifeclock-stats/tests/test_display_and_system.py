"""Tests for display views and make_stats_system."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from lifeclock import Engine, ManualWall

from lifeclock_stats import (
    PLACEHOLDER,
    LifeStats,
    Parameters,
    StatsView,
    compute_life_stats,
    make_stats_system,
    progress_fraction,
    week_cells,
)

_NOW = datetime(2020, 1, 1, tzinfo=timezone.utc)


class TestStatsView:
    def test_placeholders_without_stats(self) -> None:
        view = StatsView.of(None)
        assert view.age == view.left == view.percent == PLACEHOLDER
        assert view.countdown == view.weeks == PLACEHOLDER

    def test_formatting(self) -> None:
        s = compute_life_stats(date(2000, 1, 1), _NOW, 82)
        view = StatsView.of(s)
        assert view.age == "20.00 y"
        assert view.left == "62.00 y"
        assert view.percent == f"{s.percent:.2f}%"
        assert view.weeks == "1040 / 4264"
        assert view.countdown.startswith("61y ")
        assert view.countdown.endswith("s")

    def test_outlived_countdown(self) -> None:
        s = compute_life_stats(date(1900, 1, 1), _NOW, 60)
        view = StatsView.of(s)
        assert view.countdown == "0y 0d 0h 0m 0s"
        assert view.percent == "100.00%"


class TestCells:
    def test_filled_prefix(self) -> None:
        assert week_cells(5, 2) == [True, True, False, False, False]

    def test_displayed_beyond_total(self) -> None:
        assert week_cells(3, 10) == [True, True, True]

    def test_empty(self) -> None:
        assert week_cells(0, 0) == []

    def test_progress_fraction(self) -> None:
        assert progress_fraction(None) == 0.0
        s = compute_life_stats(date(1900, 1, 1), _NOW, 60)
        assert progress_fraction(s) == 1.0


class TestStatsSystem:
    def _engine(self, wall: ManualWall) -> Engine:
        engine = Engine(fps=100, wall=wall)
        engine.add_system(make_stats_system())
        return engine

    def test_no_parameters_no_stats(self) -> None:
        engine = self._engine(ManualWall(_NOW))
        engine.step()
        assert not engine.world.has(LifeStats)

    def test_no_birth_removes_stats(self) -> None:
        engine = self._engine(ManualWall(_NOW))
        engine.world.insert(Parameters.of(date(2000, 1, 1)))
        engine.step()
        assert engine.world.has(LifeStats)
        engine.world.insert(Parameters(birth=None))
        engine.step()
        assert not engine.world.has(LifeStats)

    def test_recomputed_each_frame_from_wall(self) -> None:
        wall = ManualWall.ticking(_NOW, timedelta(days=7))
        engine = self._engine(wall)
        engine.world.insert(Parameters.of(date(2000, 1, 1), 82))
        engine.step()
        first = engine.world.get(LifeStats)
        engine.step()
        second = engine.world.get(LifeStats)
        assert second is not first
        assert second.age_ms - first.age_ms == 7 * 86_400_000
        assert first == compute_life_stats(date(2000, 1, 1), _NOW, 82)

    def test_on_stats_callback(self) -> None:
        seen: list[int] = []
        engine = Engine(fps=100, wall=ManualWall(_NOW))
        engine.add_system(
            make_stats_system(on_stats=lambda w, c, s: seen.append(s.lived_weeks))
        )
        engine.world.insert(Parameters.of(date(2000, 1, 1)))
        engine.run(2)
        assert seen == [1040, 1040]

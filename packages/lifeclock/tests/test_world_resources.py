"""Tests for World resource insert/get/find/remove."""

from dataclasses import dataclass

import pytest

from lifeclock.types import MissingResourceError
from lifeclock.world import World


@dataclass
class Settings:
    fps: int


@dataclass
class Counter:
    value: int


def test_insert_and_get():
    world = World()
    world.insert(Settings(fps=60))
    assert world.get(Settings).fps == 60


def test_insert_replaces_same_type():
    world = World()
    world.insert(Counter(1))
    world.insert(Counter(2))
    assert world.get(Counter).value == 2
    assert len(world.resources()) == 1


def test_get_missing_raises():
    world = World()
    with pytest.raises(MissingResourceError) as excinfo:
        world.get(Counter)
    assert excinfo.value.rtype is Counter


def test_missing_resource_error_is_key_error():
    world = World()
    with pytest.raises(KeyError):
        world.get(Settings)


def test_find_returns_none_when_absent():
    world = World()
    assert world.find(Counter) is None
    world.insert(Counter(3))
    assert world.find(Counter) == Counter(3)


def test_has_and_remove():
    world = World()
    world.insert(Counter(0))
    assert world.has(Counter)
    world.remove(Counter)
    assert not world.has(Counter)


def test_remove_absent_is_noop():
    world = World()
    world.remove(Counter)
    assert world.resources() == []


def test_clear():
    world = World()
    world.insert(Counter(0))
    world.insert(Settings(30))
    world.clear()
    assert world.resources() == []

"""lifeclock - Frame loop, clock source, and resource world for the life clock."""

from lifeclock.clock import FrameClock, ManualWall, system_now
from lifeclock.engine import Engine
from lifeclock.types import FrameContext, MissingResourceError, WallSource
from lifeclock.world import World

__all__ = [
    "Engine",
    "World",
    "FrameClock",
    "FrameContext",
    "ManualWall",
    "MissingResourceError",
    "WallSource",
    "system_now",
]

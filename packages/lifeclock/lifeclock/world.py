"""World - typed resource storage for a single display."""

from __future__ import annotations

from typing import Any, TypeVar, cast

from lifeclock.types import MissingResourceError

T = TypeVar("T")


class World:
    """Holds at most one resource per type.

    Systems communicate through the world: the surrounding UI inserts
    ``Parameters``, the stats system replaces ``LifeStats`` every frame,
    and so on. Inserting a resource of a type that is already present
    replaces it.
    """

    def __init__(self) -> None:
        self._resources: dict[type, Any] = {}

    def insert(self, resource: Any) -> None:
        self._resources[type(resource)] = resource

    def get(self, rtype: type[T]) -> T:
        try:
            return cast(T, self._resources[rtype])
        except KeyError:
            raise MissingResourceError(
                rtype, f"World has no {rtype.__name__} resource"
            ) from None

    def find(self, rtype: type[T]) -> T | None:
        return cast("T | None", self._resources.get(rtype))

    def has(self, rtype: type) -> bool:
        return rtype in self._resources

    def remove(self, rtype: type) -> None:
        self._resources.pop(rtype, None)

    def resources(self) -> list[Any]:
        return list(self._resources.values())

    def clear(self) -> None:
        self._resources.clear()

"""Entity identifiers and the table of which components each entity carries."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

MAX_ENTITIES = 100
MAX_COMPONENTS = 32


class Component(IntEnum):
    """Identifiers of the built-in component kinds."""

    TRANSFORM = 0
    MESH = 1
    CAMERA = 2


def _valid_component(component: int) -> bool:
    return 0 <= int(component) < MAX_COMPONENTS


class EntityRegistry:
    """Hands out entity ids and records which components each live entity has."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every entity and component."""
        self._alive: set[int] = set()
        self._components: dict[int, set[int]] = {}
        self._next = 0

    def create(self) -> int:
        """Return the lowest free entity id; raise OverflowError when all are taken."""
        for entity in range(self._next, MAX_ENTITIES):
            if entity in self._alive:
                continue
            self._alive.add(entity)
            self._components[entity] = set()
            self._next = entity + 1
            return entity
        raise OverflowError(f"no free entity: all {MAX_ENTITIES} are in use")

    def destroy(self, entity: int) -> None:
        """Free an entity and drop its components; ids out of range are ignored."""
        if not 0 <= entity < MAX_ENTITIES:
            return
        self._alive.discard(entity)
        self._components.pop(entity, None)
        self._next = min(self._next, entity)

    def is_alive(self, entity: int) -> bool:
        return 0 <= entity < MAX_ENTITIES and entity in self._alive

    def add_component(self, entity: int, component: int) -> None:
        """Mark a live entity as having a component; other requests are ignored."""
        if self.is_alive(entity) and _valid_component(component):
            self._components[entity].add(int(component))

    def remove_component(self, entity: int, component: int) -> None:
        if self.is_alive(entity) and _valid_component(component):
            self._components[entity].discard(int(component))

    def has_component(self, entity: int, component: int) -> bool:
        return (
            self.is_alive(entity)
            and _valid_component(component)
            and int(component) in self._components[entity]
        )

    def __iter__(self) -> Iterator[int]:
        """Live entities in ascending order."""
        return iter(sorted(self._alive))

    def __len__(self) -> int:
        return len(self._alive)
"""Transform, camera and mesh components and their per-entity stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

from .entity import Component, EntityRegistry
from .mathutils import Vec3
from .matrix import Mat4

T = TypeVar("T")


@dataclass
class Transform:
    """Position, Euler rotation and scale, plus the basis vectors derived from rotation."""

    position: Vec3 = Vec3()
    rotation: Vec3 = Vec3()
    scale: Vec3 = Vec3()
    up: Vec3 = Vec3()
    right: Vec3 = Vec3()
    forward: Vec3 = Vec3()

    def update(self) -> None:
        """Recompute right, up and forward from the rotation."""
        rotation = Mat4.from_euler(self.rotation.x, self.rotation.y, self.rotation.z)
        self.right, self.up, self.forward = (
            Vec3(*(rotation[row][column] for row in range(3))) for column in range(3)
        )


_KEY_DIRECTIONS = {"W": 1.0, "D": 1.0, "S": -1.0, "A": -1.0}


@dataclass
class Camera:
    speed: float = 0.0
    sensitivity: float = 0.0
    fov: float = 0.0
    aspect: float = 0.0
    near_plane: float = 0.0
    far_plane: float = 0.0

    def process_keyboard(self, transform: Transform, direction: str, delta_time: float) -> None:
        """Move the transform along its forward vector for a W, A, S or D key."""
        sign = _KEY_DIRECTIONS.get(direction)
        if sign is None:
            return
        step = sign * self.speed * delta_time
        p, f = transform.position, transform.forward
        transform.position = Vec3(p.x + f.x * step, p.y + f.y * step, p.z + f.z * step)


@dataclass
class Mesh:
    """Vertex positions and the zero-based triangle indices into them."""

    vertices: list[Vec3] = field(default_factory=list)
    vertex_indices: list[int] = field(default_factory=list)


class ComponentStore(Generic[T]):
    """Values of one component kind, keyed by entity and tied to a registry."""

    def __init__(self, registry: EntityRegistry, component: Component) -> None:
        self.registry = registry
        self.component = component
        self._values: dict[int, T] = {}

    def add(self, entity: int, value: T) -> None:
        """Attach a value; an entity that already has this component keeps its value."""
        if self.registry.has_component(entity, self.component):
            return
        self.registry.add_component(entity, self.component)
        if self.registry.has_component(entity, self.component):
            self._values[entity] = value

    def remove(self, entity: int) -> None:
        if self.registry.has_component(entity, self.component):
            self.registry.remove_component(entity, self.component)
            self._values.pop(entity, None)

    def get(self, entity: int) -> T | None:
        """The value attached to an entity, or None if it has none."""
        if self.registry.has_component(entity, self.component):
            return self._values[entity]
        return None

    def __contains__(self, entity: object) -> bool:
        return isinstance(entity, int) and self.registry.has_component(entity, self.component)

    def __iter__(self) -> Iterator[tuple[int, T]]:
        """(entity, value) pairs for entities that currently have the component."""
        for entity in self.registry:
            if self.registry.has_component(entity, self.component):
                yield entity, self._values[entity]


class World:
    """A registry together with the stores of the built-in components."""

    def __init__(self) -> None:
        self.registry = EntityRegistry()
        self.transforms: ComponentStore[Transform] = ComponentStore(
            self.registry, Component.TRANSFORM
        )
        self.meshes: ComponentStore[Mesh] = ComponentStore(self.registry, Component.MESH)
        self.cameras: ComponentStore[Camera] = ComponentStore(self.registry, Component.CAMERA)
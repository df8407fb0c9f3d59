"""Per-frame systems: basis-vector updates and mesh rendering."""

from __future__ import annotations

from typing import Callable

from .components import Camera, Mesh, Transform, World
from .matrix import Mat4

DrawFn = Callable[[Mesh, Transform, Camera, Transform], object]


def transform_system_update(world: World) -> None:
    """Recompute the basis vectors of every transform in the world."""
    for _, transform in world.transforms:
        transform.update()


def mesh_matrices(
    mesh_transform: Transform, camera: Camera, camera_transform: Transform
) -> tuple[Mat4, Mat4, Mat4]:
    """Return the model, view and projection matrices for drawing a mesh."""
    rotation = mesh_transform.rotation
    model = (
        Mat4.identity()
        .scaled(mesh_transform.scale)
        .rotate_x(rotation.x)
        .rotate_y(rotation.y)
        .rotate_z(rotation.z)
        .translate(mesh_transform.position)
    )
    view = Mat4.look_at(
        camera_transform.position, camera_transform.forward, camera_transform.up
    )
    projection = Mat4.perspective(camera.fov, camera.aspect, camera.near_plane, camera.far_plane)
    return model, view, projection


def render_system_update(world: World, draw: DrawFn) -> int:
    """Draw every mesh that has a transform through the last camera with a transform.

    Returns the number of meshes drawn. Raises LookupError when no camera
    entity with a transform exists.
    """
    found: tuple[Camera, Transform] | None = None
    for entity, camera in world.cameras:
        camera_transform = world.transforms.get(entity)
        if camera_transform is not None:
            found = (camera, camera_transform)
    if found is None:
        raise LookupError("Unable to find camera for render system")
    camera, camera_transform = found

    drawn = 0
    for entity, mesh in world.meshes:
        mesh_transform = world.transforms.get(entity)
        if mesh_transform is None:
            continue
        draw(mesh, mesh_transform, camera, camera_transform)
        drawn += 1
    return drawn
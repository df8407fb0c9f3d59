"""Keyboard movement and mouse-cursor tracking for camera control."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .mathutils import Vec2, clamp, normalize_range


class Key(IntEnum):
    """Key codes of the movement keys."""

    A = 65
    D = 68
    S = 83
    W = 87


class Action(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


# For each movement key: which axis it drives and in which direction.
_KEY_AXES: dict[int, tuple[str, float]] = {
    Key.W: ("y", 1.0),
    Key.S: ("y", -1.0),
    Key.D: ("x", 1.0),
    Key.A: ("x", -1.0),
}


def _action_step(action: int) -> float:
    if action == Action.PRESS:
        return 1.0
    if action == Action.RELEASE:
        return -1.0
    return 0.0


@dataclass
class InputState:
    """Movement direction from WASD keys and per-frame mouse motion.

    Cursor positions are kept normalised to [0, 1] on both axes, with y
    growing upwards.
    """

    movement: Vec2 = field(default_factory=Vec2)
    mouse_delta: Vec2 = field(default_factory=Vec2)
    last_mouse_pos: Vec2 = field(default_factory=Vec2)

    def handle_key(self, key: int, action: int) -> None:
        """Apply a key event; each movement axis stays within [-1, 1]."""
        x, y = self.movement.x, self.movement.y
        axis = _KEY_AXES.get(key)
        if axis is not None:
            name, sign = axis
            step = sign * _action_step(action)
            if name == "x":
                x += step
            else:
                y += step
        self.movement = Vec2(clamp(x, -1.0, 1.0), clamp(y, -1.0, 1.0))

    def update_cursor(self, x: float, y: float, width: float, height: float) -> None:
        """Record a cursor position in window pixels and the motion since the last one."""
        nx = normalize_range(x, 0.0, width, 0.0, 1.0)
        ny = 1.0 - normalize_range(y, 0.0, height, 0.0, 1.0)
        self.mouse_delta = Vec2(nx - self.last_mouse_pos.x, ny - self.last_mouse_pos.y)
        self.last_mouse_pos = Vec2(nx, ny)
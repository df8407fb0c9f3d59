"""4x4 matrices for model, view and projection transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .mathutils import Vec3

# The projection uses this rounded value of pi.
_PI = 3.141592

Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix stored as four rows; translation lives in row 3."""

    m: tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.m)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "m", rows)

    def __getitem__(self, index: int) -> Row:
        return self.m[index]

    @classmethod
    def identity(cls) -> Mat4:
        return cls(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[float]]) -> Mat4:
        return cls(tuple(tuple(row) for row in rows))

    def _rows(self) -> list[list[float]]:
        return [list(row) for row in self.m]

    def __matmul__(self, other: object) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = list(zip(*other.m))
        return Mat4._from_rows(
            (sum(a * b for a, b in zip(row, column)) for column in columns) for row in self.m
        )

    def transpose(self) -> Mat4:
        return Mat4._from_rows(zip(*self.m))

    @classmethod
    def perspective(cls, fov_degrees: float, aspect: float, near: float, far: float) -> Mat4:
        f = 1.0 / math.tan(fov_degrees * (_PI / 180.0) / 2.0)
        depth = near - far
        rows = [[0.0] * 4 for _ in range(4)]
        rows[0][0] = f / aspect
        rows[1][1] = f
        rows[2][2] = (far + near) / depth
        rows[2][3] = -1.0
        rows[3][2] = (2.0 * far * near) / depth
        return cls._from_rows(rows)

    def translate(self, translation: Vec3) -> Mat4:
        rows = self._rows()
        rows[3][0] += translation.x
        rows[3][1] += translation.y
        rows[3][2] += translation.z
        return Mat4._from_rows(rows)

    @staticmethod
    def _rotation(entries: dict[tuple[int, int], float]) -> Mat4:
        rows = Mat4.identity()._rows()
        for (i, j), value in entries.items():
            rows[i][j] = value
        return Mat4._from_rows(rows)

    def rotate_x(self, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return self @ self._rotation({(1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c})

    def rotate_y(self, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return self @ self._rotation({(0, 0): c, (0, 2): s, (2, 0): -s, (2, 2): c})

    def rotate_z(self, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return self @ self._rotation({(0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c})

    @classmethod
    def look_at(cls, position: Vec3, forward: Vec3, up: Vec3) -> Mat4:
        """View matrix for a camera at position looking along forward."""
        length = math.sqrt(forward.x ** 2 + forward.y ** 2 + forward.z ** 2)
        fx, fy, fz = forward.x / length, forward.y / length, forward.z / length

        rx = up.y * fz - up.z * fy
        ry = up.z * fx - up.x * fz
        rz = up.x * fy - up.y * fx
        right_length = math.sqrt(rx * rx + ry * ry + rz * rz)
        rx, ry, rz = rx / right_length, ry / right_length, rz / right_length

        ux = fy * rz - fz * ry
        uy = fz * rx - fx * rz
        uz = fx * ry - fy * rx

        px, py, pz = position.x, position.y, position.z
        return cls(
            (
                (rx, ux, -fx, 0.0),
                (ry, uy, -fy, 0.0),
                (rz, uz, -fz, 0.0),
                (
                    -(rx * px + ry * py + rz * pz),
                    -(ux * px + uy * py + uz * pz),
                    fx * px + fy * py + fz * pz,
                    1.0,
                ),
            )
        )

    def scaled(self, scale: Vec3) -> Mat4:
        factors = (scale.x, scale.y, scale.z)
        rows = self._rows()
        for row in rows[:3]:
            for column, factor in enumerate(factors):
                row[column] *= factor
        return Mat4._from_rows(rows)

    def position(self) -> Vec3:
        x, y, z, _ = self.m[3]
        return Vec3(x, y, z)

    def extract_scale(self) -> Vec3:
        """Lengths of the first three basis columns."""
        lengths = (math.hypot(*(self.m[row][column] for row in range(3))) for column in range(3))
        return Vec3(*lengths)

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> Mat4:
        cp, sp = math.cos(pitch), math.sin(pitch)
        cy, sy = math.cos(yaw), math.sin(yaw)
        cr, sr = math.cos(roll), math.sin(roll)
        return cls(
            (
                (cy * cr, cy * sr, -sy, 0.0),
                (sp * sy * cr - cp * sr, sp * sy * sr + cp * cr, sp * cy, 0.0),
                (cp * sy * cr + sp * sr, cp * sy * sr - sp * cr, cp * cy, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def format(self) -> str:
        """Text form used for logging: one line per row after a leading newline."""
        return "\n" + "\n".join(" ".join(f"{value:f}" for value in row) for row in self.m)
"""Loading vertex positions and triangle indices from Wavefront OBJ text."""

from __future__ import annotations

import re

from .components import Mesh
from .mathutils import Vec3

_UINT32_MAX = 0xFFFFFFFF

_FLOAT = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_DIGITS = re.compile(r"\d+")
_FACE_SEPARATOR = re.compile(r"[ \t\r\f\v]+")
_RECORD = re.compile(r"(?=[vf] )")


class ObjParseError(ValueError):
    """Raised when a face record cannot be read."""


def _read_index(token: str, pos: int, what: str, needs_slash: bool) -> tuple[int, int]:
    match = _DIGITS.match(token, pos)
    if match is None:
        raise ObjParseError(f"Invalid {what} index format")
    value = int(match.group())
    end = match.end()
    if value > _UINT32_MAX:
        raise ObjParseError(f"Invalid {what} index format")
    if needs_slash:
        if end >= len(token) or token[end] != "/":
            raise ObjParseError(f"Invalid {what} index format")
        end += 1
    return value, end


def parse_face_indices(text: str) -> tuple[list[int], list[int], list[int]]:
    """Read v/t/n triples up to the first newline; return vertex, texture and normal lists."""
    line = text.split("\n", 1)[0]
    vertices: list[int] = []
    textures: list[int] = []
    normals: list[int] = []
    for token in filter(None, _FACE_SEPARATOR.split(line)):
        vertex, pos = _read_index(token, 0, "vertex", True)
        texture, pos = _read_index(token, pos, "texture coordinate", True)
        normal, pos = _read_index(token, pos, "normal", False)
        if pos != len(token):
            # Anything glued to the normal index is read as a malformed next vertex.
            raise ObjParseError("Invalid vertex index format")
        vertices.append(vertex)
        textures.append(texture)
        normals.append(normal)
    return vertices, textures, normals


def _parse_vec3_at(text: str, pos: int) -> Vec3:
    values: list[float] = []
    while len(values) < 3 and pos < len(text) and text[pos] != "\n":
        while pos < len(text) and text[pos] in " \t\n":
            pos += 1
        match = _FLOAT.match(text, pos)
        if match is None:
            break
        values.append(float(match.group(1)))
        pos = match.end()
    return Vec3(*values)


def parse_vec3(text: str) -> Vec3:
    """Read up to three floats from the start of text; missing ones are zero."""
    return _parse_vec3_at(text, 0)


def load_obj(content: str) -> Mesh:
    """Build a mesh from the "v " and "f " records of OBJ text."""
    mesh = Mesh()
    for match in _RECORD.finditer(content):
        start = match.start()
        if content[start] == "v":
            mesh.vertices.append(_parse_vec3_at(content, start + 2))
        else:
            end = content.find("\n", start + 2)
            line = content[start + 2 :] if end < 0 else content[start + 2 : end]
            vertex_indices, _, _ = parse_face_indices(line)
            # Indices are one-based in the file; zero wraps as an unsigned 32-bit value.
            mesh.vertex_indices.extend((index - 1) & _UINT32_MAX for index in vertex_indices)
    return mesh
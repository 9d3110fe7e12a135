"""Vertices, indexed triangle meshes, an OBJ loader and a sphere generator."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Vertex", "Mesh", "load_obj", "sphere"]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, RGBA8 color, texture coordinate and normal."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Color = (255, 255, 255, 255)
    tex_coord: Vec2 = (0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)


class Mesh:
    """An indexed triangle list."""

    def __init__(self, vertices: Iterable[Vertex], elements: Iterable[int], path: str = "") -> None:
        self.vertices: tuple[Vertex, ...] = tuple(vertices)
        self.elements: tuple[int, ...] = tuple(int(e) for e in elements)
        out_of_range = [e for e in self.elements if not 0 <= e < len(self.vertices)]
        if out_of_range:
            raise ValueError(f"element indices out of range: {out_of_range[:5]}")
        self.path = path
        self.enabled = True

    @property
    def element_count(self) -> int:
        return len(self.elements)

    def triangles(self) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
        """Yield each triangle's vertices; nothing when the mesh is disabled."""
        if not self.enabled:
            return
        indices = iter(self.elements)
        for a, b, c in zip(indices, indices, indices):
            yield self.vertices[a], self.vertices[b], self.vertices[c]


def _floats(fields: Sequence[str], count: int, keyword: str) -> tuple[float, ...]:
    if len(fields) < count:
        raise ValueError(f"'{keyword}' needs at least {count} numbers")
    return tuple(float(f) for f in fields[:count])


def _resolve(token: str, count: int, kind: str) -> int:
    index = int(token)
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = count + index
    else:
        raise ValueError(f"{kind} index 0 is not valid")
    if not 0 <= resolved < count:
        raise ValueError(f"{kind} index {index} is out of range")
    return resolved


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(channel * 255)))


def load_obj(filename: str | os.PathLike[str]) -> Mesh:
    """Load a Wavefront OBJ file into a mesh, merging identical vertices.

    Polygons are fan-triangulated. Missing normals or texture coordinates
    become zeros and missing vertex colors become opaque white.
    """
    positions: list[Vec3] = []
    colors: list[tuple[float, float, float]] = []
    normals: list[Vec3] = []
    tex_coords: list[Vec2] = []

    vertices: list[Vertex] = []
    elements: list[int] = []
    index_of: dict[Vertex, int] = {}

    def corner(token: str) -> Vertex:
        parts = token.split("/")
        p = _resolve(parts[0], len(positions), "vertex")
        tex = (0.0, 0.0)
        normal = (0.0, 0.0, 0.0)
        if len(parts) > 1 and parts[1]:
            tex = tex_coords[_resolve(parts[1], len(tex_coords), "texcoord")]
        if len(parts) > 2 and parts[2]:
            normal = normals[_resolve(parts[2], len(normals), "normal")]
        r, g, b = colors[p]
        return Vertex(
            position=positions[p],
            color=(_to_byte(r), _to_byte(g), _to_byte(b), 255),
            tex_coord=tex,
            normal=normal,
        )

    with Path(filename).open(encoding="utf-8") as handle:
        for line_number, raw in enumerate(handle, 1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            keyword, *fields = line.split()
            try:
                if keyword == "v":
                    positions.append(_floats(fields, 3, keyword))  # type: ignore[arg-type]
                    if len(fields) >= 6:
                        colors.append(tuple(float(f) for f in fields[3:6]))  # type: ignore[arg-type]
                    else:
                        colors.append((1.0, 1.0, 1.0))
                elif keyword == "vn":
                    normals.append(_floats(fields, 3, keyword))  # type: ignore[arg-type]
                elif keyword == "vt":
                    u = _floats(fields, 1, keyword)[0]
                    v = float(fields[1]) if len(fields) > 1 else 0.0
                    tex_coords.append((u, v))
                elif keyword == "f":
                    if len(fields) < 3:
                        raise ValueError("a face needs at least 3 vertices")
                    corners = [corner(token) for token in fields]
                    for k in range(1, len(corners) - 1):
                        for vertex in (corners[0], corners[k], corners[k + 1]):
                            index = index_of.get(vertex)
                            if index is None:
                                index = len(vertices)
                                index_of[vertex] = index
                                vertices.append(vertex)
                            elements.append(index)
            except ValueError as exc:
                raise ValueError(f"{filename}:{line_number}: {exc}") from exc

    return Mesh(vertices, elements, path=str(filename))


def sphere(segments: Sequence[int]) -> Mesh:
    """Create a unit sphere with ``(longitude, latitude)`` divisions.

    Triangles wind counter-clockwise seen from outside.
    """
    seg_x, seg_y = (int(s) for s in segments)
    if seg_x < 1 or seg_y < 1:
        raise ValueError("sphere needs at least one segment in each direction")

    vertices: list[Vertex] = []
    for lat in range(seg_y + 1):
        v = lat / seg_y
        pitch = v * math.pi - math.pi / 2
        cos_p, sin_p = math.cos(pitch), math.sin(pitch)
        for lng in range(seg_x + 1):
            u = lng / seg_x
            yaw = u * 2 * math.pi
            normal = (cos_p * math.cos(yaw), sin_p, cos_p * math.sin(yaw))
            vertices.append(Vertex(position=normal, tex_coord=(u, v), normal=normal))

    elements: list[int] = []
    row = seg_x + 1
    for lat in range(1, seg_y + 1):
        start = lat * row
        for lng in range(1, seg_x + 1):
            prev = lng - 1
            elements += [
                lng + start,
                lng + start - row,
                prev + start - row,
                prev + start - row,
                prev + start,
                lng + start,
            ]

    return Mesh(vertices, elements)
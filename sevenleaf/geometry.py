"""Triangle meshes for circles, subdivided planes and rectangular frames."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

_FLOAT_BYTES = 4
_INDEX_BYTES = 2
_INDEX_MASK = 0xFFFF

Vertex = tuple[float, ...]
Triangle = tuple[int, int, int]


def _f32(value: float) -> float:
    """Round a value to single precision, as a float vertex buffer stores it."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _index(value: int) -> int:
    return value & _INDEX_MASK


@dataclass(frozen=True)
class Geometry:
    """A mesh of vertices and 16-bit indexed triangles.

    Each vertex is a tuple of single-precision floats: a 2-D position,
    optionally followed by a 2-D texture coordinate.
    """

    vertices: tuple[Vertex, ...]
    indices: tuple[Triangle, ...]

    def index_count(self) -> int:
        """Return the number of indices drawn (three per triangle)."""
        return 3 * len(self.indices)

    def vertex_bytes(self) -> int:
        """Return the size of the vertex buffer in bytes."""
        return sum(len(vertex) for vertex in self.vertices) * _FLOAT_BYTES

    def index_bytes(self) -> int:
        """Return the size of the 16-bit index buffer in bytes."""
        return self.index_count() * _INDEX_BYTES


def circle_geometry(segments: int, radius: float) -> Geometry:
    """Build a filled circle as a fan of ``segments`` triangles around the origin."""
    if segments < 4:
        raise ValueError(f"a circle needs at least 4 segments, got {segments}")
    radian_per_segment = _f32(2 * math.pi / segments)

    vertices: list[Vertex] = [(0.0, 0.0)]
    for i in range(1, segments + 1):
        radian = _f32(i * radian_per_segment)
        vertices.append((_f32(radius * math.cos(radian)), _f32(radius * math.sin(radian))))

    indices: list[Triangle] = [(0, _index(i + 2), _index(i + 1)) for i in range(segments - 1)]
    indices.append((0, 1, _index(segments)))
    return Geometry(tuple(vertices), tuple(indices))


def plane_geometry(
    columns: int,
    rows: int,
    width: float,
    height: float,
    texcoord: bool = False,
    ox: float = 0.0,
    oy: float = 0.0,
    oi: int = 0,
) -> Geometry:
    """Build a ``width`` by ``height`` plane split into ``columns`` by ``rows`` quads.

    Vertices are laid out row by row starting at ``(ox, oy)``; indices start
    at ``oi``. With ``texcoord`` each vertex also carries a texture
    coordinate whose v axis runs from 1 at the first row to 0 at the last.
    """
    if columns < 1 or rows < 1:
        raise ValueError(f"a plane needs at least one column and row, got {columns}x{rows}")
    width_per_segment = _f32(width / columns)
    height_per_segment = _f32(height / rows)

    vertices: list[Vertex] = []
    for j in range(rows + 1):
        y = _f32(_f32(j * height_per_segment) + oy)
        for i in range(columns + 1):
            x = _f32(_f32(i * width_per_segment) + ox)
            if texcoord:
                vertices.append((x, y, _f32(i / columns), _f32(1.0 - _f32(j / rows))))
            else:
                vertices.append((x, y))

    stride = columns + 1
    indices: list[Triangle] = []
    for j in range(rows):
        offset = oi + stride * j
        for i in range(columns):
            a = _index(offset + i)
            b = _index(offset + i + 1)
            c = _index(offset + stride + i)
            d = _index(offset + stride + i + 1)
            indices.append((a, b, c))
            indices.append((c, b, d))
    return Geometry(tuple(vertices), tuple(indices))


def rectangle_geometry(
    columns: int,
    rows: int,
    width: float,
    height: float,
    border_size: float = 1.0,
) -> Geometry:
    """Build the outline of a ``width`` by ``height`` rectangle ``border_size`` thick.

    The outline is made of four strips, top, right, bottom and left, the
    horizontal ones split into ``columns`` quads and the vertical ones into
    ``rows`` quads.
    """
    if columns < 1 or rows < 1:
        raise ValueError(f"a rectangle needs at least one column and row, got {columns}x{rows}")
    inner_width = _f32(width - border_size)
    inner_height = _f32(height - border_size)
    width_per_segment = _f32(inner_width / columns)
    height_per_segment = _f32(inner_height / rows)
    border = _f32(border_size)
    full_width = _f32(width)
    full_height = _f32(height)

    vertices: list[Vertex] = []
    # Top
    vertices.extend((_f32(i * width_per_segment), 0.0) for i in range(columns + 1))
    vertices.extend((_f32(i * width_per_segment), border) for i in range(columns + 1))
    # Right
    for i in range(rows + 1):
        y = _f32(i * height_per_segment)
        vertices.append((inner_width, y))
        vertices.append((full_width, y))
    # Bottom
    vertices.extend(
        (_f32(border + _f32(i * width_per_segment)), inner_height) for i in range(columns + 1)
    )
    vertices.extend(
        (_f32(border + _f32(i * width_per_segment)), full_height) for i in range(columns + 1)
    )
    # Left
    for i in range(rows + 1):
        y = _f32(border + _f32(i * height_per_segment))
        vertices.append((0.0, y))
        vertices.append((border, y))

    indices: list[Triangle] = []

    def add_quad(a: int, b: int, c: int, d: int) -> None:
        a, b, c, d = (_index(v) for v in (a, b, c, d))
        indices.append((a, c, b))
        indices.append((b, c, d))

    horizontal_stride = columns + 1
    offset = 0
    for side in range(4):
        if side % 2 == 0:
            for i in range(columns):
                a = offset + i
                add_quad(a, a + 1, a + horizontal_stride, a + horizontal_stride + 1)
            offset += 2 * horizontal_stride
        else:
            for j in range(rows):
                a = offset + 2 * j
                add_quad(a, a + 1, a + 2, a + 3)
            offset += 2 * (rows + 1)
    return Geometry(tuple(vertices), tuple(indices))
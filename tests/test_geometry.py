import math

import pytest

from sevenleaf.geometry import (
    Geometry,
    circle_geometry,
    plane_geometry,
    rectangle_geometry,
)


def _area(geometry: Geometry, triangle) -> float:
    (x0, y0), (x1, y1), (x2, y2) = (geometry.vertices[i][:2] for i in triangle)
    return 0.5 * ((x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0))


def _indices_valid(geometry: Geometry) -> bool:
    count = len(geometry.vertices)
    return all(0 <= i < count for tri in geometry.indices for i in tri)


# --- Circle ---

@pytest.mark.parametrize("segments", [4, 8, 32])
def test_circle_counts(segments):
    geometry = circle_geometry(segments, 2.0)
    assert len(geometry.vertices) == segments + 1
    assert len(geometry.indices) == segments
    assert geometry.index_count() == 3 * segments


def test_circle_center_and_radius():
    geometry = circle_geometry(16, 3.0)
    assert geometry.vertices[0] == (0.0, 0.0)
    for x, y in geometry.vertices[1:]:
        assert math.hypot(x, y) == pytest.approx(3.0, rel=1e-5)


def test_circle_fan_closes_on_first_rim_vertex():
    geometry = circle_geometry(6, 1.0)
    assert geometry.indices[-1] == (0, 1, 6)
    assert all(tri[0] == 0 for tri in geometry.indices)
    assert _indices_valid(geometry)


def test_circle_triangles_share_winding():
    geometry = circle_geometry(12, 1.0)
    areas = [_area(geometry, tri) for tri in geometry.indices]
    assert all(a < 0 for a in areas)


def test_circle_buffer_sizes():
    geometry = circle_geometry(8, 1.0)
    assert geometry.vertex_bytes() == 8 * len(geometry.vertices)
    assert geometry.index_bytes() == 2 * geometry.index_count()


def test_circle_rejects_too_few_segments():
    with pytest.raises(ValueError):
        circle_geometry(3, 1.0)


# --- Plane ---

def test_plane_single_quad_corners():
    geometry = plane_geometry(1, 1, 4.0, 2.0)
    assert geometry.vertices == ((0.0, 0.0), (4.0, 0.0), (0.0, 2.0), (4.0, 2.0))
    assert geometry.indices == ((0, 1, 2), (2, 1, 3))


def test_plane_texcoords_flip_v_axis():
    geometry = plane_geometry(1, 1, 4.0, 2.0, texcoord=True)
    assert geometry.vertices[0] == (0.0, 0.0, 0.0, 1.0)
    assert geometry.vertices[3] == (4.0, 2.0, 1.0, 0.0)
    assert geometry.vertex_bytes() == 16 * len(geometry.vertices)


@pytest.mark.parametrize("columns, rows", [(1, 1), (3, 2), (4, 5)])
def test_plane_counts_and_area(columns, rows):
    geometry = plane_geometry(columns, rows, 8.0, 6.0)
    assert len(geometry.vertices) == (columns + 1) * (rows + 1)
    assert geometry.index_count() == 6 * columns * rows
    assert _indices_valid(geometry)
    total = sum(abs(_area(geometry, tri)) for tri in geometry.indices)
    assert total == pytest.approx(8.0 * 6.0)


def test_plane_offsets():
    base = plane_geometry(2, 2, 4.0, 4.0)
    shifted = plane_geometry(2, 2, 4.0, 4.0, ox=1.5, oy=-2.0, oi=10)
    for (x, y), (sx, sy) in zip(base.vertices, shifted.vertices):
        assert sx == pytest.approx(x + 1.5)
        assert sy == pytest.approx(y - 2.0)
    for tri, stri in zip(base.indices, shifted.indices):
        assert stri == tuple(i + 10 for i in tri)


def test_plane_rejects_empty_grid():
    with pytest.raises(ValueError):
        plane_geometry(0, 1, 1.0, 1.0)
    with pytest.raises(ValueError):
        plane_geometry(1, 0, 1.0, 1.0)


# --- Rectangle ---

@pytest.mark.parametrize("columns, rows", [(1, 1), (2, 3), (4, 1)])
def test_rectangle_counts(columns, rows):
    geometry = rectangle_geometry(columns, rows, 10.0, 6.0)
    assert len(geometry.vertices) == 2 * (2 * (columns + 1) + 2 * (rows + 1))
    assert len(geometry.indices) == 2 * (2 * columns + 2 * rows)
    assert geometry.index_count() == 6 * (2 * columns + 2 * rows)
    assert _indices_valid(geometry)


@pytest.mark.parametrize("columns, rows", [(1, 1), (2, 3)])
def test_rectangle_covers_frame_area(columns, rows):
    width, height, border = 10.0, 6.0, 1.0
    geometry = rectangle_geometry(columns, rows, width, height, border)
    total = sum(abs(_area(geometry, tri)) for tri in geometry.indices)
    frame = width * height - (width - 2 * border) * (height - 2 * border)
    assert total == pytest.approx(frame)


def test_rectangle_stays_within_bounds():
    geometry = rectangle_geometry(3, 2, 10.0, 6.0, 0.5)
    for x, y in geometry.vertices:
        assert 0.0 <= x <= 10.0
        assert 0.0 <= y <= 6.0


def test_rectangle_triangles_are_not_degenerate():
    geometry = rectangle_geometry(2, 2, 10.0, 6.0)
    for tri in geometry.indices:
        assert len(set(tri)) == 3
        assert abs(_area(geometry, tri)) > 0


def test_rectangle_rejects_empty_strips():
    with pytest.raises(ValueError):
        rectangle_geometry(0, 1, 1.0, 1.0)
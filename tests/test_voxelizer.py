import math

import pytest

from simplegl.voxelizer import (
    HASH_TABLE_SIZE,
    VOXEL_INDICES,
    VOXEL_NORMALS,
    Mesh,
    map_to_voxel,
    plane_box_overlap,
    triangle_area,
    triangle_box_overlap,
    vertex_hash,
    voxelize,
)

TRIANGLE = ((0.0, 0.0, 0.0), (3.0, 0.0, 0.0), (0.0, 2.0, 1.0))


def _triangle_mesh():
    return Mesh(vertices=list(TRIANGLE), indices=[0, 1, 2])


@pytest.mark.parametrize("position", [-2.7, -0.3, 0.0, 0.4, 5.25])
@pytest.mark.parametrize("size", [0.5, 1.0, 2.0])
def test_map_to_voxel_grid_aligned_and_ordered(position, size):
    low = map_to_voxel(position, size, True)
    high = map_to_voxel(position, size, False)
    assert low <= high
    assert math.isclose(low / size, round(low / size), abs_tol=1e-9)
    assert math.isclose(high / size, round(high / size), abs_tol=1e-9)
    assert high - low <= size + 1e-9


def test_triangle_area_scales_quadratically():
    base = triangle_area(TRIANGLE)
    scaled = tuple(tuple(2.0 * c for c in p) for p in TRIANGLE)
    assert math.isclose(triangle_area(scaled), 4.0 * base)


def test_triangle_area_of_degenerate_triangle_is_zero():
    assert triangle_area(((0, 0, 0), (1, 1, 1), (2, 2, 2))) == 0.0


def test_plane_box_overlap():
    half = (1.0, 1.0, 1.0)
    assert plane_box_overlap((0.0, 0.0, 1.0), 0.0, half) is True
    assert plane_box_overlap((0.0, 0.0, 1.0), -5.0, half) is False
    assert plane_box_overlap((0.0, 0.0, 1.0), 5.0, half) is False


def test_triangle_box_overlap_inside_and_far_away():
    half = (1.0, 1.0, 1.0)
    inner = ((-0.5, -0.5, 0.0), (0.5, -0.5, 0.0), (0.0, 0.5, 0.0))
    assert triangle_box_overlap((0.0, 0.0, 0.0), half, inner) is True
    assert triangle_box_overlap((10.0, 10.0, 10.0), half, inner) is False


def test_triangle_box_overlap_triangle_spanning_box():
    big = ((-10.0, -10.0, 0.2), (10.0, -10.0, 0.2), (0.0, 10.0, 0.2))
    assert triangle_box_overlap((0.0, 0.0, 0.0), (0.5, 0.5, 0.5), big) is True
    assert triangle_box_overlap((0.0, 0.0, 3.0), (0.5, 0.5, 0.5), big) is False


def test_vertex_hash_in_range_and_deterministic():
    for pos in [(0.5, -1.5, 2.0), (-3.0, 7.25, -0.5), (100.0, 200.0, 300.0)]:
        h = vertex_hash(pos, HASH_TABLE_SIZE)
        assert 0 <= h < HASH_TABLE_SIZE
        assert h == vertex_hash(tuple(pos), HASH_TABLE_SIZE)
    assert vertex_hash((0.0, 0.0, 0.0), HASH_TABLE_SIZE) == 0


def test_voxelize_counts_are_consistent():
    out = voxelize(_triangle_mesh(), 1.0, 1.0, 1.0, 0.1)
    voxels = len(out.vertices) // 8
    assert voxels > 0
    assert len(out.vertices) == voxels * 8
    assert len(out.indices) == voxels * len(VOXEL_INDICES)
    assert len(out.normal_indices) == len(out.indices)
    assert all(0 <= i < len(out.vertices) for i in out.indices)
    assert out.normals == list(VOXEL_NORMALS)


def test_voxelize_normal_index_pattern():
    out = voxelize(_triangle_mesh(), 1.0, 1.0, 1.0, 0.1)
    expected = [n for n in (3, 2, 1, 5, 4, 0) for _ in range(6)]
    assert out.normal_indices[:36] == expected


def test_voxelize_voxels_are_distinct_and_touch_triangle():
    size = 0.5
    precision = 0.05
    out = voxelize(_triangle_mesh(), size, size, size, precision)
    centers = []
    for start in range(0, len(out.vertices), 8):
        cube = out.vertices[start:start + 8]
        center = tuple(sum(v[d] for v in cube) / 8 for d in range(3))
        centers.append(center)
        xs = sorted({round(v[0], 6) for v in cube})
        assert math.isclose(xs[-1] - xs[0], size)
    assert len({tuple(round(c, 6) for c in center) for center in centers}) == len(centers)
    half = (size / 2 + precision,) * 3
    assert all(triangle_box_overlap(c, half, TRIANGLE) for c in centers)


def test_voxelize_covers_triangle_vertices():
    size = 1.0
    out = voxelize(_triangle_mesh(), size, size, size, 0.1)
    for corner in TRIANGLE:
        assert any(
            all(
                min(v[d] for v in out.vertices[s:s + 8]) - 1e-9
                <= corner[d]
                <= max(v[d] for v in out.vertices[s:s + 8]) + 1e-9
                for d in range(3)
            )
            for s in range(0, len(out.vertices), 8)
        )


def test_voxelize_skips_degenerate_triangles():
    mesh = Mesh(vertices=[(0, 0, 0), (1, 1, 1), (2, 2, 2)], indices=[0, 1, 2])
    out = voxelize(mesh, 1.0, 1.0, 1.0, 0.1)
    assert out.vertices == []
    assert out.indices == []


def test_voxelize_rejects_bad_input():
    with pytest.raises(ValueError):
        voxelize(_triangle_mesh(), 0.0, 1.0, 1.0, 0.1)
    with pytest.raises(ValueError):
        voxelize(Mesh(vertices=list(TRIANGLE), indices=[0, 1, 5]), 1.0, 1.0, 1.0, 0.1)
    with pytest.raises(ValueError):
        voxelize(Mesh(vertices=list(TRIANGLE), indices=[0, 1]), 1.0, 1.0, 1.0, 0.1)
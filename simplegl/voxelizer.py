"""Turn a triangle mesh into a mesh of axis-aligned voxel cubes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

Vertex = tuple[float, float, float]
Triangle = tuple[Vertex, Vertex, Vertex]

EPSILON = 0.0000001
HASH_TABLE_SIZE = 4096
_SIZE_MASK = (1 << 64) - 1

VOXEL_INDICES: tuple[int, ...] = (
    0, 1, 2,
    0, 2, 3,
    3, 2, 6,
    3, 6, 7,
    0, 7, 4,
    0, 3, 7,
    4, 7, 5,
    7, 6, 5,
    0, 4, 5,
    0, 5, 1,
    1, 5, 6,
    1, 6, 2,
)

VOXEL_NORMALS: tuple[Vertex, ...] = (
    (0.0, -1.0, 0.0),
    (0.0, 1.0, 0.0),
    (1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0),
    (-1.0, 0.0, 0.0),
    (0.0, 0.0, -1.0),
)

VOXEL_NORMAL_INDICES: tuple[int, ...] = (3, 2, 1, 5, 4, 0)


@dataclass
class Mesh:
    """Vertices with triangle indices, and optionally normals with per-index normal indices."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    normals: list[Vertex] = field(default_factory=list)
    normal_indices: list[int] = field(default_factory=list)


def _sub(a: Sequence[float], b: Sequence[float]) -> Vertex:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Sequence[float], b: Sequence[float]) -> Vertex:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _vertex_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    return all(abs(p - q) < EPSILON for p, q in zip(a, b))


def map_to_voxel(position: float, voxel_size: float, is_min: bool) -> float:
    """Snap a coordinate to the voxel grid, rounding down for a minimum and up for a maximum."""
    sign = -1.0 if position < 0.0 else 1.0
    vox = (position + sign * voxel_size * 0.5) / voxel_size
    return (math.floor(vox) if is_min else math.ceil(vox)) * voxel_size


def vertex_hash(pos: Sequence[float], n: int) -> int:
    """Spatial hash of a position into ``n`` buckets."""
    a = int(pos[0] * 73856093) & _SIZE_MASK
    b = int(pos[1] * 19349663) & _SIZE_MASK
    c = int(pos[2] * 83492791) & _SIZE_MASK
    return (a ^ b ^ c) % n


def triangle_area(triangle: Sequence[Sequence[float]]) -> float:
    """Area of a triangle given by its three corners."""
    p1, p2, p3 = triangle
    ab = _sub(p2, p1)
    ac = _sub(p3, p1)
    cx, cy, cz = _cross(ab, ac)
    return math.sqrt(cx * cx + cy * cy + cz * cz) * 0.5


def plane_box_overlap(normal: Sequence[float], d: float, half_box_size: Sequence[float]) -> bool:
    """Whether the plane ``normal . p + d = 0`` cuts a box centred on the origin."""
    vmin = []
    vmax = []
    for n, h in zip(normal, half_box_size):
        if n > 0.0:
            vmin.append(-h)
            vmax.append(h)
        else:
            vmin.append(h)
            vmax.append(-h)
    if _dot(normal, vmin) + d > 0.0:
        return False
    return _dot(normal, vmax) + d >= 0.0


def _separated(pa: float, pb: float, rad: float) -> bool:
    return min(pa, pb) > rad or max(pa, pb) < -rad


def triangle_box_overlap(
    box_center: Sequence[float],
    half_box_size: Sequence[float],
    triangle: Sequence[Sequence[float]],
) -> bool:
    """Separating-axis test between an axis-aligned box and a triangle."""
    hx, hy, hz = half_box_size
    v1 = _sub(triangle[0], box_center)
    v2 = _sub(triangle[1], box_center)
    v3 = _sub(triangle[2], box_center)

    e1 = _sub(v2, v1)
    e2 = _sub(v3, v2)
    e3 = _sub(v1, v3)

    def axis_x(a: float, b: float, fa: float, fb: float, p: Vertex, q: Vertex) -> bool:
        return _separated(a * p[1] - b * p[2], a * q[1] - b * q[2], fa * hy + fb * hz)

    def axis_y(a: float, b: float, fa: float, fb: float, p: Vertex, q: Vertex) -> bool:
        return _separated(-a * p[0] + b * p[2], -a * q[0] + b * q[2], fa * hx + fb * hz)

    def axis_z(a: float, b: float, fa: float, fb: float, p: Vertex, q: Vertex) -> bool:
        return _separated(a * p[0] - b * p[1], a * q[0] - b * q[1], fa * hx + fb * hy)

    fex, fey, fez = (abs(c) for c in e1)
    if (
        axis_x(e1[2], e1[1], fez, fey, v1, v3)
        or axis_y(e1[2], e1[0], fez, fex, v1, v3)
        or axis_z(e1[1], e1[0], fey, fex, v2, v3)
    ):
        return False

    fex, fey, fez = (abs(c) for c in e2)
    if (
        axis_x(e2[2], e2[1], fez, fey, v1, v3)
        or axis_y(e2[2], e2[0], fez, fex, v1, v3)
        or axis_z(e2[1], e2[0], fey, fex, v1, v2)
    ):
        return False

    fex, fey, fez = (abs(c) for c in e3)
    if (
        axis_x(e3[2], e3[1], fez, fey, v1, v2)
        or axis_y(e3[2], e3[0], fez, fex, v1, v2)
        or axis_z(e3[1], e3[0], fey, fex, v2, v3)
    ):
        return False

    for dim, half in enumerate((hx, hy, hz)):
        coords = (v1[dim], v2[dim], v3[dim])
        if min(coords) > half or max(coords) < -half:
            return False

    normal = _cross(e1, e2)
    d = -_dot(normal, v1)
    return plane_box_overlap(normal, d, (hx, hy, hz))


def _frange(start: float, stop: float, step: float):
    value = start
    while value < stop:
        yield value
        value += step


def _triangles(mesh: Mesh):
    if len(mesh.indices) % 3:
        raise ValueError("index count must be a multiple of 3")
    count = len(mesh.vertices)
    for start in range(0, len(mesh.indices), 3):
        corner_ids = mesh.indices[start:start + 3]
        for index in corner_ids:
            if not 0 <= index < count:
                raise ValueError(f"vertex index {index} out of range")
        yield tuple(mesh.vertices[i] for i in corner_ids)


def voxelize(
    mesh: Mesh,
    voxel_size_x: float,
    voxel_size_y: float,
    voxel_size_z: float,
    precision: float,
) -> Mesh:
    """Build a mesh of voxel cubes covering every triangle of ``mesh``.

    ``precision`` widens each voxel for the overlap test, which reduces holes.
    """
    sizes = (voxel_size_x, voxel_size_y, voxel_size_z)
    if any(s <= 0.0 for s in sizes):
        raise ValueError("voxel sizes must be positive")
    half_x, half_y, half_z = (s * 0.5 for s in sizes)

    buckets: list[list[Vertex]] = [[] for _ in range(HASH_TABLE_SIZE)]

    for triangle in _triangles(mesh):
        if triangle_area(triangle) < EPSILON:
            continue
        lo = [map_to_voxel(min(p[d] for p in triangle), sizes[d], True) for d in range(3)]
        hi = [map_to_voxel(max(p[d] for p in triangle), sizes[d], False) for d in range(3)]

        for x in _frange(lo[0], hi[0], voxel_size_x):
            for y in _frange(lo[1], hi[1], voxel_size_y):
                for z in _frange(lo[2], hi[2], voxel_size_z):
                    box_min = (x - half_x, y - half_y, z - half_z)
                    box_max = (x + half_x, y + half_y, z + half_z)
                    center = tuple((a + b) * 0.5 for a, b in zip(box_min, box_max))
                    half = tuple(
                        abs(b - a) * 0.5 + precision for a, b in zip(box_min, box_max)
                    )
                    if not triangle_box_overlap(center, half, triangle):
                        continue
                    bucket = buckets[vertex_hash(center, HASH_TABLE_SIZE)]
                    if not any(_vertex_equals(existing, center) for existing in bucket):
                        bucket.append(center)  # type: ignore[arg-type]

    template = [
        (-half_x, half_y, half_z),
        (-half_x, -half_y, half_z),
        (half_x, -half_y, half_z),
        (half_x, half_y, half_z),
        (-half_x, half_y, -half_z),
        (-half_x, -half_y, -half_z),
        (half_x, -half_y, -half_z),
        (half_x, half_y, -half_z),
    ]
    per_index_normals = [n for n in VOXEL_NORMAL_INDICES for _ in range(6)]

    out = Mesh(normals=list(VOXEL_NORMALS))
    for bucket in buckets:
        for center in bucket:
            base = len(out.vertices)
            out.vertices.extend(
                (tx + center[0], ty + center[1], tz + center[2]) for tx, ty, tz in template
            )
            out.normal_indices.extend(per_index_normals)
            out.indices.extend(i + base for i in VOXEL_INDICES)
    return out
"""Virtual trackball: map 2D pointer motion to quaternion rotations."""

from __future__ import annotations

import math
from collections.abc import Sequence

TRACKBALL_SIZE = 0.8
RENORM_COUNT = 97

Quaternion = tuple[float, float, float, float]
Vec3 = tuple[float, float, float]
IDENTITY_QUAT: Quaternion = (0.0, 0.0, 0.0, 1.0)


def _cross(v1: Sequence[float], v2: Sequence[float]) -> Vec3:
    return (
        v1[1] * v2[2] - v1[2] * v2[1],
        v1[2] * v2[0] - v1[0] * v2[2],
        v1[0] * v2[1] - v1[1] * v2[0],
    )


def _dot(v1: Sequence[float], v2: Sequence[float]) -> float:
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


def _length(v: Sequence[float]) -> float:
    return math.sqrt(_dot(v, v))


def project_to_sphere(r: float, x: float, y: float) -> float:
    """Project (x, y) onto a sphere of radius r, or a hyperbolic sheet away from the centre."""
    d = math.sqrt(x * x + y * y)
    if d < r * 0.70710678118654752440:
        return math.sqrt(r * r - d * d)
    t = r / 1.41421356237309504880
    return t * t / d


def axis_to_quat(axis: Sequence[float], phi: float) -> Quaternion:
    """Quaternion for a rotation of ``phi`` radians about ``axis``."""
    length = _length(axis)
    s = math.sin(phi / 2.0)
    return (
        axis[0] / length * s,
        axis[1] / length * s,
        axis[2] / length * s,
        math.cos(phi / 2.0),
    )


def trackball(p1x: float, p1y: float, p2x: float, p2y: float) -> Quaternion:
    """Rotation for a pointer moving from (p1x, p1y) to (p2x, p2y), coordinates in [-1, 1]."""
    if p1x == p2x and p1y == p2y:
        return IDENTITY_QUAT

    p1 = (p1x, p1y, project_to_sphere(TRACKBALL_SIZE, p1x, p1y))
    p2 = (p2x, p2y, project_to_sphere(TRACKBALL_SIZE, p2x, p2y))

    axis = _cross(p2, p1)
    diff = tuple(a - b for a, b in zip(p1, p2))
    t = _length(diff) / (2.0 * TRACKBALL_SIZE)
    t = max(-1.0, min(1.0, t))
    phi = 2.0 * math.asin(t)
    return axis_to_quat(axis, phi)


def add_quats(q1: Sequence[float], q2: Sequence[float]) -> Quaternion:
    """Combine two rotations into the single equivalent rotation."""
    t1 = tuple(c * q2[3] for c in q1[:3])
    t2 = tuple(c * q1[3] for c in q2[:3])
    t3 = _cross(q2, q1)
    x, y, z = (a + b + c for a, b, c in zip(t3, t1, t2))
    w = q1[3] * q2[3] - _dot(q1, q2)
    return (x, y, z, w)


def normalize_quat(q: Sequence[float]) -> Quaternion:
    """Rescale a quaternion by the sum of the squares of its components."""
    mag = sum(c * c for c in q)
    return tuple(c / mag for c in q)  # type: ignore[return-value]


def build_rotmatrix(q: Sequence[float]) -> list[list[float]]:
    """4x4 rotation matrix for quaternion ``q``."""
    x, y, z, w = q
    return [
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (z * x + y * w), 0.0],
        [2.0 * (x * y + z * w), 1.0 - 2.0 * (z * z + x * x), 2.0 * (y * z - x * w), 0.0],
        [2.0 * (z * x - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (y * y + x * x), 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]


class QuaternionAccumulator:
    """Adds rotations and renormalises the result every so many additions."""

    def __init__(self) -> None:
        self.count = 0

    def add(self, q1: Sequence[float], q2: Sequence[float]) -> Quaternion:
        """Combine ``q1`` and ``q2``; every ``RENORM_COUNT + 1`` calls the result is renormalised."""
        result = add_quats(q1, q2)
        self.count += 1
        if self.count > RENORM_COUNT:
            self.count = 0
            result = normalize_quat(result)
        return result
"""Vectors, rotations and 4x4 matrices for 3D scene transforms."""

from __future__ import annotations

import math
from collections.abc import Iterator
from enum import Enum


class AngleUnit(Enum):
    """Unit in which a rotation's angles are expressed."""

    DEGREE = 0
    RADIAN = 1


class MatrixOrder(Enum):
    """Memory layout of a 4x4 matrix."""

    ROW_MAJOR = 0
    COLUMN_MAJOR = 1


def to_radian(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * math.pi / 180.0


def to_degree(radian: float) -> float:
    """Convert radians to degrees."""
    return radian * 180.0 / math.pi


class Vector3:
    """A mutable 3D vector."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"

    def copy(self) -> Vector3:
        """An independent copy."""
        return Vector3(self.x, self.y, self.z)

    # in-place operations
    def add(self, other: Vector3) -> None:
        """Add ``other`` component-wise."""
        self.x += other.x
        self.y += other.y
        self.z += other.z

    def sub(self, other: Vector3) -> None:
        """Subtract ``other`` component-wise."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def mult(self, coef: float) -> None:
        """Multiply every component by ``coef``."""
        self.x *= coef
        self.y *= coef
        self.z *= coef

    def div(self, coef: float) -> None:
        """Divide every component by ``coef``."""
        self.x /= coef
        self.y /= coef
        self.z /= coef

    def scale(self, other: Vector3) -> None:
        """Multiply component-wise by ``other``."""
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z

    def len2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def len(self) -> float:
        """Length."""
        return math.sqrt(self.len2())

    def normalize(self) -> None:
        """Scale to unit length; a zero vector raises ZeroDivisionError."""
        self.div(self.len())

    def normalized(self) -> Vector3:
        """A unit-length copy."""
        result = Vector3(self.x, self.y, self.z)
        result.normalize()
        return result

    @staticmethod
    def cross(v1: Vector3, v2: Vector3) -> Vector3:
        """Cross product ``v1 x v2``."""
        return Vector3(
            v1.y * v2.z - v1.z * v2.y,
            v1.z * v2.x - v1.x * v2.z,
            v1.x * v2.y - v1.y * v2.x,
        )

    @staticmethod
    def dot(v1: Vector3, v2: Vector3) -> float:
        """Scalar product."""
        return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z

    # operators
    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, rhs: Vector3) -> Vector3:
        self.add(rhs)
        return self

    def __isub__(self, rhs: Vector3) -> Vector3:
        self.sub(rhs)
        return self

    def __imul__(self, rhs: float) -> Vector3:
        self.mult(rhs)
        return self

    def __itruediv__(self, rhs: float) -> Vector3:
        self.div(rhs)
        return self

    def __add__(self, rhs: Vector3) -> Vector3:
        return Vector3(self.x + rhs.x, self.y + rhs.y, self.z + rhs.z)

    def __sub__(self, rhs: Vector3) -> Vector3:
        return Vector3(self.x - rhs.x, self.y - rhs.y, self.z - rhs.z)

    def __mul__(self, rhs: float) -> Vector3:
        return Vector3(self.x * rhs, self.y * rhs, self.z * rhs)

    def __rmul__(self, lhs: float) -> Vector3:
        return self * lhs

    def __truediv__(self, rhs: float) -> Vector3:
        return Vector3(self.x / rhs, self.y / rhs, self.z / rhs)

    def __rtruediv__(self, lhs: float) -> Vector3:
        """``k / v`` is defined as ``v / k``."""
        return self / lhs

    def __lt__(self, rhs: Vector3) -> bool:
        return (self.x, self.y, self.z) < (rhs.x, rhs.y, rhs.z)

    def __eq__(self, rhs: object) -> bool:
        if not isinstance(rhs, Vector3):
            return NotImplemented
        return (self.x, self.y, self.z) == (rhs.x, rhs.y, rhs.z)

    __hash__ = None  # type: ignore[assignment]


class Rotation(Vector3):
    """Euler angles around x, y and z, in degrees or radians."""

    __slots__ = ("unit",)

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        unit: AngleUnit = AngleUnit.DEGREE,
    ) -> None:
        super().__init__(x, y, z)
        self.unit = AngleUnit(unit)

    def __repr__(self) -> str:
        return f"Rotation({self.x}, {self.y}, {self.z}, {self.unit.name})"

    def copy(self) -> Rotation:
        """An independent copy, keeping the unit."""
        return Rotation(self.x, self.y, self.z, self.unit)

    def to_radian(self) -> Rotation:
        """The same rotation expressed in radians."""
        if self.is_radian():
            return self.copy()
        return Rotation(to_radian(self.x), to_radian(self.y), to_radian(self.z), AngleUnit.RADIAN)

    def to_degree(self) -> Rotation:
        """The same rotation expressed in degrees."""
        if self.is_degree():
            return self.copy()
        return Rotation(to_degree(self.x), to_degree(self.y), to_degree(self.z), AngleUnit.DEGREE)

    def to_unit(self, unit: AngleUnit) -> Rotation:
        """The same rotation expressed in ``unit``."""
        return self.to_radian() if unit is AngleUnit.RADIAN else self.to_degree()

    def is_radian(self) -> bool:
        return self.unit is AngleUnit.RADIAN

    def is_degree(self) -> bool:
        return self.unit is AngleUnit.DEGREE


class Matrix4:
    """A 4x4 matrix stored as 16 floats in row- or column-major order."""

    def __init__(self, order: MatrixOrder = MatrixOrder.ROW_MAJOR) -> None:
        self.e: list[float] = [0.0] * 16
        self.order = MatrixOrder(order)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix position ({row}, {col}) out of range")
        if self.order is MatrixOrder.ROW_MAJOR:
            return row * 4 + col
        return col * 4 + row

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.e[self._index(row, col)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self.e[self._index(row, col)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return all(self[r, c] == other[r, c] for r in range(4) for c in range(4))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4({self.e!r}, {self.order.name})"

    def copy(self) -> Matrix4:
        """An independent copy with the same layout."""
        result = Matrix4(self.order)
        result.e = list(self.e)
        return result

    def identity(self) -> None:
        """Set to the identity matrix."""
        self.e = [1.0 if i in (0, 5, 10, 15) else 0.0 for i in range(16)]

    def reset(self) -> None:
        """Set every element to zero."""
        self.e = [0.0] * 16

    def transpose(self) -> None:
        """Transpose the stored data in place."""
        self.e = [self.e[col * 4 + row] for row in range(4) for col in range(4)]

    def set_order(self, order: MatrixOrder) -> None:
        """Change the storage layout, keeping the matrix's mathematical value."""
        order = MatrixOrder(order)
        if order is not self.order:
            self.transpose()
            self.order = order

    def mult(self, other: Matrix4 | float) -> None:
        """Multiply in place by a scalar, or on the right by another matrix."""
        if isinstance(other, Matrix4):
            product = [
                [sum(self[r, k] * other[k, c] for k in range(4)) for c in range(4)]
                for r in range(4)
            ]
            for r, row in enumerate(product):
                for c, value in enumerate(row):
                    self[r, c] = value
        else:
            self.e = [v * other for v in self.e]

    def div(self, coef: float) -> None:
        """Divide every element by ``coef``."""
        self.e = [v / coef for v in self.e]
"""Position, rotation and scale of an object, with change tracking."""

from __future__ import annotations

from collections.abc import Sequence

from simplegl.vecmath import AngleUnit, Matrix4, Rotation, Vector3


def _vector_from(args: tuple) -> Vector3:
    if len(args) == 1:
        (value,) = args
        if isinstance(value, Vector3):
            return Vector3(value.x, value.y, value.z)
        if isinstance(value, Sequence) and len(value) == 3:
            return Vector3(*value)
    elif len(args) == 3:
        return Vector3(*args)
    raise TypeError("expected a Vector3, a 3-item sequence or three numbers")


def _rotation_from(args: tuple) -> Rotation:
    if len(args) == 1 and isinstance(args[0], Rotation):
        return args[0].copy()
    vec = _vector_from(args)
    return Rotation(vec.x, vec.y, vec.z, AngleUnit.DEGREE)


class Properties:
    """Transform of an object; plain numbers for rotation are in degrees."""

    def __init__(self) -> None:
        self.matrix = Matrix4()
        self.matrix.identity()
        self.matrix_changed = True
        self.matrix_updated = False
        self._pos = Vector3(0.0, 0.0, 0.0)
        self._rot = Rotation(0.0, 0.0, 0.0, AngleUnit.DEGREE)
        self._scale = Vector3(1.0, 1.0, 1.0)

    def copy(self) -> Properties:
        """A copy whose matrix is marked as needing an update."""
        result = Properties()
        result.matrix = self.matrix.copy()
        result._pos = self._pos.copy()
        result._rot = self._rot.copy()
        result._scale = self._scale.copy()
        return result

    __copy__ = copy

    @property
    def pos(self) -> Vector3:
        return self._pos.copy()

    @pos.setter
    def pos(self, value: Vector3 | Sequence[float]) -> None:
        self._pos = _vector_from((value,))
        self.matrix_changed = True

    @property
    def rot(self) -> Rotation:
        return self._rot.copy()

    @rot.setter
    def rot(self, value: Rotation | Sequence[float]) -> None:
        self._rot = _rotation_from((value,))
        self.matrix_changed = True

    @property
    def scale(self) -> Vector3:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Vector3 | Sequence[float]) -> None:
        self._scale = _vector_from((value,))
        self.matrix_changed = True

    def translate(self, *args) -> None:
        """Move by a Vector3 or by three numbers."""
        self._pos.add(_vector_from(args))
        self.matrix_changed = True

    def rotate(self, *args) -> None:
        """Add a Rotation, or three angles in degrees, to the current rotation."""
        delta = _rotation_from(args).to_unit(self._rot.unit)
        self._rot.add(delta)
        self.matrix_changed = True

    def enlarge(self, *args) -> None:
        """Add a Vector3, or three numbers, to the scale."""
        self._scale.add(_vector_from(args))
        self.matrix_changed = True
import pytest

from simplegl.properties import Properties
from simplegl.vecmath import AngleUnit, Rotation, Vector3


@pytest.fixture
def pp_a():
    pp = Properties()
    pp.matrix.e = [float(i) for i in range(16)]
    pp.pos = Vector3(4, 9, 1)
    pp.rot = Rotation(5, -9, 51, AngleUnit.RADIAN)
    pp.scale = Vector3(2, 4, 1)
    pp.matrix_changed = False
    pp.matrix_updated = True
    return pp


def test_default_properties():
    pp = Properties()
    assert pp.matrix_changed is True
    assert pp.matrix_updated is False
    assert pp.pos == Vector3(0, 0, 0)
    assert pp.rot == Rotation(0, 0, 0)
    assert pp.rot.is_degree()
    assert pp.scale == Vector3(1, 1, 1)


def test_copy(pp_a):
    pp2 = pp_a.copy()
    assert pp2.matrix_changed is True
    assert pp2.matrix_updated is False
    assert pp2.pos == pp_a.pos
    assert pp2.rot == pp_a.rot
    assert pp2.scale == pp_a.scale
    assert pp2.rot.unit == pp_a.rot.unit


def test_copy_is_independent(pp_a):
    pp2 = pp_a.copy()
    pp2.translate(1, 1, 1)
    assert pp_a.pos == Vector3(4, 9, 1)


def test_translate(pp_a):
    pp3 = pp_a.copy()
    same_as_before = pp3.matrix_updated
    pp3.translate(0, 0, 0)
    assert pp3.pos == pp_a.pos
    pp3.translate(2, 3, -1)
    assert pp3.pos == Vector3(6, 12, 0)
    pp3.translate(Vector3(0, 0, 0))
    assert pp3.pos == Vector3(6, 12, 0)
    pp3.translate(Vector3(1, 2, 3))
    assert pp3.pos == Vector3(7, 14, 3)
    assert pp3.matrix_changed is True
    assert pp3.matrix_updated == same_as_before


def test_translate_rejects_bad_arguments():
    with pytest.raises(TypeError):
        Properties().translate(1, 2)


def test_enlarge(pp_a):
    pp4 = pp_a.copy()
    pp4.scale = Vector3(1, 1, 1)
    pp4.enlarge(1, 2, 3)
    assert pp4.scale == Vector3(2, 3, 4)
    pp4.enlarge(Vector3(1, 2, 3))
    assert pp4.scale == Vector3(3, 5, 7)


def test_set_pos():
    pp5 = Properties()
    pp5.pos = (1, 2, 3)
    assert pp5.pos == Vector3(1, 2, 3)
    pp5.pos = Vector3(6, 12, 0)
    assert pp5.pos == Vector3(6, 12, 0)


def test_set_rot():
    pp6 = Properties()
    pp6.rot = (10, 15, 45)
    assert pp6.rot == Rotation(10, 15, 45)
    assert pp6.rot.unit is AngleUnit.DEGREE
    pp6.rot = Rotation(1, 2, 4, AngleUnit.RADIAN)
    assert pp6.rot == Rotation(1, 2, 4, AngleUnit.RADIAN)
    assert pp6.rot.unit is AngleUnit.RADIAN


def test_set_scale():
    pp7 = Properties()
    pp7.scale = (2, 3, 4)
    assert pp7.scale == Vector3(2, 3, 4)


def test_setter_marks_matrix_changed(pp_a):
    pp_a.pos = (1, 2, 3)
    assert pp_a.matrix_changed is True


def test_rotate_in_degrees():
    pp = Properties()
    pp.rotate(10, 15, 45)
    assert pp.rot == Rotation(10, 15, 45)
    pp.rotate(Rotation(10, 15, 45))
    assert pp.rot == Rotation(10, 15, 45) * 2


def test_rotate_converts_to_current_unit(pp_a):
    pp_a.rotate(Rotation(1, 2, 4, AngleUnit.DEGREE).to_radian().to_degree())
    rot = pp_a.rot
    assert rot.is_radian()
    assert rot.x == pytest.approx(5 + Rotation(1, 2, 4).to_radian().x)


def test_matrix_attribute_keeps_data(pp_a):
    assert pp_a.matrix.e == [float(i) for i in range(16)]


def test_get_pos_returns_copy(pp_a):
    v8 = pp_a.pos
    assert v8 == Vector3(4, 9, 1)
    v8.x = 100
    assert pp_a.pos == Vector3(4, 9, 1)


def test_get_rot_returns_copy(pp_a):
    v9 = pp_a.rot
    assert v9 == Rotation(5, -9, 51, AngleUnit.RADIAN)
    assert v9.unit is AngleUnit.RADIAN
    v9.y = 0
    assert pp_a.rot.y == -9


def test_get_scale_returns_copy(pp_a):
    v10 = pp_a.scale
    assert v10 == Vector3(2, 4, 1)
    v10.z = 50
    assert pp_a.scale == Vector3(2, 4, 1)
import math

from pytest import approx

from geogrid import Vector3d


def test_vector_init():
    v = Vector3d(1, '2.5', 3.)
    assert (v.x, v.y, v.z) == (1., 2.5, 3.)


def test_vector_eq_hash():
    vectors = [Vector3d(1, 2, 3), Vector3d(1, 2, 3), Vector3d(3, 2, 1)]
    assert len(set(vectors)) == 2
    assert Vector3d(1, 2, 3) == Vector3d(1., 2., 3.)
    assert Vector3d(1, 2, 3) != (1, 2, 3)


def test_vector_repr():
    assert repr(Vector3d(1, 2, 3)) == '<Vector3d(1.0, 2.0, 3.0)>'
    assert Vector3d(1, 2, 3).to_str() == '[1.000, 2.000, 3.000]'
    assert Vector3d(1, 2, 3).to_str(1) == '[1.0, 2.0, 3.0]'


def test_vector_arithmetic():
    v1, v2 = Vector3d(1, 2, 3), Vector3d(4, 5, 6)

    assert v1.plus(v2) == Vector3d(5, 7, 9)
    assert v1 + v2 == Vector3d(5, 7, 9)
    assert v2.minus(v1) == Vector3d(3, 3, 3)
    assert v2 - v1 == Vector3d(3, 3, 3)
    assert v1.times(2) == Vector3d(2, 4, 6)
    assert v1 * 2 == 2 * v1
    assert v2.divided_by(2) == Vector3d(2, 2.5, 3)
    assert v2 / 2 == Vector3d(2, 2.5, 3)
    assert v1.negate() == Vector3d(-1, -2, -3)
    assert -v1 == Vector3d(-1, -2, -3)

    # operations don't mutate their operands
    assert v1 == Vector3d(1, 2, 3)


def test_vector_products():
    x, y, z = Vector3d(1, 0, 0), Vector3d(0, 1, 0), Vector3d(0, 0, 1)

    assert Vector3d(1, 2, 3).dot(Vector3d(4, 5, 6)) == 32.
    assert x.dot(y) == 0.
    assert x.cross(y) == z
    assert y.cross(x) == -z


def test_vector_length_unit():
    assert Vector3d(3, 4, 0).length() == 5.
    assert Vector3d(3, 4, 0).unit() == Vector3d(0.6, 0.8, 0)

    # zero and unit vectors are returned as-is
    zero = Vector3d(0, 0, 0)
    assert zero.unit() is zero
    unit = Vector3d(0, 1, 0)
    assert unit.unit() is unit


def test_vector_angle_to():
    x, y, z = Vector3d(1, 0, 0), Vector3d(0, 1, 0), Vector3d(0, 0, 1)

    assert x.angle_to(y) == approx(math.pi / 2)
    assert y.angle_to(x) == approx(math.pi / 2)
    assert x.angle_to(y, z) == approx(math.pi / 2)
    assert y.angle_to(x, z) == approx(-math.pi / 2)
    assert x.angle_to(-x) == approx(math.pi)


def test_vector_rotate_around():
    rotated = Vector3d(2, 0, 0).rotate_around(Vector3d(0, 0, 1), math.pi / 2)
    assert rotated.x == approx(0, abs=1e-12)
    assert rotated.y == approx(1)
    assert rotated.z == approx(0, abs=1e-12)

    rotated = Vector3d(0, 1, 0).rotate_around(Vector3d(1, 0, 0), math.pi)
    assert rotated.y == approx(-1)
    assert rotated.z == approx(0, abs=1e-12)

import math

import numpy
import pytest

from curvescene.geom import Point3D, Vector3D, dist, dot, epsilon, mag, vclose


def test_point_is_a_plain_tuple():
    p = Point3D(1.0, 2.0, 3.0)
    x, y, z = p
    assert (x, y, z) == (1.0, 2.0, 3.0)
    assert p == (1.0, 2.0, 3.0)
    assert p[2] == 3.0


def test_primitives_are_immutable():
    v = Vector3D(1.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        v.x = 2.0


def test_str_uses_default_float_text():
    assert str(Point3D(1.0, -0.5, 0.0)) == "(1.0, -0.5, 0.0)"
    assert str(Vector3D(0.1, 2.0, 1e-20)) == "(0.1, 2.0, 1e-20)"


def test_nan_propagates_without_error():
    p = Point3D(float('nan'), 0.0, 0.0)
    assert math.isnan(mag(p))


def test_dot_mag_dist():
    a = Vector3D(1.0, 2.0, 2.0)
    b = Vector3D(-2.0, 1.0, 0.0)
    assert dot(a, b) == 0.0
    assert mag(a) == 3.0
    assert dist(Point3D(0.0, 0.0, 0.0), Point3D(3.0, 4.0, 0.0)) == 5.0


def test_vclose_tolerance():
    assert vclose((1.0, 1.0, 1.0), (1.0 + epsilon / 2, 1.0, 1.0))
    assert not vclose((1.0, 1.0, 1.0), (1.0 + 2 * epsilon, 1.0, 1.0))


def test_to_array():
    arr = Point3D(1.0, 2.0, 3.0).to_array()
    assert arr.shape == (3,)
    assert arr.dtype == float
    assert numpy.allclose(arr, [1.0, 2.0, 3.0])

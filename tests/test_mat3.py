import math

import pytest

from cckit.mat3 import Mat3
from cckit.vectors import Vec2, Vec3

TOL = 1e-6


def test_identity_diagonal():
    m = Mat3.identity()
    assert m[0, 0] == pytest.approx(1.0, abs=TOL)
    assert m[1, 1] == pytest.approx(1.0, abs=TOL)
    assert m[2, 2] == pytest.approx(1.0, abs=TOL)
    assert m[0, 1] == 0.0
    assert Mat3() == m


def test_zero_matrix():
    z = Mat3.zero()
    assert all(abs(z[i, j]) < TOL for i in range(3) for j in range(3))


def test_identity_times_vector():
    result = Mat3.identity() * Vec3(1.0, 2.0, 3.0)
    assert tuple(result) == pytest.approx((1.0, 2.0, 3.0), abs=TOL)


def test_identity_determinant_and_transpose():
    m = Mat3.identity()
    assert m.determinant() == pytest.approx(1.0, abs=TOL)
    t = m.transpose()
    assert all(abs(t[i, j] - m[i, j]) < TOL for i in range(3) for j in range(3))


def test_row_major_arguments_column_major_storage():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m[0, 1] == 2.0
    assert m[1, 0] == 4.0
    assert m.row(1) == (4.0, 5.0, 6.0)
    assert m.col(1) == (2.0, 5.0, 8.0)
    assert m[2] == (7.0, 8.0, 9.0)
    assert m.column_major() == (1.0, 4.0, 7.0, 2.0, 5.0, 8.0, 3.0, 6.0, 9.0)
    assert Mat3.from_column_major(m.column_major()) == m


def test_transpose_swaps_elements():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.transpose() == Mat3(1, 4, 7, 2, 5, 8, 3, 6, 9)


def test_singular_inverse_is_identity():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.inverse() == Mat3.identity()


def test_matrix_product():
    a = Mat3(1, 2, 0, 0, 1, 0, 0, 0, 1)
    b = Mat3(1, 0, 0, 3, 1, 0, 0, 0, 1)
    assert a * b == Mat3(7, 2, 0, 3, 1, 0, 0, 0, 1)


def test_add_sub_scalar():
    a = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert a + a == a * 2
    assert 2 * a == a * 2.0
    assert (a - a) == Mat3.zero()


def test_rotation():
    r = Mat3.from_rotation(math.pi / 2)
    v = r * Vec3(1.0, 0.0, 0.0)
    assert tuple(v) == pytest.approx((0.0, 1.0, 0.0), abs=TOL)


def test_scale_and_translation():
    s = Mat3.from_scale(Vec2(2.0, 3.0))
    assert s * Vec3(1.0, 1.0, 1.0) == Vec3(2.0, 3.0, 1.0)
    t = Mat3.from_translation(Vec2(2.0, 3.0))
    assert t * Vec3(1.0, 1.0, 1.0) == Vec3(3.0, 4.0, 1.0)


def test_equality_uses_tolerance():
    a = Mat3.identity()
    b = Mat3.identity()
    b[0, 0] = 1.0000001
    assert a == b
    b[0, 0] = 1.01
    assert not (a == b)


def test_str_format():
    expected = (
        "[ 1.000000, 0.000000, 0.000000 ]\n"
        "[ 0.000000, 1.000000, 0.000000 ]\n"
        "[ 0.000000, 0.000000, 1.000000 ]"
    )
    assert str(Mat3.identity()) == expected


def test_bad_constructor_arguments():
    with pytest.raises(TypeError):
        Mat3(1, 2, 3)
    with pytest.raises(ValueError):
        Mat3.from_column_major([1.0, 2.0])


def test_index_out_of_range():
    m = Mat3()
    with pytest.raises(IndexError):
        m[3, 0]
    with pytest.raises(IndexError):
        m.row(-1)
import pytest

from ttge.vector import Vector1, Vector2, Vector3, Vector4


def _samples():
    return [
        (Vector1(1.5), Vector1(-2.25)),
        (Vector2(1.5, 3.0), Vector2(0.25, -4.0)),
        (Vector3(1.0, 2.0, 3.0), Vector3(-0.5, 8.0, 0.75)),
        (Vector4(1.0, 2.0, 3.0, 4.0), Vector4(0.5, 0.25, -1.0, 2.0)),
    ]


def test_default_vectors_are_zero_except_w():
    assert Vector1() == Vector1(0.0)
    assert Vector2() == Vector2(0.0, 0.0)
    assert Vector3() == Vector3(0.0, 0.0, 0.0)
    assert Vector4().w == 1.0
    assert Vector4(1.0, 2.0, 3.0).w == 1.0


def test_add_then_subtract_round_trip():
    assert (Vector1(1.5) + Vector1(-2.25)) - Vector1(-2.25) == Vector1(1.5)
    assert (Vector2(1.5, 3.0) + Vector2(0.25, -4.0)) - Vector2(0.25, -4.0) == Vector2(1.5, 3.0)
    for a, b in _samples():
        assert (a + b) - b == a


def test_addition_commutes():
    assert Vector3(1.0, 2.0, 3.0) + Vector3(-0.5, 8.0, 0.75) == Vector3(
        -0.5, 8.0, 0.75
    ) + Vector3(1.0, 2.0, 3.0)
    for a, b in _samples():
        assert a + b == b + a


def test_self_subtraction_is_zero_times():
    assert Vector2(1.5, 3.0) - Vector2(1.5, 3.0) == Vector2(0.0, 0.0)
    for a, _ in _samples():
        assert a - a == a * 0


def test_scale_by_two_equals_doubling():
    assert Vector4(1.0, 2.0, 3.0, 4.0) * 2 == Vector4(2.0, 4.0, 6.0, 8.0)
    for a, _ in _samples():
        assert a * 2 == a + a


def test_multiply_then_divide_round_trip():
    assert (Vector1(1.5) * 4) / 4 == Vector1(1.5)
    for a, _ in _samples():
        assert (a * 4) / 4 == a


def test_component_wise_sum():
    assert Vector3(1.0, 2.0, 3.0) + Vector3(-0.5, 8.0, 0.75) == Vector3(0.5, 10.0, 3.75)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1.0, 2.0, 3.0) / 0


def test_mixing_vector_sizes_is_a_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) + Vector3(1.0, 2.0, 3.0)


def test_multiplying_by_vector_is_a_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) * Vector2(1.0, 2.0)
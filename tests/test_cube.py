import pytest

from mcskin import cube
from mcskin.cube import VALUE, get_square, get_square_indices

EPS = 1.1920929e-07


def test_value_used_by_default_square():
    assert max(get_square()) == pytest.approx(VALUE)
    assert VALUE == pytest.approx(0.5)


def test_get_square_default_length():
    assert len(get_square()) == 72


def test_get_square_indices_default_length():
    assert len(get_square_indices()) == 36


def test_get_square_with_scale():
    result = get_square(2.0, 2.0, 2.0, 0.0, 0.0, 0.0, 1.0)
    assert len(result) == 72
    assert abs(max(result) - 1.0) < EPS
    assert abs(min(result) + 1.0) < EPS


def test_get_square_with_translation():
    result = get_square(1.0, 1.0, 1.0, 5.0, 10.0, 15.0, 1.0)
    assert len(result) == 72
    assert abs(max(result) - 15.5) < EPS
    assert abs(min(result) - 4.5) < EPS


def test_get_square_with_enlarge():
    result = get_square(1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 2.0)
    assert len(result) == 72
    assert abs(max(result) - 1.0) < EPS
    assert abs(min(result) + 1.0) < EPS


def test_get_square_indices_with_offset():
    result = get_square_indices(10)
    assert len(result) == 36
    assert result[:3] == [10, 11, 12]


def test_get_square_indices_zero_offset():
    result = get_square_indices(0)
    assert len(result) == 36
    assert result[:3] == [0, 1, 2]


def test_get_square_indices_large_offset():
    result = get_square_indices(1000)
    assert len(result) == 36
    assert result[0] == 1000
    assert result[35] == 1023


def test_get_square_indices_out_of_range():
    with pytest.raises(ValueError):
        get_square_indices(0xFFFF)
    with pytest.raises(ValueError):
        get_square_indices(-1)


def test_get_square_asymmetric():
    result = get_square(0.5, 1.5, 0.5, 0.0, 0.0, 0.0, 1.0)
    assert len(result) == 72
    assert abs(max(result[0::3]) - 0.25) < EPS
    assert abs(max(result[1::3]) - 0.75) < EPS
    assert abs(max(result[2::3]) - 0.25) < EPS


def test_get_square_default_matches_explicit():
    default = get_square()
    explicit = get_square(1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    assert len(default) == len(explicit)
    assert all(abs(a - b) < EPS for a, b in zip(default, explicit))


def test_normals_match_vertex_count():
    assert len(cube.VERTICES) == len(get_square())
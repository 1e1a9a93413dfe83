import numpy as np
import pytest

from latticeqft.adjoint_group import AdjointSU2, AdjointU1
from latticeqft.adjoint_sun import (
    adjoint_dimension,
    expo_sun,
    flip_sign,
    format_adjoint,
    norm2,
    random_adjoint,
    trace_t,
)
from latticeqft.gauge_group import SU2


def test_adjoint_dimension():
    assert adjoint_dimension(1) == 1
    assert adjoint_dimension(2) == 3
    assert adjoint_dimension(3) == 8


def test_adjoint_dimension_rejects_zero():
    with pytest.raises(ValueError):
        adjoint_dimension(0)


def test_flip_sign_twice_is_identity():
    a = np.array([0.3, -1.2, 2.5])
    np.testing.assert_allclose(flip_sign(flip_sign(a)), a)
    np.testing.assert_allclose(flip_sign(a) + a, np.zeros(3))


def test_norm2_matches_dot():
    a = np.array([1.5, -0.5, 2.0, 0.25])
    assert norm2(a) == pytest.approx(float(a @ a))
    assert norm2(flip_sign(a)) == pytest.approx(norm2(a))


@pytest.mark.parametrize("nc", [1, 2, 3])
def test_random_adjoint_shape_and_reproducible(nc):
    a = random_adjoint(nc, np.random.default_rng(5))
    b = random_adjoint(nc, np.random.default_rng(5))
    assert a.shape == (adjoint_dimension(nc),)
    np.testing.assert_array_equal(a, b)


@pytest.mark.parametrize("nc", [1, 2, 3])
def test_trace_t_of_identity_is_zero(nc):
    np.testing.assert_allclose(trace_t(np.eye(nc)), np.zeros(adjoint_dimension(nc)))


def test_trace_t_su2_matches_adjoint_group():
    rng = np.random.default_rng(11)
    element = SU2.random(rng, 0.7)
    matrix = np.array([[element.v[0], element.v[1]], [element.v[2], element.v[3]]])
    np.testing.assert_allclose(trace_t(matrix), AdjointSU2.from_group(element).v)


def test_trace_t_su3_is_linear():
    rng = np.random.default_rng(3)
    x = rng.normal(size=(3, 3)) + 1j * rng.normal(size=(3, 3))
    y = rng.normal(size=(3, 3)) + 1j * rng.normal(size=(3, 3))
    np.testing.assert_allclose(trace_t(x + 2.0 * y), trace_t(x) + 2.0 * trace_t(y))


def test_trace_t_rejects_large_matrix():
    with pytest.raises(ValueError):
        trace_t(np.eye(4))


def test_trace_t_rejects_non_square():
    with pytest.raises(ValueError):
        trace_t(np.zeros((2, 3)))


def test_expo_sun_su2_matches_adjoint_group():
    a = np.array([0.4, -0.9, 1.3])
    expected = AdjointSU2(a).exp().v
    np.testing.assert_allclose(expo_sun(a).ravel(), np.array(expected))


def test_expo_sun_su2_is_special_unitary():
    a = random_adjoint(2, np.random.default_rng(17))
    m = expo_sun(a)
    np.testing.assert_allclose(m @ m.conj().T, np.eye(2), atol=1e-12)
    assert np.linalg.det(m) == pytest.approx(1.0)


def test_expo_sun_u1_matches_adjoint_group():
    m = expo_sun([0.8])
    assert m.shape == (1, 1)
    assert m[0, 0] == pytest.approx(AdjointU1(0.8).exp().v)


def test_expo_sun_of_zero_is_identity():
    np.testing.assert_allclose(expo_sun(np.zeros(3)), np.eye(2))


def test_expo_sun_small_angle_round_trip():
    a = np.array([1e-4, -2e-4, 3e-4])
    np.testing.assert_allclose(trace_t(expo_sun(a)), 2.0 * a, rtol=1e-6)


def test_expo_sun_rejects_su3():
    with pytest.raises(ValueError):
        expo_sun(np.zeros(8))


def test_format_adjoint():
    text = format_adjoint([1.0, -0.5], "P:")
    lines = text.splitlines()
    assert lines[0] == "P:"
    assert lines[1] == "    [0] = ( 1.00000000000000000000)"
    assert lines[2].startswith("    [1] = (-0.5")
    assert format_adjoint([0.0]).startswith("SUNAdj:\n")
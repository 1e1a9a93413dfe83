import math

import numpy as np
import pytest

from latticeqft.gauge_group import SU2, SU3, U1, dagger


def _su3_matrix(element):
    return np.array(element.v, dtype=complex).reshape(3, 3)


def _su2_matrix(element):
    return np.array(element.v, dtype=complex).reshape(2, 2)


def _assert_close(a, b, tol=1e-12):
    assert np.allclose(np.asarray(a.v), np.asarray(b.v), atol=tol)


def test_su3_identity_trace():
    assert SU3.identity().retrace() == pytest.approx(3.0)


def test_su3_random_is_special_unitary():
    rng = np.random.default_rng(7)
    u = SU3.random(rng, 1.0)
    m = _su3_matrix(u)
    assert np.allclose(m @ m.conj().T, np.eye(3), atol=1e-12)
    assert u.det() == pytest.approx(1.0 + 0.0j, abs=1e-12)


def test_su3_det_matches_numpy():
    rng = np.random.default_rng(1)
    u = SU3.random(rng, 0.5) + SU3.random(rng, 0.5)
    assert u.det() == pytest.approx(np.linalg.det(_su3_matrix(u)), abs=1e-12)


def test_su3_product_with_dagger_is_identity():
    rng = np.random.default_rng(3)
    u = SU3.random(rng, 1.0)
    _assert_close(u * u.dagger(), SU3.identity())
    _assert_close(dagger(u) * u, SU3.identity())


def test_su3_product_matches_matrix_product():
    rng = np.random.default_rng(11)
    a = SU3.random(rng, 1.0)
    b = SU3.random(rng, 1.0)
    assert np.allclose(_su3_matrix(a * b), _su3_matrix(a) @ _su3_matrix(b))


def test_su3_dagger_is_involution():
    rng = np.random.default_rng(5)
    u = SU3.random(rng, 1.0)
    _assert_close(u.dagger().dagger(), u, tol=0.0)


def test_su3_add_sub_round_trip():
    rng = np.random.default_rng(9)
    a = SU3.random(rng, 1.0)
    b = SU3.random(rng, 1.0)
    _assert_close((a + b) - b, a)


def test_su3_restore_gauge_returns_to_group():
    rng = np.random.default_rng(13)
    u = SU3.random(rng, 1.0)
    scaled = SU3(tuple(1.3 * x for x in u.v))
    restored = scaled.restore_gauge()
    m = _su3_matrix(restored)
    assert np.allclose(m @ m.conj().T, np.eye(3), atol=1e-12)
    assert restored.det() == pytest.approx(1.0 + 0.0j, abs=1e-12)
    _assert_close(restored, u)


def test_su3_wrong_size_rejected():
    with pytest.raises(ValueError):
        SU3((1, 0, 0))


def test_su3_mixed_types_rejected():
    with pytest.raises(TypeError):
        SU3.identity() * SU2.identity()


def test_su2_identity_trace():
    assert SU2.identity().retrace() == pytest.approx(2.0)


def test_su2_random_is_unitary_and_seeded():
    u = SU2.random(np.random.default_rng(21), 0.3)
    again = SU2.random(np.random.default_rng(21), 0.3)
    assert u == again
    m = _su2_matrix(u)
    assert np.allclose(m @ m.conj().T, np.eye(2), atol=1e-12)
    assert np.linalg.det(m) == pytest.approx(1.0 + 0.0j, abs=1e-12)


def test_su2_product_matches_matrix_product():
    rng = np.random.default_rng(17)
    a = SU2.random(rng, 1.0)
    b = SU2.random(rng, 1.0)
    assert np.allclose(_su2_matrix(a * b), _su2_matrix(a) @ _su2_matrix(b))


def test_su2_dagger_inverts():
    rng = np.random.default_rng(19)
    u = SU2.random(rng, 1.0)
    _assert_close(u * dagger(u), SU2.identity())
    assert np.allclose(_su2_matrix(u.dagger()), _su2_matrix(u).conj().T)


def test_su2_add_sub_round_trip():
    rng = np.random.default_rng(23)
    a = SU2.random(rng, 1.0)
    b = SU2.random(rng, 1.0)
    _assert_close((a - b) + b, a)


def test_su2_restore_gauge_normalises():
    rng = np.random.default_rng(29)
    u = SU2.random(rng, 1.0)
    scaled = SU2(tuple(0.4 * x for x in u.v))
    _assert_close(scaled.restore_gauge(), u)


def test_u1_identity_trace():
    assert U1.identity().retrace() == pytest.approx(1.0)


def test_u1_random_phase_in_range():
    rng = np.random.default_rng(31)
    delta = 0.25
    for _ in range(50):
        u = U1.random(rng, delta)
        assert abs(u.v) == pytest.approx(1.0)
        assert abs(math.atan2(u.v.imag, u.v.real)) <= delta * math.pi + 1e-12


def test_u1_product_and_dagger():
    rng = np.random.default_rng(37)
    a = U1.random(rng, 1.0)
    b = U1.random(rng, 1.0)
    assert (a * b).v == pytest.approx(a.v * b.v)
    assert (a * dagger(a)).v == pytest.approx(1.0 + 0.0j)


def test_u1_add_sub_and_restore():
    a = U1(3 + 4j)
    b = U1(1 - 1j)
    assert ((a + b) - b).v == pytest.approx(a.v)
    assert abs(a.restore_gauge().v) == pytest.approx(1.0)
    assert a.restore_gauge().v * 5 == pytest.approx(a.v)
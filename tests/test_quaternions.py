"""Tests for hypernum.quaternions (Quaternion)."""

import numpy as np
import pytest
import quaternion

from hypernum import DivisionByZero
from hypernum import Quaternion
from hypernum import TypeConstraintError
from hypernum import commutator

_TRIALS = 1_000


def _random_quaternions(n: int, seed: int = 42) -> list[Quaternion]:
    rng = np.random.default_rng(seed)
    return [Quaternion.from_components(rng.standard_normal(4)) for _ in range(n)]


def test_default_is_zero() -> None:
    """Quaternion() is the additive identity."""
    assert Quaternion() == Quaternion(0, 0, 0, 0)
    assert Quaternion().norm() == 0


def test_accessors() -> None:
    """re, i, j, k and the imaginary vector."""
    q = Quaternion(1, 2, 3, 4)
    assert (q.re, q.i, q.j, q.k) == (1, 2, 3, 4)
    assert q.vector == (2, 3, 4)
    assert q[3] == 4


def test_basis_products() -> None:
    """Hamilton's rules: ij = k, ji = -k, i² = j² = k² = ijk = -1."""
    one = Quaternion(1, 0, 0, 0)
    i = Quaternion(0, 1, 0, 0)
    j = Quaternion(0, 0, 1, 0)
    k = Quaternion(0, 0, 0, 1)
    assert one * i == i
    assert i * j == k
    assert j * i == -k
    assert j * k == i
    assert k * i == j
    assert i * i == j * j == k * k == -one
    assert i * j * k == -one


def test_matches_numpy_quaternion() -> None:
    """The Hamilton product agrees with numpy-quaternion."""
    values = _random_quaternions(_TRIALS)
    for n in range(_TRIALS):
        a, b = values[n], values[(n + 1) % _TRIALS]
        expected = a.to_numpy_quaternion() * b.to_numpy_quaternion()
        assert np.allclose((a * b).to_array(), expected.components, atol=1e-12)


def test_numpy_quaternion_round_trip() -> None:
    """Conversion to and from numpy-quaternion keeps the components."""
    q = quaternion.quaternion(1.0, -2.0, 3.0, -4.0)
    assert Quaternion.from_numpy_quaternion(q) == Quaternion(1, -2, 3, -4)
    assert Quaternion.from_numpy_quaternion(q).to_numpy_quaternion() == q


def test_identities() -> None:
    """a + 0 == a and a * 1 == a."""
    for a in _random_quaternions(_TRIALS):
        assert a + Quaternion() == a
        assert a * Quaternion.one() == a
        assert Quaternion.one() * a == a


def test_conjugate() -> None:
    """Conjugate negates i, j, k and is an involution."""
    assert Quaternion(1, 2, 3, 4).conjugate() == Quaternion(1, -2, -3, -4)
    for a in _random_quaternions(_TRIALS):
        assert a.conjugate().conjugate() == a


def test_addition() -> None:
    """Component-wise sums; scalars only touch the real part."""
    a = Quaternion(1, 2, 3, 4)
    b = Quaternion(5, 6, 7, 8)
    assert a + b == Quaternion(6, 8, 10, 12)
    assert b - a == Quaternion(4, 4, 4, 4)
    assert a + 1 == Quaternion(2, 2, 3, 4)
    assert 1 - a == Quaternion(0, -2, -3, -4)
    assert 2 * a == a * 2 == Quaternion(2, 4, 6, 8)


def test_norm() -> None:
    """Euclidean norm over all four components."""
    assert Quaternion(1, 1, 1, 1).norm() == 2.0
    for a in _random_quaternions(_TRIALS):
        assert a.norm() > 0


def test_reciprocal() -> None:
    """a * a⁻¹ ≈ 1 and a⁻¹ * a ≈ 1."""
    one = Quaternion.one().to_array()
    for a in _random_quaternions(_TRIALS):
        assert np.allclose((a * a.reciprocal()).to_array(), one, atol=1e-12)
        assert np.allclose((a.reciprocal() * a).to_array(), one, atol=1e-12)


def test_reciprocal_errors() -> None:
    """The zero quaternion has no reciprocal; integer quaternions cannot be inverted."""
    with pytest.raises(DivisionByZero):
        Quaternion(0.0, 0.0, 0.0, 0.0).reciprocal()
    with pytest.raises(DivisionByZero):
        Quaternion(1.0, 2.0, 3.0, 4.0) / Quaternion(0.0)
    with pytest.raises(TypeConstraintError):
        Quaternion(1, 2, 3, 4).reciprocal()


def test_division_inverts_multiplication() -> None:
    """(a / b) * b ≈ a and b * a.left_divide(b) ≈ a."""
    values = _random_quaternions(_TRIALS)
    for n in range(_TRIALS):
        a, b = values[n], values[(n + 1) % _TRIALS]
        assert np.allclose(((a / b) * b).to_array(), a.to_array(), atol=1e-12)
        assert np.allclose((b * a.left_divide(b)).to_array(), a.to_array(), atol=1e-12)


def test_division_is_right_division() -> None:
    """i / j == i * j⁻¹ == -k, while the left quotient j⁻¹ * i == k."""
    i = Quaternion(0.0, 1.0, 0.0, 0.0)
    j = Quaternion(0.0, 0.0, 1.0, 0.0)
    assert i / j == Quaternion(0, 0, 0, -1)
    assert i.left_divide(j) == Quaternion(0, 0, 0, 1)


def test_scalar_division() -> None:
    """Scalar division on either side."""
    assert Quaternion(2.0, 4.0, 6.0, 8.0) / 2 == Quaternion(1, 2, 3, 4)
    assert 2.0 / Quaternion(0.0, 2.0, 0.0, 0.0) == Quaternion(0, -1, 0, 0)
    with pytest.raises(DivisionByZero):
        Quaternion(1.0, 2.0, 3.0, 4.0) / 0.0


def test_sqrt() -> None:
    """Principal square root squares back to the input."""
    assert Quaternion(-4.0).sqrt() == Quaternion(0, 2, 0, 0)
    assert Quaternion(9).sqrt() == Quaternion(3)
    assert Quaternion(0, 0, 2, 0).sqrt() == Quaternion(1, 0, 1, 0)
    for a in _random_quaternions(_TRIALS):
        root = a.sqrt()
        assert root.re >= 0
        assert np.allclose((root * root).to_array(), a.to_array(), atol=1e-12)


def test_commutator() -> None:
    """[i, j] = 2k; random quaternions generally do not commute."""
    i = Quaternion(0, 1, 0, 0)
    j = Quaternion(0, 0, 1, 0)
    assert commutator(i, j) == Quaternion(0, 0, 0, 2)
    a, b = _random_quaternions(2)
    assert commutator(a, b).norm() > 0


def test_mixed_types_rejected() -> None:
    """Quaternions do not combine with other hypercomplex types."""
    from hypernum import Complex

    with pytest.raises(TypeError):
        _ = Quaternion(1, 2, 3, 4) + Complex(1, 2)
    assert Quaternion(1, 0, 0, 0) != Complex(1, 0)


def test_extreme_magnitudes() -> None:
    """Tiny values are invertible and huge values keep a finite norm."""
    one = Quaternion.one().to_array()
    tiny = Quaternion(1e-200, 0.0, 0.0, 0.0)
    assert tiny.norm() == 1e-200
    assert np.isclose(tiny.reciprocal().re, 1e200, rtol=1e-15, atol=0)
    assert np.allclose((tiny * tiny.reciprocal()).to_array(), one, atol=1e-12)
    huge = Quaternion(1e200, 1e200, 0.0, 0.0)
    assert np.isclose(huge.norm(), np.sqrt(2) * 1e200, rtol=1e-15, atol=0)
    expected = [0.5e-200, -0.5e-200, 0.0, 0.0]
    assert np.allclose(huge.reciprocal().to_array(), expected, rtol=1e-15, atol=0)
    assert np.allclose((huge / huge).to_array(), one, atol=1e-12)

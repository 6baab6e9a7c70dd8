"""Octonion algebra built from pairs of quaternions (Cayley-Dickson doubling).

An octonion ``(p, q)`` with quaternions ``p, q`` has components
``x0..x7 = (p.re, p.i, p.j, p.k, q.re, q.i, q.j, q.k)`` and multiplies as

    (p, q)(r, s) = (pr - s̄q, sp + qr̄)

The product is neither commutative nor associative, but it is alternative, so
``(a / b) * b == a`` still holds for right division ``a / b = a * b⁻¹``.
"""

from __future__ import annotations

import numpy as np

from .algebra import Hypercomplex
from .formatting import format_octonion
from .quaternions import Quaternion
from .scalar import Scalar


class Octonion(Hypercomplex):
    """Octonion ``x0 + x1*e1 + ... + x7*e7``."""

    __slots__ = ()

    _dimension = 8
    _conj_mask = np.array([1, -1, -1, -1, -1, -1, -1, -1], dtype=np.int8)

    def __init__(
        self,
        x0: Scalar = 0,
        x1: Scalar = 0,
        x2: Scalar = 0,
        x3: Scalar = 0,
        x4: Scalar = 0,
        x5: Scalar = 0,
        x6: Scalar = 0,
        x7: Scalar = 0,
    ) -> None:
        """Create an octonion; no arguments gives zero."""
        super().__init__(x0, x1, x2, x3, x4, x5, x6, x7)

    @classmethod
    def from_quaternions(cls, p: Quaternion, q: Quaternion) -> Octonion:
        """Create the Cayley-Dickson pair ``(p, q)``."""
        return cls._wrap(np.concatenate((p._data, q._data)))

    @property
    def pair(self) -> tuple[Quaternion, Quaternion]:
        """The quaternion halves ``(p, q)``."""
        return Quaternion._wrap(self._data[:4].copy()), Quaternion._wrap(self._data[4:].copy())

    @property
    def im(self) -> tuple[Scalar, ...]:
        """Imaginary components ``x1..x7``."""
        return self.components[1:]

    def _product(self, other: Octonion) -> Octonion:
        p, q = self.pair
        r, s = other.pair
        first = p * r - s.conjugate() * q
        second = s * p + q * r.conjugate()
        return self.from_quaternions(first, second)

    def __str__(self) -> str:
        """Render as ``x0+x1e1+...+x7e7``."""
        return format_octonion(self)

    def __format__(self, format_spec: str) -> str:
        """Format every component with ``format_spec``."""
        return format_octonion(self, spec=format_spec)

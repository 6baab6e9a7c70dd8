"""Hamilton quaternions over a generic real scalar type.

A quaternion is ``re + i*𝐢 + j*𝐣 + k*𝐤`` with ``𝐢² = 𝐣² = 𝐤² = 𝐢𝐣𝐤 = -1``.
Multiplication is not commutative, so division comes in two flavours:
``a / b`` is right division ``a * b⁻¹`` and ``a.left_divide(b)`` is ``b⁻¹ * a``.
"""

from __future__ import annotations

import logging

import numpy as np
import quaternion

from .algebra import Hypercomplex
from .formatting import format_quaternion
from .scalar import Scalar
from .scalar import require_floating
from .scalar import to_python

logger = logging.getLogger(__name__)


class Quaternion(Hypercomplex):
    """Quaternion ``re + i*𝐢 + j*𝐣 + k*𝐤``."""

    __slots__ = ()

    _dimension = 4
    _conj_mask = np.array([1, -1, -1, -1], dtype=np.int8)

    def __init__(self, re: Scalar = 0, i: Scalar = 0, j: Scalar = 0, k: Scalar = 0) -> None:
        """Create a quaternion; no arguments gives zero."""
        super().__init__(re, i, j, k)

    @classmethod
    def from_numpy_quaternion(cls, q: quaternion.quaternion) -> Quaternion:
        """Create from a numpy-quaternion value (always float64)."""
        return cls(q.w, q.x, q.y, q.z)

    def to_numpy_quaternion(self) -> quaternion.quaternion:
        """Convert to a numpy-quaternion value (components cast to float)."""
        return quaternion.quaternion(*(float(component) for component in self._data))

    @property
    def i(self) -> Scalar:
        """Coefficient of 𝐢."""
        return to_python(self._data[1])

    @property
    def j(self) -> Scalar:
        """Coefficient of 𝐣."""
        return to_python(self._data[2])

    @property
    def k(self) -> Scalar:
        """Coefficient of 𝐤."""
        return to_python(self._data[3])

    @property
    def vector(self) -> tuple[Scalar, Scalar, Scalar]:
        """Imaginary part ``(i, j, k)``."""
        return self.components[1:]

    def _product(self, other: Quaternion) -> Quaternion:
        """Hamilton product; operand order is significant."""
        a0, a1, a2, a3 = self._data
        b0, b1, b2, b3 = other._data
        return self._wrap(
            np.array(
                [
                    a0 * b0 - a1 * b1 - a2 * b2 - a3 * b3,
                    a0 * b1 + a1 * b0 + a2 * b3 - a3 * b2,
                    a0 * b2 + a2 * b0 + a3 * b1 - a1 * b3,
                    a0 * b3 + a3 * b0 + a1 * b2 - a2 * b1,
                ],
            ),
        )

    def left_divide(self, other: Quaternion) -> Quaternion:
        """Left division ``other.reciprocal() * self``.

        Differs from ``self / other`` (which is ``self * other.reciprocal()``)
        unless the operands commute.
        """
        require_floating(self._data, other._data)
        return other._inverse() * self

    def __str__(self) -> str:
        """Render as ``re+ai+bj+ck``."""
        return format_quaternion(self)

    def __format__(self, format_spec: str) -> str:
        """Format every component with ``format_spec``."""
        return format_quaternion(self, spec=format_spec)

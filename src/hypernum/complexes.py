"""Complex numbers over a generic real scalar type (named to avoid shadowing builtin complex)."""

from __future__ import annotations

import logging

import numpy as np

from .algebra import Hypercomplex
from .errors import DivisionByZero
from .formatting import DEFAULT_UNIT
from .formatting import format_complex
from .scalar import Scalar
from .scalar import is_scalar
from .scalar import match_scalar
from .scalar import principal_sqrt
from .scalar import require_floating
from .scalar import scale_components
from .scalar import to_python

logger = logging.getLogger(__name__)


class Complex(Hypercomplex):
    """Complex number ``re + im*i``.

    The display unit (``i`` or ``j``) is not part of the value; pass it to
    :func:`hypernum.formatting.format_complex` or use ``f"{z:j}"``.
    """

    __slots__ = ()

    _dimension = 2
    _conj_mask = np.array([1, -1], dtype=np.int8)

    def __init__(self, re: Scalar = 0, im: Scalar = 0) -> None:
        """Create ``re + im*i``; no arguments gives zero."""
        super().__init__(re, im)

    @classmethod
    def from_builtin(cls, value: complex) -> Complex:
        """Create from a builtin ``complex``."""
        return cls(value.real, value.imag)

    @property
    def im(self) -> Scalar:
        """Imaginary component."""
        return to_python(self._data[1])

    def __complex__(self) -> complex:
        """Convert to a builtin ``complex``."""
        return complex(float(self._data[0]), float(self._data[1]))

    def _product(self, other: Complex) -> Complex:
        # (a+bi)(c+di) = (ac-bd) + (ad+bc)i
        a, b = self._data
        c, d = other._data
        return self._wrap(np.array([a * c - b * d, a * d + b * c]))

    def __truediv__(self, other: Complex | Scalar) -> Complex:
        """Divide by a complex number or a scalar.

        Complex division is ``(a+bi)(c-di) / (c^2+d^2)``, evaluated with the
        divisor scaled by its larger part so the squares cannot underflow or
        overflow.

        Raises:
            TypeConstraintError: Neither operand has a floating-point scalar type.
            DivisionByZero: The divisor is zero.
        """
        if not isinstance(other, Complex):
            return super().__truediv__(other)
        require_floating(self._data, other._data)
        if not np.any(other._data):
            error_message = f"Dividing by zero complex number: {other!r}"
            logger.error(error_message)
            raise DivisionByZero(error_message)
        a, b = self._data
        scale, (c, d) = scale_components(other._data)
        divisor = (c * c + d * d) * scale
        real_numerator = a * c + b * d
        imaginary_numerator = b * c - a * d
        return self._wrap(np.array([real_numerator / divisor, imaginary_numerator / divisor]))

    def __rtruediv__(self, other: Scalar) -> Complex:
        """Scalar divided by this number, as ``Complex(other) / self``."""
        if is_scalar(other):
            return Complex(match_scalar(self._data, other)) / self
        return NotImplemented

    def sqrt(self) -> Complex:
        """Return the principal square root.

        A negative-zero imaginary part selects the lower branch, so
        ``Complex(-1.0, -0.0).sqrt() == Complex(0, -1)``.
        """
        gamma, delta = principal_sqrt(self._data[0], self._data[1])
        return Complex(gamma, delta)

    def __str__(self) -> str:
        """Render as ``re+imi``."""
        return format_complex(self)

    def __format__(self, format_spec: str) -> str:
        """Format both parts with ``format_spec``; a trailing ``i`` or ``j`` picks the unit."""
        unit = DEFAULT_UNIT
        if format_spec.endswith(("i", "j")):
            format_spec, unit = format_spec[:-1], format_spec[-1]
        return format_complex(self, use_j=unit == "j", spec=format_spec)

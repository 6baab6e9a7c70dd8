"""Common machinery for the hypercomplex value types.

Every value keeps a single read-only ``_data`` array of real components as its
source of truth. Operations never mutate operands; each one builds a new value
around a freshly computed array.
"""

from __future__ import annotations

import logging
from typing import ClassVar, TypeVar

import numpy as np

from .errors import DivisionByZero
from .scalar import Scalar
from .scalar import as_components
from .scalar import euclidean_norm
from .scalar import freeze
from .scalar import is_scalar
from .scalar import match_scalar
from .scalar import principal_sqrt
from .scalar import require_floating
from .scalar import scale_components
from .scalar import shift_real
from .scalar import to_python

logger = logging.getLogger(__name__)

H = TypeVar("H", bound="Hypercomplex")


class Hypercomplex:
    """Real component vector with an algebra-specific product.

    Subclasses set ``_dimension`` and ``_conj_mask`` and implement ``_product``.
    Equality is component-wise; there is no ordering.
    """

    __slots__ = ["_data"]

    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    _dimension: ClassVar[int]
    _conj_mask: ClassVar[np.ndarray]

    def __init__(self, *components: Scalar) -> None:
        """Pack the components; the caller's values are copied."""
        if len(components) != self._dimension:
            error_message = (
                f"{type(self).__name__} takes {self._dimension} components; got {len(components)}."
            )
            raise ValueError(error_message)
        self._data = as_components(*components)

    @classmethod
    def _wrap(cls: type[H], data: np.ndarray) -> H:
        """Wrap a freshly computed component array. No validation, no copy."""
        obj = cls.__new__(cls)
        obj._data = freeze(data)
        return obj

    @classmethod
    def from_components(cls: type[H], components: list[Scalar] | np.ndarray) -> H:
        """Create a value from a sequence of components."""
        return cls(*components)

    @classmethod
    def zero(cls: type[H]) -> H:
        """Additive identity."""
        return cls._wrap(np.zeros(cls._dimension, dtype=np.int64))

    @classmethod
    def one(cls: type[H]) -> H:
        """Multiplicative identity."""
        return cls.basis(0)

    @classmethod
    def basis(cls: type[H], index: int) -> H:
        """Unit basis element ``e_index`` (``e_0`` is the real unit)."""
        if not 0 <= index < cls._dimension:
            error_message = f"Basis index must be in [0, {cls._dimension}); got {index}."
            raise IndexError(error_message)
        data = np.zeros(cls._dimension, dtype=np.int64)
        data[index] = 1
        return cls._wrap(data)

    @property
    def re(self) -> Scalar:
        """Real component."""
        return to_python(self._data[0])

    @property
    def components(self) -> tuple[Scalar, ...]:
        """All components, real part first."""
        return tuple(self._data.tolist())

    @property
    def dtype(self) -> np.dtype:
        """Scalar type the components promote to."""
        return self._data.dtype

    def to_array(self) -> np.ndarray:
        """Return the components as a new, writable array."""
        return self._data.copy()

    def copy(self: H) -> H:
        """Return an independent copy."""
        return self._wrap(self._data.copy())

    def __getitem__(self, index: int) -> Scalar:
        """Get a single component."""
        return to_python(self._data[index])

    def __eq__(self, other: object) -> bool:
        """Component-wise equality against a value of the same type."""
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        """Hash consistent with component-wise equality."""
        return hash((type(self).__name__, *self.components))

    def __repr__(self) -> str:
        """Representation of the value."""
        args = ", ".join(repr(component) for component in self.components)
        return f"{type(self).__name__}({args})"

    def conjugate(self: H) -> H:
        """Negate every imaginary component."""
        return self._wrap(self._data * self._conj_mask)

    def norm(self) -> float:
        """Euclidean norm over all components."""
        return euclidean_norm(self._data)

    def __abs__(self) -> float:
        """Return the norm."""
        return self.norm()

    def __neg__(self: H) -> H:
        """Negate every component."""
        return self._wrap(-self._data)

    def __pos__(self: H) -> H:
        """Return an independent copy."""
        return self.copy()

    def __add__(self: H, other: H | Scalar) -> H:
        """Component-wise sum; a scalar only shifts the real part."""
        if isinstance(other, type(self)):
            return self._wrap(self._data + other._data)
        if is_scalar(other):
            return self._wrap(shift_real(self._data, other))
        return NotImplemented

    def __radd__(self: H, other: Scalar) -> H:
        """Scalar plus value."""
        if is_scalar(other):
            return self._wrap(shift_real(self._data, other))
        return NotImplemented

    def __sub__(self: H, other: H | Scalar) -> H:
        """Component-wise difference; a scalar only shifts the real part."""
        if isinstance(other, type(self)):
            return self._wrap(self._data - other._data)
        if is_scalar(other):
            return self._wrap(shift_real(self._data, other, subtract=True))
        return NotImplemented

    def __rsub__(self: H, other: Scalar) -> H:
        """Scalar minus value."""
        if is_scalar(other):
            return self._wrap(shift_real(-self._data, other))
        return NotImplemented

    def _product(self: H, other: H) -> H:
        raise NotImplementedError

    def __mul__(self: H, other: H | Scalar) -> H:
        """Algebra product (order matters), or scaling by a real scalar."""
        if isinstance(other, type(self)):
            return self._product(other)
        if is_scalar(other):
            return self._wrap(self._data * match_scalar(self._data, other))
        return NotImplemented

    def __rmul__(self: H, other: Scalar) -> H:
        """Scaling by a real scalar from the left."""
        if is_scalar(other):
            return self._wrap(match_scalar(self._data, other) * self._data)
        return NotImplemented

    def _inverse(self: H) -> H:
        """Conjugate over squared norm, without the scalar type check."""
        if not np.any(self._data):
            error_message = f"Attempting to invert zero {type(self).__name__}: {self!r}"
            logger.error(error_message)
            raise DivisionByZero(error_message)
        # conj / |x|^2 == (conj / m) / (m * |x / m|^2) for the largest component m
        scale, unit = scale_components(self._data)
        return self._wrap(unit * self._conj_mask / (scale * np.dot(unit, unit)))

    def reciprocal(self: H) -> H:
        """Multiplicative inverse ``conjugate() / norm()**2``.

        Raises:
            TypeConstraintError: The scalar type is not floating point.
            DivisionByZero: The value is zero.
        """
        require_floating(self._data)
        return self._inverse()

    def _divide_scalar(self: H, other: Scalar) -> H:
        if other == 0:
            error_message = f"Dividing {type(self).__name__} by zero scalar: {self!r}"
            logger.error(error_message)
            raise DivisionByZero(error_message)
        return self._wrap(self._data / match_scalar(self._data, other))

    def __truediv__(self: H, other: H | Scalar) -> H:
        """Right division ``self * other.reciprocal()``, or component-wise scalar division."""
        if isinstance(other, type(self)):
            require_floating(self._data, other._data)
            return self._product(other._inverse())
        if is_scalar(other):
            return self._divide_scalar(other)
        return NotImplemented

    def __rtruediv__(self: H, other: Scalar) -> H:
        """Scalar divided by value: ``other * self.reciprocal()``."""
        if is_scalar(other):
            other = match_scalar(self._data, other)
            require_floating(self._data, other)
            return self._inverse() * other
        return NotImplemented

    def sqrt(self: H) -> H:
        """Principal square root.

        Writing the value as ``a + r*u`` with ``u`` a unit imaginary direction,
        the root is ``gamma + delta*u`` where ``gamma + delta*i`` is the principal
        complex root of ``a + r*i``. A negative real value takes ``u = e_1``.
        """
        vector = self._data[1:].astype(np.float64)
        v_norm = euclidean_norm(vector)
        gamma, delta = principal_sqrt(self._data[0], v_norm)
        if v_norm == 0:
            direction = np.zeros(self._dimension - 1, dtype=np.float64)
            direction[0] = 1.0
        else:
            direction = vector / v_norm
        return self._wrap(np.concatenate(([gamma], delta * direction)))


def commutator(a: H, b: H) -> H:
    """Commutator [a, b] = a*b - b*a."""
    return a * b - b * a


def associator(a: H, b: H, c: H) -> H:
    """Associator (a, b, c) = a*(b*c) - (a*b)*c."""
    return a * (b * c) - (a * b) * c

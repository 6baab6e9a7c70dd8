"""Scalar helpers shared by the hypercomplex types.

The scalar type of a value is the numpy dtype its components promote to:
``int64`` for Python ints, ``float64`` for floats, ``object`` for
``fractions.Fraction`` and other exact types.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from numbers import Real

import numpy as np

from .errors import TypeConstraintError

logger = logging.getLogger(__name__)

# Type alias for scalar operands (float, int, np.float64, Fraction, etc.)
Scalar = float | int | Fraction | np.number


def is_scalar(value: object) -> bool:
    """Return True for real scalar operands (numpy reals register as ``numbers.Real``)."""
    return isinstance(value, Real)


def freeze(data: np.ndarray) -> np.ndarray:
    """Mark a component array read-only. Booleans are promoted to integers."""
    if data.dtype == np.bool_:
        data = data.astype(np.int64)
    data.setflags(write=False)
    return data


def as_components(*values: Scalar) -> np.ndarray:
    """Validate real components and pack them into a fresh read-only array."""
    for value in values:
        if not is_scalar(value):
            error_message = f"Components must be real scalars; got {value!r}."
            raise TypeError(error_message)
    return freeze(np.array(values))


def to_python(value: object) -> object:
    """Unwrap numpy scalars to the equivalent Python scalar."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def is_floating(dtype: np.dtype) -> bool:
    """Whether ``dtype`` has floating-point semantics."""
    return bool(np.issubdtype(dtype, np.floating))


def require_floating(*operands: np.ndarray | Scalar) -> np.dtype:
    """Return the promoted dtype of ``operands``; raise unless it is floating."""
    dtype = np.result_type(*(np.asarray(operand) for operand in operands))
    if not is_floating(dtype):
        error_message = f"Division requires a floating-point scalar type; got {dtype}."
        logger.error(error_message)
        raise TypeConstraintError(error_message)
    return dtype


def match_scalar(data: np.ndarray, value: Scalar) -> Scalar:
    """Cast ``value`` to the floating type of ``data``; other types pass through."""
    if is_floating(data.dtype):
        return data.dtype.type(value)
    return value


def shift_real(data: np.ndarray, value: Scalar, subtract: bool = False) -> np.ndarray:
    """Copy of ``data`` with ``value`` added to (or subtracted from) the real component.

    The sum is taken after type promotion, so unsigned scalars never wrap.
    """
    value = match_scalar(data, value)
    out = data.astype(np.result_type(data, np.asarray(value)), copy=True)
    out[0] = out[0] - value if subtract else out[0] + value
    return out


def scale_components(data: np.ndarray) -> tuple[Scalar, np.ndarray]:
    """Largest absolute component and ``data`` divided by it.

    Working on the scaled components keeps squares clear of underflow and
    overflow. Zero or non-finite scales leave ``data`` as is.
    """
    scale = np.max(np.abs(data))
    if scale == 0 or not np.isfinite(scale):
        return scale, data
    return scale, data / scale


def euclidean_norm(data: np.ndarray) -> float:
    """Euclidean norm of the components as a float."""
    scale, unit = scale_components(data.astype(np.float64))
    if scale == 0 or not np.isfinite(scale):
        return float(scale)
    return float(scale * np.linalg.norm(unit))


def principal_sqrt(re: Scalar, im: Scalar) -> tuple[float, float]:
    """Principal square root ``gamma + delta*i`` of ``re + im*i``.

    ``gamma = sqrt((re + |z|) / 2)`` and ``delta = sign(im) * sqrt((|z| - re) / 2)``,
    where ``sign(im)`` is -1 whenever the sign bit of ``im`` is set (negative zero
    included) and +1 otherwise.
    """
    re = float(re)
    im = float(im)
    common = np.hypot(re, im)
    gamma = np.sqrt(re / 2 + common / 2)
    sign = -1.0 if np.signbit(im) else 1.0
    delta = sign * np.sqrt(-re / 2 + common / 2)
    return float(gamma), float(delta)

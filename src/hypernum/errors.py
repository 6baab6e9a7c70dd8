"""Exceptions raised by the hypercomplex types."""


class HypercomplexError(Exception):
    """Base class for hypernum errors."""


class DivisionByZero(HypercomplexError, ZeroDivisionError):
    """Divisor (or value being inverted) has zero norm."""


class TypeConstraintError(HypercomplexError, TypeError):
    """Division requested on a scalar type without floating-point semantics."""

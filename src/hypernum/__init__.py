"""Generic hypercomplex numbers: complex numbers, quaternions and octonions."""

from .algebra import Hypercomplex
from .algebra import associator
from .algebra import commutator
from .complexes import Complex
from .errors import DivisionByZero
from .errors import HypercomplexError
from .errors import TypeConstraintError
from .formatting import format_complex
from .formatting import format_octonion
from .formatting import format_quaternion
from .logger import setup_logging
from .octonions import Octonion
from .quaternions import Quaternion

__all__ = [
    "Complex",
    "DivisionByZero",
    "Hypercomplex",
    "HypercomplexError",
    "Octonion",
    "Quaternion",
    "TypeConstraintError",
    "associator",
    "commutator",
    "format_complex",
    "format_octonion",
    "format_quaternion",
    "setup_logging",
]

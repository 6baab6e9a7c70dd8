"""Text rendering for hypercomplex values.

The imaginary unit symbol is a formatting argument rather than state on the
value, so two numbers that differ only in how they are printed still compare
and hash equal.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .complexes import Complex
    from .octonions import Octonion
    from .quaternions import Quaternion

DEFAULT_UNIT = "i"
ELECTRICAL_UNIT = "j"

QUATERNION_UNITS = ("i", "j", "k")
OCTONION_UNITS = tuple(f"e{index}" for index in range(1, 8))


def _render(components: Sequence[object], units: Sequence[str], spec: str) -> str:
    """Real part, then each imaginary part with an explicit sign and its unit."""
    parts = [format(components[0], spec)]
    for value, unit in zip(components[1:], units, strict=True):
        text = format(value, spec)
        # Negative values (negative zero included) already carry their sign.
        if not text.startswith(("-", "+")):
            parts.append("+")
        parts.append(f"{text}{unit}")
    return "".join(parts)


def format_complex(z: Complex, use_j: bool = False, spec: str = "") -> str:
    """Render ``z`` as ``re+imi`` (or ``re+imj`` with ``use_j``).

    Args:
        z: The complex number.
        use_j: Use the electrical-engineering unit ``j`` instead of ``i``.
        spec: Format spec applied to both parts, e.g. ``".3f"``.

    Returns:
        The rendered number, e.g. ``"3-4j"``.
    """
    unit = ELECTRICAL_UNIT if use_j else DEFAULT_UNIT
    return _render(z.components, (unit,), spec)


def format_quaternion(q: Quaternion, spec: str = "") -> str:
    """Render ``q`` as ``re+ai+bj+ck``."""
    return _render(q.components, QUATERNION_UNITS, spec)


def format_octonion(o: Octonion, spec: str = "") -> str:
    """Render ``o`` as ``x0+x1e1+...+x7e7``."""
    return _render(o.components, OCTONION_UNITS, spec)

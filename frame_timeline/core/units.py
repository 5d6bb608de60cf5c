"""Time-unit arithmetic.

A time unit is any signed integer: a plain Python ``int`` or a numpy signed
integer scalar (``np.int32``, ``np.int64`` ...).  Fixed-width numpy units wrap
on overflow following numpy's own rules.
"""

from __future__ import annotations

import numbers
from typing import TypeVar

import numpy as np

from .errors import UnitTypeError

T = TypeVar("T")


def is_signed_integer(value: object) -> bool:
    """Return ``True`` for ``int`` and numpy signed integers (not ``bool``)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, np.unsignedinteger):
        return False
    return isinstance(value, numbers.Integral)


def check_unit(value: T, name: str = "now") -> T:
    """Return *value* unchanged, or raise :class:`UnitTypeError`."""
    if not is_signed_integer(value):
        raise UnitTypeError(name, value)
    return value


def trunc_div(a: T, b: T) -> T:
    """Integer division truncating toward zero.

    Python's ``//`` floors, so ``-1 // 4 == -1``; here ``trunc_div(-1, 4) == 0``.
    The result keeps the unit type of the operands.  A zero divisor is not
    intercepted: ``int`` raises ``ZeroDivisionError``, numpy scalars warn and
    yield ``0``.
    """
    q = a // b
    if q < 0 and a % b != 0:
        q += 1
    return q


def to_float(value: numbers.Real) -> float:
    """Convert a unit value to a Python ``float``."""
    return float(value)

"""
Decimal precision constants and utilities.

Every scalar in PyLinalg is a ``decimal.Decimal``. This module owns the
arithmetic context the algorithms run under, the tolerance tiers used when
comparing results that are not exact, and the coercion of user input into
the decimal domain.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from decimal import (
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
    localcontext,
)
from typing import Any, Callable, TypeVar

import numpy as np

from pylinalg.core.exceptions import NumericalError, ValidationError


# Significant digits for every computation
DECIMAL_PRECISION: int = 28

DECIMAL_CONTEXT = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

ZERO = Decimal(0)
ONE = Decimal(1)

# Types accepted as scalar operands of ``*``
SCALAR_TYPES = (Decimal, int, float, np.integer, np.floating)


@dataclass(frozen=True)
class ToleranceTier:
    """Named tolerance for comparing decimal results."""
    atol: Decimal
    name: str
    description: str


# Row reduction over integers and terminating fractions is exact
EXACT = ToleranceTier(
    atol=ZERO,
    name='exact',
    description='Exact decimal equality',
)

# Square roots in normalization cannot be represented exactly
QR = ToleranceTier(
    atol=Decimal('1e-9'),
    name='qr',
    description='Orthogonalization results (Gram-Schmidt, QR)',
)

# Relative to the largest magnitude a row has held during elimination.
# Cancellation leaves residue near 10**-DECIMAL_PRECISION of that magnitude;
# eight digits are reserved for growth across elimination steps.
RANK = ToleranceTier(
    atol=Decimal(1).scaleb(-(DECIMAL_PRECISION - 8)),
    name='rank',
    description='Zero test for rank, pivot counting and dependent columns',
)


F = TypeVar('F', bound=Callable[..., Any])


def decimal_context(func: F) -> F:
    """
    Run ``func`` under DECIMAL_CONTEXT.

    The caller's own decimal context is restored on return, so settings
    made outside the library never change its results. A trapped decimal
    signal (overflow, invalid operation, division by zero) is re-raised as
    NumericalError.
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with localcontext(DECIMAL_CONTEXT):
            try:
                return func(*args, **kwargs)
            except DecimalException as e:
                raise NumericalError(
                    f"{func.__qualname__}: decimal arithmetic failed "
                    f"({type(e).__name__}) at {DECIMAL_PRECISION}-digit precision"
                ) from e
    return wrapper  # type: ignore[return-value]


def to_decimal(value: Any, name: str = 'value') -> Decimal:
    """
    Convert a scalar to Decimal.

    Floats are converted through their shortest repr, so ``0.1`` becomes
    ``Decimal('0.1')`` rather than its binary expansion.

    Args:
        value: Decimal, int, float, numeric string or NumPy scalar
        name: Parameter name for error messages

    Returns:
        Finite Decimal

    Raises:
        ValidationError: If value is None, bool, non-numeric or not finite
    """
    if value is None:
        raise ValidationError(f"{name}: expected a number, got None")
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected a number, got bool {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, np.integer)):
        result = Decimal(int(value))
    elif isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            raise ValidationError(f"{name}: non-finite value {float(value)!r}")
        result = Decimal(repr(float(value)))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValidationError(f"{name}: cannot convert {value!r} to Decimal") from e
    else:
        raise ValidationError(
            f"{name}: non-numeric type {type(value).__name__}, expected a number"
        )

    if not result.is_finite():
        raise ValidationError(f"{name}: non-finite value {result!r}")
    return result


def snap_integral(value: Decimal) -> Decimal:
    """
    Replace an integral value by its plain integer form.

    ``Decimal('1.000000')`` becomes ``Decimal('1')``. Only values whose
    remainder modulo 1 is exactly zero are touched; this is not rounding.
    """
    # Same test as value % 1 == 0, without DivisionImpossible on huge values
    if value == value.to_integral_value():
        return Decimal(int(value))
    return value


def is_close(a: Decimal, b: Decimal, atol: Decimal = QR.atol) -> bool:
    """Check ``|a - b| <= atol``."""
    return abs(a - b) <= atol

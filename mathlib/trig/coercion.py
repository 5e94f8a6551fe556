"""
Unit resolution for arithmetic between angles.

The right-hand operand always decides the unit of the result:

    DegreeAngle + RadianAngle -> RadianAngle
    RadianAngle + DegreeAngle -> DegreeAngle

The left-hand operand is converted into the right-hand operand's unit before
the operator runs. Same-unit operations skip the conversion entirely.
"""

from typing import TYPE_CHECKING, Callable

import numpy as np

from mathlib.logging_config import get_logger
from mathlib.trig.units import AngleValue, promote

if TYPE_CHECKING:
    from mathlib.trig.angles import Angle

logger = get_logger(__name__)

BinaryOperator = Callable[[AngleValue, AngleValue], AngleValue]


def resolve_units(lhs: "Angle", rhs: "Angle") -> tuple[type["Angle"], AngleValue, AngleValue]:
    """
    Bring two angles into a common unit.

    Returns:
        (result type, lhs value, rhs value), both values expressed in the
        unit of the right-hand operand.
    """
    result_type = type(rhs)
    if type(lhs) is not result_type:
        logger.debug(
            "Coercing %s into %s (right-hand operand wins)",
            type(lhs).__name__,
            result_type.__name__,
        )
    return result_type, lhs.in_unit(rhs.unit), rhs.value


def apply_operator(op: BinaryOperator, lhs: "Angle", rhs: "Angle") -> "Angle":
    """Apply a binary operator to two angles using right-hand unit precedence."""
    result_type, lhs_value, rhs_value = resolve_units(lhs, rhs)

    dtype = promote(lhs_value.dtype, rhs_value.dtype)
    if lhs_value.dtype != rhs_value.dtype:
        logger.debug(
            "Promoting %s and %s operands to %s", lhs_value.dtype, rhs_value.dtype, dtype
        )

    # NaN and Infinity propagate silently, including division by zero
    with np.errstate(all="ignore"):
        result = op(lhs_value, rhs_value)

    return result_type(result, dtype=dtype)

"""
Unit tags and floating-point precisions for angle values.

Angles keep their magnitude as a numpy scalar. Only two precisions are
supported, which keeps the behaviour of every operation predictable:

    single -> numpy.float32
    double -> numpy.float64

Usage:
    from mathlib.trig.units import AngleUnit

    def half_turn(unit: AngleUnit) -> float:
        return 180.0 if unit is AngleUnit.DEGREES else np.pi
"""

from enum import Enum
from typing import Union

import numpy as np

AngleValue = Union[np.float32, np.float64]  # Magnitude stored by an angle

SINGLE = np.dtype(np.float32)
DOUBLE = np.dtype(np.float64)

SUPPORTED_PRECISIONS: dict[np.dtype, str] = {
    SINGLE: "single",
    DOUBLE: "double",
}


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


def precision_name(dtype: np.dtype) -> str:
    """Human-readable name of a supported precision ("single" or "double")."""
    return SUPPORTED_PRECISIONS[np.dtype(dtype)]


def promote(lhs: np.dtype, rhs: np.dtype) -> np.dtype:
    """Precision of a result computed from two operands, per numpy promotion."""
    return np.result_type(lhs, rhs)

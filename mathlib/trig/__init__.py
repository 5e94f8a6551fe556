"""
Angle primitives for trigonometric code.

Two unit-tagged types are provided, DegreeAngle and RadianAngle. They convert
into each other, compare across units and support +, -, * and /.

Type coercions: the right-hand operand is always preferred over the left.

    DegreeAngle + RadianAngle = RadianAngle
    RadianAngle + DegreeAngle = DegreeAngle

Precision: plain Python numbers are double precision unless
MATHLIB_DEFAULT_PRECISION=single is set, while PI32 is single precision.
Angles of different precisions never compare equal, so

    RadianAngle(0.5 * PI32) == DegreeAngle(90.0)                 # False
    RadianAngle(0.5 * PI32) == DegreeAngle(90.0, dtype="single") # True

and mixing them in arithmetic promotes the result to double precision.
Pass dtype="single" (or a numpy.float32 value) to stay in single precision.
"""

from mathlib.trig.angles import Angle, DegreeAngle, RadianAngle, into_degrees, into_radians
from mathlib.trig.constants import PI32, PI64
from mathlib.trig.exceptions import (
    AngleException,
    InvalidAngleValueError,
    UnsupportedPrecisionError,
)
from mathlib.trig.units import AngleUnit

__all__ = [
    "Angle",
    "AngleException",
    "AngleUnit",
    "DegreeAngle",
    "InvalidAngleValueError",
    "PI32",
    "PI64",
    "RadianAngle",
    "UnsupportedPrecisionError",
    "into_degrees",
    "into_radians",
]

"""Native math primitives, starting with degree and radian angles."""

from mathlib import trig
from mathlib.trig import PI32, PI64, DegreeAngle, RadianAngle, into_degrees, into_radians

__version__ = "0.1.0"
__all__ = ["trig", "PI32", "PI64", "DegreeAngle", "RadianAngle", "into_degrees", "into_radians"]

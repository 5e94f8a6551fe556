"""
Degree and radian angle types.

Both types wrap a single floating-point magnitude (float32 or float64) and are
immutable. Neither type normalizes its value: -90 and 450 degrees are kept as
they are.

Usage:
    from mathlib.trig import PI32, DegreeAngle, RadianAngle

    right = RadianAngle(0.5 * PI32)
    assert right == DegreeAngle(90.0, dtype="single")
    straight = DegreeAngle(90.0, dtype="single") + right  # RadianAngle
"""

import operator
from abc import ABC, abstractmethod
from typing import ClassVar

import numpy as np
from numpy.typing import DTypeLike

from mathlib.config import get_settings
from mathlib.trig.coercion import BinaryOperator, apply_operator
from mathlib.trig.units import AngleUnit, AngleValue, precision_name
from mathlib.trig.validators import validate_angle_value


def _binary_operator(op: BinaryOperator):
    def method(self: "Angle", other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return apply_operator(op, self, other)

    method.__name__ = f"__{op.__name__}__"
    return method


class Angle(ABC):
    """
    Abstract base class for unit-tagged angles.

    Angles of different precisions never compare equal. Within one precision,
    equality canonicalizes through radians: when the units differ, the degree
    side is converted into radians and compared with the radian value.
    Arithmetic resolves mixed units in favour of the right-hand operand.
    """

    __slots__ = ("_value",)

    unit: ClassVar[AngleUnit]

    def __init__(self, value: float, dtype: DTypeLike | None = None) -> None:
        coerced = validate_angle_value(value, dtype, default=get_settings().default_precision)
        object.__setattr__(self, "_value", coerced)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), (self._value,)

    @property
    def value(self) -> AngleValue:
        return self._value

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    @property
    def precision(self) -> str:
        return precision_name(self._value.dtype)

    @abstractmethod
    def into_radians(self) -> AngleValue:
        """Magnitude of this angle in radians, in its own precision."""

    @abstractmethod
    def into_degrees(self) -> AngleValue:
        """Magnitude of this angle in degrees, in its own precision."""

    def in_unit(self, unit: AngleUnit) -> AngleValue:
        """Magnitude of this angle expressed in the given unit."""
        if unit is AngleUnit.DEGREES:
            return self.into_degrees()
        return self.into_radians()

    def to_degree_angle(self) -> "DegreeAngle":
        return DegreeAngle(self.into_degrees(), dtype=self.dtype)

    def to_radian_angle(self) -> "RadianAngle":
        return RadianAngle(self.into_radians(), dtype=self.dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        if self.dtype != other.dtype:
            return False
        if type(self) is type(other):
            return bool(self.value == other.value)
        return bool(self.into_radians() == other.into_radians())

    def __hash__(self) -> int:
        return hash(float(self.into_radians()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value}, dtype={self.dtype.name})"

    __add__ = _binary_operator(operator.add)
    __sub__ = _binary_operator(operator.sub)
    __mul__ = _binary_operator(operator.mul)
    __truediv__ = _binary_operator(operator.truediv)


class DegreeAngle(Angle):
    """An angle in degrees."""

    __slots__ = ()
    unit = AngleUnit.DEGREES

    def into_radians(self) -> AngleValue:
        with np.errstate(all="ignore"):
            return np.deg2rad(self.value)

    def into_degrees(self) -> AngleValue:
        return self.value


class RadianAngle(Angle):
    """An angle in radians."""

    __slots__ = ()
    unit = AngleUnit.RADIANS

    def into_radians(self) -> AngleValue:
        return self.value

    def into_degrees(self) -> AngleValue:
        with np.errstate(all="ignore"):
            return np.rad2deg(self.value)


def into_radians(angle: Angle) -> AngleValue:
    """Magnitude of an angle in radians."""
    return angle.into_radians()


def into_degrees(angle: Angle) -> AngleValue:
    """Magnitude of an angle in degrees."""
    return angle.into_degrees()

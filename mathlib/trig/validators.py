"""Input validation for angle construction."""

import math
import numbers

import numpy as np
from numpy.typing import DTypeLike

from mathlib.trig.exceptions import InvalidAngleValueError, UnsupportedPrecisionError
from mathlib.trig.units import DOUBLE, SUPPORTED_PRECISIONS, AngleValue


def validate_precision(dtype: DTypeLike) -> np.dtype:
    """Resolve a precision specifier to one of the supported numpy dtypes.

    Args:
        dtype: Anything numpy accepts as a dtype ("single", "float64", np.float32, ...)

    Returns:
        The resolved numpy dtype (float32 or float64)

    Raises:
        UnsupportedPrecisionError: If the dtype is unknown or not single/double precision
    """
    if dtype is None:
        raise UnsupportedPrecisionError("Precision must be given, got None")

    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise UnsupportedPrecisionError(f"Unknown precision {dtype!r}") from exc

    if resolved not in SUPPORTED_PRECISIONS:
        raise UnsupportedPrecisionError(
            f"Unsupported precision {resolved}. Must be one of: single (float32), double (float64)"
        )

    return resolved


def validate_angle_value(
    value: object,
    dtype: DTypeLike | None = None,
    default: DTypeLike = DOUBLE,
) -> AngleValue:
    """Check an angle magnitude and cast it to its precision.

    Args:
        value: Real number to wrap
        dtype: Explicit precision, overrides everything else
        default: Precision for plain Python numbers and numpy integers

    Returns:
        The value as a numpy float32 or float64 scalar

    Raises:
        InvalidAngleValueError: If the value is not a real number
        UnsupportedPrecisionError: If the resulting precision is not supported

    Note:
        NaN and +/-Infinity are valid magnitudes and pass through unchanged.
        Values too large for the target precision become +/-Infinity.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidAngleValueError(
            f"Angle value must be a real number, got {type(value).__name__}"
        )

    if dtype is not None:
        target = validate_precision(dtype)
    elif isinstance(value, np.floating):
        target = validate_precision(value.dtype)
    else:
        target = validate_precision(default)

    if not isinstance(value, np.floating):
        try:
            value = float(value)
        except OverflowError:
            # Integers and fractions beyond the double range
            value = math.inf if value > 0 else -math.inf

    with np.errstate(over="ignore"):
        return target.type(value)

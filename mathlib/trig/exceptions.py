class AngleException(Exception):
    """
    Base exception for all angle-related errors.
    """


class InvalidAngleValueError(AngleException, TypeError):
    """
    Raised when an angle is constructed from something that is not a real number.
    """


class UnsupportedPrecisionError(AngleException, ValueError):
    """
    Raised when a precision other than single or double is requested.
    """

import math
import numbers

from stepwise.core.errors import ConfigurationError


def require_positive_int(name: str, value) -> int:
    """
    Checks that a parameter is a strictly positive integer.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The value converted to a plain int.

    Raises:
        ConfigurationError: If the value is not an integer or is not positive.
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"'{name}' should be an integer, but got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"'{name}' should be positive, but got {value}")
    return int(value)


def require_non_negative_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"'{name}' should be an integer, but got {value!r}")
    if value < 0:
        raise ConfigurationError(f"'{name}' should be non-negative, but got {value}")
    return int(value)


def require_real(name: str, value) -> float:
    """
    Checks that a parameter is a finite real number.

    Raises:
        ConfigurationError: If the value is not a real number, or is NaN or infinite.
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"'{name}' should be a real number, but got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"'{name}' should be finite, but got {value}")
    return value


def require_positive_real(name: str, value) -> float:
    value = require_real(name, value)
    if value <= 0:
        raise ConfigurationError(f"'{name}' should be positive, but got {value}")
    return value

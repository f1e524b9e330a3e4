import numpy as np

from homesim.core.errors import InvalidArgumentError


def require_finite(value: float, what: str) -> float:
    """Return ``value`` as a float or raise if it is NaN or infinite."""
    try:
        finite = bool(np.isfinite(value))
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{what} must be a finite number, got {value!r}.") from None
    if not finite:
        raise InvalidArgumentError(f"{what} must be a finite number, got {value}.")
    return float(value)


def require_non_negative(value: float, what: str) -> float:
    """Return ``value`` as a float or raise if it is negative, NaN or infinite."""
    value = require_finite(value, what)
    if value < 0:
        raise InvalidArgumentError(f"{what} must be non-negative, got {value}.")
    return value


def require_fraction(value: float, what: str) -> float:
    """Return ``value`` as a float or raise if it is outside [0, 1]."""
    value = require_finite(value, what)
    if not (0.0 <= value <= 1.0):
        raise InvalidArgumentError(f"{what} must be between 0 and 1, got {value}.")
    return value

"""
Scalar math helpers for numkit.

Tolerance comparisons (to_val, to_zero, equal, is_zero) and small
arithmetic wrappers (lerp, radians, degrees, sgn, clamp, sinc). All
functions are generic over number-like types: anything that supports
subtraction, multiplication and ordering works, including int, float,
Fraction and Decimal. Float constants (PI, a float lerp factor) are
converted to the argument's type first, so Decimal and Fraction inputs
stay in their own arithmetic.
"""

import math
from typing import Any, Optional, Union

from ..config.models import EPSILON, SINC_THRESHOLD
from .validators import validate_bound, validate_ordered_range

Number = Union[int, float]

PI = 3.14159265358979323
INV_PI = 0.318309886183790672


def _resolve_bound(bound: Optional[Any]) -> Any:
    if bound is None:
        from ..config import get_config
        return get_config().epsilon
    return validate_bound(bound)


def _as_type_of(value: Any, ref: Any) -> Any:
    # int and float already mix with float constants
    if isinstance(ref, (int, float)) or not isinstance(value, float):
        return value
    return type(ref)(value)


# =============================================================================
# Tolerance Comparisons
# =============================================================================

def to_val(orig: Number, val: Number, bound: Optional[Number] = None) -> Number:
    """
    Snap orig to val when the two are within bound.

    The window is open: a difference of exactly bound is not snapped.

    Args:
        orig: The value to test
        val: The value to snap to
        bound: Half-width of the window (default: configured epsilon, 1e-6)

    Returns:
        val if |orig - val| < bound, otherwise orig unchanged

    Raises:
        ValidationError: If bound is negative

    Example:
        >>> to_val(0.9999999, 1.0)
        1.0
        >>> to_val(0.9, 1.0)
        0.9
        >>> to_val(1.5, 1.0, bound=0.5)
        1.5
    """
    bound = _resolve_bound(bound)
    delta = orig - val
    if -bound < delta < bound:
        return val
    return orig


def to_zero(orig: Number, bound: Optional[Number] = None) -> Number:
    """Snap orig to zero when |orig| < bound."""
    return to_val(orig, type(orig)(0), bound)


def equal(lhs: Number, rhs: Number, bound: Optional[Number] = None) -> bool:
    """
    Tolerance equality: True iff |rhs - lhs| < bound.

    This is symmetric but not transitive; equal(a, b) and equal(b, c)
    do not imply equal(a, c).

    Example:
        >>> equal(1.0, 1.0 + 1e-7)
        True
        >>> equal(1.0, 1.1)
        False
        >>> equal(1.0, 1.1, bound=0.2)
        True
    """
    return to_zero(rhs - lhs, bound) == 0


def is_zero(orig: Number, bound: Optional[Number] = None) -> bool:
    """True iff |orig| < bound."""
    return equal(orig, 0, bound)


# =============================================================================
# Interpolation and Angles
# =============================================================================

def lerp(v0: Number, v1: Number, t: Number) -> Number:
    """
    Linear interpolation between two values.

    Computed as (1 - t) * v0 + t * v1 so that both endpoints are
    reproduced exactly. t is not clamped; values outside [0, 1]
    extrapolate.

    Args:
        v0: Start value
        v1: End value
        t: Interpolation factor (0 = v0, 1 = v1), may be of another type.
            A float t is converted to the type of v0 when v0 is not an
            int or float (e.g. Decimal).

    Returns:
        Interpolated value

    Example:
        >>> lerp(0.0, 10.0, 0.5)
        5.0
        >>> lerp(0.0, 10.0, 1.5)
        15.0
    """
    t = _as_type_of(t, v0)
    return (1 - t) * v0 + t * v1


def radians(degree: float) -> float:
    """Convert degrees to radians, keeping the input's number type."""
    return (_as_type_of(PI, degree) / 180) * degree


def degrees(radians: float) -> float:
    """Convert radians to degrees, keeping the input's number type."""
    return (180 / _as_type_of(PI, radians)) * radians


def sgn(val: Number) -> Number:
    """
    Sign of a value, typed as the input.

    Example:
        >>> sgn(5)
        1
        >>> sgn(-2.5)
        -1.0
        >>> sgn(0)
        0
    """
    return type(val)((0 < val) - (val < 0))


def clamp(value: Number, min_val: Any, max_val: Any) -> Number:
    """
    Constrain a value to a range.

    The bounds are converted to the type of value before comparing, so
    clamp(7, 0.0, 5.5) clamps against the int range [0, 5].

    Args:
        value: The value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        The clamped value

    Raises:
        ValidationError: If min_val > max_val after conversion. This is a
            programming error in the caller.

    Example:
        >>> clamp(1.5, 0.0, 1.0)
        1.0
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
        >>> clamp(0.5, 0.0, 1.0)
        0.5
    """
    cast = type(value)
    lo, hi = validate_ordered_range(cast(min_val), cast(max_val), "clamp")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def sinc(x: float, threshold: Optional[float] = None) -> float:
    """
    Normalized sinc: sin(pi * x) / (pi * x).

    The input is folded to |x|, and values below threshold return 1 to
    step over the removable singularity at zero.

    Args:
        x: Input value
        threshold: Cutoff below which 1 is returned
            (default: configured sinc_threshold, 1e-5)

    Example:
        >>> sinc(0.0)
        1.0
        >>> abs(sinc(1.0)) < 1e-15
        True
    """
    if threshold is None:
        from ..config import get_config
        threshold = get_config().sinc_threshold
    x = abs(x)
    if x < threshold:
        return _as_type_of(1.0, x)
    px = _as_type_of(PI, x) * x
    return _as_type_of(math.sin(px), x) / px

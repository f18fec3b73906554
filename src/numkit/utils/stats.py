"""
Sequence statistics for numkit.

All aggregates raise EmptySequenceError on empty input rather than
returning NaN. Any iterable is accepted; it is materialized once.

int and float data is summed with math.fsum and gives float results.
Other number types (Fraction, Decimal) are summed in their own
arithmetic and the results keep that type.
"""

import math
from typing import Any, Iterable, List, Optional, TypeVar

from .rng import SeededRNG, permute as _permute_default
from .validators import validate_not_empty

T = TypeVar('T')


def _total(values: List) -> Any:
    if all(isinstance(x, (int, float)) for x in values):
        return math.fsum(values)
    return sum(values)


def mean(data: Iterable[float]) -> float:
    """
    Arithmetic mean of a non-empty sequence.

    For int and float data the summation uses math.fsum, so the result
    does not depend on the order of the values.

    Example:
        >>> mean([1, 2, 3])
        2.0
    """
    values = validate_not_empty(list(data))
    return _total(values) / len(values)


def variance(data: Iterable[float]) -> float:
    """
    Population variance of a non-empty sequence.

    Divides by N, not N - 1. Uses two passes (mean first, then squared
    deviations) to avoid the cancellation of the sum-of-squares formula.

    Args:
        data: Numeric values

    Returns:
        Mean of squared deviations from the mean

    Raises:
        EmptySequenceError: If data is empty

    Example:
        >>> variance([1, 2, 3, 4, 5])
        2.0
        >>> variance([7])
        0.0
    """
    values = validate_not_empty(list(data))
    m = mean(values)
    return _total([(x - m) ** 2 for x in values]) / len(values)


def std_dev(data: Iterable[float]) -> float:
    """Population standard deviation."""
    var = variance(data)
    # Decimal carries its own correctly rounded sqrt
    sqrt = getattr(var, "sqrt", None)
    if sqrt is not None:
        return sqrt()
    return math.sqrt(var)


def coefficient_of_variation(data: Iterable[float]) -> float:
    """
    Standard deviation divided by mean.

    Returns 0.0 when the mean is zero.

    Example:
        >>> coefficient_of_variation([10, 10, 10])
        0.0
    """
    values = validate_not_empty(list(data))
    m = mean(values)
    if m == 0:
        return 0.0
    return std_dev(values) / m


def minimum(data: Iterable[T]) -> T:
    """Smallest element; the first one wins on ties."""
    return min(validate_not_empty(list(data)))


def maximum(data: Iterable[T]) -> T:
    """Largest element; the first one wins on ties."""
    return max(validate_not_empty(list(data)))


def permute(data: Iterable[T], rng: Optional[SeededRNG] = None) -> List[T]:
    """
    Return a uniformly random reordering of data as a new list.

    The input is left untouched. Works for any length, including 0.

    Args:
        data: Elements to reorder
        rng: Generator to draw from (default: the process-wide generator)

    Returns:
        New list holding the same elements in random order
    """
    if rng is None:
        return _permute_default(data)
    return rng.permute(data)

"""
Precondition checks for numkit.

Every helper returns the validated value so checks can be used inline,
and raises ValidationError (a ValueError) with the offending field name.
"""

from typing import Any, List, Set


class ValidationError(ValueError):
    """Raised when a caller violates a numeric precondition."""

    def __init__(self, message: str, field: str = ""):
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


class EmptySequenceError(ValidationError):
    """Raised when an aggregate is requested over an empty sequence."""


def validate_bound(bound: Any, field: str = "bound") -> Any:
    """
    Validate that a tolerance bound is non-negative.

    Args:
        bound: Half-width of the tolerance window
        field: Field name for error messages

    Returns:
        The validated bound

    Raises:
        ValidationError: If bound is negative
    """
    if bound < 0:
        raise ValidationError(f"must be non-negative, got {bound}", field)
    return bound


def validate_ordered_range(min_val: Any, max_val: Any,
                           field: str = "range") -> tuple:
    """
    Validate that min_val <= max_val.

    Args:
        min_val: Lower end of the range
        max_val: Upper end of the range
        field: Field name for error messages

    Returns:
        Tuple of (min_val, max_val)

    Raises:
        ValidationError: If the range is inverted
    """
    if not min_val <= max_val:
        raise ValidationError(
            f"min must not exceed max, got [{min_val}, {max_val}]",
            field
        )
    return min_val, max_val


def validate_not_empty(values: List, field: str = "data") -> List:
    """
    Validate that a materialized sequence has at least one element.

    Raises:
        EmptySequenceError: If the sequence is empty
    """
    if len(values) == 0:
        raise EmptySequenceError("cannot be empty", field)
    return values


def validate_in_set(value: Any, valid_values: Set[Any],
                    field: str = "value") -> Any:
    """Validate that a value is one of a fixed set."""
    if value not in valid_values:
        valid_str = ', '.join(str(v) for v in sorted(valid_values, key=str))
        raise ValidationError(
            f"must be one of [{valid_str}], got '{value}'",
            field
        )
    return value

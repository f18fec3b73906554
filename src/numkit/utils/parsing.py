"""
String to number conversion for numkit.

Two flavours are provided:

- cast_to: lenient, stream-style extraction. Leading whitespace is
  skipped, the longest valid prefix is converted and anything after it
  is ignored. Input with no valid prefix yields the type's zero value
  (0, 0.0 or False) and a warning on the shared logger; nothing is
  raised.
- parse_number: strict. The whole string, apart from surrounding
  whitespace, must be a literal of the requested type. The outcome is
  reported as a ParseResult instead of an exception.

Supported target types are int, float and bool. Booleans are read the
way a character stream reads them: "0" or "1".
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Pattern, Type

from ..output.debug_logger import get_logger


# ASCII digits only; \d would also accept other Unicode digits.
_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
)
_BOOL_RE = re.compile(r'[01]')

_PATTERNS: Dict[type, Pattern] = {
    int: _INT_RE,
    float: _FLOAT_RE,
    bool: _BOOL_RE,
}


class ParseErrorKind(Enum):
    """Why a strict parse failed."""
    EMPTY = "empty"
    MALFORMED = "malformed"
    TRAILING_CHARACTERS = "trailing_characters"
    UNSUPPORTED_TYPE = "unsupported_type"


class ParseError(ValueError):
    """Raised by ParseResult.unwrap() for a failed parse."""

    def __init__(self, text: str, kind: ParseErrorKind, type_name: str):
        self.text = text
        self.kind = kind
        self.type_name = type_name
        super().__init__(f"cannot parse {text!r} as {type_name}: {kind.value}")


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parse_number.

    Attributes:
        text: The input string
        type_: Requested target type
        value: Parsed value, or None on failure
        error: Failure kind, or None on success
    """
    text: str
    type_: type
    value: Any = None
    error: Optional[ParseErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value or raise ParseError."""
        if self.error is not None:
            raise ParseError(self.text, self.error, self.type_.__name__)
        return self.value

    def value_or(self, default: Any) -> Any:
        """Return the value, or default on failure."""
        return self.value if self.error is None else default


def _convert(token: str, type_: type) -> Any:
    if type_ is bool:
        return token == "1"
    return type_(token)


def _pattern_for(type_: type) -> Pattern:
    try:
        return _PATTERNS[type_]
    except KeyError:
        raise TypeError(f"cannot parse numbers of type {type_.__name__}") from None


def cast_to(text: str, type_: Type = int) -> Any:
    """
    Leniently extract a number of the given type from text.

    Args:
        text: Input string
        type_: Target type (int, float or bool)

    Returns:
        Value of the longest valid prefix, or the type's zero value
        when there is none

    Raises:
        TypeError: If type_ is not supported

    Example:
        >>> cast_to("42")
        42
        >>> cast_to("  3.5kg", float)
        3.5
        >>> cast_to("12.9")
        12
        >>> cast_to("abc")
        0
    """
    match = _pattern_for(type_).match(text.lstrip())
    if match is None:
        fallback = type_()
        get_logger().log_parse_fallback(text, type_.__name__, fallback)
        return fallback
    return _convert(match.group(0), type_)


def parse_number(text: str, type_: Type = int) -> ParseResult:
    """
    Strictly parse text as a number of the given type.

    Example:
        >>> parse_number("42").value
        42
        >>> parse_number("42abc").error
        <ParseErrorKind.TRAILING_CHARACTERS: 'trailing_characters'>
    """
    pattern = _PATTERNS.get(type_)
    if pattern is None:
        return ParseResult(text, type_, error=ParseErrorKind.UNSUPPORTED_TYPE)

    stripped = text.strip()
    if not stripped:
        return ParseResult(text, type_, error=ParseErrorKind.EMPTY)

    match = pattern.match(stripped)
    if match is None:
        return ParseResult(text, type_, error=ParseErrorKind.MALFORMED)
    if match.end() != len(stripped):
        return ParseResult(text, type_, error=ParseErrorKind.TRAILING_CHARACTERS)

    return ParseResult(text, type_, value=_convert(match.group(0), type_))

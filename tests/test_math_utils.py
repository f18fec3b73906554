#!/usr/bin/env python3
"""
Tolerance and scalar helper tests for numkit.

Tests:
- to_val / to_zero / equal / is_zero window semantics
- lerp, radians, degrees, sgn, clamp, sinc

Run from the repository root:
    python tests/test_math_utils.py
"""

import sys
import os
import math
from decimal import Decimal
from fractions import Fraction

# Add src to path for imports
src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'src')
sys.path.insert(0, src_path)

import pytest

from numkit.utils import (
    PI, to_val, to_zero, equal, is_zero,
    lerp, radians, degrees, sgn, clamp, sinc,
    ValidationError,
)
from numkit.config import reset_config


def setup_module(module):
    reset_config()


def test_to_val():
    """Snapping inside an open window."""
    print("\n=== Testing to_val ===")

    assert to_val(0.9999999, 1.0) == 1.0, "close value not snapped"
    assert to_val(0.9, 1.0) == 0.9, "far value snapped"
    print("  ✓ default bound")

    # Exactly on the edge is outside the window on both sides
    assert to_val(1.5, 1.0, 0.5) == 1.5, "upper edge snapped"
    assert to_val(0.5, 1.0, 0.5) == 0.5, "lower edge snapped"
    assert to_val(1.4, 1.0, 0.5) == 1.0, "inside window not snapped"
    print("  ✓ open interval edges")

    assert to_val(7, 5, 3) == 5, "int snap failed"
    assert to_val(8, 5, 3) == 8, "int edge snapped"
    print("  ✓ integer values")


def test_to_zero():
    print("\n=== Testing to_zero ===")

    result = to_zero(1e-7)
    assert result == 0.0 and isinstance(result, float), f"to_zero small: {result!r}"
    assert to_zero(1e-5) == 1e-5, "to_zero snapped a large value"
    assert to_zero(-1e-7) == 0.0, "negative side not snapped"
    assert to_zero(0.3, bound=0.5) == 0.0, "custom bound ignored"
    print("  ✓ to_zero")


def test_equal():
    print("\n=== Testing equal ===")

    assert equal(0.1 + 0.2, 0.3), "float noise not tolerated"
    assert equal(1.0, 1.0 + 5e-7)
    assert not equal(1.0, 1.0 + 2e-6)
    assert equal(1.0, 1.1, bound=0.2)
    print("  ✓ tolerance window")

    assert equal(2.0, 3.0, 1.0) is False, "edge of window counted as equal"
    assert equal(3, 4, 2)
    assert equal(Fraction(1, 3), Fraction(1, 3) + Fraction(1, 10**9))
    print("  ✓ edge and generic types")

    assert equal(0.25, 0.75, 0.6) == equal(0.75, 0.25, 0.6)
    print("  ✓ symmetry")

    # a ~ b and b ~ c does not make a ~ c
    a, b, c = 0.0, 0.6e-6, 1.2e-6
    assert equal(a, b) and equal(b, c), "neighbours should be equal"
    assert not equal(a, c), "equal must not be transitive"
    print("  ✓ non-transitivity")


def test_is_zero():
    print("\n=== Testing is_zero ===")

    assert is_zero(0.0)
    assert is_zero(-9e-7)
    assert not is_zero(1e-6), "edge counted as zero"
    assert is_zero(0.5, bound=1.0), "explicit bound not honoured"
    assert not is_zero(0.5, bound=0.25)
    print("  ✓ is_zero")


def test_negative_bound_rejected():
    print("\n=== Testing negative bound ===")

    with pytest.raises(ValidationError):
        to_val(1.0, 1.0, -1e-3)
    with pytest.raises(ValidationError):
        equal(1.0, 1.0, -1.0)
    with pytest.raises(ValueError):
        is_zero(0.0, -0.1)
    print("  ✓ ValidationError")


def test_lerp():
    print("\n=== Testing lerp ===")

    assert lerp(0.0, 10.0, 0.5) == 5.0, "lerp failed"
    assert lerp(0.0, 10.0, 0.0) == 0.0, "lerp start failed"
    assert lerp(0.0, 10.0, 1.0) == 10.0, "lerp end failed"
    assert lerp(3.7, -1.3, 0) == 3.7
    assert lerp(3.7, -1.3, 1) == -1.3
    print("  ✓ endpoints")

    assert lerp(0.0, 10.0, 1.5) == 15.0, "no extrapolation past 1"
    assert lerp(0.0, 10.0, -0.5) == -5.0, "no extrapolation below 0"
    print("  ✓ extrapolation")

    assert lerp(0, 10, 0.25) == 2.5, "mixed int/float"
    assert lerp(Fraction(0), Fraction(1), Fraction(1, 3)) == Fraction(1, 3)
    print("  ✓ mixed types")


def test_angles():
    print("\n=== Testing radians/degrees ===")

    assert equal(radians(180.0), math.pi)
    assert equal(radians(90.0), math.pi / 2)
    assert equal(degrees(PI), 180.0)
    assert radians(0.0) == 0.0
    print("  ✓ conversions")

    for x in (-720.0, -33.3, 0.0, 1.0, 45.0, 1234.5):
        assert equal(degrees(radians(x)), x), f"round trip failed for {x}"
        assert equal(radians(degrees(x)), x), f"round trip failed for {x}"
    print("  ✓ round trips")


def test_sgn():
    print("\n=== Testing sgn ===")

    assert sgn(5) == 1
    assert sgn(-3) == -1
    assert sgn(0) == 0
    print("  ✓ int")

    result = sgn(-2.5)
    assert result == -1.0 and isinstance(result, float), f"sgn float: {result!r}"
    assert isinstance(sgn(7), int)
    assert sgn(Fraction(-1, 2)) == Fraction(-1)
    print("  ✓ result typed as input")


def test_clamp():
    print("\n=== Testing clamp ===")

    assert clamp(1.5, 0.0, 1.0) == 1.0, "clamp high failed"
    assert clamp(-0.5, 0.0, 1.0) == 0.0, "clamp low failed"
    assert clamp(0.5, 0.0, 1.0) == 0.5, "clamp middle failed"
    assert clamp(2, 2, 2) == 2, "degenerate range"
    print("  ✓ basic")

    result = clamp(7, 0.0, 5.5)
    assert result == 5 and isinstance(result, int), f"bounds not cast: {result!r}"
    assert clamp(0.25, 0, 1) == 0.25
    print("  ✓ bounds converted to value type")

    with pytest.raises(ValidationError):
        clamp(0.5, 1.0, 0.0)
    # 0.9 and 0.1 both truncate to 0 for an int value, so the range is valid
    assert clamp(3, 0.9, 0.1) == 0
    print("  ✓ inverted range rejected")


def test_sinc():
    print("\n=== Testing sinc ===")

    assert sinc(0.0) == 1.0
    assert sinc(0) == 1.0
    assert sinc(5e-6) == 1.0, "below threshold"
    assert sinc(-5e-6) == 1.0
    print("  ✓ singularity")

    assert abs(sinc(1.0)) < 1e-12
    assert abs(sinc(2.0)) < 1e-12
    assert equal(sinc(0.5), 2.0 / math.pi)
    print("  ✓ known values")

    for x in (0.1, 0.3, 1.7, 12.25):
        assert sinc(x) == sinc(-x), f"sinc not even at {x}"
    print("  ✓ evenness")


def test_decimal_and_fraction_inputs():
    """Decimal and Fraction arguments stay in their own arithmetic."""
    print("\n=== Testing Decimal / Fraction inputs ===")

    assert equal(Decimal("1.0000001"), Decimal("1"))
    assert not equal(Decimal("1.1"), Decimal("1"))
    assert to_zero(Decimal("1e-7")) == 0
    print("  ✓ tolerance comparisons")

    half = lerp(Decimal("0"), Decimal("10"), 0.5)
    assert half == Decimal("5") and isinstance(half, Decimal), f"lerp: {half!r}"
    assert lerp(Decimal("2"), Decimal("4"), 1) == Decimal("4")
    print("  ✓ lerp with a float factor")

    rad = radians(Decimal("180"))
    assert isinstance(rad, Decimal), f"radians: {rad!r}"
    assert abs(rad - Decimal(math.pi)) < Decimal("1e-20")
    deg = degrees(Decimal(math.pi))
    assert isinstance(deg, Decimal) and abs(deg - 180) < Decimal("1e-20")
    assert radians(Fraction(180)) == Fraction(PI)
    print("  ✓ radians / degrees")

    value = sinc(Decimal("0.5"))
    assert isinstance(value, Decimal), f"sinc: {value!r}"
    assert abs(float(value) - 2.0 / math.pi) < 1e-12
    assert sinc(Decimal("0")) == 1 and isinstance(sinc(Decimal("0")), Decimal)
    assert abs(sinc(Fraction(1, 2)) - Fraction(2.0 / math.pi)) < 1e-12
    print("  ✓ sinc")

    assert sinc(0.05, threshold=0.1) == 1.0, "threshold override ignored"
    print("  ✓ custom threshold")


def main():
    """Run all math utils tests."""
    print("=" * 60)
    print("numkit - Math Utils Tests")
    print("=" * 60)

    try:
        setup_module(None)
        test_to_val()
        test_to_zero()
        test_equal()
        test_is_zero()
        test_negative_bound_rejected()
        test_lerp()
        test_angles()
        test_sgn()
        test_clamp()
        test_sinc()
        test_decimal_and_fraction_inputs()

        print("\n" + "=" * 60)
        print("ALL MATH UTILS TESTS PASSED!")
        print("=" * 60)
        return 0

    except AssertionError as e:
        print(f"\n✗ TEST FAILED: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

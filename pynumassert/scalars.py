"""
Tolerance-based equality of real and complex scalars.

NaN is treated as equal to NaN, which deviates from IEEE semantics but is
what a test comparing an expected NaN against a computed NaN needs.
"""

import math
from typing import Optional

from ._config import resolve_delta
from ._utils import fail, validate_delta, with_context


def doubles_are_equal(expected: float, actual: float, delta: float) -> bool:
    """
    Check whether two real numbers are equal within ``delta``.

    Parameters
    ----------
    expected : float
        Expected value
    actual : float
        Actual value
    delta : float
        Maximum allowed absolute difference

    Returns
    -------
    bool
        True if both are NaN, if they are exactly equal (equal infinities
        included), or if ``|expected - actual| <= delta``
    """
    expected = float(expected)
    actual = float(actual)
    if math.isnan(expected) or math.isnan(actual):
        return math.isnan(expected) and math.isnan(actual)
    if expected == actual:
        return True
    return abs(expected - actual) <= delta


def assert_double_equal(expected: float,
                        actual: float,
                        delta: Optional[float] = None,
                        message: Optional[str] = None):
    """
    Assert that two real numbers are equal within ``delta``.

    Raises
    ------
    AssertFailedError
        If the values differ by more than delta, or only one of them is NaN
    """
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    if not doubles_are_equal(expected, actual, delta):
        if math.isnan(float(expected)):
            text = f"Expected NaN, got <{actual}>."
        else:
            text = (f"Expected <{expected}>, got <{actual}> "
                    f"(allowed difference <{delta}>).")
        fail(with_context(text, message))


def complexes_are_equal(expected: complex, actual: complex, delta: float) -> bool:
    """Componentwise version of :func:`doubles_are_equal`."""
    expected = complex(expected)
    actual = complex(actual)
    return (doubles_are_equal(expected.real, actual.real, delta)
            and doubles_are_equal(expected.imag, actual.imag, delta))


def assert_complex_equal(expected: complex,
                         actual: complex,
                         delta: Optional[float] = None,
                         message: Optional[str] = None):
    """
    Assert that two complex numbers are equal within ``delta``.

    Real and imaginary parts are compared independently, each with the real
    number rule.
    """
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    expected = complex(expected)
    actual = complex(actual)

    if not doubles_are_equal(expected.real, actual.real, delta):
        fail(with_context(
            f"Wrong real part: expected <{expected.real}>, got <{actual.real}> "
            f"(allowed difference <{delta}>).", message))
    if not doubles_are_equal(expected.imag, actual.imag, delta):
        fail(with_context(
            f"Wrong imaginary part: expected <{expected.imag}>, got <{actual.imag}> "
            f"(allowed difference <{delta}>).", message))

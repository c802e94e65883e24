"""
Equality of homogeneous arrays.

Arrays are equal if both are None, or both are not None with the same
length and pointwise-equal elements. When both sides are multi-dimensional
numpy arrays, their shapes must also agree.
"""

from typing import Any, Callable, Optional

import numpy as np

from ._config import resolve_delta
from ._utils import as_sequence, both_none, fail, validate_delta
from .scalars import complexes_are_equal, doubles_are_equal


def _check_shapes(expected: Any, actual: Any):
    if isinstance(expected, np.ndarray) and isinstance(actual, np.ndarray):
        if expected.ndim > 1 and actual.ndim > 1 and expected.shape != actual.shape:
            fail(f"Arrays have not the same shape: expected {expected.shape}, "
                 f"got {actual.shape}.")


def _compare(expected: Any,
             actual: Any,
             items_are_equal: Callable[[Any, Any], bool],
             describe: Callable[[Any, Any], str]):
    if both_none(expected, actual, "array"):
        return

    _check_shapes(expected, actual)

    expected_items = as_sequence(expected)
    actual_items = as_sequence(actual)

    if len(expected_items) != len(actual_items):
        fail(f"Arrays have not the same length: expected {len(expected_items)}, "
             f"got {len(actual_items)}.")

    for i in range(len(expected_items)):
        if not items_are_equal(expected_items[i], actual_items[i]):
            fail(f"Wrong value at position {i}. "
                 f"{describe(expected_items[i], actual_items[i])}")


def assert_array_equal(expected: Any, actual: Any):
    """
    Assert that two arrays contain exactly equal items.

    Items can be of any type supporting ``==`` (booleans, integers,
    strings, ...).

    Raises
    ------
    AssertFailedError
        If only one array is None, lengths differ, or an item differs
    """
    _compare(
        expected, actual,
        lambda e, a: bool(e == a),
        lambda e, a: f"Expected: <{e}>. Actual: <{a}>.")


def assert_double_array_equal(expected: Any,
                              actual: Any,
                              delta: Optional[float] = None):
    """
    Assert that two arrays of real numbers are equal within ``delta``.

    Parameters
    ----------
    expected : array-like or None
        Expected values
    actual : array-like or None
        Actual values
    delta : float, optional
        Maximum allowed absolute difference per element (defaults to the
        configured matrix tolerance)
    """
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    _compare(
        expected, actual,
        lambda e, a: doubles_are_equal(e, a, delta),
        lambda e, a: f"Expected: <{e}>. Actual: <{a}>. Delta: <{delta}>.")


def assert_complex_array_equal(expected: Any,
                               actual: Any,
                               delta: Optional[float] = None):
    """Assert that two arrays of complex numbers are equal within ``delta``."""
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    _compare(
        expected, actual,
        lambda e, a: complexes_are_equal(e, a, delta),
        lambda e, a: f"Expected: <{complex(e)}>. Actual: <{complex(a)}>. Delta: <{delta}>.")

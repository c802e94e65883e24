"""
Internal utilities shared by the assertion modules.

Covers the None/None rule every comparer follows, argument validation for
tolerances, and the uniform failure messages used when two plain values
differ.
"""

import math
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from .data_structures import AssertFailedError


def fail(message: str):
    """Raise an assertion failure with ``message``."""
    raise AssertFailedError(message)


def both_none(expected: Any, actual: Any, kind: str) -> bool:
    """
    Apply the None rule to a pair of values.

    Parameters
    ----------
    expected, actual : object
        Values under comparison
    kind : str
        Human-readable name of the compared type, used in the message

    Returns
    -------
    bool
        True if both values are None, in which case they are equal and the
        caller has nothing left to check. False if both are not None.

    Raises
    ------
    AssertFailedError
        If exactly one of the values is None
    """
    if expected is None and actual is None:
        return True
    if expected is None or actual is None:
        fail(f"One {kind} is None, the other is not.")
    return False


def validate_delta(delta: float) -> float:
    """
    Validate an absolute tolerance.

    Raises
    ------
    ValueError
        If delta is negative, NaN or not a real number
    """
    if isinstance(delta, bool) or not isinstance(delta, (int, float, np.floating, np.integer)):
        raise ValueError(f"delta must be a real number, got {delta!r}")
    if math.isnan(delta) or delta < 0:
        raise ValueError(f"delta must be non-negative, got {delta}")
    return float(delta)


def with_context(message: str, context: Optional[str]) -> str:
    """Append caller context to a failure message."""
    if context:
        return f"{message} {context}"
    return message


def assert_equal(expected: Any, actual: Any, message: str):
    """Exact equality with a descriptive failure."""
    if not (expected == actual):
        fail(f"{message} Expected: <{expected}>. Actual: <{actual}>.")


def assert_true(condition: bool, message: str):
    if not condition:
        fail(message)


def as_sequence(values: Any) -> Sequence:
    """
    Convert array-like input to something indexable with a length.

    numpy arrays and pandas objects are flattened to 1-D numpy arrays;
    other sequences are returned as lists.
    """
    if isinstance(values, (pd.Series, pd.Index)):
        return values.to_numpy()
    if isinstance(values, np.ndarray):
        return values.reshape(-1)
    if isinstance(values, (list, tuple, range)):
        return values
    return list(values)

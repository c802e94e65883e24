"""
Default tolerances for pynumassert.

Assertion helpers accept an explicit ``delta``; when it is omitted they fall
back to the process-wide defaults kept here. Each family of checks has its
own default because the achievable accuracy differs: matrix arithmetic is
compared loosely, distribution functions tightly.
"""

import math
import threading
from dataclasses import dataclass, fields, replace
from typing import Optional


@dataclass(frozen=True)
class Tolerances:
    """Default absolute tolerances by family of checks."""
    matrix: float = 1e-2           # Matrix entries
    distribution: float = 1e-6     # Pdf, cdf and moments of distributions
    sampling: float = 1e-6         # Random sampling designs
    categorical: float = 1e-4      # Data matrices of categorical data sets
    decomposition: float = 1e-3    # SVD and spectral decompositions
    scaling: float = 1e-3          # Multidimensional scaling configurations

    def validate(self):
        """Validate tolerances."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise ValueError(
                    f"{f.name} must be finite and non-negative, got {value}")


_lock = threading.Lock()
_tolerances: Optional[Tolerances] = None


def get_tolerances() -> Tolerances:
    """Get the current default tolerances."""
    global _tolerances  # pylint: disable=global-statement
    with _lock:
        if _tolerances is None:
            _tolerances = Tolerances()
        return _tolerances


def set_tolerances(**kwargs) -> Tolerances:
    """
    Update default tolerances.

    Parameters
    ----------
    **kwargs : float
        New values keyed by family name (matrix, distribution, sampling,
        categorical, decomposition, scaling)

    Returns
    -------
    Tolerances
        The updated defaults

    Raises
    ------
    TypeError
        If a family name is unknown
    ValueError
        If a value is negative or not finite

    Examples
    --------
    >>> set_tolerances(matrix=1e-8)
    """
    global _tolerances  # pylint: disable=global-statement
    known = {f.name for f in fields(Tolerances)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise TypeError(f"Unknown tolerance(s): {', '.join(unknown)}")

    with _lock:
        current = _tolerances if _tolerances is not None else Tolerances()
        updated = replace(current, **kwargs)
        updated.validate()
        _tolerances = updated
        return _tolerances


def reset_tolerances() -> Tolerances:
    """Reset default tolerances."""
    global _tolerances  # pylint: disable=global-statement
    with _lock:
        _tolerances = Tolerances()
        return _tolerances


def resolve_delta(delta: Optional[float], family: str) -> float:
    """Return ``delta`` if given, otherwise the default for ``family``."""
    if delta is None:
        return getattr(get_tolerances(), family)
    return delta

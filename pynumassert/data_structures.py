"""
Data structures for pynumassert.

This module defines the failure type raised by every assertion helper and
the small result objects shared across modules: the normalized view of a
matrix, its structural patterns, and the outcome of a goodness-of-fit check.

License: MIT
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import numpy as np


class AssertFailedError(AssertionError):
    """
    Raised when an expected and an actual value do not match.

    Subclasses ``AssertionError`` so that pytest and unittest report it as
    a test failure rather than an error.
    """


@dataclass
class MatrixParts:
    """
    Normalized content of a matrix-like value.

    Attributes
    ----------
    entries : np.ndarray
        Entries in column-major order, shape (number_of_rows * number_of_columns,)
    number_of_rows : int
        Number of rows
    number_of_columns : int
        Number of columns
    name : str, optional
        Matrix name
    row_names : dict, optional
        Row position -> row name, or None if the matrix has no row names
    column_names : dict, optional
        Column position -> column name, or None if the matrix has no column names
    """
    entries: np.ndarray
    number_of_rows: int
    number_of_columns: int
    name: Optional[str] = None
    row_names: Optional[Dict[int, str]] = None
    column_names: Optional[Dict[int, str]] = None

    def __post_init__(self):
        self.entries = np.asarray(self.entries).reshape(-1)

    @property
    def is_complex(self) -> bool:
        """Whether the entries have a complex dtype."""
        return np.iscomplexobj(self.entries)

    @property
    def has_row_names(self) -> bool:
        return self.row_names is not None

    @property
    def has_column_names(self) -> bool:
        return self.column_names is not None

    def to_array(self) -> np.ndarray:
        """Entries reshaped as a 2-D array."""
        return self.entries.reshape(
            (self.number_of_rows, self.number_of_columns), order='F')

    def __repr__(self) -> str:
        return (f"MatrixParts({self.number_of_rows}x{self.number_of_columns}, "
                f"name={self.name!r}, dtype={self.entries.dtype})")


@dataclass
class MatrixPatterns:
    """
    Structural patterns of a matrix.

    Hessenberg, triangular and diagonal flags are only true for square
    matrices. Bandwidths are computed on non-zero entries.
    """
    is_vector: bool = False
    is_row_vector: bool = False
    is_column_vector: bool = False
    is_scalar: bool = False
    is_square: bool = False
    is_diagonal: bool = False
    is_hessenberg: bool = False
    is_upper_hessenberg: bool = False
    is_lower_hessenberg: bool = False
    is_triangular: bool = False
    is_upper_triangular: bool = False
    is_lower_triangular: bool = False
    is_symmetric: bool = False
    is_skew_symmetric: bool = False
    is_hermitian: bool = False
    is_skew_hermitian: bool = False
    upper_bandwidth: int = 0
    lower_bandwidth: int = 0

    def as_dict(self) -> Dict[str, object]:
        return dict(self.__dict__)


@dataclass
class GoodnessOfFitResult:
    """
    Result of a Pearson chi-squared goodness-of-fit check.

    Attributes
    ----------
    statistic : float
        Sum of (observed - expected)^2 / expected
    df : int
        Degrees of freedom used to derive the critical value
    critical_value : float
        Threshold the statistic must stay below
    p_value : float
        Upper tail probability of the statistic (NaN if df is not positive)
    passed : bool
        Whether statistic < critical_value
    n_cells : int
        Number of compared cells
    skipped_cells : int
        Cells with zero expected and zero observed frequency
    """
    statistic: float
    df: int
    critical_value: float
    p_value: float
    passed: bool
    n_cells: int
    skipped_cells: int = 0
    notes: list = field(default_factory=list)

    def summary(self) -> str:
        """Generate human-readable summary of the check."""
        lines = [
            "Pearson Goodness-of-Fit Check",
            "=" * 40,
            f"Test statistic (χ²): {self.statistic:.6f}",
            f"Critical value: {self.critical_value:.6f}",
            f"Degrees of freedom: {self.df}",
            f"P-value: {self.p_value:.4f}",
            f"Cells: {self.n_cells} ({self.skipped_cells} skipped)",
            "",
            f"Decision: {'PASS' if self.passed else 'FAIL'}",
        ]
        if self.notes:
            lines.append("\nNotes:")
            for note in self.notes:
                lines.append(f"  - {note}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()


__all__ = [
    'AssertFailedError',
    'MatrixParts',
    'MatrixPatterns',
    'GoodnessOfFitResult',
]

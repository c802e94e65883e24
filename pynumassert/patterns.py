"""
Structural pattern analysis for matrices.

Identifies the shape and sparsity structure of a matrix (vectors, square,
triangular, Hessenberg, diagonal) and its symmetry properties, so that
tests can verify the pattern flags a matrix implementation reports.

Bandwidths are measured on non-zero entries: the lower bandwidth is the
largest ``i - j`` and the upper bandwidth the largest ``j - i`` over all
positions ``(i, j)`` holding a non-zero value, or 0 if there is none.
"""

from dataclasses import fields
from typing import Any, Mapping, Union

import numpy as np

from .data_structures import MatrixPatterns
from ._utils import fail


def _as_array(matrix: Any) -> np.ndarray:
    if isinstance(matrix, np.ndarray) and matrix.ndim == 2:
        return matrix
    from .matrices import matrix_parts
    return matrix_parts(matrix).to_array()


def lower_bandwidth(matrix: Any) -> int:
    """Largest distance below the diagonal of a non-zero entry."""
    rows, columns = np.nonzero(_as_array(matrix))
    if rows.size == 0:
        return 0
    return int(max(0, np.max(rows - columns)))


def upper_bandwidth(matrix: Any) -> int:
    """Largest distance above the diagonal of a non-zero entry."""
    rows, columns = np.nonzero(_as_array(matrix))
    if rows.size == 0:
        return 0
    return int(max(0, np.max(columns - rows)))


def _off_diagonal_equal(a: np.ndarray, b: np.ndarray) -> bool:
    mask = ~np.eye(a.shape[0], dtype=bool)
    return bool(np.all(a[mask] == b[mask]))


def matrix_patterns(matrix: Any) -> MatrixPatterns:
    """
    Compute the structural patterns of a matrix.

    Parameters
    ----------
    matrix : matrix-like
        Anything accepted by :func:`pynumassert.matrices.matrix_parts`

    Returns
    -------
    MatrixPatterns
        Shape, band and symmetry flags together with the bandwidths

    Notes
    -----
    Hessenberg, triangular, diagonal and symmetry flags are False for
    non-square matrices. Symmetry flags compare entries exactly. A Hermitian
    matrix has a real diagonal and a skew-Hermitian one an imaginary diagonal.
    """
    a = _as_array(matrix)
    n_rows, n_cols = a.shape
    lower = lower_bandwidth(a)
    upper = upper_bandwidth(a)
    square = n_rows == n_cols

    patterns = MatrixPatterns(
        is_row_vector=n_rows == 1,
        is_column_vector=n_cols == 1,
        is_scalar=n_rows == 1 and n_cols == 1,
        is_square=square,
        upper_bandwidth=upper,
        lower_bandwidth=lower,
    )
    patterns.is_vector = patterns.is_row_vector or patterns.is_column_vector

    if not square:
        return patterns

    patterns.is_upper_hessenberg = lower <= 1
    patterns.is_lower_hessenberg = upper <= 1
    patterns.is_hessenberg = patterns.is_upper_hessenberg or patterns.is_lower_hessenberg
    patterns.is_upper_triangular = lower == 0
    patterns.is_lower_triangular = upper == 0
    patterns.is_triangular = patterns.is_upper_triangular or patterns.is_lower_triangular
    patterns.is_diagonal = lower == 0 and upper == 0

    transposed = a.T
    conjugated = np.conj(transposed)
    patterns.is_symmetric = _off_diagonal_equal(a, transposed)
    patterns.is_skew_symmetric = (_off_diagonal_equal(a, -transposed)
                                  and bool(np.all(np.diag(a) == 0)))
    diagonal = np.diag(a)
    patterns.is_hermitian = (_off_diagonal_equal(a, conjugated)
                             and bool(np.all(np.imag(diagonal) == 0)))
    patterns.is_skew_hermitian = (_off_diagonal_equal(a, -conjugated)
                                  and bool(np.all(np.real(diagonal) == 0)))

    return patterns


def assert_matrix_patterns(expected: Union[MatrixPatterns, Mapping[str, Any]],
                           actual: Any):
    """
    Assert that a matrix has the expected structural patterns.

    Parameters
    ----------
    expected : MatrixPatterns or mapping
        Expected patterns. A mapping checks only the flags it names, e.g.
        ``{"is_symmetric": True, "lower_bandwidth": 0}``.
    actual : matrix-like
        Matrix to analyze

    Raises
    ------
    ValueError
        If a mapping names an unknown pattern
    AssertFailedError
        If a pattern differs
    """
    if isinstance(expected, MatrixPatterns):
        expected = expected.as_dict()

    known = {f.name for f in fields(MatrixPatterns)}
    unknown = sorted(set(expected) - known)
    if unknown:
        raise ValueError(f"Unknown matrix pattern(s): {', '.join(unknown)}")

    computed = matrix_patterns(actual).as_dict()
    for name, expected_value in expected.items():
        if computed[name] != expected_value:
            fail(f"Wrong value for {name}: expected <{expected_value}>, "
                 f"got <{computed[name]}>.")

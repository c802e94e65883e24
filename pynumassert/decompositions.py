"""
Checks for matrix decompositions and multidimensional scaling.

Factors returned by a decomposition are only unique up to sign (or phase)
of the vectors, so besides comparing them with reference factors when
these are known, the checks verify the defining properties: the factors
reconstruct the decomposed matrix and the vectors are orthonormal.
"""

from typing import Any, Optional, Sequence

import numpy as np
from scipy.spatial.distance import pdist, squareform

from ._config import resolve_delta
from ._utils import validate_delta
from .matrices import assert_matrix_equal, matrix_parts


def _as_array(matrix: Any) -> np.ndarray:
    return matrix_parts(matrix).to_array()


def _diagonal_matrix(values: Any, n_rows: int, n_cols: int) -> np.ndarray:
    # Values given as a sequence are the diagonal of a n_rows x n_cols matrix
    if isinstance(values, (list, tuple)) or (isinstance(values, np.ndarray) and values.ndim == 1):
        values = np.asarray(values)
        diagonal = np.zeros((n_rows, n_cols), dtype=values.dtype)
        k = min(n_rows, n_cols, values.size)
        diagonal[np.arange(k), np.arange(k)] = values[:k]
        return diagonal
    return _as_array(values)


def _assert_orthonormal_columns(vectors: np.ndarray, delta: float):
    gram = vectors.conj().T @ vectors
    assert_matrix_equal(np.eye(gram.shape[0]), gram, delta)


def check_singular_value_decomposition(matrix: Any,
                                       values: Any,
                                       left_vectors: Any,
                                       conjugate_transposed_right_vectors: Any,
                                       expected: Optional[Sequence[Any]] = None,
                                       delta: Optional[float] = None):
    """
    Check a singular value decomposition ``matrix = U S V^H``.

    Parameters
    ----------
    matrix : matrix-like
        Decomposed matrix
    values : matrix-like or 1-d sequence
        Singular values, as the diagonal matrix S or as its diagonal
    left_vectors : matrix-like
        U, with orthonormal columns
    conjugate_transposed_right_vectors : matrix-like
        V^H, with orthonormal rows
    expected : (values, left_vectors, conjugate_transposed_right_vectors), optional
        Reference factors the actual ones must match entry by entry
    delta : float, optional
        Tolerance, by default the configured decomposition tolerance

    Examples
    --------
    >>> a = np.array([[3.0, 0.0], [4.0, 5.0]])
    >>> u, s, vh = np.linalg.svd(a)
    >>> check_singular_value_decomposition(a, s, u, vh)
    """
    delta = validate_delta(resolve_delta(delta, 'decomposition'))

    a = _as_array(matrix)
    u = _as_array(left_vectors)
    vh = _as_array(conjugate_transposed_right_vectors)
    s = _diagonal_matrix(values, u.shape[1], vh.shape[0])

    if expected is not None:
        expected_values, expected_left, expected_right = expected
        expected_s = _diagonal_matrix(expected_values, u.shape[1], vh.shape[0])
        assert_matrix_equal(expected_s, s, delta)
        assert_matrix_equal(expected_left, u, delta)
        assert_matrix_equal(expected_right, vh, delta)

    assert_matrix_equal(a, u @ s @ vh, delta)
    _assert_orthonormal_columns(u, delta)
    _assert_orthonormal_columns(vh.conj().T, delta)


def check_spectral_decomposition(matrix: Any,
                                 values: Any,
                                 vectors: Any,
                                 expected: Optional[Sequence[Any]] = None,
                                 delta: Optional[float] = None):
    """
    Check a spectral decomposition ``matrix = V D V^H`` of a Hermitian matrix.

    Parameters
    ----------
    matrix : matrix-like
        Decomposed matrix
    values : matrix-like or 1-d sequence
        Eigenvalues, as the diagonal matrix D or as its diagonal
    vectors : matrix-like
        V, with orthonormal columns
    expected : (values, vectors), optional
        Reference factors the actual ones must match entry by entry
    delta : float, optional
        Tolerance, by default the configured decomposition tolerance
    """
    delta = validate_delta(resolve_delta(delta, 'decomposition'))

    a = _as_array(matrix)
    v = _as_array(vectors)
    d = _diagonal_matrix(values, v.shape[1], v.shape[1])

    if expected is not None:
        expected_values, expected_vectors = expected
        assert_matrix_equal(_diagonal_matrix(expected_values, v.shape[1], v.shape[1]), d, delta)
        assert_matrix_equal(expected_vectors, v, delta)

    assert_matrix_equal(a, v @ d @ v.conj().T, delta)
    _assert_orthonormal_columns(v, delta)


def check_configuration_distances(configuration: Any,
                                  dissimilarities: Any,
                                  delta: Optional[float] = None):
    """
    Check that a configuration reproduces Euclidean dissimilarities.

    Classical multidimensional scaling of a Euclidean distance matrix
    recovers a configuration of points (one per row) whose pairwise
    distances equal the original ones.

    Parameters
    ----------
    configuration : matrix-like
        Coordinates of the points, one row per point
    dissimilarities : matrix-like
        Square matrix of the expected pairwise distances
    delta : float, optional
        Tolerance, by default the configured scaling tolerance
    """
    delta = validate_delta(resolve_delta(delta, 'scaling'))
    points = _as_array(configuration).astype(float)
    distances = squareform(pdist(points, metric='euclidean'))
    assert_matrix_equal(_as_array(dissimilarities), distances, delta)

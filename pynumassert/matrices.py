"""
Matrix equality and expected matrix states.

Every matrix-like value is first normalized to a ``MatrixParts`` instance:
column-major entries, dimensions, and optional names. Comparison then
checks, in order, the number of entries, each entry within the tolerance
(NaN equals NaN, complex entries compared per component), the number of
rows and columns, the matrix name, and the row and column names.

Supported inputs
----------------
- ``LabeledMatrix`` or any object holding a private implementor that
  exposes ``as_column_major_dense_array()``, ``number_of_rows`` and
  ``number_of_columns``; the implementor is read reflectively
- ``MatrixState`` and ``MatrixParts``
- numpy arrays (0-d as 1x1, 1-d as a column vector, 2-d)
- scipy sparse arrays and matrices
- pandas DataFrames (name from ``attrs["name"]``; row and column names
  unless the index or columns are a default ``RangeIndex``)
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import numpy as np
import pandas as pd
from scipy import sparse

from ._config import resolve_delta
from ._utils import assert_equal, both_none, fail, validate_delta
from .data_structures import MatrixParts
from .labeled_matrix import LabeledMatrix
from .reflector import execute_member, get_field, get_property
from .scalars import complexes_are_equal, doubles_are_equal


# ============================================================================
# Expected states
# ============================================================================

@dataclass(eq=False)
class MatrixState:
    """
    Expected state of a matrix.

    Parameters
    ----------
    as_column_major_dense_array : array-like
        Expected entries in column-major order
    number_of_rows : int
        Expected number of rows
    number_of_columns : int
        Expected number of columns
    name : str, optional
        Expected matrix name
    row_names : dict, optional
        Expected row names by position, None if the matrix has none
    column_names : dict, optional
        Expected column names by position, None if the matrix has none

    States hash by identity, so they can key a partial graph.
    """
    as_column_major_dense_array: Any
    number_of_rows: int
    number_of_columns: int
    name: Optional[str] = None
    row_names: Optional[Dict[int, str]] = None
    column_names: Optional[Dict[int, str]] = None

    dtype = None

    def __post_init__(self):
        self.as_column_major_dense_array = np.asarray(
            self.as_column_major_dense_array, dtype=self.dtype).reshape(-1)

    def parts(self) -> MatrixParts:
        return MatrixParts(
            entries=self.as_column_major_dense_array,
            number_of_rows=self.number_of_rows,
            number_of_columns=self.number_of_columns,
            name=self.name,
            row_names=None if self.row_names is None else dict(self.row_names),
            column_names=None if self.column_names is None else dict(self.column_names))

    def _with_names(self, matrix: LabeledMatrix) -> LabeledMatrix:
        matrix.name = self.name
        for position, row_name in (self.row_names or {}).items():
            matrix.set_row_name(position, row_name)
        for position, column_name in (self.column_names or {}).items():
            matrix.set_column_name(position, column_name)
        return matrix

    def dense(self) -> LabeledMatrix:
        """Build a dense matrix in this state."""
        return self._with_names(LabeledMatrix.dense(
            self.number_of_rows, self.number_of_columns,
            self.as_column_major_dense_array))

    def sparse(self) -> LabeledMatrix:
        """Build a sparse matrix in this state."""
        matrix = LabeledMatrix.sparse(
            self.number_of_rows, self.number_of_columns,
            dtype=self.as_column_major_dense_array.dtype)
        for linear_index, value in enumerate(self.as_column_major_dense_array):
            if value != 0:
                matrix[linear_index] = value
        return self._with_names(matrix)

    def view(self) -> LabeledMatrix:
        """
        Build a view in this state.

        The view selects every row and column but the first from a dense
        parent whose first row and column are filled with NaN.
        """
        entries = self.parts().to_array()
        parent = np.full((self.number_of_rows + 1, self.number_of_columns + 1),
                         np.nan, dtype=np.result_type(entries.dtype, np.float64))
        parent[1:, 1:] = entries
        view = LabeledMatrix.from_array(parent).view(
            rows=range(1, self.number_of_rows + 1),
            columns=range(1, self.number_of_columns + 1))
        return self._with_names(view)


@dataclass(eq=False)
class DoubleMatrixState(MatrixState):
    """Expected state of a matrix of real entries."""
    dtype = np.float64


@dataclass(eq=False)
class ComplexMatrixState(MatrixState):
    """Expected state of a matrix of complex entries."""
    dtype = np.complex128


@dataclass(eq=False)
class ExtendedMatrixState(DoubleMatrixState):
    """Expected state of a real matrix, including its structural patterns."""
    is_upper_hessenberg: bool = False
    is_lower_hessenberg: bool = False
    is_upper_triangular: bool = False
    is_lower_triangular: bool = False
    is_symmetric: bool = False
    is_skew_symmetric: bool = False
    is_hermitian: bool = False
    is_skew_hermitian: bool = False
    upper_bandwidth: int = 0
    lower_bandwidth: int = 0

    def expected_patterns(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in _PATTERN_FIELDS}


@dataclass(eq=False)
class ExtendedComplexMatrixState(ComplexMatrixState):
    """Expected state of a complex matrix, including its structural patterns."""
    is_upper_hessenberg: bool = False
    is_lower_hessenberg: bool = False
    is_upper_triangular: bool = False
    is_lower_triangular: bool = False
    is_symmetric: bool = False
    is_skew_symmetric: bool = False
    is_hermitian: bool = False
    is_skew_hermitian: bool = False
    upper_bandwidth: int = 0
    lower_bandwidth: int = 0

    def expected_patterns(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in _PATTERN_FIELDS}


_PATTERN_FIELDS = (
    'is_upper_hessenberg', 'is_lower_hessenberg',
    'is_upper_triangular', 'is_lower_triangular',
    'is_symmetric', 'is_skew_symmetric',
    'is_hermitian', 'is_skew_hermitian',
    'upper_bandwidth', 'lower_bandwidth',
)


# ============================================================================
# Normalization
# ============================================================================

def _optional_field(obj: Any, field_name: str) -> Any:
    try:
        return get_field(obj, field_name)
    except AttributeError:
        return None


def _names_or_none(names: Optional[Mapping[int, str]]) -> Optional[Dict[int, str]]:
    if not names:
        return None
    return dict(names)


def _from_implementor(obj: Any, implementor: Any) -> MatrixParts:
    entries = execute_member(implementor, 'as_column_major_dense_array')
    if entries is None:
        fail("The matrix implementor returned no entries.")
    return MatrixParts(
        entries=entries,
        number_of_rows=get_property(implementor, 'number_of_rows'),
        number_of_columns=get_property(implementor, 'number_of_columns'),
        name=getattr(obj, 'name', None),
        row_names=_names_or_none(_optional_field(obj, 'row_names')),
        column_names=_names_or_none(_optional_field(obj, 'column_names')))


def _dimension_names(labels: pd.Index) -> Optional[Dict[int, str]]:
    if isinstance(labels, pd.RangeIndex) and labels.start == 0 and labels.step == 1:
        return None
    return {position: str(label) for position, label in enumerate(labels)}


def matrix_parts(obj: Any) -> MatrixParts:
    """
    Normalize a matrix-like value.

    Parameters
    ----------
    obj : matrix-like
        See the module docstring for supported inputs

    Returns
    -------
    MatrixParts
        Column-major entries, dimensions and names

    Raises
    ------
    TypeError
        If the input type is not supported
    """
    if isinstance(obj, MatrixParts):
        return obj

    if isinstance(obj, MatrixState):
        return obj.parts()

    if isinstance(obj, pd.DataFrame):
        values = obj.to_numpy()
        return MatrixParts(
            entries=values.ravel(order='F'),
            number_of_rows=values.shape[0],
            number_of_columns=values.shape[1],
            name=obj.attrs.get('name'),
            row_names=_dimension_names(obj.index),
            column_names=_dimension_names(obj.columns))

    if sparse.issparse(obj):
        values = obj.toarray()
        return MatrixParts(values.ravel(order='F'), values.shape[0], values.shape[1])

    if isinstance(obj, np.ndarray):
        if obj.ndim == 0:
            values = obj.reshape(1, 1)
        elif obj.ndim == 1:
            values = obj.reshape(-1, 1)
        elif obj.ndim == 2:
            values = obj
        else:
            raise TypeError(f"Cannot interpret a {obj.ndim}-d array as a matrix")
        return MatrixParts(values.ravel(order='F'), values.shape[0], values.shape[1])

    implementor = _optional_field(obj, 'implementor')
    if implementor is not None:
        return _from_implementor(obj, implementor)

    raise TypeError(f"Cannot interpret {type(obj).__name__} as a matrix")


# ============================================================================
# Assertions
# ============================================================================

def _compare_dimension_names(dimension: str,
                             expected_names: Mapping[int, str],
                             actual_names: Mapping[int, str]):
    assert_equal(len(expected_names), len(actual_names),
                 f"Wrong number of {dimension} names.")
    for position, expected_name in expected_names.items():
        if position not in actual_names:
            fail(f"Expected name not found in actual {dimension} {position}.")
        if actual_names[position] != expected_name:
            fail(f"Expected and actual names for {dimension} {position} "
                 f"are not the same. Expected: <{expected_name}>. "
                 f"Actual: <{actual_names[position]}>.")


def _assert_names_equal(expected: MatrixParts, actual: MatrixParts):
    assert_equal(expected.name, actual.name, "Wrong matrix name.")

    assert_equal(expected.has_row_names, actual.has_row_names,
                 "Wrong value for has_row_names.")
    if expected.has_row_names:
        _compare_dimension_names("row", expected.row_names, actual.row_names)

    assert_equal(expected.has_column_names, actual.has_column_names,
                 "Wrong value for has_column_names.")
    if expected.has_column_names:
        _compare_dimension_names("column", expected.column_names, actual.column_names)


def _assert_parts_equal(expected: MatrixParts, actual: MatrixParts, delta: float):
    expected_entries = expected.entries
    actual_entries = actual.entries

    assert_equal(len(expected_entries), len(actual_entries),
                 "Matrices have not the same number of entries.")

    if expected.is_complex or actual.is_complex:
        are_equal = complexes_are_equal
    else:
        are_equal = doubles_are_equal
    for position in range(len(actual_entries)):
        if not are_equal(expected_entries[position], actual_entries[position], delta):
            fail(f"Wrong entry at linear index {position}. "
                 f"Expected: <{expected_entries[position]}>. "
                 f"Actual: <{actual_entries[position]}>. Delta: <{delta}>.")

    assert_equal(expected.number_of_rows, actual.number_of_rows,
                 "Wrong number of rows.")
    assert_equal(expected.number_of_columns, actual.number_of_columns,
                 "Wrong number of columns.")

    _assert_names_equal(expected, actual)


def assert_matrix_equal(expected: Any, actual: Any, delta: Optional[float] = None):
    """
    Assert that two matrices are equal.

    Parameters
    ----------
    expected : matrix-like or None
        Expected matrix
    actual : matrix-like or None
        Actual matrix
    delta : float, optional
        Maximum allowed absolute difference per entry (per component for
        complex entries). Defaults to the configured matrix tolerance.

    Raises
    ------
    AssertFailedError
        If only one matrix is None, or entries, dimensions or names differ

    Examples
    --------
    >>> assert_matrix_equal(np.eye(2), LabeledMatrix.dense(2, 2, [1, 0, 0, 1]))
    """
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    if both_none(expected, actual, "matrix"):
        return
    _assert_parts_equal(matrix_parts(expected), matrix_parts(actual), delta)


def assert_matrix_state(expected_state: MatrixState,
                        actual: Any,
                        delta: Optional[float] = None):
    """
    Assert that a matrix is in the expected state.

    Extended states additionally check the structural patterns of the
    actual matrix.
    """
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    if both_none(expected_state, actual, "matrix"):
        return
    actual_parts = matrix_parts(actual)
    _assert_parts_equal(expected_state.parts(), actual_parts, delta)

    if isinstance(expected_state, (ExtendedMatrixState, ExtendedComplexMatrixState)):
        from .patterns import assert_matrix_patterns
        assert_matrix_patterns(expected_state.expected_patterns(), actual_parts)


def row_name_exists(matrix: Any, row_name: str) -> bool:
    """Whether some row of the matrix has the given name."""
    names = matrix_parts(matrix).row_names
    return names is not None and row_name in names.values()


def column_name_exists(matrix: Any, column_name: str) -> bool:
    """Whether some column of the matrix has the given name."""
    names = matrix_parts(matrix).column_names
    return names is not None and column_name in names.values()

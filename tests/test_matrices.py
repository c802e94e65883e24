"""
Test suite for matrix equality and expected matrix states
=========================================================

Tests cover:
- Normalization of every supported matrix-like input
- Order of checks and failure messages of matrix equality
- Matrix, row and column names
- Dense, sparse and view matrices built from expected states
- Extended states including structural patterns
"""

import numpy as np
import pandas as pd
import pytest
from pathlib import Path
from scipy import sparse
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pynumassert import (
    AssertFailedError,
    ComplexMatrixState,
    DoubleMatrixState,
    ExtendedComplexMatrixState,
    ExtendedMatrixState,
    LabeledMatrix,
    MatrixParts,
    assert_matrix_equal,
    assert_matrix_state,
    column_name_exists,
    get_field,
    matrix_parts,
    row_name_exists,
    set_tolerances,
)


class ColumnStore:
    """Implementor keeping a list of columns."""

    def __init__(self, columns):
        self._columns = [list(column) for column in columns]

    @property
    def number_of_rows(self):
        return len(self._columns[0])

    @property
    def number_of_columns(self):
        return len(self._columns)

    def _as_column_major_dense_array(self):
        return np.array([x for column in self._columns for x in column])


class Table:
    """Matrix-like type hiding its implementor behind a mangled name."""

    def __init__(self, columns, name=None):
        self.__implementor = ColumnStore(columns)
        self.name = name


class TestMatrixParts:
    """Test normalization of matrix-like values."""

    def test_labeled_matrix(self):
        matrix = LabeledMatrix.dense(2, 2, [1.0, 2.0, 3.0, 4.0])
        matrix.name = "M"
        matrix.set_column_name(1, "y")
        parts = matrix_parts(matrix)
        np.testing.assert_array_equal(parts.entries, [1.0, 2.0, 3.0, 4.0])
        assert (parts.number_of_rows, parts.number_of_columns) == (2, 2)
        assert parts.name == "M"
        assert parts.row_names is None
        assert parts.column_names == {1: "y"}

    def test_arrays(self):
        parts = matrix_parts(np.array([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(parts.entries, [1.0, 3.0, 2.0, 4.0])

        column = matrix_parts(np.array([1.0, 2.0, 3.0]))
        assert (column.number_of_rows, column.number_of_columns) == (3, 1)

        scalar = matrix_parts(np.array(7.0))
        assert (scalar.number_of_rows, scalar.number_of_columns) == (1, 1)

    def test_scipy_sparse(self):
        parts = matrix_parts(sparse.csr_matrix(np.array([[0.0, 2.0], [1.0, 0.0]])))
        np.testing.assert_array_equal(parts.entries, [0.0, 1.0, 2.0, 0.0])

    def test_data_frame_with_labels(self):
        frame = pd.DataFrame([[1.0, 2.0], [3.0, 4.0]], index=["a", "b"], columns=["x", "y"])
        frame.attrs["name"] = "F"
        parts = matrix_parts(frame)
        np.testing.assert_array_equal(parts.entries, [1.0, 3.0, 2.0, 4.0])
        assert parts.name == "F"
        assert parts.row_names == {0: "a", 1: "b"}
        assert parts.column_names == {0: "x", 1: "y"}

    def test_data_frame_without_labels(self):
        parts = matrix_parts(pd.DataFrame(np.eye(2)))
        assert parts.name is None
        assert not parts.has_row_names
        assert not parts.has_column_names

    def test_reflective_implementor(self):
        table = Table([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]], name="T")
        parts = matrix_parts(table)
        assert (parts.number_of_rows, parts.number_of_columns) == (2, 3)
        np.testing.assert_array_equal(parts.entries, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        assert parts.name == "T"
        assert not parts.has_row_names

    def test_parts_pass_through(self):
        parts = MatrixParts([1.0], 1, 1)
        assert matrix_parts(parts) is parts

    def test_unsupported_inputs(self):
        with pytest.raises(TypeError):
            matrix_parts("matrix")
        with pytest.raises(TypeError):
            matrix_parts(np.zeros((2, 2, 2)))


class TestAssertMatrixEqual:
    """Test matrix equality."""

    def setup_method(self):
        self.expected = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_equal_across_representations(self):
        dense = LabeledMatrix.from_array(self.expected)
        assert_matrix_equal(self.expected, dense)
        assert_matrix_equal(dense, sparse.csc_matrix(self.expected))
        assert_matrix_equal(pd.DataFrame(self.expected), dense.view())

    def test_within_delta(self):
        assert_matrix_equal(self.expected, self.expected + 0.005)
        assert_matrix_equal(self.expected, self.expected + 0.5, delta=0.5)

    def test_configured_delta(self):
        set_tolerances(matrix=1e-4)
        with pytest.raises(AssertFailedError):
            assert_matrix_equal(self.expected, self.expected + 0.005)

    def test_none_rule(self):
        assert_matrix_equal(None, None)
        with pytest.raises(AssertFailedError, match="One matrix is None, the other is not."):
            assert_matrix_equal(self.expected, None)
        with pytest.raises(AssertFailedError, match="One matrix is None"):
            assert_matrix_equal(None, self.expected)

    def test_entry_count_checked_first(self):
        with pytest.raises(AssertFailedError, match="not the same number of entries"):
            assert_matrix_equal(self.expected, np.zeros((2, 2)))

    def test_wrong_entry(self):
        actual = self.expected.copy()
        actual[0, 1] = 20.0
        with pytest.raises(AssertFailedError, match="Wrong entry at linear index 2"):
            assert_matrix_equal(self.expected, actual)

    def test_entries_checked_before_dimensions(self):
        with pytest.raises(AssertFailedError, match="Wrong entry at linear index 1"):
            assert_matrix_equal(self.expected, self.expected.T)

    def test_wrong_dimensions(self):
        reshaped = self.expected.reshape(-1, order='F').reshape((3, 2), order='F')
        with pytest.raises(AssertFailedError, match="Wrong number of rows"):
            assert_matrix_equal(self.expected, reshaped)

    def test_nan_entries(self):
        expected = np.array([[np.nan, 1.0]])
        assert_matrix_equal(expected, expected.copy())
        with pytest.raises(AssertFailedError, match="linear index 0"):
            assert_matrix_equal(expected, np.array([[0.0, 1.0]]))

    def test_real_against_complex(self):
        assert_matrix_equal(self.expected, self.expected.astype(complex))
        with pytest.raises(AssertFailedError, match="linear index 0"):
            assert_matrix_equal(self.expected, self.expected + 1j)


class TestNames:
    """Test comparison of matrix, row and column names."""

    def setup_method(self):
        self.state = DoubleMatrixState(
            [1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 3, 2,
            name="M", row_names={0: "a", 2: "c"}, column_names={1: "y"})

    def make(self, name="M", row_names=None, column_names=None):
        matrix = LabeledMatrix.dense(3, 2, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        matrix.name = name
        for position, row_name in (row_names or {}).items():
            matrix.set_row_name(position, row_name)
        for position, column_name in (column_names or {}).items():
            matrix.set_column_name(position, column_name)
        return matrix

    def test_equal_names(self):
        assert_matrix_state(self.state, self.make(row_names={0: "a", 2: "c"},
                                                  column_names={1: "y"}))

    def test_wrong_matrix_name(self):
        with pytest.raises(AssertFailedError, match="Wrong matrix name"):
            assert_matrix_state(self.state, self.make(name="N", row_names={0: "a", 2: "c"},
                                                      column_names={1: "y"}))

    def test_missing_row_names(self):
        with pytest.raises(AssertFailedError, match="Wrong value for has_row_names"):
            assert_matrix_state(self.state, self.make(column_names={1: "y"}))

    def test_wrong_number_of_row_names(self):
        with pytest.raises(AssertFailedError, match="Wrong number of row names"):
            assert_matrix_state(self.state, self.make(row_names={0: "a"},
                                                      column_names={1: "y"}))

    def test_name_at_other_position(self):
        with pytest.raises(AssertFailedError,
                           match="Expected name not found in actual row 2"):
            assert_matrix_state(self.state, self.make(row_names={0: "a", 1: "c"},
                                                      column_names={1: "y"}))

    def test_different_column_name(self):
        with pytest.raises(AssertFailedError,
                           match="Expected and actual names for column 1 are not the same"):
            assert_matrix_state(self.state, self.make(row_names={0: "a", 2: "c"},
                                                      column_names={1: "z"}))

    def test_unexpected_column_names(self):
        state = DoubleMatrixState([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 3, 2, name="M",
                                  row_names={0: "a", 2: "c"})
        with pytest.raises(AssertFailedError, match="Wrong value for has_column_names"):
            assert_matrix_state(state, self.make(row_names={0: "a", 2: "c"},
                                                 column_names={1: "y"}))

    def test_name_lookup(self):
        matrix = self.make(row_names={0: "a", 2: "c"}, column_names={1: "y"})
        assert row_name_exists(matrix, "c")
        assert not row_name_exists(matrix, "y")
        assert column_name_exists(matrix, "y")
        assert not column_name_exists(np.eye(2), "y")


class TestMatrixStates:
    """Test building matrices from expected states."""

    def setup_method(self):
        self.state = DoubleMatrixState(
            [1.0, 0.0, np.nan, 0.0, 5.0, 6.0], 2, 3,
            name="S", row_names={1: "second"}, column_names={0: "first"})

    @pytest.mark.parametrize("storage", ["dense", "sparse", "view"])
    def test_built_matrix_matches_state(self, storage):
        matrix = getattr(self.state, storage)()
        assert isinstance(matrix, LabeledMatrix)
        assert matrix.shape == (2, 3)
        assert_matrix_state(self.state, matrix, delta=0.0)

    def test_sparse_stores_only_non_zero_entries(self):
        implementor = get_field(self.state.sparse(), 'implementor')
        assert implementor.number_of_stored_entries == 4

    def test_view_hides_parent_padding(self):
        view = self.state.view()
        parent = get_field(get_field(view, 'implementor'), 'parent')
        assert parent.number_of_rows == 3
        assert parent.number_of_columns == 4
        assert np.isnan(parent.get(0, 0))

    def test_dense_copy_is_independent(self):
        matrix = self.state.dense()
        matrix[0] = 10.0
        assert self.state.as_column_major_dense_array[0] == 1.0

    def test_complex_state(self):
        state = ComplexMatrixState([1 + 1j, 2.0, 0.0, -1j], 2, 2)
        assert state.as_column_major_dense_array.dtype == np.complex128
        for matrix in (state.dense(), state.sparse(), state.view()):
            assert matrix.is_complex
            assert_matrix_state(state, matrix)

    def test_complex_state_mismatch(self):
        state = ComplexMatrixState([1 + 1j, 2.0, 0.0, -1j], 2, 2)
        with pytest.raises(AssertFailedError, match="linear index 3"):
            assert_matrix_state(state, np.array([[1 + 1j, 0.0], [2.0, 1j]]))

    def test_none_rule(self):
        assert_matrix_state(None, None)
        with pytest.raises(AssertFailedError, match="One matrix is None"):
            assert_matrix_state(self.state, None)


class TestExtendedStates:
    """Test states including structural patterns."""

    def setup_method(self):
        # [[1, 2, 3], [0, 4, 5], [0, 0, 6]]
        self.entries = [1.0, 0.0, 0.0, 2.0, 4.0, 0.0, 3.0, 5.0, 6.0]

    def test_upper_triangular(self):
        state = ExtendedMatrixState(
            self.entries, 3, 3,
            is_upper_hessenberg=True,
            is_upper_triangular=True,
            upper_bandwidth=2)
        for matrix in (state.dense(), state.sparse(), state.view()):
            assert_matrix_state(state, matrix)

    def test_wrong_pattern(self):
        state = ExtendedMatrixState(
            self.entries, 3, 3,
            is_upper_hessenberg=True,
            is_upper_triangular=True,
            is_symmetric=True,
            upper_bandwidth=2)
        with pytest.raises(AssertFailedError, match="Wrong value for is_symmetric"):
            assert_matrix_state(state, state.dense())

    def test_wrong_bandwidth(self):
        state = ExtendedMatrixState(
            self.entries, 3, 3,
            is_upper_hessenberg=True,
            is_upper_triangular=True,
            upper_bandwidth=1)
        with pytest.raises(AssertFailedError, match="Wrong value for upper_bandwidth"):
            assert_matrix_state(state, state.dense())

    def test_hermitian(self):
        state = ExtendedComplexMatrixState(
            [2.0, 1 + 1j, 1 - 1j, 3.0], 2, 2,
            is_upper_hessenberg=True,
            is_lower_hessenberg=True,
            is_hermitian=True,
            upper_bandwidth=1,
            lower_bandwidth=1)
        assert_matrix_state(state, state.sparse())

    def test_rectangular(self):
        state = ExtendedMatrixState([1.0, 2.0], 1, 2, upper_bandwidth=1)
        assert_matrix_state(state, np.array([[1.0, 2.0]]))


if __name__ == "__main__":
    # Run tests if executed directly
    pytest.main([__file__, "-v"])

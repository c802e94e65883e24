#!/usr/bin/env python3
"""
Unit tests for the labeled matrix container.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pynumassert import LabeledMatrix, get_field


class TestDense:
    """Test dense storage."""

    def setup_method(self):
        self.data = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        self.matrix = LabeledMatrix.dense(2, 3, self.data)

    def test_dimensions(self):
        assert self.matrix.number_of_rows == 2
        assert self.matrix.number_of_columns == 3
        assert self.matrix.shape == (2, 3)
        assert self.matrix.count == 6
        assert len(self.matrix) == 6

    def test_column_major_access(self):
        assert self.matrix[1] == 2.0
        assert self.matrix[0, 1] == 3.0
        assert self.matrix[1, 2] == 6.0
        assert list(self.matrix) == self.data

    def test_to_numpy(self):
        np.testing.assert_array_equal(
            self.matrix.to_numpy(), np.array([[1.0, 3.0, 5.0], [2.0, 4.0, 6.0]]))

    def test_set(self):
        self.matrix[0, 0] = -1.0
        self.matrix[5] = -6.0
        assert self.matrix[0] == -1.0
        assert self.matrix[1, 2] == -6.0

    def test_data_is_copied(self):
        data = np.array(self.data)
        matrix = LabeledMatrix.dense(2, 3, data)
        data[0] = 100.0
        assert matrix[0] == 1.0

    def test_zeros_by_default(self):
        matrix = LabeledMatrix.dense(2, 2)
        assert matrix.dtype == np.float64
        assert list(matrix) == [0.0] * 4

    def test_complex(self):
        matrix = LabeledMatrix.dense(1, 2, [1 + 1j, 2.0])
        assert matrix.is_complex
        assert not self.matrix.is_complex

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            self.matrix[6]
        with pytest.raises(IndexError):
            self.matrix[-1]
        with pytest.raises(IndexError):
            self.matrix[2, 0]

    @pytest.mark.parametrize("n_rows,n_cols", [(0, 1), (1, 0), (-1, 2)])
    def test_invalid_dimensions(self, n_rows, n_cols):
        with pytest.raises(ValueError):
            LabeledMatrix.dense(n_rows, n_cols)

    def test_wrong_data_size(self):
        with pytest.raises(ValueError, match="expected 4"):
            LabeledMatrix.dense(2, 2, [1.0, 2.0, 3.0])

    def test_from_array(self):
        matrix = LabeledMatrix.from_array([1.0, 2.0])
        assert matrix.shape == (2, 1)
        with pytest.raises(ValueError):
            LabeledMatrix.from_array(np.zeros((2, 2, 2)))


class TestSparse:
    """Test sparse storage."""

    def setup_method(self):
        self.matrix = LabeledMatrix.sparse(3, 3)

    def test_zeros_not_stored(self):
        assert self.matrix[1, 1] == 0.0
        assert get_field(self.matrix, 'implementor').number_of_stored_entries == 0

    def test_set(self):
        self.matrix[2, 0] = 5.0
        self.matrix[7] = 3.0
        assert self.matrix[2] == 5.0
        assert self.matrix[1, 2] == 3.0
        assert get_field(self.matrix, 'implementor').number_of_stored_entries == 2
        np.testing.assert_array_equal(
            self.matrix.to_numpy(),
            np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 3.0], [5.0, 0.0, 0.0]]))


class TestView:
    """Test views on other matrices."""

    def setup_method(self):
        self.parent = LabeledMatrix.from_array(np.arange(9.0).reshape(3, 3))
        self.view = self.parent.view(rows=[1, 2], columns=[0, 2])

    def test_entries(self):
        assert self.view.shape == (2, 2)
        np.testing.assert_array_equal(self.view.to_numpy(), [[3.0, 5.0], [6.0, 8.0]])
        assert list(self.view) == [3.0, 6.0, 5.0, 8.0]

    def test_writes_through(self):
        self.view[0, 0] = 100.0
        assert self.parent[1, 0] == 100.0

    def test_full_view(self):
        view = self.parent.view()
        np.testing.assert_array_equal(view.to_numpy(), self.parent.to_numpy())

    def test_names_not_shared(self):
        self.parent.name = "parent"
        self.parent.set_row_name(0, "r0")
        view = self.parent.view()
        assert view.name is None
        assert not view.has_row_names


class TestNames:
    """Test matrix, row and column names."""

    def setup_method(self):
        self.matrix = LabeledMatrix.dense(2, 2)

    def test_no_names_by_default(self):
        assert self.matrix.name is None
        assert not self.matrix.has_row_names
        assert not self.matrix.has_column_names

    def test_set_names(self):
        self.matrix.name = "M"
        self.matrix.set_row_name(1, "b")
        self.matrix.set_column_name(0, "x")
        assert self.matrix.name == "M"
        assert dict(self.matrix.row_names) == {1: "b"}
        assert dict(self.matrix.column_names) == {0: "x"}
        assert self.matrix.has_row_names
        assert self.matrix.has_column_names

    def test_remove_name(self):
        self.matrix.set_row_name(0, "a")
        self.matrix.set_row_name(0, None)
        assert not self.matrix.has_row_names

    def test_names_are_read_only(self):
        with pytest.raises(TypeError):
            self.matrix.row_names[0] = "a"

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            self.matrix.set_row_name(2, "c")
        with pytest.raises(IndexError):
            self.matrix.set_column_name(-1, "c")

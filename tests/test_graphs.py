"""
Test suite for partial graph checks
===================================
"""

import math

import numpy as np
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pynumassert import (
    AssertFailedError,
    ComplexMatrixState,
    DoubleMatrixState,
    LabeledMatrix,
    check_partial_graph,
    get_field,
)
from pynumassert.labeled_matrix import DenseImplementor


def negate(matrix):
    return -matrix.to_numpy()


class TestMatrixFunctions:
    """Test functions taking and returning matrices."""

    def setup_method(self):
        self.graph = [
            (DoubleMatrixState([1.0, 2.0, 3.0, 4.0], 2, 2),
             np.array([[-1.0, -3.0], [-2.0, -4.0]])),
            (DoubleMatrixState([0.5, -0.5], 1, 2),
             DoubleMatrixState([-0.5, 0.5], 1, 2)),
        ]

    def test_correct_function(self):
        check_partial_graph(negate, self.graph)

    def test_mapping_graph(self):
        check_partial_graph(negate, dict(self.graph))

    def test_wrong_function(self):
        with pytest.raises(AssertFailedError, match="Wrong entry"):
            check_partial_graph(lambda matrix: matrix.to_numpy(), self.graph)

    def test_function_depending_on_storage(self):
        def dense_only(matrix):
            if isinstance(get_field(matrix, 'implementor'), DenseImplementor):
                return -matrix.to_numpy()
            return matrix.to_numpy()

        with pytest.raises(AssertFailedError, match="Wrong entry"):
            check_partial_graph(dense_only, self.graph)

    def test_dimension_mismatch(self):
        graph = [(DoubleMatrixState([1.0, 2.0], 2, 1), np.array([[-1.0, -2.0]]))]
        with pytest.raises(AssertFailedError, match="same number of rows"):
            check_partial_graph(negate, graph)

    def test_none_value(self):
        graph = [(DoubleMatrixState([1.0], 1, 1), None)]
        with pytest.raises(AssertFailedError, match="None argument or value"):
            check_partial_graph(negate, graph)


class TestElementwiseFunctions:
    """Test scalar functions applied to each entry."""

    def setup_method(self):
        entries = np.array([0.0, 0.5, 1.0, 2.0])
        self.graph = [(DoubleMatrixState(entries, 2, 2),
                       LabeledMatrix.dense(2, 2, np.exp(entries)))]

    def test_correct_function(self):
        check_partial_graph(math.exp, self.graph, elementwise=True)

    def test_wrong_function(self):
        with pytest.raises(AssertFailedError,
                           match="Wrong value at linear index 1 of the dense argument"):
            check_partial_graph(lambda x: 1.0 + x + x * x / 2, self.graph, elementwise=True)

    def test_explicit_delta(self):
        check_partial_graph(lambda x: 1.0 + x + x * x / 2 + x ** 3 / 6 + x ** 4 / 24,
                            self.graph, delta=0.5, elementwise=True)

    def test_complex_entries(self):
        state = ComplexMatrixState([1j, 1 + 1j], 1, 2)
        graph = [(state, np.array([[-1.0 + 0j, 2j]]))]
        check_partial_graph(lambda z: complex(z) ** 2, graph, elementwise=True)

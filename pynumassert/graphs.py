"""
Checks of matrix functions against known points of their graph.

A partial graph pairs argument states with the values a function must
return for them. Each argument is materialized in every storage scheme
(dense, sparse and view) so that a function is verified independently of
how its input is stored.
"""

from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from ._config import resolve_delta
from ._utils import assert_equal, fail, validate_delta
from .matrices import MatrixState, assert_matrix_equal, matrix_parts
from .scalars import complexes_are_equal, doubles_are_equal

PartialGraph = Union[Mapping[Any, Any], Iterable[Tuple[MatrixState, Any]]]


def _pairs(graph: PartialGraph):
    if isinstance(graph, Mapping):
        return graph.items()
    return graph


def check_partial_graph(function: Callable[[Any], Any],
                        graph: PartialGraph,
                        delta: Optional[float] = None,
                        elementwise: bool = False):
    """
    Check a function on the points of a partial graph.

    Parameters
    ----------
    function : callable
        Function under test. Takes a matrix and returns a matrix, or takes
        a scalar and returns a scalar when ``elementwise`` is True.
    graph : sequence of (MatrixState, matrix-like) pairs, or mapping
        Arguments and the expected values of the function on them. The
        expected values must have the dimensions of the arguments.
    delta : float, optional
        Tolerance, by default the configured distribution tolerance
    elementwise : bool, default=False
        Whether to apply the function to each entry of the arguments

    Raises
    ------
    AssertFailedError
        If an argument or value is None, dimensions differ, or a computed
        value differs from the expected one
    """
    delta = validate_delta(resolve_delta(delta, 'distribution'))

    for arguments, values in _pairs(graph):
        if arguments is None or values is None:
            fail("The partial graph contains a None argument or value.")

        expected = matrix_parts(values)
        assert_equal(arguments.number_of_rows, expected.number_of_rows,
                     "Arguments and values have not the same number of rows.")
        assert_equal(arguments.number_of_columns, expected.number_of_columns,
                     "Arguments and values have not the same number of columns.")

        for storage, argument in (('dense', arguments.dense()),
                                  ('sparse', arguments.sparse()),
                                  ('view', arguments.view())):
            if not elementwise:
                assert_matrix_equal(expected, function(argument), delta)
                continue

            are_equal = complexes_are_equal if expected.is_complex else doubles_are_equal
            for i in range(argument.count):
                actual = function(argument[i])
                if not are_equal(expected.entries[i], actual, delta):
                    fail(f"Wrong value at linear index {i} of the {storage} argument. "
                         f"Expected: <{expected.entries[i]}>. Actual: <{actual}>. "
                         f"Delta: <{delta}>.")

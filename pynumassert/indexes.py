"""
Assertions for index collections and index/value pairs.

An index collection is any sequence of integers: a list, a tuple, a range,
a 1-d numpy integer array or a pandas ``Index``. If the collection object
has a ``max_index`` attribute it is compared as reported; otherwise the
maximum is computed from the items.

An index/value pair is either an ``(index, value)`` tuple or an object with
``index`` and ``value`` attributes.
"""

from typing import Any, Optional, Sequence

from ._config import resolve_delta
from ._utils import as_sequence, both_none, fail, validate_delta, with_context
from .scalars import doubles_are_equal


def _max_index(collection: Any, items: Sequence) -> Optional[int]:
    reported = getattr(collection, 'max_index', None)
    if reported is not None:
        return reported
    if len(items) == 0:
        return None
    return max(items)


def _assert_same_indexes(expected_items: Sequence, actual_items: Sequence):
    for i in range(len(actual_items)):
        if expected_items[i] != actual_items[i]:
            fail(f"Wrong index at position {i}. "
                 f"Expected: <{expected_items[i]}>. Actual: <{actual_items[i]}>.")


def assert_index_collection_equal(expected: Optional[Sequence[int]],
                                  actual: Optional[Sequence[int]]):
    """
    Assert that two index collections are equal.

    Collections are equal if both are None, or if they have the same length,
    the same maximum index, and the same index at each position.

    Raises
    ------
    AssertFailedError
        If the collections differ
    """
    if both_none(expected, actual, "index collection"):
        return

    expected_items = as_sequence(expected)
    actual_items = as_sequence(actual)

    if len(expected_items) != len(actual_items):
        fail(f"Index collections have not the same length: "
             f"expected {len(expected_items)}, got {len(actual_items)}.")

    expected_max = _max_index(expected, expected_items)
    actual_max = _max_index(actual, actual_items)
    if expected_max != actual_max:
        fail(f"Wrong value for MaxIndex. Expected: <{expected_max}>. "
             f"Actual: <{actual_max}>.")

    _assert_same_indexes(expected_items, actual_items)


def assert_index_collection_state(expected_indexes: Optional[Sequence[int]],
                                  expected_max_index: Optional[int],
                                  actual: Optional[Sequence[int]]):
    """
    Assert that an index collection holds the expected indexes.

    Parameters
    ----------
    expected_indexes : sequence of int or None
        Expected indexes, in order
    expected_max_index : int or None
        Expected maximum index
    actual : index collection or None
        Collection to check
    """
    if expected_indexes is None and actual is None:
        return
    if expected_indexes is None or actual is None:
        fail("The actual index collection is None unexpectedly, "
             "or the opposite is true.")

    expected_items = as_sequence(expected_indexes)
    actual_items = as_sequence(actual)

    if len(expected_items) != len(actual_items):
        fail(f"Index collection has not the expected length: "
             f"expected {len(expected_items)}, got {len(actual_items)}.")

    actual_max = _max_index(actual, actual_items)
    if expected_max_index != actual_max:
        fail(f"Index collection has not the expected MaxIndex. "
             f"Expected: <{expected_max_index}>. Actual: <{actual_max}>.")

    _assert_same_indexes(expected_items, actual_items)


def _unpack_pair(pair: Any):
    if isinstance(pair, tuple):
        index, value = pair
        return index, value
    return pair.index, pair.value


def assert_index_value_pair_equal(expected: Any,
                                  actual: Any,
                                  delta: Optional[float] = None,
                                  message: Optional[str] = None):
    """
    Assert that two index/value pairs are equal.

    Indexes must be identical; values are compared within ``delta``
    (defaults to the configured matrix tolerance).
    """
    delta = validate_delta(resolve_delta(delta, 'matrix'))
    expected_index, expected_value = _unpack_pair(expected)
    actual_index, actual_value = _unpack_pair(actual)

    if expected_index != actual_index:
        fail(with_context(
            f"Wrong index in index/value pair. Expected: <{expected_index}>. "
            f"Actual: <{actual_index}>.", message))
    if not doubles_are_equal(expected_value, actual_value, delta):
        fail(with_context(
            f"Wrong value in index/value pair. Expected: <{expected_value}>. "
            f"Actual: <{actual_value}>. Delta: <{delta}>.", message))


def assert_index_value_pairs_equal(expected: Optional[Sequence],
                                   actual: Optional[Sequence],
                                   delta: Optional[float] = None):
    """Assert that two sequences of index/value pairs are equal."""
    if both_none(expected, actual, "index/value pair sequence"):
        return

    expected = list(expected)
    actual = list(actual)
    if len(expected) != len(actual):
        fail(f"Index/value pair sequences have not the same length: "
             f"expected {len(expected)}, got {len(actual)}.")

    for i in range(len(actual)):
        assert_index_value_pair_equal(
            expected[i], actual[i], delta, f"At position {i}.")

"""
Order-independent comparison of lists through a caller-supplied predicate.

The predicate is an assertion: it raises ``AssertionError`` when two items
differ and returns normally otherwise. This lets any existing ``assert_*``
helper (with its own tolerance) decide item equality.
"""

from typing import Any, Callable, List, Optional, Sequence

from ._utils import both_none, fail


def _matches(are_equal: Callable[[Any, Any], None], expected_item: Any, actual_item: Any) -> bool:
    try:
        are_equal(expected_item, actual_item)
    except AssertionError:
        return False
    return True


def _first_match(are_equal, expected_item, actual: Sequence, candidates: List[int]) -> Optional[int]:
    for k, j in enumerate(candidates):
        if _matches(are_equal, expected_item, actual[j]):
            return k
    return None


def assert_same_items(expected: Optional[Sequence],
                      actual: Optional[Sequence],
                      are_equal: Callable[[Any, Any], None],
                      ignore_multiplicity: bool = False):
    """
    Assert that two lists contain the same items, in any order.

    Parameters
    ----------
    expected : sequence or None
        List containing the expected items
    actual : sequence or None
        List containing the actual items
    are_equal : callable
        ``are_equal(expected_item, actual_item)`` raises ``AssertionError``
        if the items are not equal
    ignore_multiplicity : bool
        If False (default), lists are compared as multisets: each expected
        item consumes one matching actual position, and every actual
        position must be consumed. If True, only membership is checked, so
        ``[a, a, b]`` and ``[a, b]`` contain the same items.

    Raises
    ------
    AssertFailedError
        If only one list is None, one list is empty and the other is not,
        an expected item has no match, or an actual item is left unmatched

    Notes
    -----
    Matching is greedy and O(n^2) in the list sizes. Exceptions other than
    ``AssertionError`` raised by the predicate propagate.
    """
    if both_none(expected, actual, "list"):
        return

    expected = list(expected)
    actual = list(actual)

    if len(expected) == 0:
        if len(actual) != 0:
            fail("The expected list is empty, the actual one is not.")
        return
    if len(actual) == 0:
        fail("The expected list is nonempty, the actual one is empty.")

    if ignore_multiplicity:
        _assert_same_members(expected, actual, are_equal)
        return

    unmatched = list(range(len(actual)))
    for expected_item in expected:
        k = _first_match(are_equal, expected_item, actual, unmatched)
        if k is None:
            fail(f"Missing expected item {expected_item}.")
        del unmatched[k]

    if unmatched:
        fail(f"Missing actual item {actual[unmatched[0]]}.")


def _assert_same_members(expected: list, actual: list, are_equal):
    # Expected is a subset of actual
    unchecked = set(range(len(actual)))
    for expected_item in expected:
        k = _first_match(are_equal, expected_item, actual, list(range(len(actual))))
        if k is None:
            fail(f"Missing expected item {expected_item}.")
        unchecked.discard(k)

    # Actual is a subset of expected
    for j in sorted(unchecked):
        actual_item = actual[j]
        if not any(_matches(are_equal, e, actual_item) for e in expected):
            fail(f"Missing actual item {actual_item}.")

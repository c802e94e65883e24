"""
Assertions for index partitions.

A partition groups indexes into parts, each labeled by an identifier. It can
be given as a mapping from identifier to index collection, or as any object
exposing an ``identifiers`` sequence and item access by identifier.
Identifier order matters for :func:`assert_partition_equal` and
:func:`assert_same_identifiers`; :func:`assert_same_parts` ignores both
identifiers and order.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List

import numpy as np
import pandas as pd

from ._utils import both_none, fail
from .indexes import assert_index_collection_equal


def _identifiers(partition: Any) -> List[Hashable]:
    identifiers = getattr(partition, 'identifiers', None)
    if identifiers is None:
        identifiers = partition.keys()
    return list(identifiers)


def _check_counts(expected: Any, actual: Any) -> bool:
    if both_none(expected, actual, "partition"):
        return False
    if len(_identifiers(expected)) != len(_identifiers(actual)):
        fail("Partitions have not the same number of parts.")
    return True


def assert_same_identifiers(expected: Any, actual: Any):
    """Assert that two partitions have the same identifiers, in the same order."""
    if not _check_counts(expected, actual):
        return
    expected_ids = _identifiers(expected)
    actual_ids = _identifiers(actual)
    for i, expected_id in enumerate(expected_ids):
        if expected_id != actual_ids[i]:
            fail(f"Wrong part identifier at position: {i}. "
                 f"Expected: <{expected_id}>. Actual: <{actual_ids[i]}>.")


def assert_partition_equal(expected: Any, actual: Any):
    """
    Assert that two partitions are equal.

    Identifiers must match position by position, and so must the parts
    they label.
    """
    if not _check_counts(expected, actual):
        return
    expected_ids = _identifiers(expected)
    actual_ids = _identifiers(actual)
    for i, expected_id in enumerate(expected_ids):
        if expected_id != actual_ids[i]:
            fail(f"Wrong part identifier at position: {i}. "
                 f"Expected: <{expected_id}>. Actual: <{actual_ids[i]}>.")
        assert_index_collection_equal(expected[expected_id], actual[actual_ids[i]])


def assert_same_parts(expected: Any, actual: Any):
    """
    Assert that two partitions have the same parts, whatever their identifiers.

    Each expected part is matched to the first still-unused actual part equal
    to it.
    """
    if not _check_counts(expected, actual):
        return
    available = _identifiers(actual)
    for expected_id in _identifiers(expected):
        expected_part = expected[expected_id]
        for j, actual_id in enumerate(available):
            try:
                assert_index_collection_equal(expected_part, actual[actual_id])
            except AssertionError:
                continue
            del available[j]
            break
        else:
            fail(f"Missing expected part {list(expected_part)}.")


def partition_indexes(indexes: Iterable[int],
                      part_of: Callable[[int], Hashable]) -> Dict[Hashable, List[int]]:
    """
    Partition indexes by the value of a key function.

    Parameters
    ----------
    indexes : iterable of int
        Indexes to partition
    part_of : callable
        Returns the identifier of the part an index belongs to

    Returns
    -------
    dict
        Identifier -> indexes of the part, identifiers in sorted order and
        indexes in their original order

    Raises
    ------
    ValueError
        If an identifier is None or NaN

    Examples
    --------
    >>> partition_indexes(range(6), lambda i: i % 2)
    {0: [0, 2, 4], 1: [1, 3, 5]}
    """
    indexes = [int(i) for i in indexes]
    if not indexes:
        return {}
    frame = pd.DataFrame({'index': np.asarray(indexes, dtype=np.int64),
                          'part': [part_of(i) for i in indexes]})
    missing = frame['part'].isna()
    if missing.any():
        raise ValueError(
            f"Missing part identifier for indexes {frame.loc[missing, 'index'].tolist()}"
        )
    return {_native(identifier): part.tolist()
            for identifier, part in frame.groupby('part', sort=True)['index']}


def _native(value: Hashable) -> Hashable:
    if isinstance(value, np.generic):
        return value.item()
    return value

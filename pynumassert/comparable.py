"""
Consistency checks for equatable and ordered types.

Equality against None (or an unrelated type) must be False, never an
error. Ordering against None has no meaning in Python: every rich
comparison operator must raise ``TypeError``, whichever side None is on.
"""

import operator
from typing import Any

from ._utils import assert_true, fail

_ORDERINGS = (
    ('<', operator.lt),
    ('<=', operator.le),
    ('>', operator.gt),
    ('>=', operator.ge),
)


class _Unrelated:
    """Instances of a type no tested object knows about."""


def check_equals_with_none(obj: Any):
    """
    Check that ``obj`` compares unequal to None and to unrelated objects.

    Raises
    ------
    ValueError
        If obj itself is None
    AssertFailedError
        If an equality check gives the wrong answer
    """
    if obj is None:
        raise ValueError("obj cannot be None")

    assert_true(obj.__eq__(None) is not True, "obj.__eq__(None) returned True.")
    assert_true(not (obj == None), "obj == None is True.")
    assert_true(not (None == obj), "None == obj is True.")
    assert_true(obj != None, "obj != None is False.")
    assert_true(None != obj, "None != obj is False.")
    assert_true(not (obj == _Unrelated()), "obj equals an unrelated object.")


def check_ordering_with_none(obj: Any):
    """Check that ordering ``obj`` against None raises ``TypeError`` both ways."""
    if obj is None:
        raise ValueError("obj cannot be None")

    for symbol, compare in _ORDERINGS:
        for left, right, text in ((obj, None, f"obj {symbol} None"),
                                  (None, obj, f"None {symbol} obj")):
            try:
                compare(left, right)
            except TypeError:
                continue
            fail(f"{text} did not raise TypeError.")


def check_ordering_consistency(smaller: Any, larger: Any):
    """
    Check that the comparison operators agree on two ordered objects.

    Parameters
    ----------
    smaller, larger : object
        Objects such that ``smaller`` strictly precedes ``larger``
    """
    assert_true(smaller < larger, "smaller < larger is False.")
    assert_true(smaller <= larger, "smaller <= larger is False.")
    assert_true(not (smaller > larger), "smaller > larger is True.")
    assert_true(not (smaller >= larger), "smaller >= larger is True.")
    assert_true(larger > smaller, "larger > smaller is False.")
    assert_true(larger >= smaller, "larger >= smaller is False.")
    assert_true(smaller != larger, "smaller != larger is False.")
    assert_true(not (smaller == larger), "smaller == larger is True.")

    for obj, name in ((smaller, "smaller"), (larger, "larger")):
        assert_true(obj == obj, f"{name} == {name} is False.")
        assert_true(obj <= obj, f"{name} <= {name} is False.")
        assert_true(obj >= obj, f"{name} >= {name} is False.")
        assert_true(not (obj < obj), f"{name} < {name} is True.")

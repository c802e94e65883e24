"""
State assertions for numerical blocks and bins.

A numerical block covers a run of sorted positions of a numerical feature,
from ``first_position`` to ``last_position``, holding feature values from
``first_value`` to ``last_value`` and a frequency distribution of the target
values observed in the run. A bin is a block subclass, so its state is read
from the fields declared by the base type.
"""

from typing import Any, Callable, Mapping

from ._utils import assert_equal, fail
from .reflector import get_base_field, get_field


def _assert_frequencies(expected: Mapping[float, int], actual: Mapping[float, int]):
    # Every observed target value must be expected with the same frequency
    for target_value, frequency in actual.items():
        if target_value not in expected:
            fail("Actual target value is not in the expected frequency distribution.")
        assert_equal(expected[target_value], frequency,
                     f"Wrong frequency for target value {target_value}.")


def _assert_stored_state(target: Any,
                         read: Callable[[Any, str], Any],
                         expected_first_position: int,
                         expected_last_position: int,
                         expected_first_value: float,
                         expected_last_value: float,
                         expected_target_frequency_distribution: Mapping[float, int]):
    assert_equal(expected_first_position, read(target, 'first_position'),
                 "Wrong stored first position.")
    assert_equal(expected_last_position, read(target, 'last_position'),
                 "Wrong stored last position.")
    assert_equal(expected_first_value, read(target, 'first_value'),
                 "Wrong stored first value.")
    assert_equal(expected_last_value, read(target, 'last_value'),
                 "Wrong stored last value.")
    _assert_frequencies(expected_target_frequency_distribution,
                        read(target, 'target_frequency_distribution'))


def assert_numerical_block_state(target: Any,
                                 expected_first_position: int,
                                 expected_last_position: int,
                                 expected_first_value: float,
                                 expected_last_value: float,
                                 expected_target_frequency_distribution: Mapping[float, int]):
    """
    Assert that a numerical block is in the expected state.

    Stored fields are read reflectively and the public properties are
    checked against the same expectations.

    Parameters
    ----------
    target : object
        The block to check
    expected_first_position, expected_last_position : int
        Expected range of sorted positions
    expected_first_value, expected_last_value : float
        Expected feature values at the range bounds
    expected_target_frequency_distribution : mapping
        Target value -> expected frequency

    Notes
    -----
    The frequency check is one-directional: target values missing from the
    actual distribution are not reported.
    """
    _assert_stored_state(
        target, get_field,
        expected_first_position, expected_last_position,
        expected_first_value, expected_last_value,
        expected_target_frequency_distribution)

    assert_equal(expected_first_position, target.first_position, "Wrong first position.")
    assert_equal(expected_last_position, target.last_position, "Wrong last position.")
    assert_equal(expected_first_value, target.first_value, "Wrong first value.")
    assert_equal(expected_last_value, target.last_value, "Wrong last value.")


def assert_numerical_bin_state(target: Any,
                               expected_first_position: int,
                               expected_last_position: int,
                               expected_first_value: float,
                               expected_last_value: float,
                               expected_target_frequency_distribution: Mapping[float, int]):
    """Assert that a numerical bin is in the expected state, reading base-type fields."""
    _assert_stored_state(
        target, get_base_field,
        expected_first_position, expected_last_position,
        expected_first_value, expected_last_value,
        expected_target_frequency_distribution)

#!/usr/bin/env python3
"""
Unit tests for the default tolerances.
"""

import sys
import math
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pynumassert import (
    AssertFailedError,
    Tolerances,
    assert_double_equal,
    get_tolerances,
    reset_tolerances,
    set_tolerances,
)


class TestTolerances:
    """Test the process-wide default tolerances."""

    def test_defaults(self):
        tolerances = get_tolerances()
        assert tolerances.matrix == 1e-2
        assert tolerances.distribution == 1e-6
        assert tolerances.sampling == 1e-6
        assert tolerances.categorical == 1e-4
        assert tolerances.decomposition == 1e-3
        assert tolerances.scaling == 1e-3

    def test_set_updates_only_named_families(self):
        updated = set_tolerances(matrix=1e-8, scaling=0.5)
        assert updated.matrix == 1e-8
        assert updated.scaling == 0.5
        assert updated.distribution == 1e-6
        assert get_tolerances() == updated

    def test_reset(self):
        set_tolerances(matrix=1.0)
        assert reset_tolerances() == Tolerances()
        assert get_tolerances().matrix == 1e-2

    def test_unknown_family(self):
        with pytest.raises(TypeError, match="precision"):
            set_tolerances(precision=1e-3)

    @pytest.mark.parametrize("value", [-1e-3, math.inf, math.nan, True, "0.1"])
    def test_invalid_values_rejected(self, value):
        with pytest.raises(ValueError):
            set_tolerances(matrix=value)
        # Previous defaults are kept
        assert get_tolerances().matrix == 1e-2

    def test_tolerances_are_immutable(self):
        with pytest.raises(AttributeError):
            get_tolerances().matrix = 1.0


class TestDefaultDelta:
    """Test that omitted deltas resolve to the configured defaults."""

    def test_matrix_default_applies(self):
        assert_double_equal(1.0, 1.005)

    def test_tightened_default_applies(self):
        set_tolerances(matrix=1e-3)
        with pytest.raises(AssertFailedError):
            assert_double_equal(1.0, 1.005)

    def test_explicit_delta_wins(self):
        set_tolerances(matrix=0.0)
        assert_double_equal(1.0, 1.25, delta=0.5)

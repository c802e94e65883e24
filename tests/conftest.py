"""
Pytest configuration for the PyNumAssert test suite.

Restores the default tolerances around every test and provides shared
categorical fixtures and a reproducible random generator.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pynumassert import reset_tolerances
from tests import RANDOM_SEED
from tests._entities import (
    Category,
    CategoricalVariable,
    CategoricalEntailment,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "statistical: mark test as depending on random sampling"
    )


@pytest.fixture(autouse=True)
def default_tolerances():
    """Run every test with the default tolerances."""
    reset_tolerances()
    yield
    reset_tolerances()


@pytest.fixture
def rng():
    """Reproducible random generator."""
    return np.random.default_rng(RANDOM_SEED)


@pytest.fixture
def color():
    """Feature variable with three categories."""
    return CategoricalVariable(
        "COLOR", [Category(0.0, "red"), Category(1.0, "green"), Category(2.0, "blue")])


@pytest.fixture
def size():
    """Feature variable with two categories."""
    return CategoricalVariable("SIZE", [Category(0.0, "small"), Category(1.0, "large")])


@pytest.fixture
def outcome():
    """Response variable."""
    return CategoricalVariable("OUTCOME", [Category(0.0, "no"), Category(1.0, "yes")])


@pytest.fixture
def entailments(color, size, outcome):
    """Three entailments on COLOR and SIZE predicting OUTCOME."""
    return [
        CategoricalEntailment([color, size], outcome, [{0.0}, set()], 1.0, 0.9),
        CategoricalEntailment([color, size], outcome, [{1.0, 2.0}, {1.0}], 0.0, 0.75),
        CategoricalEntailment([color, size], outcome, [set(), {0.0}], 1.0, 0.6),
    ]

"""
PyNumAssert Test Suite
======================

Tests for the assertion helpers, grouped as:
- unit/: scalar, array and list comparers, configuration, reflection,
  exception and comparison helpers
- top level: matrices, patterns, partitions, categorical entities, bins,
  statistical checks, decompositions and reference fixtures

Run tests:
    python -m pytest tests/ -v
"""

# Tolerances used across the suite
TEST_TOLERANCE_STRICT = 1e-10
TEST_TOLERANCE_LOOSE = 1e-2

# Seed for statistical checks
RANDOM_SEED = 42

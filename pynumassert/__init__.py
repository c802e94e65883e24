"""
PyNumAssert: Tolerance-Aware Assertions for Numerical Code

Assertion helpers for testing numerical analytics code: real and complex
scalars, arrays, dense, sparse and view matrices with optional names, index
collections and partitions, categorical entities, exception contracts, and
statistical checks of samplers and decompositions.

Every helper raises ``AssertFailedError`` (an ``AssertionError``) on
failure, so it works unchanged under pytest and unittest.

License: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Data structures
from .data_structures import (
    AssertFailedError,
    MatrixParts,
    MatrixPatterns,
    GoodnessOfFitResult
)

# Configuration
from ._config import Tolerances, get_tolerances, set_tolerances, reset_tolerances

# Scalars, arrays and lists
from .scalars import (
    doubles_are_equal,
    assert_double_equal,
    complexes_are_equal,
    assert_complex_equal
)
from .arrays import assert_array_equal, assert_double_array_equal, assert_complex_array_equal
from .lists import assert_same_items

# Reflective access
from .reflector import (
    get_field,
    get_base_field,
    set_field,
    get_property,
    execute_member,
    execute_base_member,
    execute_static_member
)

# Matrices
from .labeled_matrix import LabeledMatrix
from .matrices import (
    MatrixState,
    DoubleMatrixState,
    ComplexMatrixState,
    ExtendedMatrixState,
    ExtendedComplexMatrixState,
    matrix_parts,
    assert_matrix_equal,
    assert_matrix_state,
    row_name_exists,
    column_name_exists
)
from .patterns import matrix_patterns, lower_bandwidth, upper_bandwidth, assert_matrix_patterns

# Indexes and partitions
from .indexes import (
    assert_index_collection_equal,
    assert_index_collection_state,
    assert_index_value_pair_equal,
    assert_index_value_pairs_equal
)
from .partitions import (
    assert_partition_equal,
    assert_same_identifiers,
    assert_same_parts,
    partition_indexes
)

# Categorical entities and numerical bins
from .categorical import (
    assert_category_state,
    assert_category_equal,
    assert_variable_state,
    assert_variable_equal,
    assert_data_set_equal,
    assert_entailment_state,
    assert_entailment_equal,
    assert_classifier_state,
    assert_classifier_equal
)
from .bins import assert_numerical_block_state, assert_numerical_bin_state

# Exceptions and comparisons
from .raises import (
    NONE_PARTIAL_MESSAGE,
    assert_raises,
    assert_raises_with_cause,
    assert_cause_raises,
    assert_argument_error
)
from .comparable import check_equals_with_none, check_ordering_with_none, check_ordering_consistency

# Statistical checks
from .goodness_of_fit import (
    check_chebyshev_inequality,
    check_distribution_chebyshev,
    chi_squared_critical_value,
    check_goodness_of_fit,
    check_distribution_sample,
    check_inclusion_probabilities
)
from .graphs import check_partial_graph
from .decompositions import (
    check_singular_value_decomposition,
    check_spectral_decomposition,
    check_configuration_distances
)

# Reference fixtures
from ._validation import load_reference, matrix_state_from_reference, compare_with_reference


# Version checking utilities
def check_version():
    """Print PyNumAssert version and dependencies."""
    import numpy as np
    import pandas as pd
    import scipy
    print(f"PyNumAssert: {__version__}")
    print(f"NumPy: {np.__version__}")
    print(f"SciPy: {scipy.__version__}")
    print(f"pandas: {pd.__version__}")


__all__ = [
    # Data structures
    'AssertFailedError',
    'MatrixParts',
    'MatrixPatterns',
    'GoodnessOfFitResult',

    # Configuration
    'Tolerances',
    'get_tolerances',
    'set_tolerances',
    'reset_tolerances',

    # Scalars, arrays and lists
    'doubles_are_equal',
    'assert_double_equal',
    'complexes_are_equal',
    'assert_complex_equal',
    'assert_array_equal',
    'assert_double_array_equal',
    'assert_complex_array_equal',
    'assert_same_items',

    # Reflective access
    'get_field',
    'get_base_field',
    'set_field',
    'get_property',
    'execute_member',
    'execute_base_member',
    'execute_static_member',

    # Matrices
    'LabeledMatrix',
    'MatrixState',
    'DoubleMatrixState',
    'ComplexMatrixState',
    'ExtendedMatrixState',
    'ExtendedComplexMatrixState',
    'matrix_parts',
    'assert_matrix_equal',
    'assert_matrix_state',
    'row_name_exists',
    'column_name_exists',
    'matrix_patterns',
    'lower_bandwidth',
    'upper_bandwidth',
    'assert_matrix_patterns',

    # Indexes and partitions
    'assert_index_collection_equal',
    'assert_index_collection_state',
    'assert_index_value_pair_equal',
    'assert_index_value_pairs_equal',
    'assert_partition_equal',
    'assert_same_identifiers',
    'assert_same_parts',
    'partition_indexes',

    # Categorical entities and numerical bins
    'assert_category_state',
    'assert_category_equal',
    'assert_variable_state',
    'assert_variable_equal',
    'assert_data_set_equal',
    'assert_entailment_state',
    'assert_entailment_equal',
    'assert_classifier_state',
    'assert_classifier_equal',
    'assert_numerical_block_state',
    'assert_numerical_bin_state',

    # Exceptions and comparisons
    'NONE_PARTIAL_MESSAGE',
    'assert_raises',
    'assert_raises_with_cause',
    'assert_cause_raises',
    'assert_argument_error',
    'check_equals_with_none',
    'check_ordering_with_none',
    'check_ordering_consistency',

    # Statistical checks
    'check_chebyshev_inequality',
    'check_distribution_chebyshev',
    'chi_squared_critical_value',
    'check_goodness_of_fit',
    'check_distribution_sample',
    'check_inclusion_probabilities',
    'check_partial_graph',
    'check_singular_value_decomposition',
    'check_spectral_decomposition',
    'check_configuration_distances',

    # Reference fixtures
    'load_reference',
    'matrix_state_from_reference',
    'compare_with_reference',

    # Utilities
    'check_version',
]

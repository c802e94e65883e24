"""
Assertions for categorical entities.

The checked objects are duck-typed:

- category: ``code`` (float) and ``label`` (str)
- categorical variable: ``name``, ``categories`` (list of categories) and
  ``is_read_only``; ``category_codes``, ``category_labels`` and
  ``number_of_categories`` are derived from the categories when the object
  does not provide them
- categorical data set: ``name``, ``variables`` and ``data`` (matrix-like)
- categorical entailment: ``feature_variables``, ``response_variable``,
  ``feature_premises`` (one set of category codes per feature variable),
  ``response_conclusion`` and ``truth_value``
- entailment ensemble classifier: ``feature_variables``,
  ``response_variable`` and ``entailments``

An empty feature premise and a premise holding every code of its feature
variable both mean "any value", so they are considered equivalent.
"""

from typing import Any, List, Optional, Sequence, Set

from ._config import get_tolerances
from ._utils import assert_equal, both_none, fail
from .arrays import assert_array_equal
from .lists import assert_same_items
from .matrices import assert_matrix_equal
from .reflector import get_field
from .scalars import assert_double_equal


# ============================================================================
# Derived attributes
# ============================================================================

def _categories(variable: Any) -> List[Any]:
    return list(variable.categories)


def category_codes(variable: Any) -> List[float]:
    """Codes of the categories of a variable, in category order."""
    codes = getattr(variable, 'category_codes', None)
    if codes is None:
        return [category.code for category in _categories(variable)]
    return list(codes)


def category_labels(variable: Any) -> List[str]:
    """Labels of the categories of a variable, in category order."""
    labels = getattr(variable, 'category_labels', None)
    if labels is None:
        return [category.label for category in _categories(variable)]
    return list(labels)


def number_of_categories(variable: Any) -> int:
    count = getattr(variable, 'number_of_categories', None)
    if count is None:
        return len(_categories(variable))
    return count


# ============================================================================
# Categories
# ============================================================================

def assert_category_state(target: Any, expected_code: float, expected_label: str):
    """Assert that a category has the expected code and label."""
    assert_equal(expected_code, target.code, "Wrong category code.")
    assert_equal(expected_label, target.label, "Wrong category label.")


def assert_category_equal(expected: Any, actual: Any):
    """Assert that two categories have the same code and label."""
    if both_none(expected, actual, "category"):
        return
    if expected.code != actual.code:
        fail("Categories have different codes.")
    if expected.label != actual.label:
        fail("Categories have different labels.")


# ============================================================================
# Variables
# ============================================================================

def assert_variable_state(target: Any,
                          expected_name: str,
                          expected_categories: Sequence[Any],
                          expected_read_only: bool):
    """
    Assert that a categorical variable is in the expected state.

    The name is checked both as stored (reflectively) and as exposed.
    Derived codes and labels must agree with the categories.
    """
    assert_equal(expected_name, get_field(target, 'name'), "Wrong stored name.")
    assert_equal(expected_name, target.name, "Wrong name.")

    actual_categories = _categories(target)
    if len(actual_categories) != len(expected_categories):
        fail("Target categorical variable has an unexpected number of categories.")
    assert_equal(len(expected_categories), number_of_categories(target),
                 "Wrong number of categories.")

    for expected_category, actual_category in zip(expected_categories, actual_categories):
        assert_category_equal(expected_category, actual_category)

    codes = category_codes(target)
    labels = category_labels(target)
    for j, category in enumerate(actual_categories):
        assert_equal(category.code, codes[j], f"Wrong category code at position {j}.")
        assert_equal(category.label, labels[j], f"Wrong category label at position {j}.")

    assert_equal(expected_read_only, target.is_read_only, "Wrong read only flag.")


def assert_variable_equal(expected: Any, actual: Any):
    """Assert that two categorical variables are equal."""
    if both_none(expected, actual, "categorical variable"):
        return
    if expected.name != actual.name:
        fail("Categorical variables have different names.")
    if expected.is_read_only != actual.is_read_only:
        fail("One categorical variable is read only, the other is not.")

    expected_categories = _categories(expected)
    actual_categories = _categories(actual)
    if len(expected_categories) != len(actual_categories):
        fail("Categorical variables have different numbers of categories.")
    for expected_category, actual_category in zip(expected_categories, actual_categories):
        assert_category_equal(expected_category, actual_category)


def _assert_variables_equal(expected: Sequence[Any], actual: Sequence[Any], message: str):
    if len(expected) != len(actual):
        fail(message)
    for expected_variable, actual_variable in zip(expected, actual):
        assert_variable_equal(expected_variable, actual_variable)


# ============================================================================
# Data sets
# ============================================================================

def assert_data_set_equal(expected: Any, actual: Any, delta: Optional[float] = None):
    """
    Assert that two categorical data sets are equal.

    Variables and data are checked both as exposed and as stored. Data
    matrices are compared within ``delta``, by default the configured
    categorical tolerance.
    """
    if both_none(expected, actual, "categorical data set"):
        return
    if delta is None:
        delta = get_tolerances().categorical

    if expected.name != actual.name:
        fail("Categorical data sets have different names.")

    message = "Categorical data sets have different numbers of variables."
    _assert_variables_equal(list(expected.variables), list(actual.variables), message)
    _assert_variables_equal(list(get_field(expected, 'variables')),
                            list(get_field(actual, 'variables')), message)

    assert_matrix_equal(get_field(expected, 'data'), get_field(actual, 'data'), delta)
    assert_matrix_equal(expected.data, actual.data, delta)


# ============================================================================
# Entailments
# ============================================================================

def _is_nonempty_proper_premise(premise: Set[float], variable: Any) -> bool:
    premise = set(premise)
    return len(premise) > 0 and premise < set(category_codes(variable))


def assert_entailment_state(target: Any,
                            expected_feature_variables: Sequence[Any],
                            expected_response_variable: Any,
                            expected_feature_premises: Sequence[Set[float]],
                            expected_response_conclusion: float,
                            expected_truth_value: float):
    """Assert that a categorical entailment is in the expected state."""
    feature_variables = list(target.feature_variables)
    if len(feature_variables) != len(expected_feature_variables):
        fail("The list of target feature variables has an unexpected count.")
    for expected_variable, actual_variable in zip(expected_feature_variables, feature_variables):
        assert_variable_equal(expected_variable, actual_variable)

    assert_variable_equal(expected_response_variable, target.response_variable)

    stored_premises = list(get_field(target, 'feature_premises'))
    exposed_premises = list(target.feature_premises)
    for i, expected_premise in enumerate(expected_feature_premises):
        if set(expected_premise) != set(exposed_premises[i]):
            fail("The target feature premises are not as expected.")
        if set(expected_premise) != set(stored_premises[i]):
            fail("The target feature premises are not as expected.")

    expected_is_proper = [
        _is_nonempty_proper_premise(premise, expected_feature_variables[i])
        for i, premise in enumerate(expected_feature_premises)]
    actual_is_proper = [
        _is_nonempty_proper_premise(premise, feature_variables[i])
        for i, premise in enumerate(exposed_premises)]
    assert_array_equal(expected_is_proper, actual_is_proper)

    delta = get_tolerances().matrix
    assert_double_equal(expected_response_conclusion, target.response_conclusion,
                        delta, "Wrong response conclusion.")
    assert_double_equal(expected_truth_value, target.truth_value,
                        delta, "Wrong truth value.")


def assert_entailment_equal(expected: Any, actual: Any):
    """
    Assert that two categorical entailments are equal.

    Premises are compared as sets, and a premise that is empty or covers the
    whole domain of its feature variable matches any other such premise.
    """
    if both_none(expected, actual, "categorical entailment"):
        return

    expected_features = list(expected.feature_variables)
    actual_features = list(actual.feature_variables)
    if len(expected_features) != len(actual_features):
        fail("The categorical entailments have different feature variables.")
    for expected_variable, actual_variable in zip(expected_features, actual_features):
        assert_variable_equal(expected_variable, actual_variable)

    assert_variable_equal(expected.response_variable, actual.response_variable)

    expected_premises = list(expected.feature_premises)
    actual_premises = list(actual.feature_premises)
    for i, expected_premise in enumerate(expected_premises):
        expected_is_proper = _is_nonempty_proper_premise(expected_premise, expected_features[i])
        actual_is_proper = _is_nonempty_proper_premise(actual_premises[i], actual_features[i])
        if expected_is_proper != actual_is_proper:
            fail("The categorical entailments have different feature premises.")
        if expected_is_proper and set(expected_premise) != set(actual_premises[i]):
            fail("The categorical entailments have different feature premises.")

    delta = get_tolerances().matrix
    assert_double_equal(expected.response_conclusion, actual.response_conclusion,
                        delta, "Wrong response conclusion.")
    assert_double_equal(expected.truth_value, actual.truth_value,
                        delta, "Wrong truth value.")


# ============================================================================
# Ensemble classifiers
# ============================================================================

def assert_classifier_state(target: Any,
                            expected_feature_variables: Sequence[Any],
                            expected_response_variable: Any,
                            expected_entailments: Sequence[Any]):
    """Assert that an entailment ensemble classifier is in the expected state."""
    feature_variables = list(target.feature_variables)
    if len(feature_variables) != len(expected_feature_variables):
        fail("The list of target feature variables has an unexpected count.")
    for expected_variable, actual_variable in zip(expected_feature_variables, feature_variables):
        assert_variable_equal(expected_variable, actual_variable)

    assert_variable_equal(expected_response_variable, target.response_variable)

    assert_same_items(list(expected_entailments), list(target.entailments),
                      assert_entailment_equal)


def assert_classifier_equal(expected: Any, actual: Any):
    """
    Assert that two entailment ensemble classifiers are equal.

    Entailments are compared in any order.
    """
    if both_none(expected, actual, "categorical entailment ensemble classifier"):
        return

    expected_features = list(expected.feature_variables)
    actual_features = list(actual.feature_variables)
    if len(expected_features) != len(actual_features):
        fail("The categorical entailment ensemble classifiers have different "
             "feature variables.")
    for expected_variable, actual_variable in zip(expected_features, actual_features):
        assert_variable_equal(expected_variable, actual_variable)

    assert_variable_equal(expected.response_variable, actual.response_variable)

    assert_same_items(list(expected.entailments), list(actual.entailments),
                      assert_entailment_equal)

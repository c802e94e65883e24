"""
Statistical checks for random samplers and probability distributions.

Random output cannot be compared entry by entry, so these helpers verify
samples against their theoretical properties:

- the Chebyshev inequality bounds how far a sample mean can fall from the
  distribution mean with probability at least ``1 - delta``;
- Pearson's chi-squared statistic measures how well observed frequencies
  (or proportions) fit expected ones.

Both checks fail with a small, controlled probability even for a correct
sampler; tests using them should fix the random state.

References
----------
Pearson, K. (1900). On the criterion that a given system of deviations from
the probable in the case of a correlated system of variables is such that
it can be reasonably supposed to have arisen from random sampling.
Philosophical Magazine, 50(302), 157-175.
"""

import math
import warnings
from typing import Any, Callable, Optional, Sequence

import numpy as np
from scipy import special, stats

from ._utils import assert_equal, fail
from .data_structures import GoodnessOfFitResult
from .matrices import matrix_parts


def check_chebyshev_inequality(distribution_mean: float,
                               distribution_variance: float,
                               sample_mean: float,
                               sample_size: int,
                               delta: float):
    """
    Check that a sample mean satisfies the Chebyshev inequality.

    For a sample of ``n`` independent draws, the sample mean falls within
    ``epsilon = sigma / sqrt(n) / sqrt(delta)`` of the distribution mean
    with probability at least ``1 - delta``.

    Parameters
    ----------
    distribution_mean : float
        Mean of the sampled distribution
    distribution_variance : float
        Variance of the sampled distribution
    sample_mean : float
        Observed sample mean
    sample_size : int
        Number of draws
    delta : float
        Allowed failure probability, in (0, 1)

    Raises
    ------
    ValueError
        If delta is not in (0, 1) or sample_size is not positive
    AssertFailedError
        If the mean or standard deviation is not finite, or the sample mean
        is too far from the distribution mean
    """
    if not 0 < delta < 1:
        raise ValueError(f"delta must be in (0, 1), got {delta}")
    if sample_size < 1:
        raise ValueError(f"sample_size must be positive, got {sample_size}")

    if not math.isfinite(distribution_mean):
        fail(f"The distribution mean is not finite: <{distribution_mean}>.")
    std_dev = math.sqrt(distribution_variance)
    if not math.isfinite(std_dev):
        fail(f"The distribution standard deviation is not finite: <{std_dev}>.")

    epsilon = std_dev / math.sqrt(sample_size) / math.sqrt(delta)
    score = abs(sample_mean - distribution_mean)
    if not score < epsilon:
        fail(f"Chebyshev inequality violated: |{sample_mean} - {distribution_mean}| "
             f"= {score} is not below {epsilon}.")


def check_distribution_chebyshev(distribution: Any,
                                 sample_mean: float,
                                 sample_size: int,
                                 delta: float):
    """
    Chebyshev check against a distribution object.

    ``distribution`` needs ``mean()`` and ``var()`` methods, as scipy.stats
    frozen distributions have.
    """
    check_chebyshev_inequality(
        float(distribution.mean()), float(distribution.var()),
        sample_mean, sample_size, delta)


def chi_squared_critical_value(df: int, alpha: float = 0.01) -> float:
    """
    Upper ``alpha`` quantile of the chi-squared distribution.

    Raises
    ------
    ValueError
        If df is not positive or alpha is not in (0, 1)
    """
    if df <= 0:
        raise ValueError(f"Invalid degrees of freedom: {df}")
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")
    return float(stats.chi2.ppf(1 - alpha, df))


def check_goodness_of_fit(expected: Any,
                          actual: Any,
                          critical_value: Optional[float] = None,
                          alpha: float = 0.01,
                          n_estimated_parameters: int = 0,
                          verbose: bool = False) -> GoodnessOfFitResult:
    """
    Pearson chi-squared goodness-of-fit check.

    Parameters
    ----------
    expected : matrix-like
        Expected frequencies (or proportions)
    actual : matrix-like
        Observed frequencies (or proportions), same dimensions
    critical_value : float, optional
        Threshold the statistic must stay below. If omitted, the upper
        ``alpha`` quantile of the chi-squared distribution with
        ``n_cells - 1 - n_estimated_parameters`` degrees of freedom.
    alpha : float, default=0.01
        Significance level used when critical_value is omitted
    n_estimated_parameters : int, default=0
        Parameters estimated from the data, subtracted from the degrees
        of freedom
    verbose : bool, default=False
        Whether to print the result summary

    Returns
    -------
    GoodnessOfFitResult
        The statistic and decision

    Raises
    ------
    AssertFailedError
        If dimensions differ or the statistic is not below the critical value

    Notes
    -----
    The statistic is

        X² = Σᵢ (actualᵢ - expectedᵢ)² / expectedᵢ

    Cells where both frequencies are zero do not contribute and are not
    counted in the degrees of freedom. A zero expected frequency with a
    non-zero observed one makes the statistic infinite.
    """
    # Input validation and conversion
    expected_parts = matrix_parts(expected)
    actual_parts = matrix_parts(actual)
    assert_equal(expected_parts.number_of_rows, actual_parts.number_of_rows,
                 "Wrong number of rows.")
    assert_equal(expected_parts.number_of_columns, actual_parts.number_of_columns,
                 "Wrong number of columns.")

    e = expected_parts.entries.astype(float)
    a = actual_parts.entries.astype(float)

    notes = []
    empty = (e == 0) & (a == 0)
    skipped_cells = int(np.sum(empty))
    if skipped_cells:
        notes.append(f"{skipped_cells} cell(s) with zero expected and observed frequency skipped")

    impossible = (e == 0) & ~empty
    if np.any(impossible):
        msg = (f"{int(np.sum(impossible))} cell(s) have zero expected frequency "
               f"but a non-zero observed one")
        warnings.warn(msg)
        notes.append(msg)

    keep = ~empty
    with np.errstate(divide='ignore'):
        statistic = float(np.sum((a[keep] - e[keep]) ** 2 / e[keep]))

    n_cells = int(e.size)
    df = n_cells - skipped_cells - 1 - n_estimated_parameters
    if critical_value is None:
        critical_value = chi_squared_critical_value(df, alpha)

    p_value = float(1 - stats.chi2.cdf(statistic, df)) if df > 0 else float('nan')
    passed = statistic < critical_value

    result = GoodnessOfFitResult(
        statistic=statistic,
        df=df,
        critical_value=float(critical_value),
        p_value=p_value,
        passed=passed,
        n_cells=n_cells,
        skipped_cells=skipped_cells,
        notes=notes
    )

    if verbose:
        print(result.summary())

    if not passed:
        fail(f"Goodness of fit rejected: statistic {statistic} is not below "
             f"critical value {critical_value}.\n{result.summary()}")

    return result


def check_distribution_sample(distribution: Any,
                              sample_size: int,
                              delta: float,
                              random_state: Any = None):
    """
    Check the sampler of a distribution.

    Draws ``sample_size`` points one at a time and then as a single batch.
    The batch must have the requested size; the mean of each sample is
    checked with the Chebyshev inequality when the distribution mean and
    variance are finite.

    Parameters
    ----------
    distribution : scipy.stats frozen distribution
        Anything with ``mean()``, ``var()`` and
        ``rvs(size=None, random_state=None)``
    sample_size : int
        Number of draws per sample
    delta : float
        Allowed Chebyshev failure probability, in (0, 1)
    random_state : int or numpy.random.Generator, optional
        Seed or generator for reproducible draws
    """
    rng = np.random.default_rng(random_state)

    mean = float(distribution.mean())
    variance = float(distribution.var())
    can_check = math.isfinite(mean) and math.isfinite(variance)
    if not can_check:
        warnings.warn(
            f"Chebyshev check skipped: distribution mean {mean} or "
            f"variance {variance} is not finite")

    # Single draws
    sample = np.array([float(distribution.rvs(random_state=rng))
                       for _ in range(sample_size)])
    if can_check:
        check_chebyshev_inequality(mean, variance, float(np.mean(sample)),
                                   sample_size, delta)

    # Batch draws
    sample = np.asarray(distribution.rvs(size=sample_size, random_state=rng))
    assert_equal(sample_size, sample.size, "Wrong sample size.")
    assert_equal(1, sample.ndim, "The sample is not a vector.")
    if can_check:
        check_chebyshev_inequality(mean, variance, float(np.mean(sample)),
                                   sample_size, delta)


def check_inclusion_probabilities(draw_sample: Callable[[], Sequence[int]],
                                  population_size: int,
                                  sample_size: int,
                                  expected_inclusion_probabilities: Sequence[float],
                                  number_of_samples: int,
                                  critical_value: Optional[float] = None,
                                  delta: float = 0.01,
                                  check_distinct_samples: bool = True) -> GoodnessOfFitResult:
    """
    Check a sampling design through its inclusion probabilities.

    Draws ``number_of_samples`` samples of population units and estimates
    the probability that each unit is included. Then checks that:

    1. every possible sample was drawn, i.e. the number of distinct samples
       is ``C(population_size, sample_size)`` (skipped when
       ``check_distinct_samples`` is False);
    2. each estimated inclusion probability satisfies the Chebyshev
       inequality for a Bernoulli variable with the expected probability;
    3. the estimated probabilities fit the expected ones (Pearson check).

    Parameters
    ----------
    draw_sample : callable
        Returns the indexes of the units in a new sample
    population_size : int
        Number of units in the population
    sample_size : int
        Number of units in each sample
    expected_inclusion_probabilities : sequence of float
        Expected inclusion probability of each unit
    number_of_samples : int
        Number of samples to draw
    critical_value : float, optional
        Critical value of the goodness-of-fit check
    delta : float, default=0.01
        Allowed Chebyshev failure probability
    check_distinct_samples : bool, default=True
        Whether to require every possible sample to be drawn

    Returns
    -------
    GoodnessOfFitResult
        Outcome of the final goodness-of-fit check

    Examples
    --------
    >>> rng = np.random.default_rng(0)
    >>> check_inclusion_probabilities(
    ...     lambda: rng.choice(5, size=2, replace=False),
    ...     population_size=5, sample_size=2,
    ...     expected_inclusion_probabilities=[0.4] * 5,
    ...     number_of_samples=10000)
    """
    expected = np.asarray(expected_inclusion_probabilities, dtype=float).reshape(-1)
    assert_equal(population_size, expected.size,
                 "Wrong number of expected inclusion probabilities.")

    # Generate samples
    membership = np.zeros((number_of_samples, population_size), dtype=bool)
    samples = []
    for i in range(number_of_samples):
        units = sorted(int(unit) for unit in draw_sample())
        assert_equal(sample_size, len(units), f"Wrong size for sample {i}.")
        assert_equal(sample_size, len(set(units)), f"Repeated units in sample {i}.")
        membership[i, units] = True
        samples.append(tuple(units))

    actual = membership.mean(axis=0)

    if check_distinct_samples:
        assert_equal(int(special.comb(population_size, sample_size, exact=True)),
                     len(set(samples)),
                     "Wrong number of distinct samples.")

    for j in range(population_size):
        check_distribution_chebyshev(
            stats.bernoulli(expected[j]), float(actual[j]), number_of_samples, delta)

    return check_goodness_of_fit(expected.reshape(-1, 1), actual.reshape(-1, 1),
                                 critical_value)

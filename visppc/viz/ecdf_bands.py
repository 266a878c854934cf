# -*- coding: utf-8 -*-
"""
Functions for computing confidence bands for the empirical cumulative
distribution function (ECDF) of values that should be uniformly distributed on
[0, 1], such as PIT values.

The simultaneous bands are built from pointwise binomial quantiles. The
pointwise level, `gamma`, is adjusted so that a uniform sample's ECDF stays
entirely inside the band with the desired probability. `gamma` is found
either by simulating uniform samples or by computing the band's exact coverage
and optimizing `gamma`.
"""
import numpy as np
import scipy.stats

from .utils import progress

BAND_METHODS = ['simulate', 'optimize']
MAX_DEFAULT_POINTS = 100


def ecdf_at(values, points):
    """
    Evaluates the ECDF of `values` at each element of `points`.

    Parameters
    ----------
    values : 1D ndarray of floats.
    points : 1D ndarray of floats.

    Returns
    -------
    ecdf : 1D ndarray of floats in [0, 1].
        Same shape as `points`.
    """
    values = np.asarray(values, dtype=float)
    if values.ndim != 1 or values.size == 0:
        msg = '`values` MUST be a non-empty 1D ndarray.'
        raise ValueError(msg)
    sorted_values = np.sort(values)
    counts = np.searchsorted(sorted_values, points, side='right')
    return counts / float(values.size)


def evaluation_points(num_points):
    """
    Returns `num_points + 1` equally spaced points, `k / num_points` for
    `k = 0, ..., num_points`.
    """
    if not isinstance(num_points, (int, np.integer)) or num_points < 1:
        msg = '`num_points` MUST be a positive int.'
        raise ValueError(msg)
    return np.linspace(0, 1, num_points + 1)


def _default_points(n, points):
    """
    Returns `points` or, if `points is None`, a grid of at most
    `MAX_DEFAULT_POINTS` intervals.
    """
    if points is None:
        return evaluation_points(min(n, MAX_DEFAULT_POINTS))
    points = np.asarray(points, dtype=float)
    if points.ndim != 1 or ((points < 0) | (points > 1)).any():
        msg = '`points` MUST be a 1D ndarray of values in [0, 1].'
        raise ValueError(msg)
    if (np.diff(points) <= 0).any():
        msg = '`points` MUST be strictly increasing.'
        raise ValueError(msg)
    return points


def _check_band_args(n, prob):
    """
    Ensures `n` is a positive int and `prob` is in (0, 1).
    """
    if not isinstance(n, (int, np.integer)) or n < 1:
        msg = '`n` MUST be a positive int.'
        raise ValueError(msg)
    if not 0 < prob < 1:
        msg = '`prob` MUST be in (0, 1).'
        raise ValueError(msg)
    return None


def _interior(points):
    """
    Returns the elements of `points` strictly between zero and one. The ECDF
    of a sample is fixed at 0 and 1, so only interior points carry information.
    """
    return points[(points > 0) & (points < 1)]


def _gamma_statistic(counts, n, points):
    """
    Computes `2 * min_k min(F(N_k), 1 - F(N_k - 1))` where `N_k` is the number
    of values at or below `points[k]` and `F` is the CDF of a
    `Binomial(n, points[k])` random variable.

    `counts` may be 1D (one sample) or 2D (one row per sample).
    """
    if points.size == 0:
        return np.ones(np.shape(counts)[:-1])
    lower_tail = scipy.stats.binom.cdf(counts, n, points)
    upper_tail = scipy.stats.binom.sf(counts - 1, n, points)
    two_sided = 2 * np.minimum(lower_tail, upper_tail)
    return np.minimum(two_sided.min(axis=-1), 1.0)


def _band_from_gamma(n, points, gamma):
    """
    Computes the band of binomial quantiles at pointwise level `gamma`.
    """
    lower = scipy.stats.binom.ppf(gamma / 2, n, points)
    upper = scipy.stats.binom.ppf(1 - gamma / 2, n, points)
    lower = np.clip(lower, 0, n) / float(n)
    upper = np.clip(upper, 0, n) / float(n)
    # The ECDF is pinned at the ends of the unit interval
    lower[points == 0], upper[points == 0] = 0, 0
    lower[points == 1], upper[points == 1] = 1, 1
    return lower, upper


def pointwise_band(n, points=None, prob=0.95):
    """
    Computes a pointwise (i.e. not simultaneous) confidence band for the ECDF
    of `n` uniform values.

    Parameters
    ----------
    n : positive int.
        The number of values whose ECDF is being assessed.
    points : 1D ndarray of floats in [0, 1], or None, optional.
        The points at which the band is computed. If None,
        `evaluation_points(min(n, 100))` is used.
    prob : float in (0, 1), optional.
        The coverage probability at each point. Default == 0.95.

    Returns
    -------
    lower, upper : 1D ndarray of floats in [0, 1].
        The lower and upper limits of the band at each point.
    """
    _check_band_args(n, prob)
    points = _default_points(n, points)
    return _band_from_gamma(n, points, 1 - prob)


def _simulate_gammas(n, points, num_sims, rseed=None, progress_bar=False):
    """
    Computes the gamma statistic of `num_sims` uniform samples of size `n`.
    """
    random_state = np.random.RandomState(rseed)
    interior = _interior(points)
    if progress_bar:
        iterator = progress(range(num_sims), desc='Simulating ECDFs')
    else:
        iterator = range(num_sims)

    gammas = np.empty(num_sims)
    for sim in iterator:
        uniform_draws = np.sort(random_state.uniform(size=n))
        counts = np.searchsorted(uniform_draws, interior, side='right')
        gammas[sim] = _gamma_statistic(counts, n, interior)
    return gammas


def _band_coverage(n, points, gamma):
    """
    Computes the probability that the ECDF of `n` uniform values lies inside
    the band of pointwise level `gamma` at every interior point.

    The number of values at or below successive points forms a Markov chain:
    given `i` values at or below `z_prev`, the number of the remaining `n - i`
    values falling in `(z_prev, z]` is
    `Binomial(n - i, (z - z_prev) / (1 - z_prev))`.
    """
    interior = _interior(points)
    if interior.size == 0:
        return 1.0
    lower = np.clip(scipy.stats.binom.ppf(gamma / 2, n, interior), 0, n)
    upper = np.clip(scipy.stats.binom.ppf(1 - gamma / 2, n, interior), 0, n)
    lower, upper = lower.astype(int), upper.astype(int)

    # Start with all mass at zero values below z = 0
    state = np.ones(1)
    prev_low, prev_high, prev_z = 0, 0, 0.0
    for pos, z in enumerate(interior):
        prev_counts = np.arange(prev_low, prev_high + 1)[:, None]
        new_counts = np.arange(lower[pos], upper[pos] + 1)[None, :]
        step_prob = (z - prev_z) / (1 - prev_z)
        transitions = scipy.stats.binom.pmf(new_counts - prev_counts,
                                            n - prev_counts,
                                            step_prob)
        state = state.dot(transitions)
        prev_low, prev_high, prev_z = lower[pos], upper[pos], z
    return float(state.sum())


def _optimize_gamma(n, points, prob, max_iter=40):
    """
    Finds the largest pointwise level `gamma` whose band has a simultaneous
    coverage of at least `prob`, via bisection on `[0, 1 - prob]`.
    """
    low, high = 0.0, 1.0 - prob
    if _band_coverage(n, points, high) >= prob:
        return high
    for _ in range(max_iter):
        mid = (low + high) / 2.0
        if _band_coverage(n, points, mid) >= prob:
            low = mid
        else:
            high = mid
    return low


def simultaneous_band(n,
                      points=None,
                      prob=0.95,
                      method='simulate',
                      num_sims=1000,
                      rseed=None,
                      progress_bar=False):
    """
    Computes a simultaneous confidence band for the ECDF of `n` uniform values.

    Parameters
    ----------
    n : positive int.
        The number of values whose ECDF is being assessed.
    points : 1D ndarray of floats in [0, 1], or None, optional.
        The points at which the band is computed. If None,
        `evaluation_points(min(n, 100))` is used.
    prob : float in (0, 1), optional.
        The desired probability that the ECDF of a uniform sample lies inside
        the band at every point simultaneously. Default == 0.95.
    method : {'simulate', 'optimize'}, optional.
        'simulate' estimates the adjusted pointwise level from `num_sims`
        simulated uniform samples. 'optimize' computes the band's coverage
        exactly and searches for the adjusted level. Default == 'simulate'.
    num_sims : positive int, optional.
        The number of simulated samples. Only used if
        `method == 'simulate'`. Default == 1000.
    rseed : int or None, optional.
        The random seed used for the simulations. Default is None.
    progress_bar : bool, optional.
        Determines whether a progress bar is displayed while simulating.
        Default == False.

    Returns
    -------
    lower, upper : 1D ndarray of floats in [0, 1].
        The lower and upper limits of the band at each point.
    gamma : float in (0, 1).
        The adjusted pointwise level used to build the band.
    """
    _check_band_args(n, prob)
    if method not in BAND_METHODS:
        msg = '`method` MUST be one of {}.'.format(BAND_METHODS)
        raise ValueError(msg)
    points = _default_points(n, points)

    if method == 'simulate':
        if num_sims < 1:
            msg = '`num_sims` MUST be a positive int.'
            raise ValueError(msg)
        gammas = _simulate_gammas(n, points, num_sims,
                                  rseed=rseed, progress_bar=progress_bar)
        gamma = float(np.quantile(gammas, 1 - prob))
    else:
        gamma = _optimize_gamma(n, points, prob)

    lower, upper = _band_from_gamma(n, points, gamma)
    return lower, upper, gamma


def ecdf_uniformity_test(values,
                         num_points=None,
                         num_sims=1000,
                         rseed=None,
                         progress_bar=False):
    """
    Tests whether `values` are uniformly distributed on [0, 1] using the gamma
    statistic underlying the simultaneous ECDF bands.

    Parameters
    ----------
    values : 1D ndarray of floats in [0, 1].
        E.g. PIT values.
    num_points : positive int or None, optional.
        The number of intervals of the evaluation grid. If None,
        `min(values.size, 100)` is used.
    num_sims : positive int, optional.
        The number of simulated uniform samples used to compute the p-value.
        Default == 1000.
    rseed : int or None, optional.
        The random seed used for the simulations. Default is None.
    progress_bar : bool, optional.
        Determines whether a progress bar is displayed while simulating.
        Default == False.

    Returns
    -------
    gamma : float in [0, 1].
        The observed statistic. Small values mean the ECDF strays far from the
        uniform CDF at some point.
    p_value : float in [0, 1].
        The fraction of simulated uniform samples whose statistic is less than
        or equal to the observed `gamma`.
    """
    values = np.asarray(values, dtype=float)
    if values.ndim != 1 or values.size == 0:
        msg = '`values` MUST be a non-empty 1D ndarray.'
        raise ValueError(msg)
    if num_sims < 1:
        msg = '`num_sims` MUST be a positive int.'
        raise ValueError(msg)
    n = values.size
    if num_points is None:
        points = _default_points(n, None)
    else:
        points = evaluation_points(num_points)
    interior = _interior(points)

    counts = np.searchsorted(np.sort(values), interior, side='right')
    gamma = float(_gamma_statistic(counts, n, interior))

    gammas = _simulate_gammas(n, points, num_sims,
                              rseed=rseed, progress_bar=progress_bar)
    p_value = float((gammas <= gamma).mean())
    return gamma, p_value

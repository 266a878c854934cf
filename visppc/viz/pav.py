# -*- coding: utf-8 -*-
"""
The pool-adjacent-violators (PAV) algorithm for isotonic regression, and the
calibration diagnostics built on it: the CORP (consistent, optimally binned,
reproducible, PAV-based) reliability curve, its score decomposition, and
resampling-based consistency bands.
"""
import numpy as np
import pandas as pd
# Use scikit-learn for the isotonic (PAV) fit
from sklearn.isotonic import IsotonicRegression

from .utils import progress, simulate_binary_outcomes


def _check_pav_args(x, y, weights):
    """
    Ensures `x` and `y` are 1D ndarrays of equal length and that `weights`
    is None or a 1D ndarray of positive values with the same length.
    """
    if not isinstance(x, np.ndarray) or x.ndim != 1:
        msg = '`x` MUST be a 1D ndarray.'
        raise ValueError(msg)
    if not isinstance(y, np.ndarray) or y.ndim != 1:
        msg = '`y` MUST be a 1D ndarray.'
        raise ValueError(msg)
    if x.shape[0] != y.shape[0]:
        msg = '`x` and `y` MUST have the same number of elements.'
        raise ValueError(msg)
    if x.size == 0:
        msg = '`x` and `y` MUST NOT be empty.'
        raise ValueError(msg)
    if weights is not None:
        if not isinstance(weights, np.ndarray) or weights.shape != x.shape:
            msg = '`weights` MUST be None or an ndarray shaped like `x`.'
            raise ValueError(msg)
        if (weights <= 0).any():
            msg = '`weights` MUST be positive.'
            raise ValueError(msg)
    return None


def pav(x, y, weights=None, increasing=True):
    """
    Fits an isotonic regression of `y` on `x` with the pool-adjacent-violators
    algorithm.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The covariate, e.g. predicted probabilities.
    y : 1D ndarray of floats.
        The response, e.g. binary outcomes. Should have the same number of
        elements as `x`.
    weights : 1D ndarray of positive floats, or None, optional.
        The weight of each observation. If None, all observations are weighted
        equally. Default is None.
    increasing : bool, optional.
        If True, the fit is non-decreasing in `x`. Else, it is non-increasing.
        Default is True.

    Returns
    -------
    fitted : 1D ndarray of floats.
        The fitted value of each observation, in the same order as `x`.
        Observations with equal values of `x` receive equal fitted values.
    """
    _check_pav_args(x, y, weights)
    # Tied values of `x` are pooled (weighted) before the violators are pooled
    regressor = IsotonicRegression(increasing=increasing)
    fitted = regressor.fit_transform(x.astype(float),
                                     y.astype(float),
                                     sample_weight=weights)
    return np.asarray(fitted, dtype=float)


def pav_step_function(x, y, weights=None):
    """
    Computes the non-decreasing step function fitted by PAV, for plotting.

    Parameters
    ----------
    x, y, weights : see `pav`.

    Returns
    -------
    unique_x : 1D ndarray of floats.
        The sorted, unique values of `x`.
    fitted : 1D ndarray of floats.
        The fitted value at each element of `unique_x`.
    """
    fitted = pav(x, y, weights=weights)
    unique_x, first_pos = np.unique(x, return_index=True)
    return unique_x, fitted[first_pos]


def _check_probs_and_outcomes(probs, y):
    """
    Ensures `probs` is a 1D ndarray in [0, 1] and that `y` is a matching 1D
    ndarray of zeros and ones.
    """
    _check_pav_args(probs, y, None)
    if ((probs < 0) | (probs > 1)).any():
        msg = '`probs` MUST be in [0, 1].'
        raise ValueError(msg)
    if not np.isin(y, [0, 1]).all():
        msg = '`y` MUST only contain zeros and ones.'
        raise ValueError(msg)
    return None


def corp_decomposition(probs, y):
    """
    Decomposes the Brier score of probability forecasts into miscalibration
    (MCB), discrimination (DSC), and uncertainty (UNC) components, such that
    `score == mcb - dsc + unc`. The recalibrated forecasts are the PAV fit of
    the outcomes on the forecasts.

    Parameters
    ----------
    probs : 1D ndarray of floats in [0, 1].
        The predicted probabilities that `y == 1`.
    y : 1D ndarray of ints in `{0, 1}`.
        The observed outcomes.

    Returns
    -------
    decomposition : pandas Series.
        Has the index `['score', 'mcb', 'dsc', 'unc']`.
    """
    _check_probs_and_outcomes(probs, y)
    calibrated = pav(probs, y.astype(float))
    climatology = y.mean()

    score = np.mean((probs - y)**2)
    calibrated_score = np.mean((calibrated - y)**2)
    reference_score = np.mean((climatology - y)**2)

    decomposition =\
        pd.Series({'score': score,
                   'mcb': score - calibrated_score,
                   'dsc': reference_score - calibrated_score,
                   'unc': reference_score})
    return decomposition


def consistency_band(probs,
                     prob=0.9,
                     num_sims=1000,
                     rseed=None,
                     progress_bar=False):
    """
    Computes a consistency band for a CORP reliability curve: the range of
    PAV-recalibrated probabilities one would expect if `probs` were perfectly
    calibrated. Outcomes are resampled as Bernoulli(`probs`) draws and the PAV
    fit is recomputed for each resample.

    Parameters
    ----------
    probs : 1D ndarray of floats in [0, 1].
        The predicted probabilities.
    prob : float in (0, 1), optional.
        The pointwise coverage of the band. Default == 0.9.
    num_sims : positive int, optional.
        The number of resampled outcome vectors. Default == 1000.
    rseed : int or None, optional.
        The random seed used for resampling. Default is None.
    progress_bar : bool, optional.
        Determines whether a progress bar is displayed while resampling.
        Default == False.

    Returns
    -------
    unique_probs : 1D ndarray of floats.
        The sorted, unique values of `probs`.
    lower, upper : 1D ndarray of floats.
        The limits of the band at each element of `unique_probs`.
    """
    if not isinstance(probs, np.ndarray) or probs.ndim != 1:
        msg = '`probs` MUST be a 1D ndarray.'
        raise ValueError(msg)
    if not 0 < prob < 1:
        msg = '`prob` MUST be in (0, 1).'
        raise ValueError(msg)
    if num_sims < 1:
        msg = '`num_sims` MUST be a positive int.'
        raise ValueError(msg)
    random_state = np.random.RandomState(rseed)
    unique_probs = np.unique(probs)

    if progress_bar:
        iterator = progress(range(num_sims), desc='Resampling outcomes')
    else:
        iterator = range(num_sims)

    # Draw every resampled outcome vector at once, one row per simulation
    sim_y = simulate_binary_outcomes(np.tile(probs, (num_sims, 1)),
                                     rseed=random_state.randint(2**31 - 1))

    resampled_fits = np.empty((num_sims, unique_probs.size))
    for sim in iterator:
        resampled_fits[sim] =\
            pav_step_function(probs, sim_y[sim].astype(float))[1]

    tail = (1 - prob) / 2.0
    lower = np.quantile(resampled_fits, tail, axis=0)
    upper = np.quantile(resampled_fits, 1 - tail, axis=0)
    return unique_probs, lower, upper

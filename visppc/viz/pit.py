# -*- coding: utf-8 -*-
"""
Functions for computing probability integral transform (PIT) values.

Two kinds of PIT values are supported:
- the PIT of observed outcomes with respect to one's posterior predictive
  draws, used to check the calibration of one's model;
- the PIT of data with respect to the visualization (histogram, kernel
  density estimate, or quantile dot plot) that displays that data, used to
  check whether the visualization is a faithful summary of the data.

Under a well calibrated predictive distribution, or a faithful visualization,
the PIT values are (approximately) uniformly distributed on [0, 1].
"""
import numpy as np

from .utils import _ensure_2d_sim_y
from .density import _check_1d_array
from .density import kde_cdf, histogram_edges, histogram_cdf
from .dots import compute_quantile_dots, dot_layout, dots_cdf


def pit_from_draws(sim_y, obs_y, randomize=True, rseed=None):
    """
    Computes the PIT of each observed outcome with respect to its predictive
    draws.

    Parameters
    ----------
    sim_y : 2D ndarray.
        The simulated outcomes. There should be one row for every element of
        `obs_y` and one column for every set of simulated outcomes.
    obs_y : 1D ndarray.
        The observed outcomes.
    randomize : bool, optional.
        If True, ties between the observed and simulated outcomes are broken
        uniformly at random, i.e. `P(yrep < y) + V * P(yrep == y)` with
        `V ~ Uniform(0, 1)`. This makes the PIT values of discrete outcomes
        uniform under a calibrated model. If False, `P(yrep <= y)` is returned.
        Default is True.
    rseed : int or None, optional.
        The random seed used for breaking ties. Default is None.

    Returns
    -------
    pit_values : 1D ndarray of floats in [0, 1].
        One value per element of `obs_y`.
    """
    sim_y = _ensure_2d_sim_y(sim_y, obs_y)
    frac_below = (sim_y < obs_y[:, None]).mean(axis=1)
    frac_equal = (sim_y == obs_y[:, None]).mean(axis=1)

    if not randomize:
        return frac_below + frac_equal

    uniform_draws =\
        np.random.RandomState(rseed).uniform(size=obs_y.shape[0])
    return frac_below + uniform_draws * frac_equal


def pit_from_histogram(x, bins='auto', points=None):
    """
    Computes the PIT of `points` under the histogram of `x`.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data the histogram is built from.
    bins : int, str, or 1D ndarray, optional.
        The number of bins, the name of a numpy binning rule, or the bin edges
        themselves. Default == 'auto'.
    points : 1D ndarray or None, optional.
        The values to transform. If None, `x` itself is transformed.
        Default is None.

    Returns
    -------
    pit_values : 1D ndarray of floats in [0, 1].
    """
    _check_1d_array(x)
    if isinstance(bins, np.ndarray):
        edges = bins
    else:
        edges = histogram_edges(x, bins=bins)
    points = x if points is None else points
    return histogram_cdf(x, edges, points)


def pit_from_kde(x, bw='silverman', bounds=None, points=None):
    """
    Computes the PIT of `points` under the Gaussian kernel density estimate of
    `x`.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data the kernel density estimate is built from.
    bw : {'silverman', 'scott'} or positive float, optional.
        The bandwidth or the rule used to select it. Default == 'silverman'.
    bounds : 2-tuple or None, optional.
        The bounds of the data's support. See `density.kde_pdf`.
    points : 1D ndarray or None, optional.
        The values to transform. If None, `x` itself is transformed.
        Default is None.

    Returns
    -------
    pit_values : 1D ndarray of floats in [0, 1].
    """
    points = x if points is None else points
    return kde_cdf(x, points, bw=bw, bounds=bounds)


def pit_from_dots(x, num_dots=100, binwidth=None, aspect=1.0, points=None):
    """
    Computes the PIT of `points` under the quantile dot plot of `x`.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data the quantile dot plot is built from.
    num_dots : positive int, optional.
        The number of dots in the plot. Default == 100.
    binwidth : positive float or None, optional.
        See `dots.dot_layout`. Default is None.
    aspect : positive float, optional.
        See `dots.dot_layout`. Default == 1.0.
    points : 1D ndarray or None, optional.
        The values to transform. If None, `x` itself is transformed.
        Default is None.

    Returns
    -------
    pit_values : 1D ndarray of floats in [0, 1].
    """
    _check_1d_array(x)
    dots = compute_quantile_dots(x, num_dots=num_dots)
    layout, binwidth = dot_layout(dots, binwidth=binwidth, aspect=aspect)
    points = x if points is None else points
    return dots_cdf(layout['x'].values, binwidth, points)


PIT_FUNCTIONS = {'hist': pit_from_histogram,
                 'kde': pit_from_kde,
                 'dots': pit_from_dots}


def visualization_pit(x, kind, **kwargs):
    """
    Computes the PIT of the data in `x` under the visualization, `kind`, that
    displays `x`. Uniform PIT values indicate a faithful visualization.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data being visualized.
    kind : {'hist', 'kde', 'dots'}.
        The type of visualization.
    kwargs : passed to the PIT function of the chosen visualization type.

    Returns
    -------
    pit_values : 1D ndarray of floats in [0, 1].
    """
    if kind not in PIT_FUNCTIONS:
        msg = '`kind` MUST be one of {}.'.format(sorted(PIT_FUNCTIONS))
        raise ValueError(msg)
    return PIT_FUNCTIONS[kind](x, **kwargs)

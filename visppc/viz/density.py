# -*- coding: utf-8 -*-
"""
Density and distribution estimators underlying the continuous visualizations:
Gaussian kernel density estimates (with optional boundary reflection) and
histograms. Both the density and the cumulative distribution function of each
estimator are exposed so that one can compute the probability integral
transform of data under the visualization that displays it.
"""
import numpy as np
import scipy.stats

# Use statsmodels for bandwidth selection
from statsmodels.nonparametric.bandwidths import bw_scott, bw_silverman

BANDWIDTH_RULES = {'scott': bw_scott, 'silverman': bw_silverman}


def _check_1d_array(x, name='x'):
    """
    Ensures `x` is a non-empty, finite, 1D ndarray.
    """
    if not isinstance(x, np.ndarray) or x.ndim != 1:
        msg = '`{}` MUST be a 1D ndarray.'.format(name)
        raise ValueError(msg)
    if x.size == 0:
        msg = '`{}` MUST NOT be empty.'.format(name)
        raise ValueError(msg)
    if not np.isfinite(x).all():
        msg = '`{}` contains NaNs or infinite values.'.format(name)
        raise ValueError(msg)
    return None


def _check_bounds(bounds):
    """
    Converts `bounds` into a (lower, upper) tuple where missing bounds are
    replaced by -inf and inf respectively.
    """
    if bounds is None:
        return -np.inf, np.inf
    if len(bounds) != 2:
        msg = '`bounds` MUST be None or a 2-tuple.'
        raise ValueError(msg)
    lower = -np.inf if bounds[0] is None else float(bounds[0])
    upper = np.inf if bounds[1] is None else float(bounds[1])
    if lower >= upper:
        msg = 'The lower bound MUST be less than the upper bound.'
        raise ValueError(msg)
    return lower, upper


def select_bandwidth(x, bw='silverman'):
    """
    Determines the bandwidth of a Gaussian kernel density estimate.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data that the kernel density estimate is built from.
    bw : {'silverman', 'scott'} or positive float, optional.
        Either the name of the rule of thumb used to select the bandwidth or
        the bandwidth itself. Default == 'silverman'.

    Returns
    -------
    bandwidth : positive float.
    """
    if isinstance(bw, str):
        if bw not in BANDWIDTH_RULES:
            msg = '`bw` MUST be one of {} or a positive float.'
            raise ValueError(msg.format(sorted(BANDWIDTH_RULES)))
        _check_1d_array(x)
        bandwidth = float(BANDWIDTH_RULES[bw](x))
    else:
        bandwidth = float(bw)

    if not np.isfinite(bandwidth) or bandwidth <= 0:
        msg = ('The bandwidth MUST be positive. Data with zero spread '
               'cannot be shown with a kernel density estimate.')
        raise ValueError(msg)
    return bandwidth


def _kernel_centers(x, lower, upper):
    """
    Returns the centers of all Gaussian kernels: the data itself plus the data
    reflected about each finite bound.
    """
    centers = [x]
    if np.isfinite(lower):
        centers.append(2 * lower - x)
    if np.isfinite(upper):
        centers.append(2 * upper - x)
    return np.concatenate(centers)


def _unnormalized_kde_cdf(centers, bandwidth, lower, points):
    """
    Integrates the reflected kernels from `lower` to each element of `points`.
    """
    standardized = (points[:, None] - centers[None, :]) / bandwidth
    lower_standardized = (lower - centers) / bandwidth
    mass = (scipy.stats.norm.cdf(standardized) -
            scipy.stats.norm.cdf(lower_standardized)[None, :])
    return mass.sum(axis=1)


def kde_pdf(x, points, bw='silverman', bounds=None):
    """
    Evaluates a Gaussian kernel density estimate of `x` at `points`.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data that the kernel density estimate is built from.
    points : 1D ndarray of floats.
        The values at which to evaluate the density.
    bw : {'silverman', 'scott'} or positive float, optional.
        See `select_bandwidth`. Default == 'silverman'.
    bounds : 2-tuple or None, optional.
        The lower and upper bound of the data's support. Either element may be
        None. Kernel mass falling outside the bounds is reflected back inside.
        Default is None.

    Returns
    -------
    density : 1D ndarray of floats.
        Same shape as `points`. Zero outside of `bounds`.
    """
    _check_1d_array(x)
    points = np.asarray(points, dtype=float)
    lower, upper = _check_bounds(bounds)
    bandwidth = select_bandwidth(x, bw)

    centers = _kernel_centers(x, lower, upper)
    standardized = (points[:, None] - centers[None, :]) / bandwidth
    density = scipy.stats.norm.pdf(standardized).sum(axis=1) / bandwidth

    # Normalize so the density integrates to one inside the bounds
    total = _unnormalized_kde_cdf(centers, bandwidth, lower, np.array([upper]))
    density = density / total[0]
    density[(points < lower) | (points > upper)] = 0
    return density


def kde_cdf(x, points, bw='silverman', bounds=None):
    """
    Evaluates the cumulative distribution function of a Gaussian kernel
    density estimate of `x` at `points`.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data that the kernel density estimate is built from.
    points : 1D ndarray of floats.
        The values at which to evaluate the CDF.
    bw : {'silverman', 'scott'} or positive float, optional.
        See `select_bandwidth`. Default == 'silverman'.
    bounds : 2-tuple or None, optional.
        See `kde_pdf`. Default is None.

    Returns
    -------
    cdf : 1D ndarray of floats in [0, 1].
        Same shape as `points`.
    """
    _check_1d_array(x)
    points = np.asarray(points, dtype=float)
    lower, upper = _check_bounds(bounds)
    bandwidth = select_bandwidth(x, bw)

    centers = _kernel_centers(x, lower, upper)
    clipped = np.clip(points, lower, upper)
    mass = _unnormalized_kde_cdf(centers, bandwidth, lower, clipped)
    total = _unnormalized_kde_cdf(centers, bandwidth, lower, np.array([upper]))
    return np.clip(mass / total[0], 0, 1)


def histogram_edges(x, bins='auto'):
    """
    Computes the bin edges of a histogram of `x`.

    Parameters
    ----------
    x : 1D ndarray of floats.
    bins : int or str, optional.
        Either the number of bins or the name of one of numpy's binning rules.
        Default == 'auto'.

    Returns
    -------
    edges : 1D ndarray of floats.
        Monotonically increasing bin edges.
    """
    _check_1d_array(x)
    if isinstance(bins, (int, np.integer)) and bins < 1:
        msg = '`bins` MUST be a positive int or a binning rule.'
        raise ValueError(msg)
    return np.histogram_bin_edges(x, bins=bins)


def histogram_cdf(x, edges, points):
    """
    Evaluates the cumulative distribution function implied by a histogram of
    `x`, i.e. a piecewise uniform density over the bins.

    Parameters
    ----------
    x : 1D ndarray of floats.
        The data that the histogram is built from.
    edges : 1D ndarray of floats.
        Monotonically increasing bin edges. All of `x` should fall within
        `edges[0]` and `edges[-1]`.
    points : 1D ndarray of floats.
        The values at which to evaluate the CDF.

    Returns
    -------
    cdf : 1D ndarray of floats in [0, 1].
        Same shape as `points`.
    """
    _check_1d_array(x)
    edges = np.asarray(edges, dtype=float)
    points = np.asarray(points, dtype=float)
    if edges.ndim != 1 or edges.size < 2 or (np.diff(edges) <= 0).any():
        msg = '`edges` MUST be a 1D ndarray of increasing values.'
        raise ValueError(msg)

    counts = np.histogram(x, bins=edges)[0]
    if counts.sum() == 0:
        msg = 'No values of `x` fall inside of `edges`.'
        raise ValueError(msg)
    bin_probs = counts / float(counts.sum())

    lefts, widths = edges[:-1], np.diff(edges)
    frac_of_bin = np.clip((points[:, None] - lefts[None, :]) / widths[None, :],
                          0, 1)
    return frac_of_bin.dot(bin_probs)

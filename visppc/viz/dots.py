# -*- coding: utf-8 -*-
"""
Functions for computing and plotting quantile dot plots: a fixed number of
quantiles of a predictive distribution, stacked into Wilkinson-style dot
plots, so that each dot represents an equal share of probability.
"""
import numpy as np
import pandas as pd
import seaborn as sbn
import matplotlib.patches as mpatches

from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax

# Set the plotting style
sbn.set_style('darkgrid')


def compute_quantile_dots(sample, num_dots=100):
    """
    Computes the quantiles of `sample` to be displayed in a quantile dot plot.

    Parameters
    ----------
    sample : 1D ndarray of floats.
        Draws from the distribution being displayed.
    num_dots : positive int, optional.
        The number of dots in the plot. Default == 100.

    Returns
    -------
    dots : 1D ndarray of floats.
        The quantiles at probabilities `(k - 0.5) / num_dots` for
        `k = 1, ..., num_dots`. Sorted in increasing order.
    """
    if not isinstance(sample, np.ndarray) or sample.ndim != 1:
        msg = '`sample` MUST be a 1D ndarray.'
        raise ValueError(msg)
    if sample.size == 0:
        msg = '`sample` MUST NOT be empty.'
        raise ValueError(msg)
    if not isinstance(num_dots, (int, np.integer)) or num_dots < 1:
        msg = '`num_dots` MUST be a positive int.'
        raise ValueError(msg)
    probs = (np.arange(1, num_dots + 1) - 0.5) / num_dots
    return np.quantile(sample, probs)


def _bin_dots(sorted_dots, binwidth):
    """
    Greedily groups sorted dots into bins of width `binwidth`. A new bin starts
    with the first dot lying at least `binwidth` to the right of the current
    bin's first dot.

    Returns
    -------
    bin_ids : 1D ndarray of ints.
        The bin of each dot.
    centers : 1D ndarray of floats.
        The center of each bin: the midpoint of its first and last dot.
    """
    bin_ids = np.empty(sorted_dots.size, dtype=int)
    starts, ends = [], []
    current_bin = -1
    bin_start = None
    for pos, value in enumerate(sorted_dots):
        if bin_start is None or value >= bin_start + binwidth:
            current_bin += 1
            bin_start = value
            starts.append(value)
            ends.append(value)
        ends[-1] = value
        bin_ids[pos] = current_bin
    centers = (np.array(starts) + np.array(ends)) / 2.0
    return bin_ids, centers


def _max_stack(sorted_dots, binwidth):
    """
    Returns the height of the tallest stack when binning with `binwidth`.
    """
    bin_ids = _bin_dots(sorted_dots, binwidth)[0]
    return np.bincount(bin_ids).max()


def _select_binwidth(sorted_dots, aspect, num_candidates=200):
    """
    Chooses the largest binwidth whose tallest stack of dots fits in a panel
    that is `aspect` times as tall as it is wide.
    """
    data_range = sorted_dots[-1] - sorted_dots[0]
    candidates = np.geomspace(data_range / (10.0 * sorted_dots.size),
                              data_range,
                              num=num_candidates)
    best = candidates[0]
    for binwidth in candidates:
        panel_height = aspect * (data_range + binwidth)
        if _max_stack(sorted_dots, binwidth) * binwidth <= panel_height:
            best = binwidth
    return best


def dot_layout(dots, binwidth=None, aspect=1.0):
    """
    Lays out the dots of a dot plot.

    Parameters
    ----------
    dots : 1D ndarray of floats.
        The values to be displayed as dots.
    binwidth : positive float or None, optional.
        The width of each bin, which is also the diameter of each dot. If None,
        the largest binwidth whose tallest stack fits into a panel of height
        `aspect * (range + binwidth)` is used. Default is None.
    aspect : positive float, optional.
        The height to width ratio of the panel the dots are drawn in. Only used
        when `binwidth is None`. Default == 1.0.

    Returns
    -------
    layout : pandas DataFrame.
        One row per dot with the columns `x` (the center of the dot's bin),
        `stack` (the dot's 0-based position in its stack), `bin` (the dot's
        bin) and `value` (the dot's original value).
    binwidth : positive float.
        The binwidth used for the layout.
    """
    if not isinstance(dots, np.ndarray) or dots.ndim != 1 or dots.size == 0:
        msg = '`dots` MUST be a non-empty 1D ndarray.'
        raise ValueError(msg)
    if aspect <= 0:
        msg = '`aspect` MUST be positive.'
        raise ValueError(msg)
    if binwidth is not None and binwidth <= 0:
        msg = '`binwidth` MUST be positive or None.'
        raise ValueError(msg)
    sorted_dots = np.sort(dots)

    if np.ptp(sorted_dots) == 0:
        # Every dot is identical so all dots go in a single stack.
        binwidth = 1.0 if binwidth is None else float(binwidth)
        bin_ids = np.zeros(sorted_dots.size, dtype=int)
        centers = sorted_dots[:1]
    else:
        if binwidth is None:
            binwidth = _select_binwidth(sorted_dots, aspect)
        bin_ids, centers = _bin_dots(sorted_dots, float(binwidth))

    # Determine each dot's position within its stack
    stack = np.zeros(sorted_dots.size, dtype=int)
    for bin_id in np.unique(bin_ids):
        members = np.where(bin_ids == bin_id)[0]
        stack[members] = np.arange(members.size)

    layout = pd.DataFrame({'x': centers[bin_ids],
                           'stack': stack,
                           'bin': bin_ids,
                           'value': sorted_dots})
    return layout, float(binwidth)


def dots_cdf(centers, binwidth, points):
    """
    Evaluates the cumulative distribution function implied by a dot plot.
    Each dot carries mass `1 / num_dots`, spread uniformly over its diameter.

    Parameters
    ----------
    centers : 1D ndarray of floats.
        The x-location of every dot, e.g. `layout['x'].values`.
    binwidth : positive float.
        The diameter of each dot.
    points : 1D ndarray of floats.
        The values at which to evaluate the CDF.

    Returns
    -------
    cdf : 1D ndarray of floats in [0, 1].
        Same shape as `points`.
    """
    centers = np.asarray(centers, dtype=float)
    points = np.asarray(points, dtype=float)
    if binwidth <= 0:
        msg = '`binwidth` MUST be positive.'
        raise ValueError(msg)
    lefts = centers - binwidth / 2.0
    frac_of_dot = np.clip((points[:, None] - lefts[None, :]) / binwidth, 0, 1)
    return frac_of_dot.mean(axis=1)


def plot_quantile_dots(sample,
                       obs_value=None,
                       num_dots=100,
                       binwidth=None,
                       aspect=0.5,
                       dot_color='#1f78b4',
                       obs_color='#e31a1c',
                       dot_label='Predictive Quantiles',
                       obs_label='Observed',
                       x_label='y',
                       y_label='',
                       title=None,
                       fontsize=12,
                       figsize=(5, 3),
                       fig_and_ax=None,
                       legend=True,
                       show=True,
                       output_file=None,
                       dpi=500):
    """
    Plots a quantile dot plot of `sample` and, optionally, an observed value.

    Parameters
    ----------
    sample : 1D ndarray of floats.
        Draws from the predictive distribution to be displayed.
    obs_value : float or None, optional.
        If not None, a vertical line is drawn at this value and the fraction
        of dots below it is added to the legend. Default is None.
    num_dots : positive int, optional.
        The number of dots in the plot. Default == 100.
    binwidth : positive float or None, optional.
        See `dot_layout`. Default is None.
    aspect : positive float, optional.
        See `dot_layout`. Default == 0.5.
    dot_color, obs_color : valid matplotlib colors, optional.
        The colors of the dots and the observed value line. Defaults are
        '#1f78b4' and '#e31a1c'.
    dot_label, obs_label : str, optional.
        The legend labels of the dots and the observed value line.
    x_label, y_label : str, optional.
        Denotes the label for the x-axis and y-axis. Defaults are 'y' and ''.
    title : str, or None, optional.
        Denotes the title to be displayed for the plot. Default is None.
    fontsize : int or None, optional.
        The fontsize to be used in the plot. Default is 12.
    figsize : 2-tuple of positive ints.
        Determines the size of the created figure. Default == (5, 3).
    fig_and_ax : list of matplotlib figure and axis, or `None`, optional.
        Determines whether a new figure will be created for the plot or whether
        the plot will be drawn on existing axes. Default is `None`.
    legend : bool, optional.
        Determines whether a legend is printed for the plot. Default == True.
    show : bool, optional.
        Determines whether the figure is shown after plotting is complete.
        Default == True.
    output_file : str, or None, optional.
        Denotes the filepath (including the file format) used to save the
        plot. If None, the plot will not be saved to file. Default is None.
    dpi : positive int, optional.
        Denotes the number of 'dots per inch' for the saved figure.
        Default == 500.

    Returns
    -------
    None.
    """
    dots = compute_quantile_dots(sample, num_dots=num_dots)
    layout, binwidth = dot_layout(dots, binwidth=binwidth, aspect=aspect)

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, ax = fig_and_ax

    # Draw one circle per dot, stacked upwards from zero
    radius = binwidth / 2.0
    for pos, row in enumerate(layout.itertuples(index=False)):
        circle = mpatches.Circle((row.x, radius + row.stack * binwidth),
                                 radius=radius,
                                 facecolor=dot_color,
                                 edgecolor='white',
                                 label=dot_label if pos == 0 else None)
        ax.add_patch(circle)

    max_height = (layout['stack'].max() + 1) * binwidth
    ax.set_xlim(layout['x'].min() - binwidth, layout['x'].max() + binwidth)
    ax.set_ylim(0, max(max_height, aspect * np.ptp(ax.get_xlim())))
    ax.set_aspect('equal', adjustable='box')
    ax.set_yticks([])

    if obs_value is not None:
        frac_below = (dots < obs_value).mean()
        line_label = obs_label + '\nP(dots < observed) = {:.0%}'
        ax.vlines(obs_value, 0, ax.get_ylim()[1], linestyle='dashed',
                  color=obs_color, label=line_label.format(frac_below))

    if legend:
        ax.legend(loc='best', fontsize=fontsize)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None

# -*- coding: utf-8 -*-
"""
Functions for plotting rootograms: observed vs predicted frequencies of each
count value, drawn on a square-root scale so that deviations at low and high
frequencies are comparably visible.
"""
import numpy as np
import pandas as pd
import seaborn as sbn

from .utils import _ensure_2d_sim_y, is_count_data
from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax

# Set the plotting style
sbn.set_style('darkgrid')

ROOTOGRAM_STYLES = ['hanging', 'standing', 'suspended']


def compute_rootogram_frequencies(sim_y, obs_y, max_count=None, prob=0.9):
    """
    Computes the observed frequency of each count value and the predictive
    distribution of that frequency.

    Parameters
    ----------
    sim_y : 2D ndarray of non-negative ints.
        The simulated counts. There should be one row per element of `obs_y`
        and one column per simulated dataset.
    obs_y : 1D ndarray of non-negative ints.
        The observed counts.
    max_count : int or None, optional.
        The largest count value to be tabulated. If None, the maximum of the
        observed counts and the 99th percentile of the simulated counts is
        used. Default is None.
    prob : float in (0, 1), optional.
        The coverage of the predictive interval for each frequency.
        Default == 0.9.

    Returns
    -------
    frequencies : pandas DataFrame.
        One row per count value from zero to `max_count` with the columns
        `count`, `observed`, `expected`, `lower`, and `upper`.
    """
    sim_y = _ensure_2d_sim_y(sim_y, obs_y)
    if not is_count_data(obs_y) or not is_count_data(sim_y):
        msg = '`sim_y` and `obs_y` MUST contain non-negative integer counts.'
        raise ValueError(msg)
    if not 0 < prob < 1:
        msg = '`prob` MUST be in (0, 1).'
        raise ValueError(msg)

    if max_count is None:
        max_count = int(max(obs_y.max(), np.percentile(sim_y, 99)))
    num_values = max_count + 1

    observed = np.bincount(obs_y.astype(int), minlength=num_values)[:num_values]

    # Tabulate each simulated dataset
    sim_counts = sim_y.astype(int)
    sim_frequencies = np.empty((num_values, sim_counts.shape[1]))
    for col in range(sim_counts.shape[1]):
        current = np.bincount(sim_counts[:, col], minlength=num_values)
        sim_frequencies[:, col] = current[:num_values]

    tail = (1 - prob) / 2.0
    frequencies =\
        pd.DataFrame({'count': np.arange(num_values),
                      'observed': observed,
                      'expected': sim_frequencies.mean(axis=1),
                      'lower': np.quantile(sim_frequencies, tail, axis=1),
                      'upper': np.quantile(sim_frequencies, 1 - tail, axis=1)})
    return frequencies


def plot_rootogram(sim_y,
                   obs_y,
                   style='hanging',
                   max_count=None,
                   prob=0.9,
                   bar_color='#a6cee3',
                   line_color='#e31a1c',
                   interval_alpha=0.3,
                   obs_label='Observed',
                   expected_label='Expected',
                   x_label='Count',
                   y_label='sqrt(Frequency)',
                   title=None,
                   fontsize=12,
                   figsize=(5, 3),
                   fig_and_ax=None,
                   legend=True,
                   show=True,
                   output_file=None,
                   dpi=500):
    """
    Plots a rootogram of observed vs predicted count frequencies.

    Parameters
    ----------
    sim_y : 2D ndarray of non-negative ints.
        The simulated counts. There should be one row per element of `obs_y`
        and one column per simulated dataset.
    obs_y : 1D ndarray of non-negative ints.
        The observed counts.
    style : {'hanging', 'standing', 'suspended'}, optional.
        'hanging' hangs the observed bars from the expected frequencies,
        'standing' draws the observed bars from zero, and 'suspended' draws
        the difference between expected and observed frequencies from zero.
        Default == 'hanging'.
    max_count : int or None, optional.
        See `compute_rootogram_frequencies`.
    prob : float in (0, 1), optional.
        The coverage of the shaded predictive interval around the expected
        frequencies. Default == 0.9.
    bar_color, line_color : valid matplotlib colors, optional.
        The colors of the bars and of the expected frequencies.
    interval_alpha : float in [0.0, 1.0], optional.
        The opacity of the predictive interval. Default == 0.3.
    obs_label, expected_label : str, optional.
        The legend labels of the observed and expected frequencies.
    x_label, y_label : str, optional.
        The axis labels.
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
    if style not in ROOTOGRAM_STYLES:
        msg = '`style` MUST be one of {}.'.format(ROOTOGRAM_STYLES)
        raise ValueError(msg)
    frequencies =\
        compute_rootogram_frequencies(sim_y, obs_y,
                                      max_count=max_count, prob=prob)
    counts = frequencies['count'].values
    sqrt_obs = np.sqrt(frequencies['observed'].values)
    sqrt_expected = np.sqrt(frequencies['expected'].values)

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, ax = fig_and_ax

    if style == 'hanging':
        bar_bottoms = sqrt_expected - sqrt_obs
        bar_heights = sqrt_obs
        ax.axhline(0, color='black', linewidth=1)
    elif style == 'standing':
        bar_bottoms = np.zeros(counts.size)
        bar_heights = sqrt_obs
    else:
        bar_bottoms = np.zeros(counts.size)
        bar_heights = sqrt_expected - sqrt_obs
        ax.axhline(0, color='black', linewidth=1)

    ax.bar(counts, bar_heights, bottom=bar_bottoms, width=0.9,
           color=bar_color, label=obs_label)

    if style == 'suspended':
        # Bars leaving this region are outside of the predictive interval
        lower_diff = sqrt_expected - np.sqrt(frequencies['upper'].values)
        upper_diff = sqrt_expected - np.sqrt(frequencies['lower'].values)
        ax.fill_between(counts, lower_diff, upper_diff, step='mid',
                        color=line_color, alpha=interval_alpha,
                        label='{:.0%} Predictive Interval'.format(prob))
    else:
        ax.fill_between(counts,
                        np.sqrt(frequencies['lower'].values),
                        np.sqrt(frequencies['upper'].values),
                        step='mid', color=line_color, alpha=interval_alpha,
                        label='{:.0%} Predictive Interval'.format(prob))
        ax.plot(counts, sqrt_expected, c=line_color, marker='o',
                label=expected_label)

    if legend:
        ax.legend(loc='best', fontsize=fontsize)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None

# -*- coding: utf-8 -*-
"""
Functions for plotting reliability (calibration) diagrams: smooths of
simulated vs observed outcomes on the y-axis against predicted probabilities on
the x-axis. By default the smooth is the PAV-based CORP reliability curve,
drawn with a consistency band and annotated with the CORP decomposition of the
Brier score.
"""
import numpy as np
import seaborn as sbn

from .utils import progress
from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax
from .plot_utils import add_ref_line
from .pav import corp_decomposition, consistency_band
from .smoothers import (DiscreteSmoother,
                        ContinuousSmoother,
                        IsotonicSmoother,
                        SmoothPlotter)

# Set the plotting style
sbn.set_style('darkgrid')

SMOOTHING_METHODS = ['pav', 'binned', 'continuous']


def _check_reliability_args(probs, choices, method, partitions, sim_y):
    """
    Ensures `probs` is a 1D or 2D ndarray, that `choices` is a 1D ndarray, that
    `method` is a known smoothing method, that `partitions` is an int, and that
    `sim_y` is None or a 2D ndarray with as many rows as `probs`.
    """
    if not isinstance(probs, np.ndarray):
        msg = '`probs` MUST be an ndarray.'
        raise ValueError(msg)
    if probs.ndim not in [1, 2]:
        msg = '`probs` MUST be a 1D or 2D ndarray.'
        raise ValueError(msg)
    if not isinstance(choices, np.ndarray):
        msg = '`choices` MUST be an ndarray.'
        raise ValueError(msg)
    if choices.ndim != 1 or choices.shape[0] != probs.shape[0]:
        msg = '`choices` MUST be a 1D ndarray with one element per row of probs.'
        raise ValueError(msg)
    if method not in SMOOTHING_METHODS:
        msg = '`method` MUST be one of {}.'.format(SMOOTHING_METHODS)
        raise ValueError(msg)
    if not isinstance(partitions, int):
        msg = '`partitions` MUST be an int.'
        raise ValueError(msg)
    if sim_y is not None:
        if not isinstance(sim_y, np.ndarray) or sim_y.ndim != 2:
            msg = '`sim_y` MUST be a 2D ndarray or None.'
            raise ValueError(msg)
        if sim_y.shape[0] != probs.shape[0]:
            msg = '`sim_y` MUST have the same number of rows as `probs`.'
            raise ValueError(msg)
        if probs.ndim == 2 and probs.shape[1] not in [1, sim_y.shape[1]]:
            msg = ('`sim_y` MUST have the same shape as `probs` if '
                   '`probs.shape[1] != 1`.')
            raise ValueError(msg)
    return None


def _make_smoother(method, num_obs, partitions, n_estimators,
                   min_samples_leaf, random_state):
    """
    Creates the smoother corresponding to `method`.
    """
    if method == 'pav':
        return IsotonicSmoother()
    if method == 'binned':
        return DiscreteSmoother(num_obs=num_obs, partitions=partitions)
    return ContinuousSmoother(n_estimators=n_estimators,
                              min_samples_leaf=min_samples_leaf,
                              random_state=random_state)


def plot_smoothed_reliability(probs,
                              choices,
                              method='pav',
                              partitions=10,
                              n_estimators=50,
                              min_samples_leaf=10,
                              random_state=None,
                              line_color='#1f78b4',
                              line_label='Observed vs Predicted',
                              alpha=None,
                              sim_y=None,
                              sim_line_color='#a6cee3',
                              sim_label='Simulated vs Predicted',
                              sim_alpha=0.5,
                              consistency=True,
                              consistency_prob=0.9,
                              num_sims=200,
                              band_color='#fdbf6f',
                              band_alpha=0.4,
                              decomposition=True,
                              x_label='Predicted Probability',
                              y_label='Conditional\nEvent\nProbability',
                              title=None,
                              fontsize=12,
                              ref_line=True,
                              figsize=(5, 3),
                              fig_and_ax=None,
                              legend=True,
                              progress_bar=True,
                              rseed=None,
                              show=True,
                              output_file=None,
                              dpi=500):
    """
    Creates a reliability diagram based on the given probability predictions
    and the given observed outcomes.

    Parameters
    ----------
    probs : 1D or 2D ndarray.
        Each element should be in [0, 1]. There should be 1 column for each
        set of predicted probabilities. These will be plotted on the x-axis.
    choices : 1D ndarray.
        Each element should be either a zero or a one, denoting whether the
        outcome of the corresponding row was a 'success'.
    method : {'pav', 'binned', 'continuous'}, optional.
        The smoother used to estimate the conditional event probabilities.
        'pav' gives the CORP reliability curve, 'binned' uses `partitions`
        equal-count bins, and 'continuous' uses Extremely Randomized Trees.
        Default == 'pav'.
    partitions : positive int, optional.
        Denotes the number of partitions used for binning. Only used if
        `method == 'binned'`. Default == 10.
    n_estimators, min_samples_leaf, random_state : optional.
        Passed to `ContinuousSmoother`. Only used if
        `method == 'continuous'`. Defaults are 50, 10, and None.
    line_color : valid matplotlib color, optional.
        Determines the color that is used to plot the predicted probabilities
        versus the observed choices. Default is `'#1f78b4'`.
    line_label : str or None, optional.
        Denotes the label of the observed reliability curve.
        Default is 'Observed vs Predicted'.
    alpha : positive float in [0.0, 1.0], or `None`, optional.
        Determines the opacity of the observed reliability curve.
    sim_y : 2D ndarray or None, optional.
        Denotes the outcomes that were simulated based on `probs`. If passed,
        one reliability curve per column of `sim_y` is drawn as a reference
        distribution of curves from one's postulated model.
    sim_line_color : valid matplotlib color, optional.
        The color of the simulated reliability curves. Default is '#a6cee3'.
    sim_label : str, or None, optional.
        The label of the simulated reliability curves.
    sim_alpha : positive float in [0.0, 1.0], or `None`, optional.
        Determines the opacity of the simulated reliability curves.
        Default == 0.5.
    consistency : bool, optional.
        Determines whether a consistency band is drawn. Only used if
        `method == 'pav'`. Default is True.
    consistency_prob : float in (0, 1), optional.
        The pointwise coverage of the consistency band. Default == 0.9.
    num_sims : positive int, optional.
        The number of resamples used to compute the consistency band.
        Default == 200.
    band_color : valid matplotlib color, optional.
        The color of the consistency band. Default is '#fdbf6f'.
    band_alpha : float in [0.0, 1.0], optional.
        The opacity of the consistency band. Default == 0.4.
    decomposition : bool, optional.
        Determines whether the CORP decomposition of the Brier score is added
        to the label of the observed reliability curve. Default is True.
    x_label, y_label : str, optional.
        Denotes the label for the x-axis and y-axis, respectively.
    title : str, or None, optional.
        Denotes the title to be displayed for the plot. Default is None.
    fontsize : int or None, optional.
        The fontsize to be used in the plot. Default is 12.
    ref_line : bool, optional.
        Determines whether a diagonal line, y = x, will be plotted to show the
        relationship of perfectly calibrated forecasts. Default is True.
    figsize : 2-tuple of positive ints.
        Determines the size of the created figure. Default == (5, 3).
    fig_and_ax : list of matplotlib figure and axis, or `None`, optional.
        Determines whether a new figure will be created for the plot or whether
        the plot will be drawn on existing axes. Default is `None`.
    legend : bool, optional.
        Determines whether a legend is printed for the plot. Default == True.
    progress_bar : bool, optional.
        Determines whether a progress bar is displayed while making the plot.
        Default == True.
    rseed : int or None, optional.
        The random seed used for the consistency band. Default is None.
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
    # Perform some basic argument checking
    _check_reliability_args(probs, choices, method, partitions, sim_y)

    # Make probs 2D if necessary
    probs = probs[:, None] if probs.ndim == 1 else probs

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, ax = fig_and_ax

    # Create the desired smoother and the plotter of single smooth curves
    smoother = _make_smoother(method, probs.shape[0], partitions,
                              n_estimators, min_samples_leaf, random_state)
    plotter = SmoothPlotter(smoother=smoother, ax=ax)

    def get_current_probs(col):
        """
        Fetches the current probabilities when plotting the reliability curves.
        """
        return probs[:, 0] if probs.shape[1] == 1 else probs[:, col]

    # Plot the consistency band around the point-estimate forecasts
    point_probs = probs.mean(axis=1)
    if consistency and method == 'pav':
        band_x, band_lower, band_upper =\
            consistency_band(point_probs,
                             prob=consistency_prob,
                             num_sims=num_sims,
                             rseed=rseed,
                             progress_bar=progress_bar)
        band_label = '{:.0%} Consistency Band'.format(consistency_prob)
        ax.fill_between(band_x, band_lower, band_upper, step='post',
                        color=band_color, alpha=band_alpha, label=band_label)

    # Plot the simulated reliability curves, if desired
    if sim_y is not None:
        if progress_bar:
            sim_iterator =\
                progress(range(sim_y.shape[1]), desc="Plotting Simulations")
        else:
            sim_iterator = range(sim_y.shape[1])
        for i in sim_iterator:
            current_label = sim_label if i == 0 else None
            plotter.plot(get_current_probs(i),
                         sim_y[:, i],
                         label=current_label,
                         color=sim_line_color,
                         alpha=sim_alpha,
                         sort=True)

    # Annotate the observed curve with the CORP score decomposition
    if decomposition and line_label is not None:
        corp = corp_decomposition(point_probs, choices)
        corp_msg = '\nMCB = {:.3f}, DSC = {:.3f}, UNC = {:.3f}'
        line_label =\
            line_label + corp_msg.format(corp['mcb'], corp['dsc'], corp['unc'])

    # Make the 'true' reliability plots
    for col in range(probs.shape[1]):
        plotter.plot(get_current_probs(col),
                     choices,
                     label=line_label if col == 0 else None,
                     color=line_color,
                     alpha=alpha,
                     sort=True)

    # Create the reference line if desired
    if ref_line:
        add_ref_line(ax)

    # Make the legend, if desired
    if legend:
        ax.legend(loc='best', fontsize=fontsize)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None

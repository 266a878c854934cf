# -*- coding: utf-8 -*-
"""
Functions for plotting the predictive distribution of a continuous test
statistic against the test statistic of the observed data.
"""
import numpy as np
import seaborn as sbn

from .density import kde_pdf
from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax
from .plot_utils import _plot_single_cdf_on_axis

# Set the plotting style
sbn.set_style('darkgrid')


def _predictive_p_values(sim_scalars, obs_scalar):
    """
    Returns the fraction of simulated scalars below the observed scalar and
    the two-sided posterior predictive p-value.
    """
    frac_below = (sim_scalars < obs_scalar).mean()
    lower_tail = (sim_scalars <= obs_scalar).mean()
    upper_tail = (sim_scalars >= obs_scalar).mean()
    return frac_below, min(1.0, 2 * min(lower_tail, upper_tail))


def plot_continuous_scalars(sim_scalars,
                            obs_scalar,
                            kde=True,
                            bw='silverman',
                            bounds=None,
                            num_grid=200,
                            fig_and_ax=None,
                            figsize=(10, 6),
                            sim_color='#a6bddb',
                            sim_label='Simulated',
                            obs_label='Observed',
                            x_label='Test Statistic',
                            y_label='Density',
                            fontsize=12,
                            title=None,
                            output_file=None,
                            dpi=500,
                            show=True):
    """
    Plots the distribution of a test statistic over simulated datasets, along
    with the statistic of the observed dataset.

    Parameters
    ----------
    sim_scalars : 1D ndarray of floats.
        The test statistic of each simulated dataset, e.g. the output of
        `compute_test_statistics`.
    obs_scalar : int or float.
        The test statistic of the observed dataset.
    kde : bool, optional.
        If True, a kernel density estimate of `sim_scalars` is drawn. Else, the
        empirical CDF of `sim_scalars` is drawn. Default is True.
    bw : {'silverman', 'scott'} or positive float, optional.
        The bandwidth of the kernel density estimate. Default == 'silverman'.
    bounds : 2-tuple or None, optional.
        The bounds of the statistic's support, e.g. `(0, None)` for standard
        deviations. Used for boundary reflection. Default is None.
    num_grid : positive int, optional.
        The number of points at which the density is drawn. Default == 200.
    fig_and_ax : list of matplotlib figure and axis, or `None`, optional.
        Determines whether a new figure will be created for the plot or whether
        the plot will be drawn on existing axes. Default is `None`.
    figsize : 2-tuple of positive ints.
        Determines the size of the created figure. Default == (10, 6).
    sim_color : valid 'color' argument for matplotlib, optional.
        The color used to plot the simulated scalars. Default is '#a6bddb'.
    sim_label, obs_label, x_label, y_label : str, optional.
        The legend labels of the simulated and observed statistics and the axis
        labels. With `kde=False`, 'Cumulative\\nDistribution' is a sensible
        `y_label`.
    fontsize : int or None, optional.
        The fontsize to be used in the plot. Default is 12.
    title : string or None, optional.
        Denotes the title to be displayed for the plot. Default is None.
    output_file : str, or None, optional.
        Denotes the filepath (including the file format) used to save the
        plot. If None, the plot will not be saved to file. Default is None.
    dpi : positive int, optional.
        Denotes the number of 'dots per inch' for the saved figure.
        Default == 500.
    show : bool, optional.
        Determines whether the figure is shown after plotting is complete.
        Default == True.

    Returns
    -------
    None.
    """
    if not isinstance(sim_scalars, np.ndarray) or sim_scalars.ndim != 1:
        msg = '`sim_scalars` MUST be a 1D ndarray.'
        raise ValueError(msg)
    if sim_scalars.size == 0:
        msg = '`sim_scalars` MUST NOT be empty.'
        raise ValueError(msg)
    if not np.isfinite(sim_scalars).all():
        msg = '`sim_scalars` contains NaNs or infinite values.'
        raise ValueError(msg)

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, axis = fig_and_ax

    if kde:
        low = min(sim_scalars.min(), obs_scalar)
        high = max(sim_scalars.max(), obs_scalar)
        pad = 0.1 * (high - low) if high > low else 1.0
        grid = np.linspace(low - pad, high + pad, num_grid)
        density = kde_pdf(sim_scalars, grid, bw=bw, bounds=bounds)
        axis.plot(grid, density, c=sim_color, label=sim_label)
        axis.fill_between(grid, 0, density, color=sim_color, alpha=0.3)
    else:
        _plot_single_cdf_on_axis(sim_scalars, axis,
                                 color=sim_color, linestyle='-',
                                 label=sim_label, alpha=1.0)

    min_y, max_y = axis.get_ylim()
    frac_below, p_value = _predictive_p_values(sim_scalars, obs_scalar)

    # Mark the observed statistic
    line_label = (obs_label + '\nP(samples < observed) = {:.0%}' +
                  '\nTwo-sided p-value = {:.2f}')
    axis.vlines(obs_scalar, min_y, max_y, linestyle='dashed',
                label=line_label.format(frac_below, p_value))

    axis.legend(loc='best', fontsize=fontsize)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None

# -*- coding: utf-8 -*-
"""
Functions for overlaying the distribution of observed outcomes on the
distributions of simulated outcomes, using kernel density estimates or
histograms.
"""
import numpy as np
import seaborn as sbn

from .utils import progress, _ensure_2d_sim_y
from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax
from .plot_utils import _select_traces
from .density import kde_pdf, histogram_edges

# Set the plotting style
sbn.set_style('darkgrid')


def _density_grid(sim_y, obs_y, bounds, num_grid):
    """
    Creates the grid on which densities are evaluated. The grid spans all
    observed and simulated values, clipped to `bounds`.
    """
    min_x = min(obs_y.min(), sim_y.min())
    max_x = max(obs_y.max(), sim_y.max())
    if bounds is not None:
        if bounds[0] is not None:
            min_x = max(min_x, bounds[0])
        if bounds[1] is not None:
            max_x = min(max_x, bounds[1])
    return np.linspace(min_x, max_x, num_grid)


def plot_kde_overlay(sim_y,
                     obs_y,
                     n_traces=50,
                     bw='silverman',
                     bounds=None,
                     num_grid=200,
                     rseed=None,
                     sim_color='#a6bddb',
                     obs_color='#045a8d',
                     sim_label='Simulated',
                     obs_label='Observed',
                     sim_alpha=0.3,
                     x_label='y',
                     y_label='Density',
                     title=None,
                     fontsize=12,
                     figsize=(5, 3),
                     fig_and_ax=None,
                     legend=True,
                     progress_bar=True,
                     show=True,
                     output_file=None,
                     dpi=500):
    """
    Plots the kernel density estimate of the observed outcomes over the kernel
    density estimates of the simulated outcomes.

    Parameters
    ----------
    sim_y : 2D ndarray.
        The simulated outcomes. There should be one row per element of `obs_y`
        and one column per simulated dataset.
    obs_y : 1D ndarray.
        The observed outcomes.
    n_traces : int or None, optional.
        The number of randomly selected simulated datasets to be drawn. If
        None, all columns of `sim_y` are drawn. Default == 50.
    bw : {'silverman', 'scott'} or positive float, optional.
        The bandwidth of each kernel density estimate, or the rule used to
        select it. Default == 'silverman'.
    bounds : 2-tuple or None, optional.
        The bounds of the outcomes' support, used for boundary reflection.
        Either element may be None. Default is None.
    num_grid : positive int, optional.
        The number of points at which each density is evaluated.
        Default == 200.
    rseed : int or None, optional.
        The random seed used to select the simulated datasets to be drawn.
    sim_color, obs_color : valid matplotlib colors, optional.
        The colors of the simulated and observed densities.
    sim_label, obs_label : str, optional.
        The legend labels of the simulated and observed densities.
    sim_alpha : float in [0.0, 1.0], optional.
        The opacity of the simulated densities. Default == 0.3.
    x_label, y_label : str, optional.
        The axis labels. Defaults are 'y' and 'Density'.
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
    progress_bar : bool, optional.
        Determines whether a progress bar is displayed while making the plot.
        Default == True.
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
    sim_y = _ensure_2d_sim_y(sim_y, obs_y)
    sim_y = _select_traces(sim_y, n_traces, rseed=rseed)
    grid = _density_grid(sim_y, obs_y, bounds, num_grid)

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, ax = fig_and_ax

    if progress_bar:
        iterator = progress(range(sim_y.shape[1]), desc='Calculating KDEs')
    else:
        iterator = range(sim_y.shape[1])

    for col in iterator:
        density = kde_pdf(sim_y[:, col], grid, bw=bw, bounds=bounds)
        ax.plot(grid, density, c=sim_color, alpha=sim_alpha,
                label=sim_label if col == 0 else None)

    obs_density = kde_pdf(obs_y, grid, bw=bw, bounds=bounds)
    ax.plot(grid, obs_density, c=obs_color, label=obs_label)

    if legend:
        ax.legend(loc='best', fontsize=fontsize)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None


def plot_hist_overlay(sim_y,
                      obs_y,
                      bins='auto',
                      n_traces=50,
                      rseed=None,
                      sim_color='#a6bddb',
                      obs_color='#045a8d',
                      sim_label='Simulated',
                      obs_label='Observed',
                      sim_alpha=0.3,
                      obs_alpha=0.5,
                      x_label='y',
                      y_label='Density',
                      title=None,
                      fontsize=12,
                      figsize=(5, 3),
                      fig_and_ax=None,
                      legend=True,
                      show=True,
                      output_file=None,
                      dpi=500):
    """
    Plots the histogram of the observed outcomes as bars and the histograms of
    the simulated outcomes, on the same bins, as step outlines.

    Parameters
    ----------
    sim_y : 2D ndarray.
        The simulated outcomes. There should be one row per element of `obs_y`
        and one column per simulated dataset.
    obs_y : 1D ndarray.
        The observed outcomes.
    bins : int, str, or 1D ndarray, optional.
        The number of bins, the name of a numpy binning rule, or the bin edges.
        Rules are applied to `obs_y`. Default == 'auto'.
    n_traces : int or None, optional.
        The number of randomly selected simulated datasets to be drawn.
        Default == 50.
    rseed : int or None, optional.
        The random seed used to select the simulated datasets to be drawn.
    sim_color, obs_color : valid matplotlib colors, optional.
        The colors of the simulated and observed histograms.
    sim_label, obs_label : str, optional.
        The legend labels of the simulated and observed histograms.
    sim_alpha, obs_alpha : float in [0.0, 1.0], optional.
        The opacities of the simulated and observed histograms.
    x_label, y_label : str, optional.
        The axis labels. Defaults are 'y' and 'Density'.
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
    sim_y = _ensure_2d_sim_y(sim_y, obs_y)
    sim_y = _select_traces(sim_y, n_traces, rseed=rseed)
    if isinstance(bins, np.ndarray):
        edges = bins
    else:
        edges = histogram_edges(obs_y.astype(float), bins=bins)

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, ax = fig_and_ax

    ax.hist(obs_y, bins=edges, density=True, color=obs_color,
            alpha=obs_alpha, label=obs_label)
    for col in range(sim_y.shape[1]):
        ax.hist(sim_y[:, col], bins=edges, density=True, histtype='step',
                color=sim_color, alpha=sim_alpha,
                label=sim_label if col == 0 else None)

    if legend:
        ax.legend(loc='best', fontsize=fontsize)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None

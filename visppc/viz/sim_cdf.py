# -*- coding: utf-8 -*-
"""
Functions for plotting simulated vs observed cumulative distribution functions.
"""
import seaborn as sbn
import matplotlib.patches as mpatches

from .utils import progress, _ensure_2d_sim_y
from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax
from .plot_utils import _select_traces
from .plot_utils import _plot_single_cdf_on_axis

# Set the plotting style
sbn.set_style('darkgrid')


def plot_simulated_cdfs(sim_y,
                        obs_y,
                        filter_idx=None,
                        sim_color='#a6bddb',
                        orig_color='#045a8d',
                        n_traces=None,
                        rseed=None,
                        fig_and_ax=None,
                        label='Simulated',
                        x_label='y',
                        title=None,
                        progress_bar=True,
                        show=True,
                        figsize=(10, 6),
                        fontsize=12,
                        xlim=None,
                        ylim=None,
                        output_file=None,
                        dpi=500,
                        **kwargs):
    """
    Plots an observed cumulative distribution function (CDF) versus the
    simulated versions of that same CDF.

    Parameters
    ----------
    sim_y : 2D ndarray.
        The simulated outcomes. There should be one column for every set of
        simulated outcomes and one row for every element of `obs_y`.
    obs_y : 1D ndarray.
        The observed outcomes.
    filter_idx : 1D ndarray of booleans or None, optional.
        Should have the same number of rows as `obs_y`. Denotes the rows that
        are used to compute the CDFs. If None, all rows are used.
    sim_color, orig_color : valid 'color' argument for matplotlib, optional.
        The colors that will be used to plot the simulated and observed CDFs,
        respectively. Default is `sim_color == '#a6bddb'` and
        `orig_color == '#045a8d'`.
    n_traces : int or None, optional.
        Denotes the number of simulated datasets to randomly select for
        plotting. If None, all columns of `sim_y` will be used for plotting.
        Default is None.
    rseed : int or None, optional.
        Denotes the random seed to be used when selecting `n_traces` columns
        for plotting. Default is None.
    fig_and_ax : list of matplotlib figure and axis, or `None`, optional.
        Determines whether a new figure will be created for the plot or whether
        the plot will be drawn on the passed Axes object. Default is `None`.
    label : str or None, optional.
        The label for the simulated CDFs. If None, no label will be displayed.
        Default = 'Simulated'.
    x_label : str, optional.
        The label of the x-axis. Default is 'y'.
    title : str or None, optional.
        The plot title. If None, no title will be displayed. Default is None.
    progress_bar : bool, optional.
        Determines whether a progress bar is displayed while making the plot.
        Default == True.
    show : bool, optional.
        Determines whether `fig.show()` will be called after the plots have
        been drawn. Default is True.
    figsize : 2-tuple of ints, optional.
        If a new figure is created for this plot, this kwarg determines the
        width and height of the figure that is created. Default is `(10, 6)`.
    fontsize : int or None, optional.
        The fontsize to be used in the plot. Default is 12.
    xlim, ylim : 2-tuple of ints or None, optional.
        Denotes the extent that will be set on the x-axis and y-axis,
        respectively. If None, the extent will not be manually altered.
    output_file : str, or None, optional.
        Denotes the relative or absolute filepath (including the file format)
        that is to be used to save the plot. If None, the plot will not be
        saved to file. Default is None.
    dpi : positive int, optional.
        Denotes the number of 'dots per inch' for the saved figure. Will only
        be used if `output_file is not None`. Default == 500.
    kwargs : passed to `ax.plot` call in matplotlib.

    Returns
    -------
    None.
    """
    sim_y = _ensure_2d_sim_y(sim_y, obs_y)

    # Filter the data
    if filter_idx is not None:
        if filter_idx.shape[0] != obs_y.shape[0] or filter_idx.sum() == 0:
            msg = ('`filter_idx` MUST have one element per observation and '
                   'select at least one observation.')
            raise ValueError(msg)
        sim_y, obs_y = sim_y[filter_idx, :], obs_y[filter_idx]

    sim_y = _select_traces(sim_y, n_traces, rseed=rseed)

    if progress_bar:
        sample_iterator =\
            progress(range(sim_y.shape[1]), desc='Calculating CDFs')
    else:
        sample_iterator = range(sim_y.shape[1])

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, axis = fig_and_ax

    # store the minimum and maximum x-values
    min_x, max_x = obs_y.min(), obs_y.max()

    for i in sample_iterator:
        current_vals = sim_y[:, i]
        # Update the plot extents
        min_x = min(current_vals.min(), min_x)
        max_x = max(current_vals.max(), max_x)
        _plot_single_cdf_on_axis(current_vals,
                                 axis, color=sim_color, alpha=0.5, **kwargs)

    # Plot the originally observed relationship
    _plot_single_cdf_on_axis(obs_y,
                             axis, color=orig_color,
                             label='Observed', alpha=1.0, **kwargs)

    if label is not None:
        _patch = mpatches.Patch(color=sim_color, label=label)
        current_handles, current_labels = axis.get_legend_handles_labels()
        current_handles.append(_patch)
        current_labels.append(label)

        axis.legend(current_handles, current_labels,
                    loc='best', fontsize=fontsize)

    # set the plot extents
    if xlim is None:
        if max_x > min_x:
            axis.set_xlim((min_x, max_x))
    else:
        axis.set_xlim(xlim)

    if ylim is not None:
        axis.set_ylim(ylim)

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label='Cumulative\nDistribution\nFunction',
        fig_and_ax=fig_and_ax, fontsize=fontsize, y_rot=0, y_pad=40,
        title=title, output_file=output_file, show=show, dpi=dpi)
    return None

"""
Helper functions for plotting.
"""
import sys
import gc

import numpy as np
import seaborn as sbn
import matplotlib.pyplot as plt

# Use statsmodels for empirical cdf function
from statsmodels.distributions.empirical_distribution import ECDF


def _label_despine_save_and_show_plot(x_label,
                                      y_label,
                                      fig_and_ax,
                                      fontsize=12,
                                      y_rot=0,
                                      y_pad=40,
                                      title=None,
                                      output_file=None,
                                      show=True,
                                      dpi=500):
    """
    Adds the x-label, y-label, and title to the matplotlib Axes object. Also
    despines the figure, saves it (if desired), and shows it (if desired).

    Parameters
    ----------
    x_label, y_label : string.
        Determines the labels for the x-axis and y-axis respectively.
    fig_and_ax : list of matplotlib figure and axis.
        The matplotlib figure and axis that are being altered.
    fontsize : int or None, optional.
        The fontsize to be used in the plot. Default is 12.
    y_rot : int in [0, 360], optional.
        Denotes the angle by which to rotate the text of the y-axis label.
        Default == 0.
    y_pad : int, optional.
        Denotes the amount by which the text of the y-axis label will be offset
        from the y-axis itself. Default == 40.
    title : string or None, optional.
        Denotes the title to be displayed for the plot. Default is None.
    output_file : str, or None, optional.
        Denotes the relative or absolute filepath (including the file format)
        that is to be used to save the plot. If None, the plot will not be
        saved to file. Default is None.
    show : bool, optional.
        Determines whether the figure is shown after plotting is complete.
        Default == True.
    dpi : positive int, optional.
        Denotes the number of 'dots per inch' for the saved figure. Will only
        be used if `output_file is not None`. Default == 500.
    """
    # Get the figure and axis as separate objects
    fig, axis = fig_and_ax

    # Despine the plot
    sbn.despine(fig=fig, ax=axis)
    # Make plot labels
    axis.set_xlabel(x_label, fontsize=fontsize)
    axis.set_ylabel(y_label, fontsize=fontsize, rotation=y_rot, labelpad=y_pad)
    # Create the title
    if title is not None and title != '':
        if not isinstance(title, str):
            msg = "`title` MUST be a string."
            raise TypeError(msg)
        axis.set_title(title, fontsize=fontsize)

    # Save the plot if desired
    if output_file is not None:
        fig.tight_layout()
        fig.savefig(output_file, dpi=dpi, bbox_inches='tight')

    if show:
        fig.show()

    # Explicitly close the figure
    notebook_env = bool(any([x in sys.modules for x in ['ipykernel', 'IPython']]))
    if not notebook_env:
        plt.close(fig)
        gc.collect()
    return None


def _get_fig_and_ax(fig_and_ax, figsize):
    """
    Creates a new figure and axis when `fig_and_ax` is None. Otherwise,
    unpacks the passed figure and axis.
    """
    if fig_and_ax is None:
        fig, axis = plt.subplots(1, figsize=figsize)
    else:
        fig, axis = fig_and_ax
    return [fig, axis]


def _select_traces(sim_y, n_traces, rseed=None):
    """
    Randomly select `n_traces` columns of `sim_y` to be used in plotting.

    Parameters
    ----------
    sim_y : 2D ndarray.
        Each row should represent an observation. Each column should represent
        a given simulated dataset.
    n_traces : int or None.
        The number of columns to retain. If None or if `n_traces` is greater
        than or equal to the number of columns, `sim_y` is returned unaltered.
    rseed : int or None, optional.
        Denotes the random seed used to select the columns.

    Returns
    -------
    selected_sim_y : 2D ndarray.
        The randomly selected columns of `sim_y`.
    """
    if n_traces is None or n_traces >= sim_y.shape[1]:
        return sim_y
    if n_traces < 1:
        msg = '`n_traces` MUST be a positive int or None.'
        raise ValueError(msg)
    selected_cols =\
        np.random.RandomState(rseed).choice(sim_y.shape[1],
                                            size=n_traces,
                                            replace=False)
    return sim_y[:, selected_cols]


def _plot_single_cdf_on_axis(x_vals,
                             axis,
                             color='#a6bddb',
                             linestyle='-',
                             label=None,
                             alpha=0.1):
    """
    Plots a CDF of `x_vals` on `axis` with the desired color, linestyle, label,
    and transparency (alpha) level.
    """
    # Create a function that will take in an array of values and
    # return an array of the same size which is a CDF for the values.
    cdf_func = ECDF(x_vals)
    # Create a sorted list of the unique values in `x_vals`
    sorted_samples = np.unique(x_vals)
    # Get the CDF values for each of the sorted values
    cdf_values = cdf_func(sorted_samples)
    # Plot the sorted, unique values versus their CDF values
    axis.plot(sorted_samples,
              cdf_values,
              c=color,
              ls=linestyle,
              alpha=alpha,
              label=label,
              drawstyle='steps-post')
    return None


def add_ref_line(ax, ref_label="Perfect Calibration"):
    """
    Plots a diagonal line, y = x, to show a reference relationship.

    Parameters
    ----------
    ax : matplotlib Axes instance
        The Axes that the reference line should be plotted on.
    ref_label : str, optional.
        The label to be applied to the reference line that is drawn.

    Returns
    -------
    None. `ax` is modified in place: the line is plotted and the label added.
    """
    # Determine the maximum value of the x-axis or y-axis
    max_ref_val = max(ax.get_xlim()[1], ax.get_ylim()[1])
    min_ref_val = max(ax.get_xlim()[0], ax.get_ylim()[0])
    # Determine the values to use to plot the reference line
    ref_vals = np.linspace(min_ref_val, max_ref_val, num=100)
    # Plot the reference line as a black dashed line
    ax.plot(ref_vals, ref_vals, 'k--', label=ref_label)
    return None

# -*- coding: utf-8 -*-
"""
Functions for plotting the empirical cumulative distribution function (ECDF)
of PIT values, or its difference from the uniform CDF, together with a
simultaneous confidence band for uniformly distributed values.
"""
import numpy as np
import seaborn as sbn

from .plot_utils import _label_despine_save_and_show_plot
from .plot_utils import _get_fig_and_ax
from .ecdf_bands import (ecdf_at,
                         _default_points,
                         simultaneous_band,
                         ecdf_uniformity_test)

# Set the plotting style
sbn.set_style('darkgrid')


def plot_pit_ecdf(pit_values,
                  difference=False,
                  prob=0.95,
                  method='simulate',
                  num_points=None,
                  num_sims=1000,
                  test=True,
                  rseed=None,
                  line_color='#045a8d',
                  line_label='PIT ECDF',
                  band_color='#a6bddb',
                  band_alpha=0.5,
                  x_label='PIT',
                  y_label=None,
                  title=None,
                  fontsize=12,
                  figsize=(5, 3),
                  fig_and_ax=None,
                  legend=True,
                  progress_bar=False,
                  show=True,
                  output_file=None,
                  dpi=500):
    """
    Plots the ECDF of PIT values with a simultaneous confidence band for the
    ECDF of uniformly distributed values.

    Parameters
    ----------
    pit_values : 1D ndarray of floats in [0, 1].
        The PIT values to be assessed.
    difference : bool, optional.
        If True, the ECDF minus the uniform CDF is plotted, which makes
        deviations easier to see for large samples. Default is False.
    prob : float in (0, 1), optional.
        The simultaneous coverage of the band. Default == 0.95.
    method : {'simulate', 'optimize'}, optional.
        How the band is adjusted for simultaneous coverage. See
        `ecdf_bands.simultaneous_band`. Default == 'simulate'.
    num_points : positive int or None, optional.
        The number of intervals of the evaluation grid. If None,
        `min(pit_values.size, 100)` is used.
    num_sims : positive int, optional.
        The number of simulations for the band and the uniformity test.
        Default == 1000.
    test : bool, optional.
        Determines whether the p-value of the uniformity test is added to the
        legend. Default is True.
    rseed : int or None, optional.
        The random seed used for the simulations. Default is None.
    line_color, band_color : valid matplotlib colors, optional.
        The colors of the ECDF and of the band.
    line_label : str, optional.
        The legend label of the ECDF. Default is 'PIT ECDF'.
    band_alpha : float in [0.0, 1.0], optional.
        The opacity of the band. Default == 0.5.
    x_label, y_label : str or None, optional.
        The axis labels. If `y_label is None`, 'ECDF' or 'ECDF\\nDifference' is
        used depending on `difference`.
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
        Determines whether a progress bar is displayed while simulating.
        Default == False.
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
    if not isinstance(pit_values, np.ndarray) or pit_values.ndim != 1:
        msg = '`pit_values` MUST be a 1D ndarray.'
        raise ValueError(msg)
    if ((pit_values < 0) | (pit_values > 1)).any():
        msg = '`pit_values` MUST be in [0, 1].'
        raise ValueError(msg)

    num_values = pit_values.size
    if num_points is None:
        points = _default_points(num_values, None)
    else:
        points = np.linspace(0, 1, num_points + 1)

    lower, upper, _ = simultaneous_band(num_values,
                                        points=points,
                                        prob=prob,
                                        method=method,
                                        num_sims=num_sims,
                                        rseed=rseed,
                                        progress_bar=progress_bar)
    ecdf = ecdf_at(pit_values, points)

    # Subtract the uniform CDF for the difference plot
    offset = points if difference else np.zeros(points.size)

    fig_and_ax = _get_fig_and_ax(fig_and_ax, figsize)
    fig, ax = fig_and_ax

    band_label = '{:.0%} Simultaneous Band'.format(prob)
    ax.fill_between(points, lower - offset, upper - offset, step='post',
                    color=band_color, alpha=band_alpha, label=band_label)

    if test:
        p_value = ecdf_uniformity_test(pit_values,
                                       num_points=points.size - 1,
                                       num_sims=num_sims,
                                       rseed=rseed)[1]
        line_label = line_label + '\nUniformity p-value = {:.2f}'.format(p_value)
    ax.plot(points, ecdf - offset, c=line_color, label=line_label,
            drawstyle='steps-post')

    # Draw the expected ECDF of uniform values
    ax.plot(points, points - offset, 'k--', label='Uniform')

    if legend:
        ax.legend(loc='best', fontsize=fontsize)

    if y_label is None:
        y_label = 'ECDF\nDifference' if difference else 'ECDF'

    # Take care of boilerplate plotting necessities
    _label_despine_save_and_show_plot(
        x_label=x_label, y_label=y_label, fig_and_ax=fig_and_ax,
        fontsize=fontsize, y_rot=0, y_pad=40, title=title,
        output_file=output_file, show=show, dpi=dpi)
    return None

# -*- coding: utf-8 -*-
"""
Chooses a posterior predictive check visualization that suits the observed
data: bar plots for categorical data, rootograms for counts, and kernel
density estimates for continuous data unless the estimate misrepresents the
data, in which case quantile dot plots are used instead.
"""
import numpy as np

from .utils import is_categorical, is_count_data
from .pit import visualization_pit
from .ecdf_bands import ecdf_uniformity_test

CATEGORICAL_MAX_LEVELS = 10


def recommend_plot_type(obs_y,
                        check_fidelity=True,
                        significance=0.05,
                        bounds=None,
                        num_sims=1000,
                        rseed=None):
    """
    Recommends a visualization type for the observed outcomes, `obs_y`.

    Parameters
    ----------
    obs_y : 1D ndarray.
        The observed outcomes.
    check_fidelity : bool, optional.
        If True, the PIT of `obs_y` under its own kernel density estimate is
        tested for uniformity and 'dots' is recommended when the test rejects.
        Default is True.
    significance : float in (0, 1), optional.
        The significance level of the fidelity test. Default == 0.05.
    bounds : 2-tuple or None, optional.
        The bounds of the outcomes' support, passed to the kernel density
        estimate. Default is None.
    num_sims : positive int, optional.
        The number of simulations used by the fidelity test. Default == 1000.
    rseed : int or None, optional.
        The random seed used by the fidelity test. Default is None.

    Returns
    -------
    plot_type : {'bars', 'rootogram', 'kde', 'dots'}.
    """
    if not isinstance(obs_y, np.ndarray) or obs_y.ndim != 1 or obs_y.size == 0:
        msg = '`obs_y` MUST be a non-empty 1D ndarray.'
        raise ValueError(msg)

    # Labels such as strings can only be shown as categories
    if obs_y.dtype != bool and not np.issubdtype(obs_y.dtype, np.number):
        return 'bars'

    num_levels = np.unique(obs_y).size
    if num_levels <= CATEGORICAL_MAX_LEVELS and not is_count_data(obs_y):
        return 'bars'
    if is_count_data(obs_y):
        return 'bars' if num_levels <= 2 else 'rootogram'
    if is_categorical(obs_y, group_num=CATEGORICAL_MAX_LEVELS):
        # Heavily tied continuous data is poorly represented by a smooth
        # density estimate.
        return 'dots'
    if not check_fidelity:
        return 'kde'

    kde_pit = visualization_pit(obs_y.astype(float), 'kde', bounds=bounds)
    p_value = ecdf_uniformity_test(kde_pit, num_sims=num_sims, rseed=rseed)[1]
    return 'kde' if p_value >= significance else 'dots'

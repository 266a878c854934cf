"""
Helper functions for the rest of the visualization module. Externally, this
file gives users a way to:
- create progress bars without worrying about the python environment
- determine if a given vector contains data that is in some way categorical,
  or whether it contains counts
- simulate binary outcomes from their model's predicted probabilities.
- compute test statistics for each of their simulated datasets.
"""
import sys

import numpy as np

from tqdm import tqdm
from tqdm.notebook import tqdm as tqdm_notebook


def _is_kernel():
    """
    Determines whether or not one's code is executed inside of an ipython or
    jupyter notebook environment.

    Returns
    -------
    in_kernel : bool
        True if one's code is in an ipython environment. False otherwise.
    """
    return bool(any([x in sys.modules for x in ['ipykernel', 'IPython']]))


def progress(*args, **kwargs):
    """
    Creates a tqdm progressbar iterable based on whether one is in ipython.
    In ipython it will return a `tqdm_notebook` iterable. Else, it returns a
    `tqdm` iterable. If there is an error with calling `tqdm_notebook`, such as
    errors from missing ipywidgets in the Jupyter environment, a call to
    `tqdm` will be made instead.

    Parameters
    ----------
    args, kwargs: passed directly to `tqdm` and `tqdm_notebook`.
    """
    if _is_kernel():
        try:
            return tqdm_notebook(*args, **kwargs)
        except ImportError:
            return tqdm(*args, **kwargs)
    return tqdm(*args, **kwargs)


def _prep_categorical_return(truth, description, verbose):
    """
    Return `truth` and `description` if `verbose is True` else return
    `truth` by itself.
    """
    if verbose:
        return truth, description
    return truth


def is_categorical(vector,
                   solo_threshold=0.1,
                   group_threshold=0.5,
                   group_num=10,
                   verbose=False):
    """
    Determines if a given vector of variables is categorical (or mixed
    categorical and continuous) or not.

    Parameters
    ----------
    vector : 1D ndarray.
        Contains the data to be checked for categorical status.
    solo_threshold : float in (0.0, 1.0), optional.
        If a single unique value in `vector` makes up more than this fraction
        of the values, then the vector is considered to be categorical.
        Default == 0.1.
    group_threshold : float in (0.0, 1.0), optional.
        If a group of `group_num` unique values in `vector` makes up more than
        or equal to this fraction of the values, then the vector is considered
        to be categorical. Default == 0.5.
    group_num : int, optional.
        Denotes the size of the group that is used when judging if the vector
        is categorical or not. Default == 10.
    verbose : bool, optional.
        Determines whether the function will return a description of the 'type'
        of categorical variable this vector is deemed to be. Default is False.

    Returns
    -------
    bool, or (bool, str) if `verbose == True`.

    Examples
    --------
    >>> import numpy as np
    >>> is_categorical(np.arange(30))
    False

    >>> is_categorical(np.arange(30), group_num=15, group_threshold=0.5)
    True

    15 values make up 50% of the data so the second example evaluates to True

    >>> x = np.tile(np.array([1, 2, 3]), 10)
    >>> is_categorical(x, group_num=2, group_threshold=0.75)
    True

    Even though 2 values make up only 2/3 of the data, a single value (e.g. 1)
    makes up a third of the data, thus exceeding the `solo_threshold`.
    """
    # Figure out how many observations are in `vector`
    num_observations = float(vector.shape[0])
    # Get the count of each unique value in `vector`, largest counts first
    item_counts = np.unique(vector, return_counts=True)[1]
    item_counts = np.sort(item_counts)[::-1]
    # Get the percentage of `vector` made up by each unique value
    individual_percents = item_counts / num_observations
    # Get the cumulative density function of `vector`.
    cumulative_percents = np.cumsum(item_counts) / num_observations
    # Check for 'categorical' nature of `vector`
    if item_counts.shape[0] <= group_num:
        truth = True
        description = 'categorical'
    elif cumulative_percents[group_num - 1] >= group_threshold:
        truth = True
        description = 'group'
    elif (individual_percents > solo_threshold).any():
        truth = True
        description = 'solo'
    else:
        truth = False
        description = None

    return _prep_categorical_return(truth, description, verbose)


def is_count_data(vector):
    """
    Determines whether `vector` only contains non-negative integer values.
    Non-numeric vectors, e.g. strings, are never count data.
    """
    vector = np.asarray(vector)
    if vector.dtype == bool:
        vector = vector.astype(int)
    if not np.issubdtype(vector.dtype, np.number):
        return False
    if vector.size == 0 or not np.isfinite(vector).all():
        return False
    return bool((vector >= 0).all() and (np.mod(vector, 1) == 0).all())


def simulate_binary_outcomes(probs, rseed=None):
    """
    Take vectorized random draws over many bernoulli random variables with
    different probabilities of success. This function is faster than using a
    for-loop and repeated calls to `np.random.choice`.

    Parameters
    ----------
    probs : 1D or 2D ndarray of floats in [0.0, 1.0].
        The probability of 'success' for each element.
    rseed : int or None, optional.
        The random seed used to simulate the outcomes. Default is None.

    Returns
    -------
    outcomes : ndarray of ints in `{0, 1}`.
        Will have the same shape as `probs`.
    """
    probs = np.asarray(probs, dtype=float)
    if ((probs < 0) | (probs > 1)).any():
        msg = '`probs` MUST be in [0, 1].'
        raise ValueError(msg)

    # Initialize the simulated outcomes
    outcomes = np.zeros(probs.shape, dtype=int)

    # Generate uniform random variates
    uniform_draws = np.random.RandomState(rseed).uniform(size=probs.shape)

    # Determine which predictions led to 'successful' observations
    outcomes[np.where(uniform_draws < probs)] = 1
    return outcomes


def compute_test_statistics(sim_y, func):
    """
    Compute a scalar test statistic for each simulated dataset.

    Parameters
    ----------
    sim_y : 2D ndarray.
        The simulated outcomes. There should be one row for every observation
        and one column for every set of simulated outcomes.
    func : callable.
        Should take a 1D ndarray and return a scalar.

    Returns
    -------
    statistics : 1D ndarray of floats.
        Will have one element for each column in `sim_y`.
    """
    if not isinstance(sim_y, np.ndarray) or sim_y.ndim != 2:
        msg = '`sim_y` MUST be a 2D ndarray.'
        raise ValueError(msg)
    return np.array([func(sim_y[:, col]) for col in range(sim_y.shape[1])],
                    dtype=float)


def _ensure_2d_sim_y(sim_y, obs_y=None):
    """
    Promotes a 1D `sim_y` to a single column and checks that `sim_y` has one
    row per element of `obs_y` when `obs_y` is passed.
    """
    if not isinstance(sim_y, np.ndarray):
        msg = '`sim_y` MUST be an ndarray.'
        raise ValueError(msg)
    if sim_y.ndim == 1:
        sim_y = sim_y[:, None]
    elif sim_y.ndim != 2:
        msg = '`sim_y` MUST be a 1D or 2D ndarray.'
        raise ValueError(msg)
    if obs_y is not None:
        if not isinstance(obs_y, np.ndarray) or obs_y.ndim != 1:
            msg = '`obs_y` MUST be a 1D ndarray.'
            raise ValueError(msg)
        if obs_y.shape[0] != sim_y.shape[0]:
            msg = '`sim_y` MUST have the same number of rows as `obs_y`.'
            raise ValueError(msg)
    return sim_y

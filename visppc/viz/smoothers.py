# -*- coding: utf-8 -*-
"""
This file contains classes for producing smooths of a binary outcome against
predicted probabilities, i.e. estimates of the conditional event probability
E[y | p] that make up a reliability diagram. Three smoothers are available:
equal-count binning, isotonic regression via PAV, and an ensemble of extremely
randomized trees.
"""
import numpy as np

# Use ExtRaTrees for continuously smoothed reliability curves
from sklearn.ensemble import ExtraTreesClassifier, ExtraTreesRegressor

from .pav import pav_step_function


def _determine_bin_obs(total, partitions):
    """
    Determines the number of observations that should be in a given partition.

    Parameters
    ----------
    total : positive int.
        Denotes the total number of observations that are to be partitioned.
    partitions : positive int.
        Denotes the number of partitions that are to be created. Should be
        less than or equal to `total`.

    Returns
    -------
    obs_per_partition : 1D ndarray of positive ints.
        Denotes the number of observations to be placed in each partition.
        Will have one element per partition.
    """
    if partitions > total:
        msg = '`partitions` MUST be less than or equal to the number of obs.'
        raise ValueError(msg)
    naive = (total // partitions) * np.ones(partitions, dtype=int)
    correction = np.ones(partitions, dtype=int)
    correction[total % partitions:] = 0
    return naive + correction


def _compute_bin_means(x_vals, y_vals, obs_per_bin):
    """
    Computes the mean of the sorted `x_vals` and of `y_vals` within each
    consecutive partition of `obs_per_bin` observations.

    Returns
    -------
    mean_x, mean_y : 1D ndarray.
        Will have 1 element per partition.
    """
    bin_ids = np.repeat(np.arange(obs_per_bin.size), obs_per_bin)
    mean_x = np.bincount(bin_ids, weights=x_vals) / obs_per_bin
    mean_y = np.bincount(bin_ids, weights=y_vals) / obs_per_bin
    return mean_x, mean_y


def _get_extra_smooth_xy(x, y,
                         n_estimators=50,
                         min_samples_leaf=10,
                         random_state=None):
    """
    Creates an ensemble of extremely randomized trees that predict y given x,
    and returns the smoothed (i.e. predicted) y and original x.

    Parameters
    ----------
    x, y : 1D ndarray of real values.
        X should be an array of continuous values. y should be an array of
        either continuous or binary (0 or 1) data.
    n_estimators : positive int, optional.
        Determines the number of trees in the ensemble. The more estimators
        the smoother one's estimated relationship. Default == 50.
    min_samples_leaf : positive int, optional.
        Determines the minimum number of observations allowed in a leaf node in
        any tree in the ensemble. This parameter is conceptually equivalent to
        the bandwidth parameter in a kernel density estimator. Default == 10.
    random_state : positive int, or None, optional.
        Denotes the random seed to be used when constructing the ensemble.
        Default is None.

    Returns
    -------
    x, smoothed_y : 1D ndarray of real values.
    """
    if not isinstance(x, np.ndarray) or x.ndim != 1:
        msg = 'x MUST be a 1D ndarray'
        raise ValueError(msg)
    if not isinstance(y, np.ndarray) or y.ndim != 1:
        msg = 'y MUST be a 1D ndarray'
        raise ValueError(msg)
    # The if condition checks if we are dealing with continuous y vs binary y
    if ((y < 1.0) & (y > 0)).any():
        smoother = ExtraTreesRegressor(n_estimators=n_estimators,
                                       min_samples_leaf=min_samples_leaf,
                                       max_features=1,
                                       random_state=random_state)
        smoother.fit(x[:, None], y)
        smoothed_y = smoother.predict(x[:, None])
    else:
        smoother = ExtraTreesClassifier(n_estimators=n_estimators,
                                        min_samples_leaf=min_samples_leaf,
                                        max_features=1,
                                        random_state=random_state)
        smoother.fit(x[:, None], y.astype(int))
        # Get the predicted probabilities of y = 1, even if only one class
        # was observed.
        class_probs = smoother.predict_proba(x[:, None])
        if smoother.classes_.size == 1:
            smoothed_y = np.full(x.shape[0], float(smoother.classes_[0]))
        else:
            smoothed_y = class_probs[:, 1]
    return x, smoothed_y


class Smoother(object):
    """
    Base class for the smoothers. Instances of subclasses of `Smoother` will
    take in raw X and Y values, and they will output new x and y values that
    can be plotted to show the smoothed conditional expectation function,
    E[y | x].
    """
    # Matplotlib drawstyle used when plotting the smooth
    drawstyle = 'default'

    def __call__(self, X, Y):
        return self.smooth(X, Y)

    def smooth(self, X, Y):
        """
        Takes in raw X and Y and produces smoothed_x and smoothed_y.

        Parameters
        ----------
        X, Y : 1D ndarrays
            Should contain the raw data, sorted by X, for which we want to
            visualize a smooth of the conditional expectation function,
            E[y | x].

        Returns
        -------
        smoothed_x, smoothed_y : 1D ndarrays
            Contains the smoothed values to be plotted, respectively, on the
            x-axis and y-axis to show the smoothed E[y | x].
        """
        raise NotImplementedError


class DiscreteSmoother(Smoother):
    """
    Computes a binned smooth of E[y | x] using partitions that each contain
    (nearly) the same number of observations.

    Parameters
    ----------
    num_obs : positive int.
        Determines the number of observations in the vectors of X and Y that
        will later be smoothed.
    partitions : positive int, optional.
        Denotes the number of partitions to split one's data into for binning.
        Default == 10.
    """
    def __init__(self, num_obs, partitions=10):
        self.num_obs = num_obs
        self.partitions = partitions
        # Determine the number of observations in each partition
        self.obs_per_partition = _determine_bin_obs(num_obs, self.partitions)

    def smooth(self, X, Y):
        if X.shape[0] != self.num_obs:
            msg = 'X MUST have `num_obs` elements.'
            raise ValueError(msg)
        return _compute_bin_means(X, Y, self.obs_per_partition)


class IsotonicSmoother(Smoother):
    """
    Computes the non-decreasing, PAV-based smooth of E[y | x]. The result is
    the CORP reliability curve when X holds predicted probabilities and Y holds
    binary outcomes.
    """
    drawstyle = 'steps-post'

    def smooth(self, X, Y):
        return pav_step_function(X, Y.astype(float))


class ContinuousSmoother(Smoother):
    """
    Computes a continuous smooth of E[y | x] using an ensemble of Extremely
    Randomized Trees.

    Parameters
    ----------
    n_estimators : positive int, optional.
        Determines the number of trees in the ensemble. Default == 50.
    min_samples_leaf : positive int, optional.
        Determines the minimum number of observations allowed in a leaf node in
        any tree in the ensemble. Default == 10.
    random_state : positive int, or None, optional.
        Denotes the random seed to be used when constructing the ensemble.
        Default is None.
    """
    def __init__(self,
                 n_estimators=50,
                 min_samples_leaf=10,
                 random_state=None):
        self.n_estimators = n_estimators
        self.min_samples_leaf = min_samples_leaf
        self.random_state = random_state

    def smooth(self, X, Y):
        return _get_extra_smooth_xy(X, Y,
                                    n_estimators=self.n_estimators,
                                    min_samples_leaf=self.min_samples_leaf,
                                    random_state=self.random_state)


class SmoothPlotter(object):
    """
    An object that plots single smooths of the conditional expectation
    function, E[y | x].

    Parameters
    ----------
    smoother : an instance of a subclass of Smoother.
        This arg is used to produce the smooths that are then plotted.
    ax : an instance of matplotlib.Axes.
        The axis on which the smooth is plotted.
    """
    def __init__(self, smoother, ax):
        self.ax = ax
        self.smoother = smoother

    def plot(self, X, Y, label=None, color='#a6cee3', alpha=0.5, sort=False):
        """
        Plots a smooth estimate of the conditional expectation function E[y|x].

        Parameters
        ----------
        X, Y : 1D ndarrays
            Should contain the raw data for which we want to visualize a smooth
            of the conditional expectation function, E[y | x].
        label : str or None, optional.
            Denotes the label for the plotted curve. Default is None.
        color : valid matplotlib color, optional.
            The color that is used for the plotted curve. Default is '#a6cee3'.
        alpha : positive float in [0.0, 1.0], or `None`, optional.
            Determines the opacity of the elements drawn on the plot.
            Default == 0.5.
        sort : bool, optional.
            Determines if `X` and `Y` will be sorted before they are smoothed
            and plotted. Default is False.

        Returns
        -------
        None.
        """
        if sort:
            sort_order = np.argsort(X, kind='mergesort')
            sorted_x, sorted_y = X[sort_order], Y[sort_order]
        else:
            sorted_x, sorted_y = X, Y
        # Get the smoothed x and y values to be plotted.
        plot_x, plot_y = self.smoother(sorted_x, sorted_y)
        # Make the desired plot
        self.ax.plot(plot_x, plot_y, c=color, alpha=alpha, label=label,
                     drawstyle=self.smoother.drawstyle)
        return None

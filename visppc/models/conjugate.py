# -*- coding: utf-8 -*-
"""
Contains simple Bayesian models whose posterior predictive distributions are
available in closed form (or, for the logistic regression, via a Laplace
approximation). Each model simulates replicated datasets for use in posterior
predictive checks.

All simulations are returned with one row per observation and one column per
posterior predictive draw.
"""
# Used for type hinting
from typing import Optional

# Numpy and scipy are used for numeric computation
import numpy as np
import scipy.special
import scipy.stats
# statsmodels is used to fit the logistic regression
import statsmodels.api as sm
# Use attrs for boilerplate free creation of classes
import attr

from visppc.viz.utils import simulate_binary_outcomes


def _check_observations(y: np.ndarray) -> None:
    """
    Ensures `y` is a non-empty 1D ndarray of finite values.
    """
    if not isinstance(y, np.ndarray) or y.ndim != 1 or y.size == 0:
        msg = '`y` MUST be a non-empty 1D ndarray.'
        raise ValueError(msg)
    if not np.isfinite(y).all():
        msg = '`y` contains NaNs or infinite values.'
        raise ValueError(msg)
    return None


@attr.s
class PredictiveModel:
    """
    Base class for models that can simulate replicated datasets.
    """
    num_obs: Optional[int] = attr.ib(init=False, default=None)

    def fit(self, y: np.ndarray) -> 'PredictiveModel':
        """
        Updates the model's prior with the observed outcomes `y`.
        """
        raise NotImplementedError

    def _check_is_fit(self) -> None:
        if self.num_obs is None:
            msg = 'The model MUST be fit before simulating.'
            raise ValueError(msg)
        return None

    def _draw_replicates(self,
                         num_obs: int,
                         num_draws: int,
                         random_state: np.random.RandomState) -> np.ndarray:
        raise NotImplementedError

    def simulate(self,
                 num_draws: int = 1000,
                 rseed: Optional[int] = None,
                 num_obs: Optional[int] = None) -> np.ndarray:
        """
        Simulates replicated datasets from the posterior predictive
        distribution.

        Parameters
        ----------
        num_draws : optional, int.
            The number of replicated datasets. Default == 1000.
        rseed : optional, int or None.
            The random seed used for the simulation. Default is None.
        num_obs : optional, int or None.
            The number of observations per replicated dataset. If None, the
            number of observations the model was fit to is used.

        Returns
        -------
        sim_y : 2D ndarray.
            Has shape `(num_obs, num_draws)`.
        """
        self._check_is_fit()
        if num_draws < 1:
            msg = '`num_draws` MUST be a positive int.'
            raise ValueError(msg)
        num_obs = self.num_obs if num_obs is None else num_obs
        random_state = np.random.RandomState(rseed)
        return self._draw_replicates(num_obs, num_draws, random_state)


@attr.s
class NormalModel(PredictiveModel):
    """
    Normal model with unknown mean and variance and a conjugate
    normal-inverse-gamma prior:
    `sigma^2 ~ InvGamma(alpha, beta)`, `mu ~ Normal(mu_0, sigma^2 / kappa)`.
    """
    prior_mean: float = attr.ib(default=0.0)
    prior_kappa: float = attr.ib(default=0.01)
    prior_alpha: float = attr.ib(default=1.0)
    prior_beta: float = attr.ib(default=1.0)

    def fit(self, y: np.ndarray) -> 'NormalModel':
        _check_observations(y)
        num_obs = y.size
        y_bar = y.mean()

        self.post_kappa = self.prior_kappa + num_obs
        self.post_mean =\
            (self.prior_kappa * self.prior_mean + num_obs * y_bar) / self.post_kappa
        self.post_alpha = self.prior_alpha + num_obs / 2.0
        self.post_beta =\
            (self.prior_beta +
             0.5 * ((y - y_bar)**2).sum() +
             (self.prior_kappa * num_obs * (y_bar - self.prior_mean)**2 /
              (2 * self.post_kappa)))
        self.num_obs = num_obs
        return self

    def _draw_replicates(self, num_obs, num_draws, random_state):
        variances = scipy.stats.invgamma.rvs(self.post_alpha,
                                             scale=self.post_beta,
                                             size=num_draws,
                                             random_state=random_state)
        means = random_state.normal(self.post_mean,
                                    np.sqrt(variances / self.post_kappa))
        return random_state.normal(means[None, :],
                                   np.sqrt(variances)[None, :],
                                   size=(num_obs, num_draws))


@attr.s
class PoissonModel(PredictiveModel):
    """
    Poisson model with a conjugate `Gamma(shape, rate)` prior on the mean.
    """
    prior_shape: float = attr.ib(default=1.0)
    prior_rate: float = attr.ib(default=0.1)

    def fit(self, y: np.ndarray) -> 'PoissonModel':
        _check_observations(y)
        if (y < 0).any() or (np.mod(y, 1) != 0).any():
            msg = '`y` MUST contain non-negative integer counts.'
            raise ValueError(msg)
        self.post_shape = self.prior_shape + y.sum()
        self.post_rate = self.prior_rate + y.size
        self.num_obs = y.size
        return self

    def _draw_replicates(self, num_obs, num_draws, random_state):
        rates = random_state.gamma(self.post_shape,
                                   1.0 / self.post_rate,
                                   size=num_draws)
        return random_state.poisson(rates[None, :], size=(num_obs, num_draws))


@attr.s
class BernoulliModel(PredictiveModel):
    """
    Bernoulli model with a conjugate `Beta(a, b)` prior on the probability of
    success.
    """
    prior_a: float = attr.ib(default=1.0)
    prior_b: float = attr.ib(default=1.0)

    def fit(self, y: np.ndarray) -> 'BernoulliModel':
        _check_observations(y)
        if not np.isin(y, [0, 1]).all():
            msg = '`y` MUST only contain zeros and ones.'
            raise ValueError(msg)
        self.post_a = self.prior_a + y.sum()
        self.post_b = self.prior_b + y.size - y.sum()
        self.num_obs = y.size
        return self

    def _draw_replicates(self, num_obs, num_draws, random_state):
        probs = random_state.beta(self.post_a, self.post_b, size=num_draws)
        uniform_draws = random_state.uniform(size=(num_obs, num_draws))
        return (uniform_draws < probs[None, :]).astype(int)


@attr.s
class LogisticModel(PredictiveModel):
    """
    Logistic regression whose posterior is approximated by a normal
    distribution centered at the maximum likelihood estimate, with the inverse
    Hessian as covariance (i.e. a Laplace approximation under a flat prior).

    The design matrix used for fitting should already contain any intercept
    column.
    """
    def fit(self, y: np.ndarray, design: np.ndarray = None) -> 'LogisticModel':
        _check_observations(y)
        if not isinstance(design, np.ndarray) or design.ndim != 2:
            msg = '`design` MUST be a 2D ndarray.'
            raise ValueError(msg)
        if design.shape[0] != y.size:
            msg = '`design` MUST have one row per element of `y`.'
            raise ValueError(msg)
        results = sm.Logit(y, design).fit(disp=0)
        self.coefs = np.asarray(results.params)
        self.cov = np.asarray(results.cov_params())
        self.design = design
        self.num_obs = y.size
        return self

    def sample_probs(self,
                     design: Optional[np.ndarray] = None,
                     num_draws: int = 1000,
                     rseed: Optional[int] = None) -> np.ndarray:
        """
        Draws the predicted probabilities of `y == 1` for each row of
        `design` and each posterior draw of the coefficients.

        Returns
        -------
        probs : 2D ndarray of floats in (0, 1).
            Has shape `(design.shape[0], num_draws)`.
        """
        self._check_is_fit()
        design = self.design if design is None else design
        random_state = np.random.RandomState(rseed)
        coef_draws =\
            random_state.multivariate_normal(self.coefs, self.cov,
                                             size=num_draws)
        return scipy.special.expit(design.dot(coef_draws.T))

    def point_probs(self, design: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Returns the predicted probabilities at the estimated coefficients.
        """
        self._check_is_fit()
        design = self.design if design is None else design
        return scipy.special.expit(design.dot(self.coefs))

    def _draw_replicates(self, num_obs, num_draws, random_state):
        if num_obs != self.design.shape[0]:
            msg = '`num_obs` MUST equal the number of rows of the design.'
            raise ValueError(msg)
        probs = self.sample_probs(num_draws=num_draws,
                                  rseed=random_state.randint(2**31 - 1))
        return simulate_binary_outcomes(probs,
                                        rseed=random_state.randint(2**31 - 1))

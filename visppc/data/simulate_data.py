# -*- coding: utf-8 -*-
"""
This file simulates the example datasets used throughout the notebooks:
continuous data that is bimodal, bounded, or heavily rounded; overdispersed
counts; and binary outcomes whose log-odds are quadratic in a covariate.
Running `python -m visppc.data.simulate_data` writes each dataset to a csv
file in `data/raw`.
"""
import os
import argparse

import numpy as np
import pandas as pd
import scipy.special

from ..viz.utils import progress


def simulate_mixture_data(num_obs=500,
                          means=(-2.0, 2.0),
                          scales=(1.0, 1.0),
                          weights=(0.5, 0.5),
                          rseed=None):
    """
    Simulates draws from a mixture of normal distributions.

    Returns
    -------
    y : 1D ndarray of floats.
        Has `num_obs` elements.
    """
    if not len(means) == len(scales) == len(weights):
        msg = '`means`, `scales`, and `weights` MUST have the same length.'
        raise ValueError(msg)
    weights = np.asarray(weights, dtype=float)
    if (weights < 0).any() or not np.isclose(weights.sum(), 1):
        msg = '`weights` MUST be non-negative and sum to one.'
        raise ValueError(msg)
    random_state = np.random.RandomState(rseed)
    components = random_state.choice(len(means), size=num_obs, p=weights)
    return random_state.normal(np.asarray(means)[components],
                               np.asarray(scales)[components])


def simulate_bounded_data(num_obs=500, scale=1.0, rseed=None):
    """
    Simulates exponentially distributed data, which is bounded below by zero
    and has most of its mass near the bound.
    """
    return np.random.RandomState(rseed).exponential(scale, size=num_obs)


def simulate_discrete_data(num_obs=500, loc=10.0, scale=2.0, rseed=None):
    """
    Simulates normally distributed data that is rounded to the nearest
    integer, so that a few unique values are heavily tied.
    """
    random_state = np.random.RandomState(rseed)
    return np.round(random_state.normal(loc, scale, size=num_obs))


def simulate_count_data(num_obs=500, mean=3.0, dispersion=1.5, rseed=None):
    """
    Simulates overdispersed counts from a negative binomial distribution with
    the given `mean` and `dispersion` (its shape parameter). The variance is
    `mean + mean**2 / dispersion`.
    """
    if mean <= 0 or dispersion <= 0:
        msg = '`mean` and `dispersion` MUST be positive.'
        raise ValueError(msg)
    success_prob = dispersion / (dispersion + mean)
    random_state = np.random.RandomState(rseed)
    return random_state.negative_binomial(dispersion, success_prob,
                                          size=num_obs)


def simulate_binary_data(num_obs=1000,
                         intercept=-0.5,
                         slope=1.0,
                         quadratic=0.75,
                         rseed=None):
    """
    Simulates binary outcomes whose log-odds are
    `intercept + slope * x + quadratic * x**2` with `x ~ Normal(0, 1)`.
    A logistic regression that is linear in `x` is miscalibrated for this data
    whenever `quadratic != 0`.

    Returns
    -------
    df : pandas DataFrame.
        Has the columns `x`, `true_prob`, and `y`.
    """
    random_state = np.random.RandomState(rseed)
    x = random_state.normal(size=num_obs)
    true_prob = scipy.special.expit(intercept + slope * x + quadratic * x**2)
    y = (random_state.uniform(size=num_obs) < true_prob).astype(int)
    return pd.DataFrame({'x': x, 'true_prob': true_prob, 'y': y})


def make_datasets(output_dir, num_obs=500, rseed=601, progress_bar=True):
    """
    Simulates every example dataset and writes each one to a csv file in
    `output_dir`. Each dataset gets its own seed, drawn from a random state
    seeded by `rseed`, so `rseed=None` gives fresh datasets on every call.

    Returns
    -------
    paths : dict.
        Keys are dataset names. Values are the paths of the written files.
    """
    print("Beginning to simulate the example datasets.")
    if not os.path.isdir(output_dir):
        os.makedirs(output_dir)

    seeds = np.random.RandomState(rseed).randint(2**31 - 1, size=5)
    datasets =\
        {'mixture': pd.DataFrame(
            {'y': simulate_mixture_data(num_obs, rseed=seeds[0])}),
         'bounded': pd.DataFrame(
            {'y': simulate_bounded_data(num_obs, rseed=seeds[1])}),
         'discrete': pd.DataFrame(
            {'y': simulate_discrete_data(num_obs, rseed=seeds[2])}),
         'counts': pd.DataFrame(
            {'y': simulate_count_data(num_obs, rseed=seeds[3])}),
         'binary': simulate_binary_data(2 * num_obs, rseed=seeds[4]),
         }

    if progress_bar:
        iterator = progress(datasets.items(), desc='Writing datasets',
                            total=len(datasets))
    else:
        iterator = datasets.items()

    paths = {}
    for name, df in iterator:
        paths[name] = os.path.join(output_dir, '{}_data.csv'.format(name))
        df.to_csv(paths[name], index=False)
        print("Wrote {:,} rows to {}".format(df.shape[0], paths[name]))

    print("Finished simulating the example datasets.")
    return paths


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--output_dir', default='data/raw')
    parser.add_argument('--num_obs', type=int, default=500)
    parser.add_argument('--rseed', type=int, default=601)
    parser.add_argument('--no_progress_bar', action='store_true')
    args = parser.parse_args()
    make_datasets(args.output_dir,
                  num_obs=args.num_obs,
                  rseed=args.rseed,
                  progress_bar=not args.no_progress_bar)

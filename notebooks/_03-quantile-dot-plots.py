# ---
# jupyter:
#   jupytext:
#     formats: ipynb,py:light
#     text_representation:
#       extension: .py
#       format_name: light
#       format_version: '1.5'
#       jupytext_version: 1.4.2
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# # Purpose
# Quantile dot plots display a predictive distribution with a fixed number of
# equally probable dots. This notebook draws them for a posterior predictive
# test statistic and for the heavily tied example data.

# +
import os
import sys

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

sys.path.insert(0, '..')
from visppc import viz
from visppc.data import make_datasets
from visppc.models import NormalModel

# %matplotlib inline
# -

DATA_DIR = '../data/raw'
FIGURE_DIR = '../reports/figures'
if not os.path.isdir(DATA_DIR):
    make_datasets(DATA_DIR)
if not os.path.isdir(FIGURE_DIR):
    os.makedirs(FIGURE_DIR)

# +
# Posterior predictive distribution of the standard deviation of the mixture
obs_y = pd.read_csv(os.path.join(DATA_DIR, 'mixture_data.csv'))['y'].values
sim_y = NormalModel().fit(obs_y).simulate(num_draws=2000, rseed=281)
sim_stds = viz.compute_test_statistics(sim_y, np.std)

fig, axes = plt.subplots(1, 2, figsize=(12, 4))
viz.plot_quantile_dots(sim_stds,
                       obs_value=obs_y.std(),
                       num_dots=50,
                       x_label='Standard Deviation',
                       title='50 Dots',
                       fig_and_ax=[fig, axes[0]],
                       show=False)
viz.plot_quantile_dots(sim_stds,
                       obs_value=obs_y.std(),
                       num_dots=100,
                       x_label='Standard Deviation',
                       title='100 Dots',
                       legend=False,
                       fig_and_ax=[fig, axes[1]],
                       show=False)

for ext in ['.pdf', '.jpeg']:
    fname = os.path.join(FIGURE_DIR, 'quantile-dots-std{}'.format(ext))
    fig.savefig(fname, dpi=500, bbox_inches='tight')
fig.show()
# -

# Compare the same test statistic as a density plot
viz.plot_continuous_scalars(sim_stds,
                            obs_y.std(),
                            bounds=(0, None),
                            x_label='Standard Deviation',
                            output_file=os.path.join(FIGURE_DIR,
                                                     'kde-std.pdf'))

# +
# The heavily tied example data
discrete_y = pd.read_csv(os.path.join(DATA_DIR, 'discrete_data.csv'))['y'].values

for aspect in [0.25, 0.5, 1.0]:
    layout, binwidth = viz.dot_layout(
        viz.compute_quantile_dots(discrete_y, num_dots=100), aspect=aspect)
    print('aspect = {:.2f}: binwidth = {:.3f}, tallest stack = {}'.format(
        aspect, binwidth, layout['stack'].max() + 1))

viz.plot_quantile_dots(discrete_y,
                       num_dots=100,
                       title='Discrete data',
                       output_file=os.path.join(FIGURE_DIR,
                                                'quantile-dots-discrete.pdf'))

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
# Kernel density estimates are the default way of displaying continuous
# predictive distributions. They misrepresent data that is bounded or heavily
# tied. This notebook shows the misrepresentation and the recommended
# alternative for each of the example datasets.

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

# Create the example datasets if needed
DATA_DIR = '../data/raw'
FIGURE_DIR = '../reports/figures'
if not os.path.isdir(DATA_DIR):
    make_datasets(DATA_DIR)
if not os.path.isdir(FIGURE_DIR):
    os.makedirs(FIGURE_DIR)

# Load the continuous datasets
datasets =\
    {name: pd.read_csv(os.path.join(DATA_DIR, '{}_data.csv'.format(name)))['y'].values
     for name in ['mixture', 'bounded', 'discrete']}
bounds = {'mixture': None, 'bounded': (0, None), 'discrete': None}

# +
# Compare observed and replicated densities under a single normal model
for name, obs_y in datasets.items():
    model = NormalModel().fit(obs_y)
    sim_y = model.simulate(num_draws=100, rseed=601)

    fig, ax = plt.subplots(1, figsize=(10, 6))
    viz.plot_kde_overlay(sim_y,
                         obs_y,
                         n_traces=50,
                         bounds=bounds[name],
                         rseed=281,
                         title='{} data'.format(name.title()),
                         fig_and_ax=[fig, ax],
                         show=False)

    for ext in ['.pdf', '.jpeg']:
        fname = os.path.join(FIGURE_DIR, 'kde-overlay-{}{}'.format(name, ext))
        fig.savefig(fname, dpi=500, bbox_inches='tight')
    fig.show()
# -

# Which visualization is recommended for each dataset?
recommendations =\
    {name: viz.recommend_plot_type(obs_y, bounds=bounds[name], rseed=7)
     for name, obs_y in datasets.items()}
print(pd.Series(recommendations))

# +
# Compare the data's KDE with and without boundary reflection
obs_y = datasets['bounded']
grid = np.linspace(-0.5, np.percentile(obs_y, 99), 300)

fig, ax = plt.subplots(1, figsize=(10, 6))
ax.hist(obs_y, bins=40, density=True, alpha=0.3, label='Observed')
ax.plot(grid, viz.kde_pdf(obs_y, grid), label='Unbounded KDE')
ax.plot(grid, viz.kde_pdf(obs_y, grid, bounds=(0, None)),
        label='Reflected KDE')
ax.set_xlabel('y')
ax.set_ylabel('Density')
ax.legend(loc='best')

for ext in ['.pdf', '.jpeg']:
    fname = os.path.join(FIGURE_DIR, 'kde-boundary-reflection{}'.format(ext))
    fig.savefig(fname, dpi=500, bbox_inches='tight')
fig.show()

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
# A faithful visualization of one's data assigns uniformly distributed PIT
# values to that data. This notebook plots the ECDF of the PIT values of each
# example dataset under its histogram, kernel density estimate, and quantile
# dot plot, along with simultaneous 95% confidence bands.

# +
import os
import sys

import pandas as pd
import matplotlib.pyplot as plt

sys.path.insert(0, '..')
from visppc import viz
from visppc.data import make_datasets

# %matplotlib inline
# -

DATA_DIR = '../data/raw'
FIGURE_DIR = '../reports/figures'
if not os.path.isdir(DATA_DIR):
    make_datasets(DATA_DIR)
if not os.path.isdir(FIGURE_DIR):
    os.makedirs(FIGURE_DIR)

datasets =\
    {name: pd.read_csv(os.path.join(DATA_DIR, '{}_data.csv'.format(name)))['y'].values
     for name in ['mixture', 'bounded', 'discrete']}

visualization_kwargs =\
    {'hist': {'bins': 'auto'},
     'kde': {'bw': 'silverman'},
     'dots': {'num_dots': 100}}

# +
# One row per dataset, one column per visualization type
fig, axes = plt.subplots(len(datasets), len(visualization_kwargs),
                         figsize=(15, 12), sharex=True, sharey=True)

for row, (name, obs_y) in enumerate(datasets.items()):
    for col, (kind, kwargs) in enumerate(visualization_kwargs.items()):
        pit_values = viz.visualization_pit(obs_y, kind, **kwargs)
        viz.plot_pit_ecdf(pit_values,
                          difference=True,
                          method='optimize',
                          rseed=601,
                          title='{}: {}'.format(name.title(), kind),
                          legend=(row == 0 and col == 0),
                          fig_and_ax=[fig, axes[row, col]],
                          show=False)

fig.tight_layout()
for ext in ['.pdf', '.jpeg']:
    fname = os.path.join(FIGURE_DIR, 'pit-ecdf-of-visualizations{}'.format(ext))
    fig.savefig(fname, dpi=500, bbox_inches='tight')
fig.show()
# -

# Summarize the uniformity tests in a table
test_results = []
for name, obs_y in datasets.items():
    for kind, kwargs in visualization_kwargs.items():
        pit_values = viz.visualization_pit(obs_y, kind, **kwargs)
        gamma, p_value = viz.ecdf_uniformity_test(pit_values, rseed=601)
        test_results.append({'dataset': name, 'visualization': kind,
                             'gamma': gamma, 'p_value': p_value})
pd.DataFrame(test_results).pivot(index='dataset',
                                 columns='visualization',
                                 values='p_value')

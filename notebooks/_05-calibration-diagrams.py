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
# Compare reliability diagrams of a logistic regression that omits a
# quadratic term. Binned diagrams depend on the number of bins. CORP diagrams
# based on PAV do not, and they come with a consistency band and a
# decomposition of the Brier score.

# +
import os
import sys

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

sys.path.insert(0, '..')
from visppc import viz
from visppc.data import make_datasets
from visppc.models import LogisticModel

# %matplotlib inline
# -

DATA_DIR = '../data/raw'
FIGURE_DIR = '../reports/figures'
if not os.path.isdir(DATA_DIR):
    make_datasets(DATA_DIR)
if not os.path.isdir(FIGURE_DIR):
    os.makedirs(FIGURE_DIR)

# +
binary_df = pd.read_csv(os.path.join(DATA_DIR, 'binary_data.csv'))
design = np.column_stack([np.ones(binary_df.shape[0]), binary_df['x'].values])
choices = binary_df['y'].values

model = LogisticModel().fit(choices, design)
point_probs = model.point_probs()
sim_probs = model.sample_probs(num_draws=100, rseed=601)
sim_choices = viz.simulate_binary_outcomes(sim_probs, rseed=602)
# -

# Binned reliability diagrams with different numbers of bins
fig, axes = plt.subplots(1, 3, figsize=(18, 5), sharey=True)
for ax, partitions in zip(axes, [5, 10, 20]):
    viz.plot_smoothed_reliability(point_probs,
                                  choices,
                                  method='binned',
                                  partitions=partitions,
                                  title='{} bins'.format(partitions),
                                  fig_and_ax=[fig, ax],
                                  show=False)
for ext in ['.pdf', '.jpeg']:
    fname = os.path.join(FIGURE_DIR, 'reliability-binned{}'.format(ext))
    fig.savefig(fname, dpi=500, bbox_inches='tight')
fig.show()

# CORP reliability diagram with its consistency band
viz.plot_smoothed_reliability(point_probs,
                              choices,
                              method='pav',
                              num_sims=500,
                              rseed=281,
                              title='CORP reliability diagram',
                              output_file=os.path.join(
                                  FIGURE_DIR, 'reliability-corp.pdf'))

# Compare the observed curve to curves of simulated outcomes
viz.plot_smoothed_reliability(sim_probs,
                              choices,
                              method='pav',
                              sim_y=sim_choices,
                              consistency=False,
                              title='Simulated vs observed reliability',
                              output_file=os.path.join(
                                  FIGURE_DIR, 'reliability-simulated.pdf'))

# Brier score decomposition for the fitted and the true probabilities
pd.DataFrame({'fitted': viz.corp_decomposition(point_probs, choices),
              'true': viz.corp_decomposition(binary_df['true_prob'].values,
                                             choices)}).round(4)

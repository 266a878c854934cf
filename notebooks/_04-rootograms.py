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
# Check a Poisson model of overdispersed count data with rootograms and with
# the randomized PIT of the observed counts.

# +
import os
import sys

import pandas as pd
import matplotlib.pyplot as plt

sys.path.insert(0, '..')
from visppc import viz
from visppc.data import make_datasets
from visppc.models import PoissonModel

# %matplotlib inline
# -

DATA_DIR = '../data/raw'
FIGURE_DIR = '../reports/figures'
if not os.path.isdir(DATA_DIR):
    make_datasets(DATA_DIR)
if not os.path.isdir(FIGURE_DIR):
    os.makedirs(FIGURE_DIR)

obs_y = pd.read_csv(os.path.join(DATA_DIR, 'counts_data.csv'))['y'].values
sim_y = PoissonModel().fit(obs_y).simulate(num_draws=500, rseed=601)

# Tabulate the frequencies underlying the rootograms
viz.compute_rootogram_frequencies(sim_y, obs_y).round(2)

# +
styles = ['hanging', 'standing', 'suspended']
fig, axes = plt.subplots(1, len(styles), figsize=(18, 5))

for ax, style in zip(axes, styles):
    viz.plot_rootogram(sim_y,
                       obs_y,
                       style=style,
                       title=style.title(),
                       legend=(style == 'hanging'),
                       fig_and_ax=[fig, ax],
                       show=False)

fig.tight_layout()
for ext in ['.pdf', '.jpeg']:
    fname = os.path.join(FIGURE_DIR, 'rootograms-poisson{}'.format(ext))
    fig.savefig(fname, dpi=500, bbox_inches='tight')
fig.show()
# -

# The randomized PIT values of the observed counts should be uniform under a
# well calibrated model. Overdispersion shows up as a U-shaped PIT histogram.
pit_values = viz.pit_from_draws(sim_y, obs_y, rseed=281)
viz.plot_pit_ecdf(pit_values,
                  difference=True,
                  rseed=281,
                  title='Poisson model of overdispersed counts',
                  output_file=os.path.join(FIGURE_DIR,
                                           'pit-ecdf-poisson.pdf'))

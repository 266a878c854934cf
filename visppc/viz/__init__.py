# -*- coding: utf-8 -*-
"""
Visualization module for visual posterior predictive checks.
"""
from .utils import (progress,
                    is_categorical,
                    is_count_data,
                    simulate_binary_outcomes,
                    compute_test_statistics)
from .density import kde_pdf, kde_cdf, histogram_edges, histogram_cdf
from .dots import (compute_quantile_dots,
                   dot_layout,
                   dots_cdf,
                   plot_quantile_dots)
from .pit import (pit_from_draws,
                  pit_from_histogram,
                  pit_from_kde,
                  pit_from_dots,
                  visualization_pit)
from .ecdf_bands import (ecdf_at,
                         evaluation_points,
                         pointwise_band,
                         simultaneous_band,
                         ecdf_uniformity_test)
from .pav import pav, pav_step_function, corp_decomposition, consistency_band
from .pit_ecdf import plot_pit_ecdf
from .reliability import plot_smoothed_reliability
from .rootogram import compute_rootogram_frequencies, plot_rootogram
from .overlays import plot_kde_overlay, plot_hist_overlay
from .sim_cdf import plot_simulated_cdfs
from .cont_scalars import plot_continuous_scalars
from .recommend import recommend_plot_type

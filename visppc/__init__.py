"""
Tools for visual posterior predictive checks of Bayesian models.
"""

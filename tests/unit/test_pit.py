"""
Tests the computation of PIT values with respect to predictive draws and with
respect to the visualizations that display one's data.
"""
import unittest

import numpy as np

from visppc.viz.pit import (pit_from_draws,
                            pit_from_histogram,
                            pit_from_kde,
                            pit_from_dots,
                            visualization_pit)
from visppc.viz.ecdf_bands import ecdf_uniformity_test


class PitFromDrawsTests(unittest.TestCase):
    """
    Unit test class for `pit_from_draws`.
    """
    def test_pit_without_ties(self):
        sim_y = np.array([[1., 2., 3., 4.],
                          [0., 0., 0., 0.]])
        obs_y = np.array([2.5, 5.])
        func_result = pit_from_draws(sim_y, obs_y, rseed=1)
        self.assertTrue(np.allclose(np.array([0.5, 1.0]), func_result))

    def test_pit_without_randomization(self):
        sim_y = np.array([[1., 2., 3., 4.]])
        obs_y = np.array([2.])
        func_result = pit_from_draws(sim_y, obs_y, randomize=False)
        self.assertTrue(np.allclose(np.array([0.5]), func_result))

    def test_randomized_ties_stay_between_strict_and_weak_pit(self):
        sim_y = np.tile(np.array([[0, 1]]), (500, 1))
        obs_y = np.zeros(500)
        func_result = pit_from_draws(sim_y, obs_y, rseed=7)
        self.assertTrue(((func_result >= 0) & (func_result <= 0.5)).all())
        # The tie-breaking spreads values across the interval
        self.assertTrue(func_result.std() > 0.1)

    def test_calibrated_models_give_centered_pit_values(self):
        random_state = np.random.RandomState(15)
        num_obs, num_sims = 400, 200

        normal_obs = random_state.normal(size=num_obs)
        normal_sims = random_state.normal(size=(num_obs, num_sims))
        normal_pit = pit_from_draws(normal_sims, normal_obs, rseed=2)
        self.assertAlmostEqual(0.5, normal_pit.mean(), delta=0.05)

        count_obs = random_state.poisson(2, size=num_obs)
        count_sims = random_state.poisson(2, size=(num_obs, num_sims))
        count_pit = pit_from_draws(count_sims, count_obs, rseed=2)
        self.assertAlmostEqual(0.5, count_pit.mean(), delta=0.05)

    def test_mismatched_shapes_raise(self):
        with self.assertRaises(ValueError):
            pit_from_draws(np.ones((3, 5)), np.ones(4))


class VisualizationPitTests(unittest.TestCase):
    """
    Unit test class for the PIT of data under histograms, kernel density
    estimates, and quantile dot plots.
    """
    def test_pit_from_histogram(self):
        x = np.array([0.5, 1.5, 2.5, 3.5])
        edges = np.array([0., 2., 4.])
        points = np.array([1., 2., 3., 4.])
        func_result = pit_from_histogram(x, bins=edges, points=points)
        self.assertTrue(np.allclose(np.array([0.25, 0.5, 0.75, 1]),
                                    func_result))

    def test_histogram_pit_of_data_is_in_unit_interval(self):
        x = np.random.RandomState(8).normal(size=100)
        func_result = pit_from_histogram(x, bins=10)
        self.assertEqual(x.shape, func_result.shape)
        self.assertTrue(((func_result >= 0) & (func_result <= 1)).all())

    def test_pit_from_kde(self):
        x = np.array([-2., -1., 0., 1., 2.])
        func_result = pit_from_kde(x, points=np.array([0., -50., 50.]))
        self.assertTrue(np.allclose(np.array([0.5, 0, 1]), func_result))

    def test_bounded_kde_puts_no_mass_below_the_bound(self):
        x = np.random.RandomState(3).exponential(size=200)
        func_result = pit_from_kde(x, bounds=(0, None),
                                   points=np.array([-1., 0., 1e6]))
        self.assertTrue(np.allclose(np.array([0, 0, 1]), func_result))

    def test_pit_from_dots(self):
        x = np.random.RandomState(5).normal(size=300)
        func_result = pit_from_dots(x, num_dots=20)
        self.assertEqual(x.shape, func_result.shape)
        self.assertTrue(((func_result >= 0) & (func_result <= 1)).all())
        self.assertAlmostEqual(0.5, np.median(func_result), delta=0.1)

    def test_visualization_pit_dispatch(self):
        x = np.random.RandomState(6).normal(size=50)
        self.assertTrue(np.allclose(pit_from_kde(x, bw=0.5),
                                    visualization_pit(x, 'kde', bw=0.5)))
        self.assertTrue(np.allclose(pit_from_histogram(x, bins=5),
                                    visualization_pit(x, 'hist', bins=5)))
        with self.assertRaises(ValueError):
            visualization_pit(x, 'violin')

    def test_kde_pit_tests_the_fidelity_of_the_density_estimate(self):
        """
        The kernel density estimate represents a large normal sample
        faithfully, but not the heavily tied values of rounded data.
        """
        random_state = np.random.RandomState(1001)
        continuous = random_state.normal(size=1000)
        rounded = np.round(random_state.normal(0, 3, size=1000))

        continuous_pit = visualization_pit(continuous, 'kde')
        p_value = ecdf_uniformity_test(continuous_pit, num_sims=300,
                                       rseed=13)[1]
        self.assertTrue(p_value > 0.01)

        rounded_pit = visualization_pit(rounded, 'kde')
        p_value = ecdf_uniformity_test(rounded_pit, num_sims=300, rseed=13)[1]
        self.assertTrue(p_value < 0.01)

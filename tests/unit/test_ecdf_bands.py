"""
Tests the pointwise and simultaneous confidence bands for the ECDF of uniform
values, as well as the uniformity test built on them.
"""
import unittest

import numpy as np
import scipy.stats

from visppc.viz import ecdf_bands
from visppc.viz.ecdf_bands import (ecdf_at,
                                   evaluation_points,
                                   pointwise_band,
                                   simultaneous_band,
                                   ecdf_uniformity_test)


class EcdfHelperTests(unittest.TestCase):
    def test_ecdf_at(self):
        func = ecdf_at
        func_args =\
            [(np.array([0.1, 0.5, 0.5, 0.9]), np.array([0, 0.5, 1])),
             (np.array([0.3]), np.array([0.2, 0.3])),
             ]
        expected_results =\
            [np.array([0, 0.75, 1]),
             np.array([0, 1]),
             ]

        for args, expected_result in zip(func_args, expected_results):
            func_result = func(*args)
            self.assertTrue(np.allclose(expected_result, func_result))

        with self.assertRaises(ValueError):
            func(np.array([]), np.array([0.5]))

    def test_evaluation_points(self):
        self.assertTrue(np.allclose(np.array([0, 0.25, 0.5, 0.75, 1]),
                                    evaluation_points(4)))
        for bad_arg in [0, -3, 2.5]:
            with self.assertRaises(ValueError):
                evaluation_points(bad_arg)

    def test_default_points_are_capped(self):
        func = ecdf_bands._default_points
        self.assertEqual(11, func(10, None).size)
        self.assertEqual(ecdf_bands.MAX_DEFAULT_POINTS + 1,
                         func(5000, None).size)
        with self.assertRaises(ValueError):
            func(10, np.array([0.5, 0.2]))
        with self.assertRaises(ValueError):
            func(10, np.array([0.5, 1.2]))


class BandTests(unittest.TestCase):
    """
    Unit test class for the pointwise and simultaneous bands.
    """
    def setUp(self):
        self.n = 40
        self.points = evaluation_points(20)

    def test_pointwise_band_matches_binomial_quantiles(self):
        lower, upper = pointwise_band(self.n, self.points, prob=0.9)
        interior = slice(1, -1)
        expected_lower =\
            scipy.stats.binom.ppf(0.05, self.n, self.points[interior]) / self.n
        expected_upper =\
            scipy.stats.binom.ppf(0.95, self.n, self.points[interior]) / self.n
        self.assertTrue(np.allclose(expected_lower, lower[interior]))
        self.assertTrue(np.allclose(expected_upper, upper[interior]))

        # The band is pinned at the ends of the unit interval
        self.assertEqual((0, 0), (lower[0], upper[0]))
        self.assertEqual((1, 1), (lower[-1], upper[-1]))

    def test_simultaneous_band_is_wider_than_pointwise(self):
        pointwise_lower, pointwise_upper =\
            pointwise_band(self.n, self.points, prob=0.95)
        for method in ecdf_bands.BAND_METHODS:
            lower, upper, gamma =\
                simultaneous_band(self.n, self.points, prob=0.95,
                                  method=method, num_sims=500, rseed=4)
            self.assertTrue(0 < gamma < 0.05)
            self.assertTrue((lower <= pointwise_lower).all())
            self.assertTrue((upper >= pointwise_upper).all())
            self.assertTrue((lower <= upper).all())

    def test_band_coverage_single_point(self):
        """
        With a single interior point, the simultaneous coverage is the
        probability of the binomial count falling inside the band.
        """
        n, gamma = 10, 0.2
        points = np.array([0, 0.5, 1])
        low = scipy.stats.binom.ppf(gamma / 2, n, 0.5)
        high = scipy.stats.binom.ppf(1 - gamma / 2, n, 0.5)
        expected_result = (scipy.stats.binom.cdf(high, n, 0.5) -
                           scipy.stats.binom.cdf(low - 1, n, 0.5))
        func_result = ecdf_bands._band_coverage(n, points, gamma)
        self.assertAlmostEqual(expected_result, func_result)

        # No interior points means the ECDF can never leave the band
        self.assertEqual(1.0, ecdf_bands._band_coverage(n, points[[0, -1]],
                                                        gamma))

    def test_optimized_band_has_desired_coverage(self):
        prob = 0.9
        lower, upper, gamma =\
            simultaneous_band(self.n, self.points, prob=prob,
                              method='optimize')
        exact_coverage =\
            ecdf_bands._band_coverage(self.n, self.points, gamma)
        self.assertTrue(exact_coverage >= prob)

        # Check the coverage against simulated uniform samples
        random_state = np.random.RandomState(91)
        num_sims = 2000
        inside = np.empty(num_sims, dtype=bool)
        for sim in range(num_sims):
            ecdf = ecdf_at(random_state.uniform(size=self.n), self.points)
            inside[sim] = ((ecdf >= lower) & (ecdf <= upper)).all()
        self.assertTrue(inside.mean() >= prob - 0.03)

    def test_simulated_band_has_desired_coverage(self):
        prob = 0.9
        lower, upper, gamma =\
            simultaneous_band(self.n, self.points, prob=prob,
                              method='simulate', num_sims=1000, rseed=17)

        # Check the coverage against fresh uniform samples
        random_state = np.random.RandomState(92)
        num_sims = 2000
        inside = np.empty(num_sims, dtype=bool)
        for sim in range(num_sims):
            ecdf = ecdf_at(random_state.uniform(size=self.n), self.points)
            inside[sim] = ((ecdf >= lower) & (ecdf <= upper)).all()
        self.assertTrue(inside.mean() >= prob - 0.04)

    def test_band_argument_errors(self):
        with self.assertRaises(ValueError):
            simultaneous_band(self.n, self.points, method='bootstrap')
        with self.assertRaises(ValueError):
            simultaneous_band(self.n, self.points, prob=1.0)
        with self.assertRaises(ValueError):
            simultaneous_band(0, self.points)
        with self.assertRaises(ValueError):
            simultaneous_band(self.n, self.points, num_sims=0)
        with self.assertRaises(ValueError):
            pointwise_band(self.n, self.points, prob=0)

    def test_single_value_band(self):
        lower, upper, gamma = simultaneous_band(1, num_sims=20, rseed=1)
        self.assertTrue(np.allclose(np.array([0, 1]), lower))
        self.assertTrue(np.allclose(np.array([0, 1]), upper))


class UniformityTestTests(unittest.TestCase):
    def test_uniform_values_are_not_rejected(self):
        evenly_spaced = (np.arange(100) + 0.5) / 100
        gamma, p_value =\
            ecdf_uniformity_test(evenly_spaced, num_sims=300, rseed=12)
        self.assertTrue(0 <= gamma <= 1)
        self.assertTrue(p_value > 0.5)

    def test_skewed_values_are_rejected(self):
        random_state = np.random.RandomState(33)
        skewed = random_state.uniform(size=200)**3
        gamma, p_value = ecdf_uniformity_test(skewed, num_sims=300, rseed=12)
        self.assertTrue(p_value < 0.01)

    def test_uniformity_test_errors(self):
        with self.assertRaises(ValueError):
            ecdf_uniformity_test(np.array([]))
        with self.assertRaises(ValueError):
            ecdf_uniformity_test(np.ones((3, 3)))
        with self.assertRaises(ValueError):
            ecdf_uniformity_test(np.linspace(0, 1, 10), num_sims=0)

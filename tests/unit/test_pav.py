"""
Tests the pool-adjacent-violators algorithm and the CORP calibration
diagnostics built on it.
"""
import unittest
from unittest import mock

import numpy as np
from sklearn.isotonic import IsotonicRegression

from visppc.viz.pav import (pav,
                            pav_step_function,
                            corp_decomposition,
                            consistency_band)
from visppc.viz.utils import simulate_binary_outcomes


class PavTests(unittest.TestCase):
    """
    Unit test class for the `pav` function and its step-function wrapper.
    """
    def test_pav_known_fits(self):
        """
        Ensures that PAV pools adjacent violators, handles unsorted inputs,
        pools tied covariate values, and respects weights.
        """
        func = pav
        func_args =\
            [(np.array([1., 2., 3., 4.]), np.array([1., 3., 2., 4.]), None),
             (np.array([3., 1., 2.]), np.array([2., 1., 3.]), None),
             (np.array([1., 1., 2.]), np.array([0., 1., 0.]), None),
             (np.array([1., 2.]), np.array([2., 0.]), np.array([3., 1.])),
             ]
        expected_results =\
            [np.array([1., 2.5, 2.5, 4.]),
             np.array([2.5, 1., 2.5]),
             np.array([1 / 3., 1 / 3., 1 / 3.]),
             np.array([1.5, 1.5]),
             ]

        for args, expected_result in zip(func_args, expected_results):
            func_result = func(*args)
            self.assertTrue(np.allclose(expected_result, func_result))

    def test_pav_decreasing(self):
        func_result = pav(np.array([1., 2., 3.]),
                          np.array([3., 1., 2.]),
                          increasing=False)
        self.assertTrue(np.allclose(np.array([3., 1.5, 1.5]), func_result))

    def test_pav_is_monotone_and_matches_sklearn(self):
        """
        Ensures that the fit is non-decreasing and matches scikit-learn's
        isotonic regression on data without ties.
        """
        random_state = np.random.RandomState(1019)
        x = random_state.uniform(size=200)
        y = (random_state.uniform(size=200) < x).astype(float)

        func_result = pav(x, y)
        expected_result = IsotonicRegression().fit_transform(x, y)

        sorted_fit = func_result[np.argsort(x)]
        self.assertTrue((np.diff(sorted_fit) >= -1e-12).all())
        self.assertTrue(np.allclose(expected_result, func_result))

    def test_pav_argument_errors(self):
        with self.assertRaises(ValueError):
            pav(np.arange(3.), np.arange(4.))
        with self.assertRaises(ValueError):
            pav(np.arange(3.), np.arange(3.), weights=np.array([1., 0., 1.]))
        with self.assertRaises(ValueError):
            pav(np.arange(6.).reshape(2, 3), np.arange(6.))
        with self.assertRaises(ValueError):
            pav(np.array([]), np.array([]))

    def test_pav_step_function(self):
        x = np.array([0.3, 0.1, 0.3, 0.2])
        y = np.array([1., 0., 0., 1.])
        unique_x, fitted = pav_step_function(x, y)
        self.assertTrue(np.allclose(np.array([0.1, 0.2, 0.3]), unique_x))
        self.assertTrue(np.allclose(np.array([0., 2 / 3., 2 / 3.]), fitted))


class CorpTests(unittest.TestCase):
    """
    Unit test class for the CORP decomposition and consistency bands.
    """
    def setUp(self):
        random_state = np.random.RandomState(281)
        self.probs = random_state.uniform(size=300)
        self.y = (random_state.uniform(size=300) < self.probs**2).astype(int)

    def test_decomposition_identity(self):
        corp = corp_decomposition(self.probs, self.y)
        self.assertEqual(['score', 'mcb', 'dsc', 'unc'], corp.index.tolist())
        self.assertAlmostEqual(corp['score'],
                               corp['mcb'] - corp['dsc'] + corp['unc'])
        self.assertTrue(corp['mcb'] >= 0)
        self.assertTrue(corp['dsc'] >= 0)

    def test_recalibrated_forecasts_have_no_miscalibration(self):
        recalibrated = pav(self.probs, self.y.astype(float))
        corp = corp_decomposition(recalibrated, self.y)
        self.assertAlmostEqual(0, corp['mcb'])

    def test_climatological_forecast_has_no_discrimination(self):
        constant = np.full(self.y.size, self.y.mean())
        corp = corp_decomposition(constant, self.y)
        self.assertAlmostEqual(0, corp['dsc'])
        self.assertAlmostEqual(0, corp['mcb'])

    def test_decomposition_argument_errors(self):
        with self.assertRaises(ValueError):
            corp_decomposition(self.probs + 1, self.y)
        with self.assertRaises(ValueError):
            corp_decomposition(self.probs, self.y + 2)

    def test_consistency_band(self):
        unique_probs, lower, upper =\
            consistency_band(self.probs, prob=0.9, num_sims=50, rseed=3)
        self.assertEqual(unique_probs.shape, lower.shape)
        self.assertEqual(unique_probs.shape, upper.shape)
        self.assertTrue((lower <= upper).all())
        self.assertTrue(((lower >= 0) & (upper <= 1)).all())

        # The band is reproducible given a random seed
        repeated = consistency_band(self.probs, prob=0.9, num_sims=50, rseed=3)
        self.assertTrue(np.allclose(lower, repeated[1]))

        with self.assertRaises(ValueError):
            consistency_band(self.probs, prob=1.5)

    def test_consistency_band_resamples_with_binary_simulator(self):
        """
        Ensures the resampled outcomes come from `simulate_binary_outcomes`,
        one row per simulation, and that certain forecasts give a band that
        collapses onto the forecasts.
        """
        probs = np.array([0., 0., 1., 1.])
        with mock.patch('visppc.viz.pav.simulate_binary_outcomes',
                        wraps=simulate_binary_outcomes) as simulator:
            unique_probs, lower, upper =\
                consistency_band(probs, prob=0.9, num_sims=20, rseed=5)
        self.assertEqual(1, simulator.call_count)
        self.assertEqual((20, 4), simulator.call_args[0][0].shape)
        self.assertTrue(np.allclose(np.array([0., 1.]), lower))
        self.assertTrue(np.allclose(np.array([0., 1.]), upper))

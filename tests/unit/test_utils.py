"""
Tests the helper functions of the visualization module.
"""
import unittest
from unittest.mock import patch

import numpy as np
from tqdm import tqdm

from visppc.viz import utils
from visppc.viz import plot_utils
from visppc.viz.utils import (is_categorical,
                              is_count_data,
                              simulate_binary_outcomes,
                              compute_test_statistics)


class CategoricalTests(unittest.TestCase):
    def test_is_categorical(self):
        func = is_categorical
        func_args =\
            [(np.arange(30),),
             (np.arange(30), 0.1, 0.5, 15),
             (np.tile(np.array([1, 2, 3]), 10), 0.1, 0.75, 2),
             (np.arange(5),),
             ]
        expected_results = [False, True, True, True]

        for args, expected_result in zip(func_args, expected_results):
            self.assertEqual(expected_result, func(*args))

    def test_is_categorical_verbose(self):
        func_args =\
            [np.arange(5),
             np.arange(30),
             np.concatenate([np.zeros(10), np.arange(1, 41)]),
             ]
        expected_results = [(True, 'categorical'),
                            (False, None),
                            (True, 'solo')]

        for vector, expected_result in zip(func_args, expected_results):
            self.assertEqual(expected_result,
                             is_categorical(vector, verbose=True))

        grouped = np.concatenate([np.repeat(np.arange(10), 4),
                                  np.arange(10, 40)])
        self.assertEqual((True, 'group'),
                         is_categorical(grouped, solo_threshold=0.5,
                                        verbose=True))

    def test_is_count_data(self):
        func_args = [np.array([0, 1, 5]),
                     np.array([0., 2., 3.]),
                     np.array([-1, 2]),
                     np.array([0.5, 1.]),
                     np.array([]),
                     np.array([1., np.nan]),
                     np.array(['a', 'b', 'a']),
                     np.array([True, False])]
        expected_results = [True, True, False, False, False, False, False,
                            True]
        for vector, expected_result in zip(func_args, expected_results):
            self.assertEqual(expected_result, is_count_data(vector))


class SimulationTests(unittest.TestCase):
    def test_simulate_binary_outcomes(self):
        probs = np.array([[0., 1.], [0., 1.], [0.5, 0.5]])
        outcomes = simulate_binary_outcomes(probs, rseed=4)
        self.assertEqual(probs.shape, outcomes.shape)
        self.assertEqual([0, 1], outcomes[0].tolist())
        self.assertEqual([0, 1], outcomes[1].tolist())

        # Results are reproducible given a seed
        self.assertTrue(np.array_equal(
            outcomes, simulate_binary_outcomes(probs, rseed=4)))

        many = simulate_binary_outcomes(np.full(5000, 0.3), rseed=1)
        self.assertAlmostEqual(0.3, many.mean(), delta=0.03)

        with self.assertRaises(ValueError):
            simulate_binary_outcomes(np.array([0.5, 1.2]))

    def test_compute_test_statistics(self):
        sim_y = np.arange(6.).reshape(2, 3)
        func_result = compute_test_statistics(sim_y, np.mean)
        self.assertTrue(np.allclose(np.array([1.5, 2.5, 3.5]), func_result))
        with self.assertRaises(ValueError):
            compute_test_statistics(np.arange(3.), np.mean)

    def test_ensure_2d_sim_y(self):
        func = utils._ensure_2d_sim_y
        self.assertEqual((3, 1), func(np.arange(3.)).shape)
        self.assertEqual((3, 2), func(np.ones((3, 2)), np.ones(3)).shape)
        with self.assertRaises(ValueError):
            func(np.ones((3, 2)), np.ones(4))
        with self.assertRaises(ValueError):
            func(np.ones((3, 2, 2)))
        with self.assertRaises(ValueError):
            func([1, 2, 3])

    def test_progress_outside_of_a_kernel(self):
        with patch.object(utils, '_is_kernel', return_value=False):
            progress_bar = utils.progress(range(3), disable=True)
        self.assertIsInstance(progress_bar, tqdm)
        self.assertEqual([0, 1, 2], list(progress_bar))


class PlotUtilsTests(unittest.TestCase):
    def test_select_traces(self):
        func = plot_utils._select_traces
        sim_y = np.arange(20).reshape(2, 10)
        self.assertIs(sim_y, func(sim_y, None))
        self.assertIs(sim_y, func(sim_y, 15))

        selected = func(sim_y, 4, rseed=3)
        self.assertEqual((2, 4), selected.shape)
        self.assertEqual(4, np.unique(selected[0]).size)
        self.assertTrue(np.array_equal(selected, func(sim_y, 4, rseed=3)))

        with self.assertRaises(ValueError):
            func(sim_y, 0)

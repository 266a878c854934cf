"""
Tests the tabulation of observed and predicted count frequencies used by
rootograms.
"""
import unittest

import numpy as np

from visppc.viz.rootogram import compute_rootogram_frequencies


class RootogramFrequencyTests(unittest.TestCase):
    def setUp(self):
        self.obs_y = np.array([0, 0, 1, 2])
        self.sim_y = np.array([[0, 0],
                               [0, 1],
                               [0, 1],
                               [1, 2]])

    def test_frequencies(self):
        frequencies = compute_rootogram_frequencies(self.sim_y, self.obs_y)
        self.assertEqual(['count', 'observed', 'expected', 'lower', 'upper'],
                         frequencies.columns.tolist())
        self.assertEqual([0, 1, 2], frequencies['count'].tolist())
        self.assertEqual([2, 1, 1], frequencies['observed'].tolist())
        self.assertTrue(np.allclose(np.array([2, 1.5, 0.5]),
                                    frequencies['expected'].values))
        self.assertTrue((frequencies['lower'] <= frequencies['expected']).all())
        self.assertTrue((frequencies['upper'] >= frequencies['expected']).all())

    def test_max_count_truncates_and_pads(self):
        truncated = compute_rootogram_frequencies(self.sim_y, self.obs_y,
                                                  max_count=1)
        self.assertEqual([2, 1], truncated['observed'].tolist())

        padded = compute_rootogram_frequencies(self.sim_y, self.obs_y,
                                               max_count=4)
        self.assertEqual([2, 1, 1, 0, 0], padded['observed'].tolist())
        self.assertTrue(np.allclose(0, padded['expected'].values[3:]))

    def test_frequencies_errors(self):
        with self.assertRaises(ValueError):
            compute_rootogram_frequencies(self.sim_y, self.obs_y - 1)
        with self.assertRaises(ValueError):
            compute_rootogram_frequencies(self.sim_y + 0.5, self.obs_y)
        with self.assertRaises(ValueError):
            compute_rootogram_frequencies(self.sim_y, self.obs_y, prob=1.0)
        with self.assertRaises(ValueError):
            compute_rootogram_frequencies(self.sim_y[:3], self.obs_y)

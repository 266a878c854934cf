"""
Tests the simulation of the example datasets.
"""
import os
import unittest
import tempfile

import numpy as np
import pandas as pd

from visppc.data import simulate_data


class SimulateDataTests(unittest.TestCase):
    def test_generators(self):
        mixture = simulate_data.simulate_mixture_data(300, rseed=1)
        bounded = simulate_data.simulate_bounded_data(300, rseed=1)
        discrete = simulate_data.simulate_discrete_data(300, rseed=1)
        counts = simulate_data.simulate_count_data(300, rseed=1)

        for values in [mixture, bounded, discrete, counts]:
            self.assertEqual((300,), values.shape)
        self.assertTrue((bounded >= 0).all())
        self.assertTrue(np.allclose(discrete, np.round(discrete)))
        self.assertTrue((counts >= 0).all())
        # Negative binomial counts are overdispersed
        self.assertTrue(counts.var() > counts.mean())

    def test_binary_data(self):
        df = simulate_data.simulate_binary_data(200, rseed=2)
        self.assertEqual(['x', 'true_prob', 'y'], df.columns.tolist())
        self.assertTrue(df['y'].isin([0, 1]).all())
        self.assertTrue(((df['true_prob'] > 0) & (df['true_prob'] < 1)).all())

    def test_generator_errors(self):
        with self.assertRaises(ValueError):
            simulate_data.simulate_mixture_data(means=(0, 1), scales=(1,))
        with self.assertRaises(ValueError):
            simulate_data.simulate_mixture_data(weights=(0.9, 0.9))
        with self.assertRaises(ValueError):
            simulate_data.simulate_count_data(mean=-1)

    def test_make_datasets(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            output_dir = os.path.join(temp_dir, 'raw')
            paths = simulate_data.make_datasets(output_dir, num_obs=50,
                                                progress_bar=False)
            self.assertEqual(['mixture', 'bounded', 'discrete',
                              'counts', 'binary'],
                             list(paths.keys()))
            for name, path in paths.items():
                self.assertTrue(os.path.isfile(path))
                df = pd.read_csv(path)
                expected_rows = 100 if name == 'binary' else 50
                self.assertEqual(expected_rows, df.shape[0])

    def test_make_datasets_seeding(self):
        """
        Ensures that a fixed seed reproduces the datasets, that `rseed=None`
        is accepted, and that the progress bar can be shown.
        """
        with tempfile.TemporaryDirectory() as temp_dir:
            first = simulate_data.make_datasets(
                os.path.join(temp_dir, 'first'), num_obs=20, rseed=7,
                progress_bar=False)
            second = simulate_data.make_datasets(
                os.path.join(temp_dir, 'second'), num_obs=20, rseed=7,
                progress_bar=True)
            for name in first:
                self.assertTrue(pd.read_csv(first[name]).equals(
                    pd.read_csv(second[name])))

            unseeded = simulate_data.make_datasets(
                os.path.join(temp_dir, 'unseeded'), num_obs=20, rseed=None,
                progress_bar=False)
            for name, path in unseeded.items():
                expected_rows = 40 if name == 'binary' else 20
                self.assertEqual(expected_rows, pd.read_csv(path).shape[0])

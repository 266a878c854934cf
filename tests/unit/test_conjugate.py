"""
Tests the conjugate models used to simulate posterior predictive datasets.
"""
import unittest

import numpy as np

from visppc.models import (NormalModel,
                           PoissonModel,
                           BernoulliModel,
                           LogisticModel)


class ConjugateModelTests(unittest.TestCase):
    """
    Unit test class for the closed form posterior predictive models.
    """
    def setUp(self):
        self.random_state = np.random.RandomState(42)

    def test_normal_model(self):
        y = self.random_state.normal(5, 2, size=500)
        model = NormalModel().fit(y)
        self.assertEqual(500, model.num_obs)
        self.assertAlmostEqual(y.mean(), model.post_mean, places=2)

        sim_y = model.simulate(num_draws=200, rseed=1)
        self.assertEqual((500, 200), sim_y.shape)
        self.assertAlmostEqual(5, sim_y.mean(), delta=0.3)
        self.assertAlmostEqual(2, sim_y.std(), delta=0.3)

        # Reproducible given a seed
        self.assertTrue(np.allclose(sim_y, model.simulate(200, rseed=1)))
        self.assertEqual((10, 3), model.simulate(3, num_obs=10).shape)

    def test_poisson_model(self):
        y = self.random_state.poisson(3, size=400)
        model = PoissonModel().fit(y)
        self.assertAlmostEqual(y.mean(), model.post_shape / model.post_rate,
                               delta=0.05)
        sim_y = model.simulate(num_draws=50, rseed=2)
        self.assertEqual((400, 50), sim_y.shape)
        self.assertTrue((sim_y >= 0).all())
        with self.assertRaises(ValueError):
            PoissonModel().fit(np.array([0.5, 1.]))

    def test_bernoulli_model(self):
        y = self.random_state.binomial(1, 0.3, size=300)
        model = BernoulliModel().fit(y)
        self.assertEqual(1 + y.sum(), model.post_a)
        self.assertEqual(1 + 300 - y.sum(), model.post_b)
        sim_y = model.simulate(num_draws=20, rseed=3)
        self.assertTrue(np.isin(sim_y, [0, 1]).all())
        with self.assertRaises(ValueError):
            BernoulliModel().fit(np.array([0, 2]))

    def test_unfit_and_invalid_models_raise(self):
        with self.assertRaises(ValueError):
            NormalModel().simulate()
        with self.assertRaises(ValueError):
            NormalModel().fit(np.array([1., np.inf]))
        with self.assertRaises(ValueError):
            NormalModel().fit(np.ones((2, 2)))
        with self.assertRaises(ValueError):
            NormalModel().fit(self.random_state.normal(size=5)).simulate(0)


class LogisticModelTests(unittest.TestCase):
    def setUp(self):
        random_state = np.random.RandomState(7)
        x = random_state.normal(size=1000)
        self.design = np.column_stack([np.ones(1000), x])
        probs = 1 / (1 + np.exp(-(-0.5 + 1.0 * x)))
        self.y = (random_state.uniform(size=1000) < probs).astype(int)

    def test_fit_and_probabilities(self):
        model = LogisticModel().fit(self.y, self.design)
        self.assertTrue(np.allclose(np.array([-0.5, 1.0]), model.coefs,
                                    atol=0.25))
        self.assertEqual((2, 2), model.cov.shape)

        point_probs = model.point_probs()
        self.assertEqual((1000,), point_probs.shape)

        sampled_probs = model.sample_probs(num_draws=30, rseed=4)
        self.assertEqual((1000, 30), sampled_probs.shape)
        self.assertTrue(((sampled_probs > 0) & (sampled_probs < 1)).all())

    def test_simulate(self):
        model = LogisticModel().fit(self.y, self.design)
        sim_y = model.simulate(num_draws=25, rseed=5)
        self.assertEqual((1000, 25), sim_y.shape)
        self.assertTrue(np.isin(sim_y, [0, 1]).all())
        self.assertAlmostEqual(self.y.mean(), sim_y.mean(), delta=0.05)
        with self.assertRaises(ValueError):
            model.simulate(num_draws=5, num_obs=10)

    def test_design_errors(self):
        with self.assertRaises(ValueError):
            LogisticModel().fit(self.y, self.design[:, 1])
        with self.assertRaises(ValueError):
            LogisticModel().fit(self.y, self.design[:10])

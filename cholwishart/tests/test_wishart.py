import unittest

import numpy as np

from cholwishart import rcholwishart, rinvcholwishart, rinvwishart, rwishart
from cholwishart.errors import InvalidDegreesOfFreedomError, NotPositiveDefiniteError
from cholwishart.rng import VariateStream


class TestWishart(unittest.TestCase):
    def setUp(self):
        self.scale = np.array([
            [2.0, 0.5, 0.0],
            [0.5, 1.0, 0.3],
            [0.0, 0.3, 1.5]
        ])

    def test_wishart_from_factors(self):
        W = rwishart(5, 4.0, self.scale, stream=VariateStream(seed=31))
        F = rcholwishart(5, 4.0, self.scale, stream=VariateStream(seed=31))
        for w, f in zip(W, F):
            self.assertTrue(np.allclose(w, f.T@f))
            self.assertTrue(np.allclose(w, w.T))
            self.assertTrue(np.all(np.linalg.eigvalsh(w) > 0.0))

    def test_wishart_mean(self):
        df = 7.0
        W = rwishart(20000, df, self.scale, stream=VariateStream(seed=101))
        self.assertTrue(np.allclose(W.mean(axis=0), df*self.scale, rtol=0.05, atol=0.15))

    def test_inverse_wishart_mean(self):
        df = 10.0
        num_dims = self.scale.shape[0]
        IW = rinvwishart(20000, df, self.scale, stream=VariateStream(seed=202))
        expected = self.scale / (df - num_dims - 1)
        self.assertTrue(np.allclose(IW.mean(axis=0), expected, rtol=0.05, atol=0.02))

    def test_inverse_wishart_inverts_wishart(self):
        df = 6.0
        inv_scale = np.linalg.inv(self.scale)
        IW = rinvwishart(5, df, self.scale, stream=VariateStream(seed=13))
        G = rinvcholwishart(5, df, 0.5*(inv_scale + inv_scale.T), stream=VariateStream(seed=13))
        for iw, g in zip(IW, G):
            W = np.linalg.inv(g).T@np.linalg.inv(g)
            self.assertTrue(np.allclose(iw@W, np.eye(3)))

    def test_inverse_wishart_validation(self):
        stream = VariateStream(seed=0)
        with self.assertRaises(InvalidDegreesOfFreedomError):
            rinvwishart(1, 2.0, -np.eye(3), stream=stream)
        with self.assertRaises(NotPositiveDefiniteError):
            rinvwishart(1, 4.0, -np.eye(3), stream=stream)
        self.assertEqual(stream.num_draws, 0)

import threading
import unittest

import numpy as np

from cholwishart.errors import StreamStateError
from cholwishart.rng import VariateStream, default_stream, seed


class TestVariateStream(unittest.TestCase):
    def test_reproducible(self):
        a = VariateStream(seed=11)
        b = VariateStream(seed=11)
        with a, b:
            x = [a.chisquare(3.0), a.standard_normal()]
            y = [b.chisquare(3.0), b.standard_normal()]
        self.assertEqual(x, y)
        self.assertEqual(a.num_draws, 2)

    def test_matches_generator(self):
        stream = VariateStream(seed=5)
        rng = np.random.default_rng(5)
        with stream:
            self.assertEqual(stream.chisquare(2.5), rng.chisquare(2.5))
            self.assertEqual(stream.standard_normal(), rng.standard_normal())

    def test_draw_outside_bracket(self):
        stream = VariateStream(seed=0)
        with self.assertRaises(StreamStateError):
            stream.standard_normal()
        with self.assertRaises(StreamStateError):
            stream.chisquare(1.0)
        self.assertEqual(stream.num_draws, 0)

    def test_bracket_misuse(self):
        stream = VariateStream(seed=0)
        with self.assertRaises(StreamStateError):
            stream.release()
        stream.acquire()
        with self.assertRaises(StreamStateError):
            stream.acquire()
        with self.assertRaises(StreamStateError):
            stream.reseed(1)
        stream.release()
        self.assertFalse(stream.held)

    def test_invalid_shape(self):
        stream = VariateStream(seed=0)
        with stream:
            with self.assertRaises(ValueError):
                stream.chisquare(0.0)
        self.assertEqual(stream.num_draws, 0)

    def test_mutual_exclusion(self):
        stream = VariateStream(seed=0)
        entered = threading.Event()

        def worker():
            with stream:
                entered.set()
                stream.standard_normal()

        stream.acquire()
        thread = threading.Thread(target=worker)
        thread.start()
        self.assertFalse(entered.wait(0.2))
        stream.release()
        thread.join(5.0)
        self.assertTrue(entered.is_set())
        self.assertEqual(stream.num_draws, 1)
        self.assertFalse(stream.held)

    def test_default_stream(self):
        seed(42)
        stream = default_stream()
        with stream:
            x = stream.standard_normal()
        seed(42)
        self.assertIs(default_stream(), stream)
        with stream:
            y = stream.standard_normal()
        self.assertEqual(x, y)

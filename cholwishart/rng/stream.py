import threading
from typing import Optional

import numpy as np

from cholwishart.errors import StreamStateError


class VariateStream:
    """A single pseudo-random stream from which chi-squared and standard normal
    variates are drawn. Draws are only permitted inside an acquire/release
    bracket; the bracket holds a lock for its entire duration so that two
    sessions sharing the stream can never interleave their draw sequences.

    Parameters:
        rng: The underlying numpy generator whose state is advanced by draws.
        num_draws: The number of variates consumed from the stream so far.

    """
    def __init__(self, seed: Optional[int]=None, rng: Optional[np.random.Generator]=None):
        self.rng: np.random.Generator = np.random.default_rng(seed) if rng is None else rng
        self.num_draws: int = 0
        self._lock = threading.Lock()
        self._owner: Optional[int] = None

    @property
    def held(self) -> bool:
        return self._owner is not None

    def acquire(self):
        if self._owner == threading.get_ident():
            raise StreamStateError("The variate stream is already held by this thread.")
        self._lock.acquire()
        self._owner = threading.get_ident()

    def release(self):
        if self._owner != threading.get_ident():
            raise StreamStateError("The variate stream is not held by this thread.")
        self._owner = None
        self._lock.release()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()
        return False

    def _check_held(self):
        if self._owner != threading.get_ident():
            raise StreamStateError("Variates may only be drawn while the stream is acquired.")

    def chisquare(self, shape: float) -> float:
        """Draw a chi-squared variate with the given (strictly positive) shape
        parameter.

        """
        self._check_held()
        if not shape > 0.0:
            raise ValueError("Chi-squared shape must be positive, got {}.".format(shape))
        self.num_draws += 1
        return float(self.rng.chisquare(shape))

    def standard_normal(self) -> float:
        self._check_held()
        self.num_draws += 1
        return float(self.rng.standard_normal())

    def reseed(self, seed: Optional[int]=None):
        """Replace the underlying generator by a freshly seeded one. Waits for any
        other thread's bracket to close; reseeding from inside one's own
        bracket raises.

        """
        with self:
            self.rng = np.random.default_rng(seed)
            self.num_draws = 0


_default = VariateStream()

def default_stream() -> VariateStream:
    """Returns the process-wide variate stream used when no stream is supplied."""
    return _default

def seed(value: Optional[int]=None):
    _default.reseed(value)

import logging
import time
from typing import Optional, Tuple

import numpy as np

from cholwishart.errors import InvalidDegreesOfFreedomError, InvalidSampleCountError, InvalidShapeError
from cholwishart.info import SessionInfo, SessionState
from cholwishart.linalg import cholesky_upper, resolve_orientation
from cholwishart.linalg.tri import Orientation
from cholwishart.rng import VariateStream, default_stream
from cholwishart.statistics.bartlett import bartlett_factor


logger = logging.getLogger(__name__)


def validate_scale(scale: np.ndarray) -> np.ndarray:
    """Checks that the scale matrix is a non-empty, square, finite, real matrix
    and returns it as an array of doubles. Positive definiteness is not checked
    here; it is established by factoring the matrix.

    """
    scale = np.asarray(scale)
    if scale.ndim != 2 or scale.shape[0] != scale.shape[1] or scale.shape[0] < 1:
        raise InvalidShapeError("'scale' must be a non-empty square matrix, got shape {}.".format(scale.shape))
    if scale.dtype.kind not in 'iuf':
        raise InvalidShapeError("'scale' must be a real matrix, got dtype {}.".format(scale.dtype))
    if not np.all(np.isfinite(scale)):
        raise InvalidShapeError("'scale' must only contain finite values.")
    return scale.astype(np.float64)

def validate_df(df: float, num_dims: int) -> float:
    arr = np.asarray(df)
    if arr.ndim != 0 or arr.dtype.kind not in 'iuf':
        raise InvalidDegreesOfFreedomError("Degrees of freedom must be a real scalar, got {!r}.".format(df))
    df = float(arr)
    if not np.isfinite(df) or df < num_dims:
        raise InvalidDegreesOfFreedomError(
            "Degrees of freedom ({}) must be at least the dimension of the scale matrix ({}).".format(df, num_dims))
    return df

def validate_num_samples(num_samples: int, strict: bool=False) -> int:
    arr = np.asarray(num_samples)
    if arr.ndim != 0 or arr.dtype.kind not in 'iu':
        raise InvalidSampleCountError("Number of samples must be an integer, got {!r}.".format(num_samples))
    num_samples = int(arr)
    if num_samples < 1:
        if strict:
            raise InvalidSampleCountError("Number of samples must be at least one, got {}.".format(num_samples))
        num_samples = 1
    return num_samples


class BatchSampler:
    """Draws a batch of Cholesky factors (or their inverses) of Wishart
    distributed matrices. The scale matrix is factored once and each draw then
    costs one Bartlett factor, one triangular product and, in inverse mode, one
    triangular inversion.

    A sampler represents a single session: it moves from `init` through
    `validating` and `factoring` to `sampling` and finally `done`, or to
    `failed` on the first error, and cannot be run again afterwards.

    Parameters:
        num_samples: Requested number of draws. Values below one are raised to
            one unless `strict` is set.
        df: Degrees of freedom; at least the dimension of the scale matrix.
        scale: Positive definite scale matrix.
        inverse: Whether to return the inverse of each Cholesky factor.
        orientation: Which triangle the factors populate, either 'upper' or
            'lower'.
        stream: The variate stream to draw from. Defaults to the process-wide
            stream.
        strict: Whether a sample count below one is an error.
        info: Diagnostic information about the session.

    """
    def __init__(
            self,
            num_samples: int,
            df: float,
            scale: np.ndarray,
            inverse: bool=False,
            orientation: Orientation='upper',
            stream: Optional[VariateStream]=None,
            strict: bool=False
    ):
        self.num_samples = num_samples
        self.df = df
        self.scale = scale
        self.inverse = inverse
        self.orientation = resolve_orientation(orientation)
        self.stream = default_stream() if stream is None else stream
        self.strict = strict
        self.info = SessionInfo()

    def validate(self) -> Tuple[np.ndarray, float, int]:
        scale = validate_scale(self.scale)
        df = validate_df(self.df, scale.shape[0])
        num_samples = validate_num_samples(self.num_samples, self.strict)
        return scale, df, num_samples

    def run(self) -> np.ndarray:
        """Runs the sampling session.

        Returns:
            out: Array of shape `(num_samples, p, p)` whose `j`-th slice is the
                `j`-th triangular draw.

        """
        if self.info.state != SessionState.INIT:
            raise RuntimeError("A sampling session can only be run once.")
        try:
            self.info.state = SessionState.VALIDATING
            scale, df, num_samples = self.validate()
            num_dims = scale.shape[0]
            self.info.num_dims = num_dims
            self.info.state = SessionState.FACTORING
            scale_factor = cholesky_upper(scale)
        except Exception as exc:
            self._fail(exc)
            raise

        self.info.state = SessionState.SAMPLING
        logger.debug(
            "Sampling %d %s factor(s) of dimension %d with %g degrees of freedom%s.",
            num_samples, self.orientation.name, num_dims, df, " (inverted)" if self.inverse else "")
        out = np.empty((num_samples, num_dims, num_dims))
        # Fully rewritten by every call to `bartlett_factor`.
        bartlett = np.zeros((num_dims, num_dims), order='F')
        start = time.time()
        try:
            with self.stream:
                first_draw = self.stream.num_draws
                try:
                    for j in range(num_samples):
                        bartlett_factor(df, num_dims, self.stream, self.orientation, out=bartlett)
                        factor = self.orientation.combine(scale_factor, bartlett)
                        if self.inverse:
                            factor = self.orientation.invert(factor)
                        out[j] = factor
                        self.info.num_samples += 1
                finally:
                    self.info.num_draws = self.stream.num_draws - first_draw
        except Exception as exc:
            self._fail(exc)
            raise
        finally:
            self.info.elapsed = time.time() - start

        self.info.state = SessionState.DONE
        logger.debug("Drew %d variates in %.3g seconds.", self.info.num_draws, self.info.elapsed)
        return out

    def _fail(self, exc: Exception):
        self.info.state = SessionState.FAILED
        self.info.error = exc
        logger.debug("Sampling session failed: %s", exc)


def sample_wishart_factors(
        num_samples: int,
        df: float,
        scale: np.ndarray,
        inverse: bool=False,
        orientation: Orientation='upper',
        stream: Optional[VariateStream]=None,
        strict: bool=False
) -> np.ndarray:
    """Generates Cholesky factors of Wishart distributed matrices, or the inverses
    of those factors, without forming the Wishart matrices themselves. See
    `BatchSampler` for a description of the arguments.

    Returns:
        out: Array of shape `(max(1, num_samples), p, p)` of triangular
            matrices. With the default orientation each slice `F` is upper
            triangular and `F.T @ F` is a draw from the Wishart distribution.

    """
    sampler = BatchSampler(num_samples, df, scale, inverse, orientation, stream, strict)
    return sampler.run()

def rcholwishart(num_samples: int, df: float, scale: np.ndarray, stream: Optional[VariateStream]=None) -> np.ndarray:
    """Draws upper triangular Cholesky factors of Wishart matrices."""
    return sample_wishart_factors(num_samples, df, scale, inverse=False, stream=stream)

def rinvcholwishart(num_samples: int, df: float, scale: np.ndarray, stream: Optional[VariateStream]=None) -> np.ndarray:
    """Draws inverses of the upper triangular Cholesky factors of Wishart
    matrices. For the same stream state these are the inverses of the matrices
    produced by `rcholwishart`.

    """
    return sample_wishart_factors(num_samples, df, scale, inverse=True, stream=stream)

from typing import Optional

import numpy as np

from cholwishart.linalg import UpperFactor, solve_psd
from cholwishart.rng import VariateStream
from cholwishart.sample import sample_wishart_factors, validate_df, validate_scale


def rwishart(num_samples: int, df: float, scale: np.ndarray, stream: Optional[VariateStream]=None) -> np.ndarray:
    """Draws matrices from the Wishart distribution by squaring sampled Cholesky
    factors. For the same stream state the draws are `F.T @ F` for the factors
    `F` returned by `rcholwishart`.

    Args:
        num_samples: Number of draws; values below one are raised to one.
        df: Degrees of freedom.
        scale: Positive definite scale matrix.
        stream: The variate stream to draw from.

    Returns:
        W: Array of shape `(num_samples, p, p)` of Wishart matrices with mean
            `df * scale`.

    """
    factors = sample_wishart_factors(num_samples, df, scale, stream=stream)
    return UpperFactor.gram(factors)

def rinvwishart(num_samples: int, df: float, scale: np.ndarray, stream: Optional[VariateStream]=None) -> np.ndarray:
    """Draws matrices from the inverse Wishart distribution. If `W` follows the
    Wishart distribution with scale `inv(scale)` then `inv(W)` is an inverse
    Wishart draw with scale `scale`. Writing `W = F.T @ F` with `F` upper
    triangular, the inverse is `G @ G.T` where `G = inv(F)` is sampled directly
    in inverse mode.

    Args:
        num_samples: Number of draws; values below one are raised to one.
        df: Degrees of freedom.
        scale: Positive definite scale matrix.
        stream: The variate stream to draw from.

    Returns:
        IW: Array of shape `(num_samples, p, p)` of inverse Wishart matrices with
            mean `scale / (df - p - 1)` when `df > p + 1`.

    """
    scale = validate_scale(scale)
    validate_df(df, scale.shape[0])
    inv_scale, _ = solve_psd(scale)
    inv_scale = 0.5*(inv_scale + inv_scale.T)
    inv_factors = sample_wishart_factors(num_samples, df, inv_scale, inverse=True, stream=stream)
    return inv_factors@np.swapaxes(inv_factors, -1, -2)

from typing import Optional

import numpy as np

from cholwishart.linalg.tri import UpperFactor
from cholwishart.rng import VariateStream


def bartlett_factor(
        df: float,
        num_dims: int,
        stream: VariateStream,
        orientation: type=UpperFactor,
        out: Optional[np.ndarray]=None
) -> np.ndarray:
    """Draws the triangular factor of a standardized Wishart variate by the
    Bartlett decomposition. The diagonal holds square roots of chi-squared
    variates and the strict triangle holds standard normal variates.

    Variates are consumed column by column; within column `j` the chi-squared
    draw for the diagonal comes first, followed by one normal draw for each of
    the rows `i < j` in increasing order. This ordering is identical for both
    orientations, so a given stream state always produces the same values.

    The caller must hold the stream and guarantee `num_dims >= 1` and
    `df >= num_dims`; no validation is performed here.

    Args:
        df: Degrees of freedom.
        num_dims: Dimension of the factor.
        stream: The acquired variate stream.
        orientation: Which triangle of the factor is populated.
        out: Optional scratch buffer of shape `(num_dims, num_dims)` that is
            completely overwritten.

    Returns:
        out: The standardized triangular factor.

    """
    if out is None:
        out = np.zeros((num_dims, num_dims), order='F')
    for j in range(num_dims):
        out[j, j] = np.sqrt(stream.chisquare(df - j))
        for i in range(j):
            populated, mirror = orientation.positions(i, j)
            out[populated] = stream.standard_normal()
            out[mirror] = 0.0
    return out

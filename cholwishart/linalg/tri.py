from typing import Tuple, Union

import numpy as np
import scipy.linalg as spla

from cholwishart.errors import SingularFactorError


def multiply_tri(tri: np.ndarray, rhs: np.ndarray, side: int, trans: bool=False) -> np.ndarray:
    """Multiplies a dense matrix by an upper triangular matrix using the BLAS
    triangular matrix-matrix product. Neither input is modified.

    Args:
        tri: Upper triangular matrix; entries below the diagonal are not
            referenced.
        rhs: The matrix to be multiplied.
        side: Zero to multiply from the left, `op(tri) @ rhs`, and one to
            multiply from the right, `rhs @ op(tri)`.
        trans: Whether `op` transposes the triangular matrix.

    Returns:
        prod: The matrix product.

    """
    trmm, = spla.get_blas_funcs(('trmm', ), (tri, rhs))
    prod = trmm(1.0, tri, rhs, side=side, lower=0, trans_a=int(trans), diag=0, overwrite_b=0)
    return prod

def invert_tri(tri: np.ndarray, lower: bool) -> np.ndarray:
    """Computes the inverse of a non-singular triangular matrix. The opposite
    triangle of the input is carried over unchanged, so it must already be
    zero.

    Args:
        tri: Triangular matrix.
        lower: Whether the matrix is lower triangular.

    Returns:
        inv: The triangular inverse.

    """
    trtri, = spla.get_lapack_funcs(('trtri', ), (tri, ))
    inv, info = trtri(tri, lower=int(lower), unitdiag=0, overwrite_c=0)
    if info > 0:
        raise SingularFactorError(
            "Triangular factor is singular (diagonal entry {} is zero).".format(info))
    if info < 0:
        raise ValueError("Illegal value in argument {} of trtri.".format(-info))
    return inv


class UpperFactor:
    """Factors that populate the upper triangle. The Bartlett factor `T` is
    upper triangular and is combined with the scale's upper Cholesky factor
    `U` as `T @ U`, so that `(T @ U).T @ (T @ U)` is a Wishart draw.

    """
    name = 'upper'
    lower = False

    @staticmethod
    def positions(i: int, j: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        # Row `i < j` of column `j`: the populated entry, then its mirror.
        return (i, j), (j, i)

    @staticmethod
    def combine(scale_factor: np.ndarray, bartlett: np.ndarray) -> np.ndarray:
        return multiply_tri(scale_factor, bartlett, side=1)

    @staticmethod
    def invert(factor: np.ndarray) -> np.ndarray:
        return invert_tri(factor, lower=False)

    @staticmethod
    def gram(factor: np.ndarray) -> np.ndarray:
        return np.swapaxes(factor, -1, -2)@factor

class LowerFactor:
    """Factors that populate the lower triangle. The Bartlett factor is the
    transpose of the upper one and is combined as `U.T @ T.T`, so every result
    is the transpose of the `UpperFactor` result for the same variates.

    """
    name = 'lower'
    lower = True

    @staticmethod
    def positions(i: int, j: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (j, i), (i, j)

    @staticmethod
    def combine(scale_factor: np.ndarray, bartlett: np.ndarray) -> np.ndarray:
        return multiply_tri(scale_factor, bartlett, side=0, trans=True)

    @staticmethod
    def invert(factor: np.ndarray) -> np.ndarray:
        return invert_tri(factor, lower=True)

    @staticmethod
    def gram(factor: np.ndarray) -> np.ndarray:
        return factor@np.swapaxes(factor, -1, -2)


Orientation = Union[str, type]

def resolve_orientation(orientation: Orientation) -> type:
    if orientation in (UpperFactor, LowerFactor):
        return orientation
    if orientation == 'upper':
        return UpperFactor
    if orientation == 'lower':
        return LowerFactor
    raise ValueError("Unrecognized `orientation` argument '{}'.".format(orientation))

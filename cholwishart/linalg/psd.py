from typing import Optional

import numpy as np
import scipy.linalg as spla

from cholwishart.errors import NotPositiveDefiniteError


def cholesky_upper(A: np.ndarray) -> np.ndarray:
    """Computes the upper triangular Cholesky factor `U` of a positive definite
    matrix so that `U.T @ U` reconstructs the matrix. Only the upper triangle
    of the input is referenced. The input is copied before being handed to
    LAPACK, so the caller's array is never modified.

    Args:
        A: Positive definite matrix.

    Returns:
        U: The upper triangular Cholesky factor, with exact zeros below the
            diagonal.

    """
    A = np.array(A, dtype=np.float64, order='F')
    potrf, = spla.get_lapack_funcs(('potrf', ), (A, ))
    U, info = potrf(A, lower=False, clean=True, overwrite_a=False)
    if info > 0:
        raise NotPositiveDefiniteError(
            "The scale matrix is not positive-definite (leading minor of order {} is not positive).".format(info))
    if info < 0:
        raise ValueError("Illegal value in argument {} of potrf.".format(-info))
    return U

def solve_psd(A: np.ndarray, rhs: Optional[np.ndarray]=None):
    """Solve the system `A x = rhs` under the assumption that `A` is positive
    definite. The method implemented is to compute the upper Cholesky
    factorization of `A` and solve the system via forward-backward
    substitution.

    Args:
        A: Left-hand side of the linear system.
        rhs: Right-hand side of the linear system. Defaults to the identity, in
            which case the solution is the inverse of `A`.

    Returns:
        x: Solution of the linear system.
        U: The upper Cholesky factor of the left-hand side of the linear system.

    """
    if rhs is None:
        rhs = np.eye(len(A))
    U = cholesky_upper(A)
    x = spla.cho_solve((U, False), rhs)
    return x, U

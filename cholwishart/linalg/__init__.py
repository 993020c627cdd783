from .psd import cholesky_upper, solve_psd
from .tri import LowerFactor, UpperFactor, invert_tri, multiply_tri, resolve_orientation

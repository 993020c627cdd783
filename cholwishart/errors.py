import numpy as np


class WishartError(ValueError):
    """Base class for failures raised while sampling Wishart factors."""

class InvalidShapeError(WishartError):
    pass

class InvalidDegreesOfFreedomError(WishartError):
    pass

class InvalidSampleCountError(WishartError):
    pass

class NotPositiveDefiniteError(WishartError, np.linalg.LinAlgError):
    pass

class SingularFactorError(WishartError, np.linalg.LinAlgError):
    """Raised when a combined triangular factor cannot be inverted. Under valid
    input this indicates an internal invariant violation rather than bad data.

    """
    pass

class StreamStateError(RuntimeError):
    """Raised when a variate stream is used outside of its acquire/release
    bracket, or the bracket is opened or closed out of order.

    """
    pass

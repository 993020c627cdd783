from . import linalg, rng, statistics
from .errors import InvalidDegreesOfFreedomError, InvalidSampleCountError, InvalidShapeError, NotPositiveDefiniteError, SingularFactorError, StreamStateError, WishartError
from .info import SessionInfo, SessionState
from .linalg import LowerFactor, UpperFactor
from .rng import VariateStream, default_stream, seed
from .sample import BatchSampler, rcholwishart, rinvcholwishart, sample_wishart_factors
from .wishart import rinvwishart, rwishart

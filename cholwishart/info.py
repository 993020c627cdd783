class SessionState:
    INIT = 'init'
    VALIDATING = 'validating'
    FACTORING = 'factoring'
    SAMPLING = 'sampling'
    DONE = 'done'
    FAILED = 'failed'

class SessionInfo:
    """Diagnostic information from a single sampling session.

    Parameters:
        state: The state the session has reached.
        num_dims: The dimension of the sampled matrices.
        num_samples: The number of output matrices completed so far.
        num_draws: The number of variates the session consumed from its stream.
        elapsed: Wall time spent sampling, excluding validation and
            factorization of the scale matrix.
        error: The exception that moved the session to the failed state, if any.

    """
    def __init__(self):
        self.state: str = SessionState.INIT
        self.num_dims: int = 0
        self.num_samples: int = 0
        self.num_draws: int = 0
        self.elapsed: float = 0.0
        self.error: Exception = None

    def asdict(self):
        d = {
            'state': self.state,
            'dims': self.num_dims,
            'samples': self.num_samples,
            'draws': self.num_draws,
            'elapsed': self.elapsed
        }
        return d

class NQueensError(Exception):
    """Base class for every error raised by the solver package."""


class AllocationError(NQueensError, MemoryError):
    """Board or position buffer could not be allocated."""

    def __init__(self, n, what="chess board"):
        self.n = n
        self.what = what
        super().__init__(f"Memory allocation ERROR: {what} for N={n}!")


class InvalidInput(NQueensError, ValueError):
    """Input rejected before any board is allocated or search begins."""


class InvalidBoardSize(InvalidInput):
    def __init__(self, n):
        self.n = n
        super().__init__(f"Size incorrect! N must be an integer >= 4, got {n!r}")


class InvalidMode(InvalidInput):
    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Error while choosing mode... unknown mode {mode!r}")


class SizeLimitExceeded(InvalidInput):
    """Board size is valid but above what the HTTP service is allowed to run."""

    def __init__(self, n, limit, strategy):
        self.n = n
        self.limit = limit
        self.strategy = strategy
        super().__init__(
            f"N={n} is above the limit of {limit} for {strategy} on this server"
        )

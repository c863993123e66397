class PreconditionError(ValueError):
    """Raised when a run or table is requested with inputs it cannot start from (e.g. fewer than 3 cities)"""


class UniformFallbackWarning(UserWarning):
    """Emitted when a weight vector sums to zero and a uniform distribution is used in its place"""

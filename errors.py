class HullError(Exception):
    """Base class for convex hull errors."""


class InvalidPointsError(HullError, ValueError):
    """The point collection handed to the hull calculator is unusable."""


class HullPreconditionError(HullError, RuntimeError):
    """
    An algorithm was invoked with input the calculator should have filtered out
    (missing collection or fewer than two points).
    """


class UnknownAlgorithmError(HullError, KeyError):
    """No hull algorithm is registered under the requested name."""

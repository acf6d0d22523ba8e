"""Exception types raised by the engine and the service layer.

"No solution" outcomes (an empty path, an empty triple list) are return
values and never raised.
"""


class EngineError(ValueError):
    """Base class for rejected engine input."""


class InvalidInputError(EngineError):
    """Input is malformed or out of range (e.g., a non-numeric token)."""


class InvalidShapeError(EngineError):
    """A flat sequence cannot be arranged into a square matrix."""

"""
Exception types for graph generation and replay.
"""

from typing import Any, Optional


class GraphulaError(Exception):
    """Base class for all graphula errors."""
    pass


class GenerationFailure(GraphulaError):
    """Raised when a node could not be generated and persisted."""
    pass


class MaxAttemptsExceededError(GenerationFailure):
    """
    Raised when persistence keeps rejecting candidates for a node type.

    Fields:
        node_type: Fixture type that could not be inserted
        attempts: Attempt bound that was exhausted
    """

    def __init__(self, node_type: type, attempts: int) -> None:
        self.node_type = node_type
        self.attempts = attempts
        super().__init__(
            f"Failed to insert {node_type.__name__} after {attempts} attempts"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MaxAttemptsExceededError):
            return NotImplemented
        return (self.node_type, self.attempts) == (other.node_type, other.attempts)

    def __hash__(self) -> int:
        return hash((self.node_type, self.attempts))


class ReplayError(GraphulaError):
    """Raised when a replay log cannot drive a graph."""
    pass


class ReplayExhaustedError(ReplayError):
    """Raised when the replay log runs out before the graph does."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(
            f"Not enough replay data to fulfill graph (node #{position} requested)."
        )


class ReplayDecodeError(ReplayError):
    """Raised when a replay payload does not decode to the requested type."""

    def __init__(self, node_type: type, position: int, reason: Optional[str] = None) -> None:
        self.node_type = node_type
        self.position = position
        message = f"Replay entry #{position} is not a valid {node_type.__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DependencyShapeError(GraphulaError):
    """Raised when dependencies do not match the declared dependency fields."""
    pass


class ArbitraryError(GraphulaError):
    """Raised when no random generator is known for a node type."""
    pass


class InvalidEffectError(GraphulaError):
    """Raised when a graph program yields something that is not an effect."""
    pass

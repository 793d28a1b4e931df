"""
Graph declaration: generate, edit, link and insert nodes.

Each builder returns a program to be composed with ``yield from``:

    def graph():
        vet = yield from node(Veterinarian)
        owner = yield from node_with(Owner, only(vet.key))
        dog = yield from node_edit_with(
            Dog, (owner.key, vet.key), lambda d: replace(d, name="fido")
        )
        return dog

Dependencies must already be persisted when they are passed in; only the
node being built is retried.
"""

from typing import Any, Callable, Optional, TypeVar

from ..config import DEFAULT_MAX_ATTEMPTS
from .dependencies import declared_dependencies, depends_on
from .effects import Graph, generate_node, insert, log_node, throw
from .errors import DependencyShapeError, MaxAttemptsExceededError

A = TypeVar("A")


def try_insert(
    node_type: type,
    max_attempts: int,
    source: Callable[[], Graph[Any]],
) -> Graph[Any]:
    """
    Run source and insert its value, retrying on rejection.

    Every attempt runs a fresh source program, so a rejected candidate is
    discarded and regenerated from scratch.

    Args:
        node_type: Fixture type, used to tag the failure
        max_attempts: Number of candidates to try before giving up
        source: Zero-argument callable returning the candidate program

    Returns:
        The entity returned by the frontend for the accepted candidate

    Raises:
        MaxAttemptsExceededError: After max_attempts rejected candidates
    """
    attempts = 0
    while attempts < max_attempts:
        value = yield from source()
        entity = yield from insert(value)
        if entity is not None:
            return entity
        attempts += 1
    return (yield from throw(MaxAttemptsExceededError(node_type, max_attempts)))


def node_edit_with(
    node_type: type,
    dependencies: Any,
    edit: Optional[Callable[[A], A]] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Graph[Any]:
    """
    Generate, edit, link and insert a node.

    The edited value is logged before dependencies are injected, and
    dependencies are injected after editing, so they always win over edits.

    Example:
        dog = yield from node_edit_with(
            Dog, (owner.key, vet.key), lambda d: replace(d, name="fido")
        )
    """

    def source() -> Graph[Any]:
        value = yield from generate_node(node_type)
        if edit is not None:
            value = edit(value)
        yield from log_node(value)
        return depends_on(value, dependencies)

    return (yield from try_insert(node_type, max_attempts, source))


def node_with(
    node_type: type,
    dependencies: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Graph[Any]:
    """Generate a node with dependencies and insert it."""
    return (yield from node_edit_with(node_type, dependencies, None, max_attempts))


def node_edit(
    node_type: type,
    edit: Callable[[A], A],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Graph[Any]:
    """Generate and edit a node that has no dependencies."""
    _require_no_dependencies(node_type)
    return (yield from node_edit_with(node_type, (), edit, max_attempts))


def node(node_type: type, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Graph[Any]:
    """Generate a node that has no dependencies."""
    _require_no_dependencies(node_type)
    return (yield from node_edit_with(node_type, (), None, max_attempts))


def _require_no_dependencies(node_type: type) -> None:
    fields = declared_dependencies(node_type)
    if fields:
        raise DependencyShapeError(
            f"{node_type.__name__} declares dependencies {fields!r}; use node_with"
        )

"""
Graph interpreter: drive a program one effect at a time.
"""

from typing import Any, Callable, Optional, Union

from ..core.effects import BACKEND_EFFECTS, FRONTEND_EFFECTS, Graph
from ..core.errors import InvalidEffectError
from .backend import Backend, RunLogger
from .frontend import Frontend

# Frontend or plain insert function: value -> entity or None
FrontendLike = Union[Frontend, Callable[[Any], Optional[Any]]]


def interpret(
    program: Graph[Any],
    backend: Backend,
    frontend: FrontendLike,
    log: Optional[RunLogger] = None,
) -> Any:
    """
    Run program to completion.

    Generation effects go to backend, Insert goes to frontend. Errors raised
    by either side abort the run immediately. The program is closed on every
    exit path.

    Args:
        program: Graph generator
        backend: Generation backend
        frontend: Persistence frontend
        log: Logger for the run (default: the backend's)

    Returns:
        The program's return value

    Raises:
        InvalidEffectError: If the program yields something other than an effect
    """
    insert = frontend.insert if isinstance(frontend, Frontend) else frontend
    log = log or backend.logger
    try:
        try:
            effect = next(program)
        except StopIteration as stop:
            return stop.value

        while True:
            if isinstance(effect, BACKEND_EFFECTS):
                result = backend.interpret(effect)
            elif isinstance(effect, FRONTEND_EFFECTS):
                result = insert(effect.value)
                if result is None:
                    log.debug("Insert rejected for %s", type(effect.value).__name__)
            else:
                raise InvalidEffectError(f"Graph yielded a non-effect: {effect!r}")

            try:
                effect = program.send(result)
            except StopIteration as stop:
                return stop.value
    finally:
        program.close()

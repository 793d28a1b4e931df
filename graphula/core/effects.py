"""
Effect commands that graph programs are built from.

A graph program is a generator. It yields commands and receives each
command's result back from the interpreter:

- GenerateNode, LogNode, Throw are generation-side (handled by a Backend)
- Insert is persistence-side (handled by a Frontend)

Programs never execute anything themselves, so the same program can run
live, logged or from a replay file against any persistence frontend.
"""

from dataclasses import dataclass
from typing import Any, Generator, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class GenerateNode:
    """Produce one raw value of node_type."""
    node_type: type


@dataclass(frozen=True)
class LogNode:
    """Record a generated value so the graph can be reproduced."""
    value: Any


@dataclass(frozen=True)
class Throw:
    """Abort the program with error."""
    error: BaseException


@dataclass(frozen=True)
class Insert:
    """Attempt to persist value. Result is the entity, or None on rejection."""
    value: Any


BackendEffect = Union[GenerateNode, LogNode, Throw]
FrontendEffect = Insert
Effect = Union[GenerateNode, LogNode, Throw, Insert]

BACKEND_EFFECTS = (GenerateNode, LogNode, Throw)
FRONTEND_EFFECTS = (Insert,)

# A program that yields effects and returns T
Graph = Generator[Effect, Any, T]


def generate_node(node_type: type) -> Graph[Any]:
    value = yield GenerateNode(node_type)
    return value


def log_node(value: Any) -> Graph[None]:
    yield LogNode(value)


def throw(error: BaseException) -> Graph[Any]:
    # The interpreter raises; nothing is ever sent back.
    yield Throw(error)
    raise error


def insert(value: Any) -> Graph[Optional[Any]]:
    entity = yield Insert(value)
    return entity

"""
Core graph primitives.

This module provides:
- Effects: GenerateNode, LogNode, Throw, Insert commands
- Dependencies: HasDependencies, Only, depends_on
- Graph: node builders with bounded insert retries
- Errors: Generation and replay failures
"""

from .dependencies import HasDependencies, Only, depends_on, dependency_values, only
from .effects import Effect, GenerateNode, Graph, Insert, LogNode, Throw
from .errors import (
    ArbitraryError,
    DependencyShapeError,
    GenerationFailure,
    GraphulaError,
    InvalidEffectError,
    MaxAttemptsExceededError,
    ReplayDecodeError,
    ReplayError,
    ReplayExhaustedError,
)
from .graph import node, node_edit, node_edit_with, node_with, try_insert

__all__ = [
    "HasDependencies",
    "Only",
    "depends_on",
    "dependency_values",
    "only",
    "Effect",
    "GenerateNode",
    "Graph",
    "Insert",
    "LogNode",
    "Throw",
    "ArbitraryError",
    "DependencyShapeError",
    "GenerationFailure",
    "GraphulaError",
    "InvalidEffectError",
    "MaxAttemptsExceededError",
    "ReplayDecodeError",
    "ReplayError",
    "ReplayExhaustedError",
    "node",
    "node_edit",
    "node_edit_with",
    "node_with",
    "try_insert",
]

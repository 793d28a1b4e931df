"""
Graphula

Generate interconnected test fixtures, link their dependencies, insert them
with bounded retries, and reproduce failing graphs from a dumped log.
"""

from .config import DEFAULT_MAX_ATTEMPTS, GraphulaSettings
from .core import (
    DependencyShapeError,
    GenerationFailure,
    GraphulaError,
    HasDependencies,
    MaxAttemptsExceededError,
    Only,
    ReplayDecodeError,
    ReplayError,
    ReplayExhaustedError,
    depends_on,
    node,
    node_edit,
    node_edit_with,
    node_with,
    only,
)
from .runtime import (
    ArbitraryGenerator,
    Entity,
    Frontend,
    IdentityFrontend,
    InMemoryFrontend,
    register_arbitrary,
    run_graphula,
    run_graphula_logged,
    run_graphula_logged_with_file,
    run_graphula_replay,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "GraphulaSettings",
    "DependencyShapeError",
    "GenerationFailure",
    "GraphulaError",
    "HasDependencies",
    "MaxAttemptsExceededError",
    "Only",
    "ReplayDecodeError",
    "ReplayError",
    "ReplayExhaustedError",
    "depends_on",
    "node",
    "node_edit",
    "node_edit_with",
    "node_with",
    "only",
    "ArbitraryGenerator",
    "Entity",
    "Frontend",
    "IdentityFrontend",
    "InMemoryFrontend",
    "register_arbitrary",
    "run_graphula",
    "run_graphula_logged",
    "run_graphula_logged_with_file",
    "run_graphula_replay",
]

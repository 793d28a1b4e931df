"""
Graph runtimes.

This module provides:
- Backends: live, logged and replay generation
- Frontends: persistence handlers (identity, in-memory)
- interpret: the effect loop shared by every runtime
- Runners: run_graphula and its logged/replay variants
"""

from .backend import ArbitraryBackend, Backend, LoggedBackend, ReplayBackend
from .frontend import Entity, Frontend, IdentityFrontend, InMemoryFrontend
from .generators import ArbitraryGenerator, register_arbitrary
from .interpreter import interpret
from .runners import (
    run_graphula,
    run_graphula_logged,
    run_graphula_logged_with_file,
    run_graphula_replay,
)

__all__ = [
    "ArbitraryBackend",
    "Backend",
    "LoggedBackend",
    "ReplayBackend",
    "Entity",
    "Frontend",
    "IdentityFrontend",
    "InMemoryFrontend",
    "ArbitraryGenerator",
    "register_arbitrary",
    "interpret",
    "run_graphula",
    "run_graphula_logged",
    "run_graphula_logged_with_file",
    "run_graphula_replay",
]

"""
Graph logs.

This module provides:
- JsonCodec: Canonical JSON encoding of nodes (one line per node)
- WriteLog: In-memory append-only log for logged runs
- ReplayLog: FIFO cursor over a dumped graph file
"""

from .codec import JsonCodec, canonical_json_str
from .replay_log import ReplayLog
from .write_log import WriteLog

__all__ = [
    "JsonCodec",
    "canonical_json_str",
    "ReplayLog",
    "WriteLog",
]

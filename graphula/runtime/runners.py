"""
Entry points running a graph program.

- run_graphula: random generation
- run_graphula_logged: random generation, graph dumped to a temp file when
  an assertion fails
- run_graphula_logged_with_file: same, dumped to a given path
- run_graphula_replay: generation read back from a dumped graph

Usage:
    def graph():
        vet = yield from node(Veterinarian)
        owner = yield from node_with(Owner, only(vet.key))
        assert owner.value.veterinarian_id == vet.key
        return owner

    run_graphula_logged(InMemoryFrontend(), graph())
"""

import uuid
from typing import Any, Callable, Optional

from ..config import GraphulaSettings
from ..core.effects import Graph
from ..log.codec import JsonCodec
from ..log.replay_log import ReplayLog
from ..log.write_log import WriteLog
from ..logging_config import get_logger
from .backend import ArbitraryBackend, LoggedBackend, ReplayBackend
from .generators import ArbitraryGenerator
from .interpreter import FrontendLike, interpret
from .report import (
    ASSERTION_FAILURES,
    open_file_dump,
    open_temp_dump,
    report_logged_failure,
    report_replay_failure,
)


def _new_run_id() -> str:
    return uuid.uuid4().hex


def run_graphula(
    frontend: FrontendLike,
    program: Graph[Any],
    generator: Optional[ArbitraryGenerator] = None,
) -> Any:
    """
    Run program with random generation and no logging.

    Args:
        frontend: Persistence frontend (or insert function)
        program: Graph program
        generator: Random source (default: unseeded ArbitraryGenerator)

    Returns:
        The program's return value
    """
    log = get_logger(__name__, run_id=_new_run_id())
    log.debug("Running graph")
    return interpret(program, ArbitraryBackend(generator, log=log), frontend, log)


def run_graphula_logged(
    frontend: FrontendLike,
    program: Graph[Any],
    generator: Optional[ArbitraryGenerator] = None,
    codec: Optional[JsonCodec] = None,
    settings: Optional[GraphulaSettings] = None,
) -> Any:
    """
    Run program with random generation, logging every node.

    On AssertionError the log is written to a fresh temp file and the
    failure message names that file. Other errors pass through unchanged.
    """
    settings = settings or GraphulaSettings()
    return _run_logged(
        lambda: open_temp_dump(settings), frontend, program, generator, codec
    )


def run_graphula_logged_with_file(
    path: str,
    frontend: FrontendLike,
    program: Graph[Any],
    generator: Optional[ArbitraryGenerator] = None,
    codec: Optional[JsonCodec] = None,
    settings: Optional[GraphulaSettings] = None,
) -> Any:
    """Like run_graphula_logged, dumping to path instead of a temp file."""
    settings = settings or GraphulaSettings()
    return _run_logged(
        lambda: open_file_dump(path, settings), frontend, program, generator, codec
    )


def _run_logged(
    destination: Callable[[], Any],
    frontend: FrontendLike,
    program: Graph[Any],
    generator: Optional[ArbitraryGenerator],
    codec: Optional[JsonCodec],
) -> Any:
    log = get_logger(__name__, run_id=_new_run_id())
    write_log = WriteLog()
    backend = LoggedBackend(write_log, generator=generator, codec=codec, log=log)
    try:
        return interpret(program, backend, frontend, log)
    except ASSERTION_FAILURES as failure:
        log.warning("Graph assertion failed after %d logged nodes", len(write_log))
        report_logged_failure(write_log, destination(), failure, log)
        raise


def run_graphula_replay(
    path: str,
    frontend: FrontendLike,
    program: Graph[Any],
    codec: Optional[JsonCodec] = None,
    settings: Optional[GraphulaSettings] = None,
) -> Any:
    """
    Run program with nodes read back from a dumped graph file.

    Nodes are consumed in file order, one per generation. Running out of
    lines raises ReplayExhaustedError; a line that does not decode as the
    requested type raises ReplayDecodeError. On AssertionError the failure
    message names path.

    Raises:
        OSError: If path cannot be read
    """
    settings = settings or GraphulaSettings()
    log = get_logger(__name__, run_id=_new_run_id())
    replay_log = ReplayLog.from_file(path, encoding=settings.encoding)
    log.info("Replaying %d graph nodes from %s", replay_log.remaining, path)
    try:
        backend = ReplayBackend(replay_log, codec=codec, log=log)
        return interpret(program, backend, frontend, log)
    except ASSERTION_FAILURES as failure:
        report_replay_failure(path, failure, log)
        raise

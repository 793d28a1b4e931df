"""
Failure reporting for logged and replayed runs.

Only AssertionError (what ``assert`` and test frameworks raise) is
annotated. The same exception object is re-raised, so its type and
traceback are kept; only its message gains a pointer to the graph file.
"""

import os
import tempfile
from contextlib import contextmanager
from typing import IO, Iterator, Optional, Tuple

from ..config import GraphulaSettings
from ..log.write_log import WriteLog
from ..logging_config import get_logger
from .backend import RunLogger

ASSERTION_FAILURES = (AssertionError,)


def annotate_failure(failure: AssertionError, message: str) -> AssertionError:
    """Prefix failure's message with message, separated by a blank line."""
    original = str(failure)
    text = f"{message}\n\n{original}" if original else message
    failure.args = (text,)
    return failure


@contextmanager
def open_temp_dump(settings: GraphulaSettings) -> Iterator[Tuple[str, IO[str]]]:
    """Create a fresh dump file in the configured directory."""
    fd, path = tempfile.mkstemp(
        prefix=settings.dump_prefix,
        suffix=settings.dump_suffix,
        dir=settings.resolved_dump_dir(),
    )
    with os.fdopen(fd, "w", encoding=settings.encoding) as handle:
        yield path, handle


@contextmanager
def open_file_dump(path: str, settings: GraphulaSettings) -> Iterator[Tuple[str, IO[str]]]:
    """Open (and truncate) an explicit dump file."""
    with open(path, "w", encoding=settings.encoding) as handle:
        yield path, handle


def dump_write_log(write_log: WriteLog, destination, log: Optional[RunLogger] = None) -> str:
    """
    Write the whole write log to destination.

    Args:
        write_log: Log of the failed run
        destination: Context manager yielding (path, handle)
        log: Logger for the run

    Returns:
        Path of the written file
    """
    with destination as (path, handle):
        count = write_log.dump(handle)
    (log or get_logger(__name__)).info("Dumped %d graph nodes to %s", count, path)
    return path


def report_logged_failure(
    write_log: WriteLog,
    destination,
    failure: AssertionError,
    log: Optional[RunLogger] = None,
) -> AssertionError:
    path = dump_write_log(write_log, destination, log)
    return annotate_failure(failure, f"Graph dumped in temp file: {path}")


def report_replay_failure(
    path: str, failure: AssertionError, log: Optional[RunLogger] = None
) -> AssertionError:
    (log or get_logger(__name__)).info("Replayed graph from %s failed", path)
    return annotate_failure(failure, f"Using graph file: {path}")

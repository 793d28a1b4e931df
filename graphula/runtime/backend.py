"""
Generation backends.

A backend interprets the generation-side effects of a graph:

| Backend          | GenerateNode            | LogNode                 | Throw |
|------------------|-------------------------|-------------------------|-------|
| ArbitraryBackend | random value            | no-op                   | raise |
| LoggedBackend    | random value            | append to write log     | raise |
| ReplayBackend    | next line of replay log | no-op                   | raise |
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Union

from ..core.effects import GenerateNode, LogNode, Throw
from ..core.errors import InvalidEffectError, ReplayDecodeError
from ..log.codec import JsonCodec
from ..log.replay_log import ReplayLog
from ..log.write_log import WriteLog
from ..logging_config import get_logger
from .generators import ArbitraryGenerator

# Plain logger or a run-scoped LoggerAdapter
RunLogger = Union[logging.Logger, logging.LoggerAdapter]


class Backend(ABC):
    """
    Generation side of a graph run.

    Subclasses implement generate() and may override log(); Throw always
    raises the carried error. Records go through self.logger, normally the
    adapter carrying the run_id of the run using this backend.
    """

    def __init__(self, log: Optional[RunLogger] = None) -> None:
        self.logger = log or get_logger(__name__)
        self._handlers: Dict[type, Callable[[Any], Any]] = {
            GenerateNode: lambda effect: self.generate(effect.node_type),
            LogNode: lambda effect: self.log(effect.value),
            Throw: lambda effect: self.throw(effect.error),
        }

    def interpret(self, effect: Any) -> Any:
        """
        Execute one generation-side effect.

        Raises:
            InvalidEffectError: If effect is not a generation-side effect
        """
        handler = self._handlers.get(type(effect))
        if handler is None:
            raise InvalidEffectError(f"Not a generation effect: {effect!r}")
        return handler(effect)

    @abstractmethod
    def generate(self, node_type: type) -> Any:
        ...

    def log(self, value: Any) -> None:
        return None

    def throw(self, error: BaseException) -> Any:
        raise error


class ArbitraryBackend(Backend):
    """Live random generation without logging."""

    def __init__(
        self,
        generator: Optional[ArbitraryGenerator] = None,
        log: Optional[RunLogger] = None,
    ) -> None:
        super().__init__(log)
        self.generator = generator or ArbitraryGenerator()

    def generate(self, node_type: type) -> Any:
        value = self.generator.generate(node_type)
        self.logger.debug("Generated %s", node_type.__name__)
        return value


class LoggedBackend(ArbitraryBackend):
    """Live random generation recording every logged node."""

    def __init__(
        self,
        write_log: WriteLog,
        generator: Optional[ArbitraryGenerator] = None,
        codec: Optional[JsonCodec] = None,
        log: Optional[RunLogger] = None,
    ) -> None:
        super().__init__(generator, log)
        self.write_log = write_log
        self.codec = codec or JsonCodec()

    def log(self, value: Any) -> None:
        self.write_log.append(self.codec.encode(value))


class ReplayBackend(Backend):
    """Deterministic generation from a recorded graph."""

    def __init__(
        self,
        replay_log: ReplayLog,
        codec: Optional[JsonCodec] = None,
        log: Optional[RunLogger] = None,
    ) -> None:
        super().__init__(log)
        self.replay_log = replay_log
        self.codec = codec or JsonCodec()

    def generate(self, node_type: type) -> Any:
        line = self.replay_log.pop()
        position = self.replay_log.consumed
        try:
            value = self.codec.decode(node_type, line)
        except ValueError as ex:
            raise ReplayDecodeError(node_type, position, str(ex)) from ex
        self.logger.debug("Replayed %s from entry #%d", node_type.__name__, position)
        return value

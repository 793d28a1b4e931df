"""
Replay log: recorded nodes consumed in FIFO order.
"""

from collections import deque
from typing import Deque, Iterable

from ..core.errors import ReplayExhaustedError


class ReplayLog:
    """
    Cursor over the lines of a graph dump.

    Each line is handed out exactly once, in file order.
    """

    def __init__(self, lines: Iterable[str], source: str = "<memory>") -> None:
        self.source = source
        self._lines: Deque[str] = deque(lines)
        self.consumed = 0

    @classmethod
    def from_file(cls, path: str, encoding: str = "utf-8") -> "ReplayLog":
        """
        Read a whole dump file.

        One node per line; a trailing newline does not add an entry.

        Raises:
            OSError: If the file cannot be read
        """
        with open(path, "r", encoding=encoding) as f:
            lines = f.read().split("\n")
        # only "\n" separates entries; U+2028 may occur inside JSON strings
        if lines and lines[-1] == "":
            lines.pop()
        return cls(lines, source=path)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def pop(self) -> str:
        """
        Take the next line.

        Raises:
            ReplayExhaustedError: If every line has been consumed
        """
        if not self._lines:
            raise ReplayExhaustedError(self.consumed + 1)
        self.consumed += 1
        return self._lines.popleft()

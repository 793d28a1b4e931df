"""
In-memory write log for logged runs.

Lines are appended in generation order and only leave memory when a run
fails and the log is dumped.
"""

from typing import IO, Iterator, List


class WriteLog:
    """
    Append-only buffer of encoded nodes.

    Guarantees:
    - Append-only (no updates, no deletes)
    - Dump order equals append order
    """

    def __init__(self) -> None:
        self._lines: List[str] = []

    def append(self, line: str) -> None:
        """
        Append one encoded node.

        Raises:
            ValueError: If line contains a newline
        """
        if "\n" in line or "\r" in line:
            raise ValueError("log entries must be single lines")
        self._lines.append(line)

    def lines(self) -> List[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def dump(self, handle: IO[str]) -> int:
        """
        Write every line, newline-terminated, to handle.

        Returns:
            Number of lines written
        """
        for line in self._lines:
            handle.write(line)
            handle.write("\n")
        handle.flush()
        return len(self._lines)

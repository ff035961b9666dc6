from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, TextIO
import sys

from .errors import TransportError

class Transport(ABC):
    """Moves whole lines; knows nothing about messages."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """Next input line, or None once input is closed."""
        raise NotImplementedError

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one line and make it visible to the reader."""
        raise NotImplementedError

class StdioTransport(Transport):
    """Line transport over text streams, the process's stdin/stdout by default."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        # resolved lazily so tests that swap sys.stdin/sys.stdout are honoured
        self._in = stdin
        self._out = stdout

    def read_line(self) -> Optional[str]:
        try:
            stream = self._in if self._in is not None else _utf8(sys.stdin)
            line = stream.readline()
        except (OSError, ValueError) as ex:
            raise TransportError(f"Failed to read input: {ex}") from ex
        return line or None

    def write_line(self, line: str) -> None:
        try:
            stream = self._out if self._out is not None else _utf8(sys.stdout)
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as ex:
            raise TransportError(f"Failed to write output: {ex}") from ex

def _utf8(stream: TextIO) -> TextIO:
    # the wire is UTF-8 whatever the locale says
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("_", "-")
    if encoding not in ("utf-8", "utf8") and hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")
    return stream

"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42


class LineReader:
    """Reads lines from a file descriptor in chunks of buffer_size bytes.

    Each line keeps its trailing newline; the last line may lack one.
    Bytes are decoded as UTF-8, with undecodable bytes replaced.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def _fill(self) -> bool:
        """Read until the stash holds a newline or the input ends."""
        if self.fd < 0:
            return False
        try:
            os.read(self.fd, 0)
            while b"\n" not in self._stash:
                chunk = os.read(self.fd, self.buffer_size)
                if not chunk:
                    break
                self._stash += chunk
        except OSError:
            return False
        return True

    def readline(self) -> Optional[str]:
        """The next line, or None at end of input or on a read error."""
        if not self._fill():
            self._stash = b""
            return None
        if not self._stash:
            return None
        cut = self._stash.find(b"\n")
        if cut < 0:
            line, self._stash = self._stash, b""
        else:
            line, self._stash = self._stash[: cut + 1], self._stash[cut + 1 :]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int, buffer_size: int = BUFFER_SIZE) -> Optional[str]:
    """The next line from fd, keeping separate pending input for each descriptor.

    Returns None at end of input or on a read error, which also drops
    whatever was pending for that descriptor.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd, buffer_size)
    else:
        reader.buffer_size = buffer_size
    line = reader.readline()
    if line is None:
        _readers.pop(fd, None)
    else:
        _readers[fd] = reader
    return line
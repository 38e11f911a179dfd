"""Line-by-line reading from file descriptors, one pending buffer per descriptor."""

import os
from typing import Dict, List, Optional

BUFFER_SIZE = 1


class LineReader:
    """Returns one line per call for each descriptor it is asked about.

    Lines keep their trailing newline; the last line of a file may lack one.
    Text read past the end of a line is kept for the next call on the same
    descriptor. A chunk is cut at its first NUL byte.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line read from ``fd``, or None at the end of input.

        A read error drops whatever was pending for ``fd`` and raises OSError.
        """
        content = self._pending.pop(fd, b"")
        content += self._read_until_newline(fd)
        if not content:
            return None
        line, newline, rest = content.partition(b"\n")
        if newline and rest:
            self._pending[fd] = rest
        return line + newline

    def _read_until_newline(self, fd: int) -> bytes:
        chunks: List[bytes] = []
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            chunk = chunk.split(b"\0", 1)[0]
            chunks.append(chunk)
            if b"\n" in chunk:
                break
        return b"".join(chunks)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Read the next line of ``fd`` with a shared reader of the default buffer size."""
    return _default_reader.next_line(fd)
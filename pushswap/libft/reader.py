"""Line-by-line reading from a stream with a fixed read size."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the final line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        empty = stream.read(0)
        self._empty: AnyStr = empty
        self._newline: AnyStr = b"\n" if isinstance(empty, bytes) else "\n"  # type: ignore[assignment]
        self._buffer: AnyStr = empty

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        buffer = self._buffer
        if self._newline not in buffer:
            while True:
                chunk = self.stream.read(self.buffer_size)
                buffer += chunk
                if not chunk or self._newline in chunk:
                    break
        if not buffer:
            self._buffer = self._empty
            return None
        index = buffer.find(self._newline)
        if index < 0:
            self._buffer = self._empty
            return buffer
        self._buffer = buffer[index + 1:]
        return buffer[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


_readers: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
_strong_readers: dict[int, tuple[object, LineReader]] = {}


def _reader_for(stream: IO) -> LineReader:
    try:
        reader = _readers.get(stream)
        if reader is None:
            reader = _readers[stream] = LineReader(stream)
        return reader
    except TypeError:
        entry = _strong_readers.get(id(stream))
        if entry is None or entry[0] is not stream:
            entry = (stream, LineReader(stream))
            _strong_readers[id(stream)] = entry
        return entry[1]


def get_next_line(stream: IO[AnyStr]) -> AnyStr | None:
    """Return the next line of ``stream``, remembering leftovers between calls."""
    return _reader_for(stream).read_line()
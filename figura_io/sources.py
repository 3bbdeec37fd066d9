"""
Byte Sources
============

Bounded Context: Supplying raw record bytes to the decoder.

Contract (ByteSource):
    read(buffer, element_size, count=1) -> bool

    True means exactly element_size * count bytes were written to the start
    of buffer. Anything less is a failure and the buffer is left untouched
    (no partial fill).

Implementations:
- FileByteSource: binary file, scoped handle (context manager)
- MemoryByteSource: bytes already in memory
- ScriptedByteSource: test double yielding a fixed kind then a fixed value
"""

import sys
from pathlib import Path
from typing import List, Optional, Protocol, TextIO, Tuple

import numpy as np

from figura_io.codec import RecordLayout
from figura_shapes.kinds import ShapeKind, kind_name


class ByteSource(Protocol):
    """Anything the decoder can pull bytes from."""

    def read(self, buffer, element_size: int, count: int = 1) -> bool:
        ...


def _byte_view(buffer, nbytes: int) -> memoryview:
    """Writable flat byte view over buffer, checked for capacity."""
    view = memoryview(buffer).cast("B")
    if view.readonly:
        raise ValueError("buffer must be writable")
    if len(view) < nbytes:
        raise ValueError(f"buffer holds {len(view)} bytes, {nbytes} requested")
    return view


class FileByteSource:
    """
    Binary file opened for reading.

    The handle is acquired on construction and released by close() or by
    leaving the ``with`` block, on every exit path.

    Usage:
        with FileByteSource("features.dat") as source:
            decoder.decode(source)

    Raises:
        OSError: If the file cannot be opened
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._file = open(self.path, "rb")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def read(self, buffer, element_size: int, count: int = 1) -> bool:
        if self._file.closed:
            return False

        nbytes = element_size * count
        view = _byte_view(buffer, nbytes)
        data = self._file.read(nbytes)
        if len(data) != nbytes:
            return False

        view[:nbytes] = data
        return True

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "FileByteSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryByteSource:
    """
    Byte source over an in-memory payload.

    A failed read does not advance ``position``.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self.position

    def read(self, buffer, element_size: int, count: int = 1) -> bool:
        nbytes = element_size * count
        view = _byte_view(buffer, nbytes)
        if nbytes > self.remaining:
            return False

        view[:nbytes] = self._data[self.position:self.position + nbytes]
        self.position += nbytes
        return True


class ScriptedByteSource:
    """
    Scripted test double.

    First read yields ``kind`` (CIRCLE by default); every later read fills
    all requested elements with ``value``. Each read is printed to ``stream``
    and recorded in ``produced``.

    Output:
        ScriptedByteSource.read(): type: CIRCLE
        ScriptedByteSource.read(): params: { 2.1 2.1 2.1 }
    """

    def __init__(
        self,
        layout: RecordLayout = RecordLayout(),
        value: float = 2.1,
        kind: int = ShapeKind.CIRCLE,
        stream: Optional[TextIO] = None,
    ):
        self.layout = layout
        self.value = value
        self.kind = int(kind)
        self.stream = stream or sys.stdout
        self.produced: List[Tuple[str, object]] = []
        self._calls = 0

    def read(self, buffer, element_size: int, count: int = 1) -> bool:
        nbytes = element_size * count
        view = _byte_view(buffer, nbytes)
        first = self._calls == 0
        self._calls += 1

        if first:
            payload = np.full(count, self.kind, dtype=self.layout.kind_dtype).tobytes()
        else:
            payload = np.full(count, self.value, dtype=self.layout.param_dtype).tobytes()
        if len(payload) != nbytes:
            return False

        view[:nbytes] = payload
        if first:
            self.produced.append(("type", self.kind))
            print(f"ScriptedByteSource.read(): type: {kind_name(self.kind)}", file=self.stream)
        else:
            self.produced.append(("params", [self.value] * count))
            values = " ".join(str(self.value) for _ in range(count))
            print(f"ScriptedByteSource.read(): params: {{ {values} }}", file=self.stream)
        return True

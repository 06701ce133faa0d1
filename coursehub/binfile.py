"""Length-prefixed binary records kept in a single file."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from coursehub.config import TEMP_FILE

T = TypeVar("T")

_UINT = struct.Struct("<I")
_DOUBLE = struct.Struct("<d")
_UINT_MAX = 2**32 - 1


def encode_uint(value: int) -> bytes:
    """Encode an unsigned 32-bit integer, little endian."""
    if not 0 <= value <= _UINT_MAX:
        raise ValueError(f"{value} does not fit in an unsigned 32-bit integer")
    return _UINT.pack(value)


def encode_double(value: float) -> bytes:
    """Encode a 64-bit float, little endian."""
    return _DOUBLE.pack(value)


def encode_string(text: str) -> bytes:
    """Encode text as its byte length followed by its UTF-8 bytes."""
    data = text.encode("utf-8")
    return encode_uint(len(data)) + data


class Reader:
    """Reads encoded values one after another from a block of bytes."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self.offset = offset

    def _take(self, count: int) -> bytes:
        end = self.offset + count
        if end > len(self._data):
            raise EOFError("record is truncated")
        chunk = self._data[self.offset:end]
        self.offset = end
        return chunk

    def uint(self) -> int:
        return _UINT.unpack(self._take(_UINT.size))[0]

    def double(self) -> float:
        return _DOUBLE.unpack(self._take(_DOUBLE.size))[0]

    def byte(self) -> int:
        return self._take(1)[0]

    def string(self) -> str:
        length = self.uint()
        return self._take(length).decode("utf-8")

    def at_end(self) -> bool:
        return self.offset >= len(self._data)


class BinaryFile(Generic[T]):
    """A file of records, each decoded by ``decode`` from a Reader.

    The file is created when it does not exist yet.
    """

    def __init__(self, path: str | os.PathLike, decode: Callable[[Reader], T]) -> None:
        self.path = Path(path)
        self._decode = decode
        self._file = self._open()

    def _open(self):
        self.path.touch(exist_ok=True)
        return self.path.open("r+b")

    def _handle(self):
        if self._file.closed:
            raise ValueError("file is closed")
        return self._file

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> BinaryFile[T]:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def size(self) -> int:
        """Size of the file in bytes."""
        handle = self._handle()
        handle.flush()
        return os.fstat(handle.fileno()).st_size

    def _contents(self) -> bytes:
        handle = self._handle()
        handle.flush()
        handle.seek(0)
        return handle.read()

    def records(self) -> Iterator[tuple[T, bytes]]:
        """Yield every whole record with the raw bytes it was read from.

        A truncated record at the end of the file is ignored.
        """
        data = self._contents()
        reader = Reader(data)
        while not reader.at_end():
            start = reader.offset
            try:
                record = self._decode(reader)
            except EOFError:
                return
            yield record, data[start:reader.offset]

    def append(self, data: bytes) -> None:
        """Write bytes at the end of the file."""
        handle = self._handle()
        handle.seek(0, os.SEEK_END)
        handle.write(data)
        handle.flush()

    def rewrite(self, chunks: Iterable[bytes]) -> None:
        """Replace the whole content of the file with the given chunks."""
        self._handle()
        temp = self.path.with_name(TEMP_FILE)
        with temp.open("wb") as output:
            for chunk in chunks:
                output.write(chunk)
        self._file.close()
        os.replace(temp, self.path)
        self._file = self._open()
"""Counters that hand out the next id for each kind of record."""

from __future__ import annotations

import os
from collections.abc import Iterable

from coursehub.binfile import BinaryFile, Reader, encode_string, encode_uint
from coursehub.config import FILE_NAMES

_FIRST_ID = 100


def _decode(reader: Reader) -> tuple[str, int]:
    return reader.string(), reader.uint()


class IdContainer:
    """Per-table id counters, saved to a file after every change."""

    def __init__(self, path: str | os.PathLike, names: Iterable[str] = FILE_NAMES) -> None:
        self.path = path
        defaults = [(name, _FIRST_ID) for name in names]
        with BinaryFile(path, _decode) as file:
            stored = [record for record, _ in file.records()][: len(defaults)]
        self._counters = dict(stored + defaults[len(stored):])

    def _save(self) -> None:
        with BinaryFile(self.path, _decode) as file:
            file.rewrite(
                encode_string(name) + encode_uint(counter)
                for name, counter in self._counters.items()
            )

    def _require(self, name: str) -> None:
        if name not in self._counters:
            raise LookupError("table name was not found")

    def get(self, name: str) -> int:
        """The next id for a table."""
        self._require(name)
        return self._counters[name]

    def increment(self, name: str) -> None:
        self._require(name)
        self._counters[name] += 1
        self._save()

    def set_counter(self, name: str, value: int) -> None:
        self._require(name)
        self._counters[name] = value
        self._save()
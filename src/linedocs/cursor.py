"""Shared, lock-guarded read position over a line corpus."""

from __future__ import annotations

import io
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import numpy as np

from linedocs.aligner import seek_to_next_line_break, wrap_text
from linedocs.decoder import LineFormatError
from linedocs.lifecycle import TempFileReaper
from linedocs.source import open_source, resolve_source

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CorpusHandle:
    stream: BinaryIO
    reader: io.TextIOWrapper
    temp_path: Path | None = None


class AtomicCounter:
    """Integer counter with an atomic get-and-increment."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        return self._value

    def get_and_increment(self) -> int:
        with self._lock:
            value = self._value
            self._value += 1
            return value

    def set(self, value: int) -> None:
        with self._lock:
            self._value = value


class LineCursor:
    """Owns the open corpus handle and hands out one line at a time.

    Only one thread reads or reopens at a time. At end of stream the corpus
    is reopened from offset 0, so callers see an endless cycle of lines.
    """

    def __init__(
        self,
        path: str | Path,
        random: np.random.Generator | None,
        *,
        reaper: TempFileReaper,
        temp_dir: Path | None = None,
    ) -> None:
        self.path = path
        self.temp_dir = temp_dir
        self._reaper = reaper
        self._lock = threading.Lock()
        self._counter = AtomicCounter()
        self._handle: CorpusHandle | None = None
        self._disposed = False
        with self._lock:
            self._open(random)

    @property
    def closed(self) -> bool:
        return self._handle is None

    @property
    def temp_path(self) -> Path | None:
        handle = self._handle
        return None if handle is None else handle.temp_path

    def _open(self, random: np.random.Generator | None) -> None:
        opened = open_source(resolve_source(self.path), random, temp_dir=self.temp_dir)
        try:
            if opened.seek_to > 0:
                seek_to_next_line_break(opened.stream)
            reader = wrap_text(opened.stream, opened.seek_to)
        except BaseException:
            opened.stream.close()
            self._reaper.schedule_delete(opened.temp_path)
            raise
        self._handle = CorpusHandle(stream=opened.stream, reader=reader, temp_path=opened.temp_path)

    def _close(self) -> None:
        handle = self._handle
        if handle is None:
            return
        self._handle = None
        handle.reader.close()
        self._reaper.schedule_delete(handle.temp_path)

    def _check_open(self) -> CorpusHandle:
        if self._disposed or self._handle is None:
            raise ValueError("I/O operation on closed LineFileDocs")
        return self._handle

    def next_line(self) -> str:
        with self._lock:
            line = self._check_open().reader.readline()
            if not line:
                LOGGER.debug("LineFileDocs: now rewind file...")
                self._close()
                self._open(None)
                line = self._check_open().reader.readline()
                if not line:
                    raise LineFormatError(f"corpus {self.path} contains no lines")
        return line.rstrip("\n")

    def next_id(self) -> int:
        return self._counter.get_and_increment()

    @property
    def record_count(self) -> int:
        return self._counter.value

    def reset(self, random: np.random.Generator | None) -> None:
        with self._lock:
            if self._disposed:
                raise ValueError("I/O operation on closed LineFileDocs")
            self._close()
            self._open(random)
            self._counter.set(0)

    def close(self) -> None:
        with self._lock:
            self._disposed = True
            self._close()

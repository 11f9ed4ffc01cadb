"""Randomized, resumable, thread-safe reader over a line corpus."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterator

import numpy as np

from linedocs.config import AppConfig
from linedocs.cursor import LineCursor
from linedocs.decoder import split_line
from linedocs.lifecycle import TempFileReaper
from linedocs.models import DocState, Document
from linedocs.sampling import as_generator


class LineFileDocs:
    """Enumerate documents from a ``title<TAB>date<TAB>body`` line file.

    Reading starts at a random, record-aligned offset chosen from ``random``
    and rewinds to the beginning at end of file, forever. Any number of
    threads may call :meth:`next_doc` concurrently.

    The returned :class:`Document` is re-used per thread: it is only valid
    until the next call on the same thread. Use ``Document.to_dict()`` to keep
    a copy.
    """

    def __init__(
        self,
        random: int | np.random.Generator | None = None,
        path: str | Path | None = None,
        use_doc_values: bool = True,
        *,
        temp_dir: Path | None = None,
    ) -> None:
        self.path = path if path is not None else AppConfig().resolve_line_docs_file()
        self.use_doc_values = use_doc_values
        self._reaper = TempFileReaper()
        self._thread_docs = threading.local()
        try:
            self._cursor = LineCursor(
                self.path,
                as_generator(random),
                reaper=self._reaper,
                temp_dir=temp_dir,
            )
        except BaseException:
            self._reaper.shutdown(wait=False)
            raise

    @classmethod
    def from_config(cls, config: AppConfig, random: int | np.random.Generator | None = None) -> LineFileDocs:
        return cls(
            random,
            config.resolve_line_docs_file(),
            config.use_doc_values,
            temp_dir=config.temp_dir,
        )

    @property
    def reaper(self) -> TempFileReaper:
        return self._reaper

    @property
    def cursor(self) -> LineCursor:
        return self._cursor

    def _doc_state(self) -> DocState:
        doc_state = getattr(self._thread_docs, "state", None)
        if doc_state is None:
            doc_state = DocState(self.use_doc_values)
            self._thread_docs.state = doc_state
        return doc_state

    def next_doc(self) -> Document:
        line = self._cursor.next_line()
        doc_state = self._doc_state()
        title, date, body = split_line(line)
        return doc_state.fill(title, date, body, self._cursor.next_id())

    def reset(self, random: int | np.random.Generator | None) -> None:
        """Sample a new start position and restart ids from 0."""
        self._cursor.reset(as_generator(random))

    def close(self) -> None:
        self._cursor.close()
        self._thread_docs = threading.local()
        if not self._reaper.closed:
            self._reaper.shutdown(wait=False)

    def __enter__(self) -> LineFileDocs:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Document]:
        while True:
            yield self.next_doc()

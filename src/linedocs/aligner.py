"""Realign a byte stream on a record boundary after an arbitrary seek."""

from __future__ import annotations

import io
from typing import BinaryIO

from linedocs.sampling import CHAR_SIZE

BUFFER_SIZE = 1 << 16  # 64K
SCAN_CHUNK_SIZE = CHAR_SIZE * 1024

_LINE_BREAKS = (ord("\r"), ord("\n"))


def seek_to_next_line_break(stream: BinaryIO) -> bool:
    """Position ``stream`` on the next CR or LF byte.

    Returns False and leaves the stream at EOF when no line break remains.
    """
    while True:
        start = stream.tell()
        chunk = stream.read(SCAN_CHUNK_SIZE)
        if not chunk:
            return False
        hits = [idx for idx in (chunk.find(b) for b in _LINE_BREAKS) if idx != -1]
        if hits:
            stream.seek(start + min(hits))
            return True


def wrap_text(stream: BinaryIO, seek_to: int) -> io.TextIOWrapper:
    """Build the UTF-8 line reader over an aligned stream.

    After a seek the first line read is discarded: the stream sits on a line
    terminator (possibly the middle of a CRLF), so the next full line is the
    first one that can be trusted. Invalid UTF-8 decodes as U+FFFD.
    """
    buffered = stream if isinstance(stream, io.BufferedIOBase) else io.BufferedReader(stream, BUFFER_SIZE)
    reader = io.TextIOWrapper(buffered, encoding="utf-8", errors="replace", newline=None)
    if seek_to > 0:
        reader.readline()
    return reader

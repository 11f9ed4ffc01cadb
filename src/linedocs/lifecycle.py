"""Temp-file creation and best-effort background cleanup."""

from __future__ import annotations

import logging
import os
import tempfile
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

LOGGER = logging.getLogger(__name__)

TEMP_FILE_PREFIX = "linedocs-"
TEMP_FILE_SUFFIX = ".tmp"


def create_temp_file(
    prefix: str = TEMP_FILE_PREFIX,
    suffix: str = TEMP_FILE_SUFFIX,
    dir: Path | None = None,
) -> Path:
    """Create an empty, uniquely named temp file and return its path."""
    if dir is not None:
        Path(dir).mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
    os.close(fd)
    return Path(name)


def _delete_quietly(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        LOGGER.debug("Could not delete temp file %s: %s", path, exc)


class TempFileReaper:
    """Deletes temp artifacts on a background worker.

    Cleanup is best-effort and unobserved: failures are logged at DEBUG and
    swallowed, and nothing waits for a deletion to finish. A file may still
    exist for a moment after its handle was closed.
    """

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="linedocs-reaper")
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule_delete(self, path: Path | None) -> Future | None:
        if path is None:
            return None
        if self._closed:
            _delete_quietly(Path(path))
            return None
        return self._executor.submit(_delete_quietly, Path(path))

    def shutdown(self, *, wait: bool = False) -> None:
        self._closed = True
        self._executor.shutdown(wait=wait)

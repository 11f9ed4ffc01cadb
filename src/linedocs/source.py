"""Resolve a corpus path and open it as a seekable byte source."""

from __future__ import annotations

import gzip
import io
import logging
import shutil
from dataclasses import dataclass
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np

from linedocs.lifecycle import create_temp_file
from linedocs.sampling import random_seek_pos

LOGGER = logging.getLogger(__name__)

DEFAULT_LINE_DOCS_FILE = "sample.lines.txt.gz"
GZIP_SUFFIX = ".gz"

# Empirical expansion ratio of gzip'd line corpora, only used to size the
# sampling range.
GZIP_SIZE_FACTOR = 2.8


@dataclass(slots=True, frozen=True)
class BundledSource:
    name: str
    resource: Traversable

    @property
    def compressed(self) -> bool:
        return self.name.endswith(GZIP_SUFFIX)


@dataclass(slots=True, frozen=True)
class ExternalSource:
    path: Path

    @property
    def compressed(self) -> bool:
        return str(self.path).endswith(GZIP_SUFFIX)


SourceResolution = Union[BundledSource, ExternalSource]


@dataclass(slots=True)
class OpenedSource:
    """A byte stream positioned where text reading should start."""

    stream: BinaryIO
    size: int
    seek_to: int
    temp_path: Path | None = None


def bundled_resource(name: str) -> Traversable:
    return files("linedocs") / "data" / name


def resolve_source(path: str | Path) -> SourceResolution:
    """Decide whether ``path`` names a bundled corpus or a filesystem path.

    Only bare names can be bundled; a name with no matching resource falls
    back to the filesystem.
    """
    name = str(path)
    if Path(name).name == name:
        resource = bundled_resource(name)
        if resource.is_file():
            return BundledSource(name=name, resource=resource)
        LOGGER.debug("No bundled corpus named %s, using filesystem path", name)
    return ExternalSource(path=Path(path))


def _stream_size(stream: BinaryIO) -> int:
    if not stream.seekable():
        return 0
    current = stream.tell()
    size = stream.seek(0, io.SEEK_END)
    stream.seek(current)
    return size


def materialize(
    stream: BinaryIO,
    *,
    decompress: bool,
    temp_dir: Path | None = None,
) -> tuple[BinaryIO, Path]:
    """Copy ``stream`` (decompressed if asked) into a fresh random-access temp file.

    The input stream is consumed and closed.
    """
    temp_path = create_temp_file(dir=temp_dir)
    result = open(temp_path, "w+b")
    try:
        with (gzip.GzipFile(fileobj=stream, mode="rb") if decompress else stream) as source:
            shutil.copyfileobj(source, result)
    except BaseException:
        result.close()
        temp_path.unlink(missing_ok=True)
        raise
    finally:
        stream.close()
    result.flush()
    result.seek(0)
    return result, temp_path


def open_source(
    resolution: SourceResolution,
    random: np.random.Generator | None,
    *,
    temp_dir: Path | None = None,
) -> OpenedSource:
    """Open ``resolution`` and seek it to a sampled offset.

    Compressed content is never seeked directly: it is decompressed once into
    a temp file and that file becomes the source.
    """
    need_skip = True
    seek_to = 0
    bundled: BinaryIO | None = None
    if isinstance(resolution, BundledSource):
        try:
            bundled = resolution.resource.open("rb")
        except OSError as exc:
            LOGGER.debug("Could not open bundled corpus %s (%s), using filesystem path", resolution.name, exc)
            resolution = ExternalSource(path=Path(resolution.name))

    if bundled is not None:
        stream: BinaryIO = bundled
        size = _stream_size(stream)
    else:
        path = resolution.path
        size = path.stat().st_size
        stream = open(path, "rb")
        if not resolution.compressed:
            seek_to = random_seek_pos(random, size)
            LOGGER.debug("LineFileDocs: file seek to fp=%d on open", seek_to)
            stream.seek(seek_to)
            need_skip = False

    temp_path: Path | None = None
    if resolution.compressed:
        stream, temp_path = materialize(stream, decompress=True, temp_dir=temp_dir)
        size = int(size * GZIP_SIZE_FACTOR)
    elif need_skip and not stream.seekable():
        stream, temp_path = materialize(stream, decompress=False, temp_dir=temp_dir)
        size = _stream_size(stream)

    if need_skip:
        seek_to = random_seek_pos(random, size)
        LOGGER.debug("LineFileDocs: stream skip to fp=%d on open", seek_to)
        stream.seek(seek_to)

    return OpenedSource(stream=stream, size=size, seek_to=seek_to, temp_path=temp_path)


def materialize_line_docs(path: str | Path, *, temp_dir: Path | None = None) -> Path | None:
    """Decompress a gzip'd corpus to a temp file that readers can share.

    Returns None for uncompressed corpora, which are already seekable. The
    caller owns the returned file.
    """
    resolution = resolve_source(path)
    if not resolution.compressed:
        return None
    stream: BinaryIO | None = None
    if isinstance(resolution, BundledSource):
        try:
            stream = resolution.resource.open("rb")
        except OSError as exc:
            LOGGER.debug("Could not open bundled corpus %s (%s), using filesystem path", resolution.name, exc)
            resolution = ExternalSource(path=Path(resolution.name))
    if stream is None:
        stream = open(resolution.path, "rb")
    result, temp_path = materialize(stream, decompress=True, temp_dir=temp_dir)
    result.close()
    LOGGER.info("Decompressed %s to %s", path, temp_path)
    return temp_path

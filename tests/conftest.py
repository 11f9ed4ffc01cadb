"""Shared corpus fixtures."""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Callable, List

import pytest


def make_lines(count: int) -> List[str]:
    """Build ``count`` distinct, valid corpus lines of varying length."""
    return [
        f"Title {i}\t2024-01-{i % 28 + 1:02d}\tBody of record {i} " + "lorem ipsum " * (i % 7 + 1)
        for i in range(count)
    ]


def write_corpus(path: Path, lines: List[str], *, newline: str = "\n") -> Path:
    data = "".join(line + newline for line in lines).encode("utf-8")
    if path.name.endswith(".gz"):
        with gzip.open(path, "wb") as handle:
            handle.write(data)
    else:
        path.write_bytes(data)
    return path


@pytest.fixture
def corpus_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a corpus under tmp_path and return its path."""

    def _factory(name: str, lines: List[str], *, newline: str = "\n") -> Path:
        return write_corpus(tmp_path / name, lines, newline=newline)

    return _factory


@pytest.fixture(name="make_lines")
def make_lines_fixture() -> Callable[[int], List[str]]:
    return make_lines

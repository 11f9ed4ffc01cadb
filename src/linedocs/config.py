"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from linedocs.source import DEFAULT_LINE_DOCS_FILE

LINE_DOCS_FILE_ENV = "LINEDOCS_FILE"
TEMP_LINE_DOCS_FILE_ENV = "LINEDOCS_TEMP_FILE"


def _get_default_line_docs_file() -> str:
    """Corpus named by the environment, else the bundled sample."""
    return os.environ.get(LINE_DOCS_FILE_ENV) or DEFAULT_LINE_DOCS_FILE


def _get_temp_line_docs_file() -> str | None:
    return os.environ.get(TEMP_LINE_DOCS_FILE_ENV) or None


@dataclass(slots=True)
class AppConfig:
    line_docs_file: str | None = None
    temp_line_docs_file: str | None = None
    use_doc_values: bool = True
    temp_dir: Path | None = None

    def __post_init__(self) -> None:
        if self.line_docs_file is None:
            self.line_docs_file = _get_default_line_docs_file()
        if self.temp_line_docs_file is None:
            self.temp_line_docs_file = _get_temp_line_docs_file()

    def resolve_line_docs_file(self) -> str:
        # A pre-decompressed copy is preferred over the original corpus.
        if self.temp_line_docs_file:
            return self.temp_line_docs_file
        if self.line_docs_file is None:
            self.line_docs_file = _get_default_line_docs_file()
        return self.line_docs_file

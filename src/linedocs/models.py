"""Core linedocs data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


@dataclass(slots=True)
class FieldType:
    """How a field would be indexed by a consuming search engine."""

    indexed: bool = True
    stored: bool = False
    tokenized: bool = False
    store_term_vectors: bool = False
    store_term_vector_offsets: bool = False
    store_term_vector_positions: bool = False
    doc_values: bool = False


STRING_NOT_STORED = FieldType(stored=False, tokenized=False)
STRING_STORED = FieldType(stored=True, tokenized=False)
TEXT_WITH_VECTORS = FieldType(
    stored=True,
    tokenized=True,
    store_term_vectors=True,
    store_term_vector_offsets=True,
    store_term_vector_positions=True,
)
SORTED_DOC_VALUES = FieldType(indexed=False, doc_values=True)


@dataclass(slots=True)
class Field:
    """Named, mutable value slot. Identity is stable; only ``value`` changes."""

    name: str
    value: Any
    field_type: FieldType


@dataclass(slots=True)
class Document:
    """Ordered collection of fields produced by the reader."""

    fields: List[Field] = field(default_factory=list)

    def add(self, item: Field) -> Field:
        self.fields.append(item)
        return item

    def get_field(self, name: str) -> Field | None:
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def get(self, name: str, default: Any = None) -> Any:
        item = self.get_field(name)
        return default if item is None else item.value

    def __getitem__(self, name: str) -> Any:
        item = self.get_field(name)
        if item is None:
            raise KeyError(name)
        return item.value

    def __contains__(self, name: object) -> bool:
        return any(item.name == name for item in self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def to_dict(self) -> Dict[str, Any]:
        """Copy field values out of the (reused) document."""
        return {item.name: item.value for item in self.fields}


class DocState:
    """Per-thread record buffer.

    The same ``Document`` and ``Field`` objects are handed out on every call;
    a document is only valid until the next ``next_doc`` on the same thread.
    """

    __slots__ = ("doc", "title", "title_tokenized", "body", "id", "date", "title_dv")

    def __init__(self, use_doc_values: bool) -> None:
        self.doc = Document()
        self.title = self.doc.add(Field("title", "", STRING_NOT_STORED))
        self.title_tokenized = self.doc.add(Field("title_tokenized", "", TEXT_WITH_VECTORS))
        self.body = self.doc.add(Field("body", "", TEXT_WITH_VECTORS))
        self.id = self.doc.add(Field("id", "", STRING_STORED))
        self.date = self.doc.add(Field("date", "", STRING_STORED))
        if use_doc_values:
            self.title_dv: Field | None = self.doc.add(Field("title_dv", b"", SORTED_DOC_VALUES))
        else:
            self.title_dv = None

    def fill(self, title: str, date: str, body: str, doc_id: int) -> Document:
        self.body.value = body
        self.title.value = title
        if self.title_dv is not None:
            self.title_dv.value = title.encode("utf-8")
        self.title_tokenized.value = title
        self.date.value = date
        self.id.value = str(doc_id)
        return self.doc

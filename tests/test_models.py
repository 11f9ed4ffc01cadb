"""Tests for core data models."""

from __future__ import annotations

import pytest

from linedocs.models import STRING_STORED, DocState, Document, Field


class TestDocument:
    """Test Document field access."""

    def test_get_and_getitem(self) -> None:
        doc = Document()
        doc.add(Field("id", "7", STRING_STORED))

        assert doc.get("id") == "7"
        assert doc["id"] == "7"
        assert "id" in doc

    def test_missing_field(self) -> None:
        doc = Document()

        assert doc.get("missing") is None
        assert doc.get("missing", "x") == "x"
        with pytest.raises(KeyError):
            doc["missing"]

    def test_to_dict_is_a_copy(self) -> None:
        doc = Document()
        item = doc.add(Field("title", "a", STRING_STORED))

        snapshot = doc.to_dict()
        item.value = "b"

        assert snapshot == {"title": "a"}


class TestDocState:
    """Test the reusable per-thread record buffer."""

    def test_fill_sets_all_fields(self) -> None:
        state = DocState(use_doc_values=True)

        doc = state.fill("Foo", "2024-01-01", "Hello world", 3)

        assert doc["title"] == "Foo"
        assert doc["title_tokenized"] == "Foo"
        assert doc["date"] == "2024-01-01"
        assert doc["body"] == "Hello world"
        assert doc["id"] == "3"
        assert doc["title_dv"] == b"Foo"

    def test_without_doc_values(self) -> None:
        state = DocState(use_doc_values=False)

        doc = state.fill("Foo", "d", "b", 0)

        assert state.title_dv is None
        assert "title_dv" not in doc

    def test_fields_are_reused(self) -> None:
        """Should overwrite values in place rather than build new objects."""
        state = DocState(use_doc_values=True)
        first = state.fill("A", "d1", "b1", 0)
        fields_before = [id(item) for item in first]

        second = state.fill("B", "d2", "b2", 1)

        assert second is first
        assert [id(item) for item in second] == fields_before
        assert first["title"] == "B"

    def test_field_types(self) -> None:
        state = DocState(use_doc_values=True)

        assert state.title.field_type.stored is False
        assert state.body.field_type.tokenized is True
        assert state.body.field_type.store_term_vectors is True
        assert state.id.field_type.stored is True
        assert state.id.field_type.tokenized is False
        assert state.title_dv.field_type.doc_values is True

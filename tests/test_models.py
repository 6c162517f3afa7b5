"""Unit tests for pocket_notes.models — Note, NoteCollection and id generation."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pocket_notes.models import (
    Note,
    NoteCollection,
    NoteIdFactory,
    is_blank,
    normalize_tag,
    normalize_tags,
)


class TestNoteModel:
    def test_create_note_defaults(self) -> None:
        note = Note(title="Hello", content="World")
        assert note.id
        assert note.title == "Hello"
        assert note.content == "World"
        assert note.tags == []
        assert note.created_at.tzinfo is not None
        assert note.updated_at.tzinfo is not None

    def test_title_and_content_may_be_empty(self) -> None:
        note = Note(title="", content="")
        assert note.is_blank

    def test_default_ids_are_unique(self) -> None:
        ids = {Note().id for _ in range(50)}
        assert len(ids) == 50

    def test_tags_normalized(self) -> None:
        note = Note(title="T", tags=[" Work ", "work", "HOME", "", "  "])
        assert note.tags == ["work", "home"]

    def test_tags_keep_insertion_order(self) -> None:
        note = Note(title="T", tags=["zeta", "alpha", "mid"])
        assert note.tags == ["zeta", "alpha", "mid"]

    def test_field_names_accepted(self) -> None:
        ts = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        note = Note(title="T", created_at=ts, updated_at=ts)
        assert note.created_at == ts

    def test_aliases_accepted(self) -> None:
        note = Note.model_validate(
            {
                "id": "1",
                "title": "T",
                "content": "",
                "tags": [],
                "createdAt": "2024-05-01T12:00:00.000Z",
                "updatedAt": "2024-05-02T12:00:00.000Z",
            }
        )
        assert note.created_at == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        assert note.updated_at == datetime(2024, 5, 2, 12, 0, tzinfo=UTC)

    def test_naive_timestamp_is_utc(self) -> None:
        note = Note.model_validate(
            {"title": "T", "createdAt": "2024-05-01T12:00:00"}
        )
        assert note.created_at == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

    def test_invalid_timestamp_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Note.model_validate({"title": "T", "createdAt": "yesterday"})


class TestHelpers:
    def test_normalize_tag(self) -> None:
        assert normalize_tag("  Python ") == "python"

    def test_normalize_tags_dedup(self) -> None:
        assert normalize_tags(["a", "A", " a", "b"]) == ["a", "b"]

    @pytest.mark.parametrize(
        ("title", "content", "expected"),
        [
            ("", "", True),
            ("   ", "\n\t", True),
            ("x", "", False),
            ("", "y", False),
            ("  x ", "   ", False),
        ],
    )
    def test_is_blank(self, title: str, content: str, expected: bool) -> None:
        assert is_blank(title, content) is expected


class TestNoteIdFactory:
    def test_uses_milliseconds(self) -> None:
        factory = NoteIdFactory(clock=lambda: 1700000000.123)
        assert factory() == "1700000000123"

    def test_stalled_clock_still_unique(self) -> None:
        factory = NoteIdFactory(clock=lambda: 1.0)
        assert [factory() for _ in range(3)] == ["1000", "1001", "1002"]

    def test_clock_going_backwards(self) -> None:
        times = iter([2.0, 1.0])
        factory = NoteIdFactory(clock=lambda: next(times))
        assert factory() == "2000"
        assert factory() == "2001"


class TestNoteCollection:
    def test_empty_collection(self) -> None:
        collection = NoteCollection()
        assert len(collection) == 0
        assert list(collection) == []

    def test_serializes_as_array_with_camel_case(self) -> None:
        ts = datetime(2024, 1, 1, tzinfo=UTC)
        note = Note(id="42", title="T", content="C", tags=["x"], created_at=ts, updated_at=ts)
        data = json.loads(NoteCollection([note]).to_json())
        assert isinstance(data, list)
        assert set(data[0]) == {"id", "title", "content", "tags", "createdAt", "updatedAt"}
        assert data[0]["id"] == "42"
        assert data[0]["tags"] == ["x"]
        assert datetime.fromisoformat(data[0]["createdAt"]) == ts

    def test_serialization_roundtrip(self) -> None:
        notes = [
            Note(title="T", content="C", tags=["x"]),
            Note(title="", content="only body"),
        ]
        raw = NoteCollection(notes).to_json()
        restored = NoteCollection.model_validate_json(raw)
        assert len(restored) == 2
        assert [n.model_dump() for n in restored] == [n.model_dump() for n in notes]

    def test_indexing(self) -> None:
        a, b = Note(title="a"), Note(title="b")
        collection = NoteCollection([a, b])
        assert collection[1].title == "b"

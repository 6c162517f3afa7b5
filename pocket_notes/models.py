"""Pydantic models for notes and the persisted note collection."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Iterator
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class NoteIdFactory:
    """Issues millisecond-timestamp identifiers that never repeat.

    If the clock has not moved past the last issued value the identifier is
    bumped by one, so rapid creations still get distinct ids.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)


new_note_id = NoteIdFactory()


def normalize_tag(tag: str) -> str:
    """Trim and lowercase a tag."""
    return tag.strip().lower()


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Normalize tags, dropping empties and duplicates but keeping order."""
    result: list[str] = []
    for tag in tags:
        tag = normalize_tag(tag)
        if tag and tag not in result:
            result.append(tag)
    return result


def is_blank(title: str, content: str) -> bool:
    """True when both title and content are empty or whitespace-only."""
    return not title.strip() and not content.strip()


class Note(BaseModel):
    """A single note with tags and timestamps."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: new_note_id())
    title: str = Field(default="", description="Note title, may be empty")
    content: str = Field(default="", description="Note body, may be empty")
    tags: list[str] = Field(
        default_factory=list, description="Lowercase tags in insertion order"
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        alias="createdAt",
        description="Creation timestamp, never changed",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        alias="updatedAt",
        description="Last successful save",
    )

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Stored timestamps without an offset are UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def is_blank(self) -> bool:
        return is_blank(self.title, self.content)


class StoredNote(BaseModel):
    """A note record as it sits in storage. Every field is required."""

    id: str
    title: str
    content: str
    tags: list[str]
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    def to_note(self) -> Note:
        return Note(
            id=self.id,
            title=self.title,
            content=self.content,
            tags=self.tags,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class NoteCollection(RootModel[list[Note]]):
    """Ordered list of notes; the unit of persistence."""

    root: list[Note] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Note]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Note:
        return self.root[index]

    def to_json(self) -> str:
        """Serialize with the camelCase field names used on disk."""
        return self.model_dump_json(by_alias=True)

"""
Schema definition for the section index.

Every indexed document is a page section with up to four text fields:

- title: section title
- content: section plain text
- tags: space-joined section tags
- sidebarParentCategories: nearest ancestor categories (only when enabled)

Field boosts are multipliers the client applies at query time; they are kept
on the schema so the build and the client runtime config agree on one set of
numbers, but they are not baked into the stored field vectors.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


TITLE_FIELD = "title"
CONTENT_FIELD = "content"
TAGS_FIELD = "tags"
PARENT_CATEGORIES_FIELD = "sidebarParentCategories"


@dataclass(frozen=True)
class TextField:
    """
    Analyzed text field for full-text search.

    Args:
        name: Field name as stored in the serialized index
        boost: Query-time weight of this field's contribution (default: 1.0)
    """

    name: str
    boost: float = 1.0

    def __post_init__(self) -> None:
        if self.boost < 0:
            msg = f"Field boost must be non-negative, got {self.boost} for '{self.name}'"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "boost": self.boost}


@dataclass
class Schema:
    """
    Schema definition for a search index.

    Example:
        schema = Schema(
            fields=[
                TextField("title", boost=5.0),
                TextField("content"),
            ],
        )
    """

    fields: list[TextField]
    ref_field: str = "id"
    name: str = "sections"

    def __post_init__(self) -> None:
        self._field_map: dict[str, TextField] = {}
        for text_field in self.fields:
            if text_field.name in self._field_map:
                msg = f"Duplicate field '{text_field.name}' in schema '{self.name}'"
                raise ValueError(msg)
            self._field_map[text_field.name] = text_field

    def __getitem__(self, name: str) -> TextField:
        return self._field_map[name]

    def __contains__(self, name: str) -> bool:
        return name in self._field_map

    def __iter__(self) -> Iterator[TextField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get_boost(self, field_name: str) -> float:
        """Get boost factor for a field."""
        if field_name in self._field_map:
            return self._field_map[field_name].boost
        return 1.0

    def boosts(self) -> dict[str, float]:
        return {f.name: f.boost for f in self.fields}

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "ref_field": self.ref_field,
            "fields": [f.to_dict() for f in self.fields],
        }


def create_section_schema(
    *,
    title_boost: float = 5.0,
    content_boost: float = 1.0,
    tags_boost: float = 3.0,
    parent_categories_boost: float = 2.0,
    parent_categories_depth: int = 0,
) -> Schema:
    """Create the section schema; the ancestor field exists only when depth > 0."""

    fields = [
        TextField(TITLE_FIELD, boost=title_boost),
        TextField(CONTENT_FIELD, boost=content_boost),
        TextField(TAGS_FIELD, boost=tags_boost),
    ]
    if parent_categories_depth > 0:
        fields.append(TextField(PARENT_CATEGORIES_FIELD, boost=parent_categories_boost))
    return Schema(fields=fields)

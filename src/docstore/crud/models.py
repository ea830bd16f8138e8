"""Value types for stored documents, their authors, and search requests"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps as UTC so they compare with stamped ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Immutable author value embedded in a Document; compared by field equality."""
    model_config = ConfigDict(frozen=True)
    id: str
    name: str


class Document(BaseModel):
    """A stored record. id and created stay None until the first successful save."""
    model_config = ConfigDict(validate_assignment=True)
    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None

    utc_created = field_validator("created")(_as_utc)


class SearchRequest(BaseModel):
    """Conjunction of optional criteria.

    None means the criterion is absent and imposes no constraint.
    An empty list is present but unsatisfiable, so it excludes every document.
    """
    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None   # inclusive
    created_to:        Optional[datetime] = None   # inclusive

    utc_bounds = field_validator("created_from", "created_to")(_as_utc)

"""In-memory document store: upsert with dedup, id lookup, filtered search"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator
from uuid import uuid4

from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo
from docstore.crud.search import matches


logger = logging.getLogger(__name__)


def _same_entry(stored: Document, doc: Document) -> bool:
    """True if both documents share author, content, created and title."""
    return (
        stored.author == doc.author
        and stored.content == doc.content
        and stored.created == doc.created
        and stored.title == doc.title
    )


@dataclass
class DocumentStore(DocumentRepo):
    """Owns its documents keyed by id. Not thread-safe; callers serialize access."""
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, doc: Document) -> Document:
        """Upsert doc, finalizing id and created in place.

        If a stored document has the same author, content, created and title,
        that document is returned and the store is left untouched. An input
        without created cannot match, since every stored document has one.
        A reused explicit id overwrites the stored entry (last write wins).
        The scan is O(n) in the number of stored documents.
        """
        for stored in self._docs.values():
            if _same_entry(stored, doc):
                logger.debug("Duplicate of %s; store unchanged", stored.id)
                return stored

        if not doc.id:
            doc.id = str(uuid4())
        if doc.created is None:
            doc.created = datetime.now(timezone.utc)

        if doc.id in self._docs:
            logger.debug("Overwriting document %s", doc.id)
        self._docs[doc.id] = doc
        logger.debug("Saved document %s", doc.id)
        return doc

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return stored documents matching request, in insertion order."""
        found = [d for d in self._docs.values() if matches(d, request)]
        logger.debug("Search matched %d of %d document(s)", len(found), len(self._docs))
        return found

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._docs.values()))

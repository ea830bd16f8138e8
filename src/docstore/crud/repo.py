from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.crud.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert doc and return the stored document (an existing duplicate, or doc itself)."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None = None) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

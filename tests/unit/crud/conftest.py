"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Author, Document


T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(name="store")
def store_fixture():
    """Empty DocumentStore per test."""
    return DocumentStore()


@pytest.fixture(name="author")
def author_fixture():
    return Author(id="u1", name="Ada")


@pytest.fixture(name="make_doc")
def make_doc_fixture(author):
    """Factory for unsaved Documents with overridable fields."""
    def _make(**kwargs) -> Document:
        data = {"title": "Report-Q1", "content": "Quarterly numbers", "author": author}
        data.update(kwargs)
        return Document(**data)
    return _make


@pytest.fixture(name="seeded")
def seeded_fixture(store):
    """Store holding A (Report-Q1, u1, T0) and B (Memo, u2, T1); returns (store, a, b)."""
    a = store.save(Document(title="Report-Q1", content="Quarterly numbers",
                            author=Author(id="u1", name="Ada"), created=T0))
    b = store.save(Document(title="Memo", content="Office closed Friday",
                            author=Author(id="u2", name="Bo"), created=T1))
    return store, a, b

"""Search predicate: every present criterion of a SearchRequest must hold"""

from docstore.crud.models import Document, SearchRequest


def matches(doc: Document, request: SearchRequest | None) -> bool:
    """Return True if doc satisfies all present criteria of request.

    A None request matches every document. List criteria are satisfied by any
    one element, so an empty list can never be satisfied.
    """
    if request is None:
        return True

    if request.title_prefixes is not None and not any(
        doc.title.startswith(p) for p in request.title_prefixes
    ):
        return False
    if request.contains_contents is not None and not any(
        s in doc.content for s in request.contains_contents
    ):
        return False
    if request.author_ids is not None and doc.author.id not in request.author_ids:
        return False
    if request.created_from is not None and doc.created < request.created_from:
        return False
    if request.created_to is not None and doc.created > request.created_to:
        return False
    return True

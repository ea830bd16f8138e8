"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, configure_logging, load_config
from docstore.core.io import dump_document, dump_documents, load_documents, load_request
from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import SearchRequest


FileOpt = Annotated[Optional[str], typer.Option("--file", "-f", help="JSON/YAML documents file")]
IndentOpt = Annotated[Optional[int], typer.Option("--indent", help="JSON output indent; 0 = compact")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings)
    return settings


def _load_store(settings: Settings) -> tuple[DocumentStore, list[tuple[str, str]]]:
    """Save every document from settings.documents_file into a fresh store.

    Returns (store, changes) where changes holds (status, id) per input document.
    """
    try:
        docs = load_documents(Path(settings.documents_file))
    except ValueError as e:
        _fail(str(e))

    store = DocumentStore()
    changes = []
    for doc in docs:
        saved = store.save(doc)
        changes.append(("saved" if saved is doc else "duplicate", saved.id))
    return store, changes


def load_cmd(file: FileOpt = None):
    """Load a documents file into the store and report saved vs duplicate entries."""
    settings = _settings(overrides={"documents_file": file})
    store, changes = _load_store(settings)
    for status, doc_id in changes:
        typer.echo(f"  {status}: {doc_id}")
    saved = sum(1 for status, _ in changes if status == "saved")
    typer.echo(
        f"Load complete - "
        f"{saved} saved, "
        f"{len(changes) - saved} duplicates, "
        f"{len(store)} stored"
    )


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    file: FileOpt = None,
    indent: IndentOpt = None,
    ):
    """Print a single document by id as JSON."""
    settings = _settings(overrides={"documents_file": file, "indent": indent})
    store, _ = _load_store(settings)
    doc = store.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document {doc_id} not found")
    typer.echo(dump_document(doc, settings.indent))


def search_cmd(
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title must start with one of these")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content must contain one of these")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id must be one of these")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Earliest created timestamp (ISO-8601, inclusive)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Latest created timestamp (ISO-8601, inclusive)")] = None,
    request_file: Annotated[Optional[str], typer.Option("--request", help="JSON/YAML search request file")] = None,
    file: FileOpt = None,
    indent: IndentOpt = None,
    ):
    """Print documents matching all given criteria as a JSON array.

    Options that are not given impose no constraint. An empty list criterion,
    which matches nothing, can only come from a --request file.
    """
    settings = _settings(overrides={"documents_file": file, "indent": indent})

    criteria = {}
    if request_file:
        try:
            criteria = load_request(Path(request_file)).model_dump()
        except ValueError as e:
            _fail(str(e))
    given = {
        "title_prefixes": title_prefix,
        "contains_contents": contains,
        "author_ids": author,
        "created_from": created_from,
        "created_to": created_to,
    }
    criteria.update({k: v for k, v in given.items() if v})
    try:
        request = SearchRequest.model_validate(criteria)
    except ValueError as e:
        _fail("Invalid search criteria", e)

    store, _ = _load_store(settings)
    typer.echo(dump_documents(store.search(request), settings.indent))

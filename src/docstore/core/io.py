"""Document and search request (de)serialization: JSON output, JSON/YAML input"""

import json
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document, SearchRequest


_YAML_SUFFIXES = {".yaml", ".yml"}


def dump_document(doc: Document, indent: int = 2) -> str:
    """Return doc as a JSON object string with ISO-8601 timestamps."""
    return json.dumps(doc.model_dump(mode="json"), indent=indent or None, ensure_ascii=False)


def dump_documents(docs: Iterable[Document], indent: int = 2) -> str:
    """Return docs as a JSON array string; indent=0 gives compact output."""
    payload = [d.model_dump(mode="json") for d in docs]
    return json.dumps(payload, indent=indent or None, ensure_ascii=False)


def read_data(path: Path) -> Any:
    """Parse a .json, .yaml or .yml file. Raises ValueError on missing or malformed input."""
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"File not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        if path.suffix.lower() == ".json":
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    raise ValueError(f"Unsupported file type: {path.name} (expected .json, .yaml or .yml)")


def load_documents(path: Path) -> list[Document]:
    """Load documents from a file holding a list, or a mapping with a 'documents' list.

    An empty file yields no documents.
    """
    path = Path(path)
    data = read_data(path)
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("documents")
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")
    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path.name}: {e}") from e


def load_request(path: Path) -> SearchRequest:
    """Load a SearchRequest from a JSON/YAML mapping; an empty file is a request with no criteria."""
    path = Path(path)
    data = read_data(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of search criteria")
    try:
        return SearchRequest.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid search request in {path.name}: {e}") from e

"""Application configuration: settings schema and config.yaml loader"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:       str = "docstore"
    documents_file: str = Field(default="documents.json", description="Default JSON/YAML documents file for the CLI")
    indent:         int = Field(default=2, ge=0, description="JSON output indent; 0 prints compact JSON")
    log_level:      str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                description="Level for the docstore logger")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides.

    Commands pass their --file and --indent flags as overrides for documents_file and
    indent, so e.g. DOCSTORE_DOCUMENTS_FILE applies only when --file is not given.
    Invalid YAML or out-of-range values (negative indent, unknown log_level) raise ValueError.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def configure_logging(settings: Settings) -> None:
    """Apply settings.log_level to the package logger."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("docstore").setLevel(settings.log_level)

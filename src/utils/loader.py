"""Load caller-supplied input documents from YAML or JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_document(path: Path | str) -> Any:
    """Load a YAML or JSON document.

    The format follows the file extension; unknown extensions are parsed as
    JSON when they look like JSON and as YAML otherwise. An empty document
    loads as an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed.
    """
    document_path = Path(path)
    if not document_path.exists():
        raise FileNotFoundError(f"Input not found: {document_path}")

    suffix = document_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return _load_yaml(document_path)
    if suffix == ".json":
        return _load_json(document_path)
    return _load_unknown(document_path)


def load_text(path: Path | str) -> str:
    """Read a plain-text document such as a resume."""
    document_path = Path(path)
    if not document_path.exists():
        raise FileNotFoundError(f"Input not found: {document_path}")
    return document_path.read_text(encoding="utf-8")


def _load_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML document: {path}") from e
    return {} if data is None else data


def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON document: {path}") from e


def _load_unknown(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    stripped = raw.lstrip()

    # Try JSON first if it looks like JSON, otherwise fall back to YAML.
    if stripped.startswith("{") or stripped.startswith("["):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid document format: {path}") from e
    return {} if data is None else data

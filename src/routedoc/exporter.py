"""Serialize an assembled document and write it to disk."""

import json
from pathlib import Path

import yaml

from routedoc.openapi.models import OpenAPI

YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(file_path: Path) -> str:
    """Pick the output format from a file name.

    Returns: 'yaml' for .yaml/.yml files, 'json' for anything else.
    """
    if Path(file_path).suffix.lower() in YAML_SUFFIXES:
        return "yaml"
    return "json"


def render(document: OpenAPI, fmt: str = "yaml") -> str:
    """Render the document as YAML or JSON text."""
    data = document.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unknown output format: {fmt}")


def export_document(document: OpenAPI, file_path: Path, fmt: str = "auto") -> Path:
    """Write the document to ``file_path``, creating parent directories."""
    file_path = Path(file_path)
    if fmt == "auto":
        fmt = detect_format(file_path)
    text = render(document, fmt)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")
    return file_path

"""Load an OpenAPI document and read its sections.

The document is not validated up front. Sections are looked up through
``require`` when first needed, so a missing ``components.schemas`` or
``paths`` surfaces as AttributeMissingError at that point.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import AttributeMissingError, ParseError

_YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: Path) -> dict[str, Any]:
    """Read and parse the document at ``path``.

    OSError propagates when the file cannot be read.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            doc = yaml.safe_load(text)
        else:
            doc = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ParseError(path, str(exc)) from exc

    if not isinstance(doc, dict):
        raise ParseError(path, "top level is not a mapping")
    return doc


def require(node: Any, key: str, where: str) -> Any:
    """Return ``node[key]`` or raise AttributeMissingError naming ``where``."""
    if not isinstance(node, dict) or key not in node:
        raise AttributeMissingError(key, where)
    return node[key]


def get_schemas(doc: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the document."""
    components = require(doc, "components", "document")
    return require(components, "schemas", "components")


def get_tags(doc: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract the declared tags from the document."""
    return require(doc, "tags", "document")


def get_paths(doc: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the document."""
    return require(doc, "paths", "document")

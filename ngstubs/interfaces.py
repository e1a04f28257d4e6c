"""Emit one TypeScript interface per component schema.

A property is a reference to another schema when it has no ``type`` or its
type is ``object``. The property key then names that schema: ``category``
imports ``ICategory`` from ``./category.interface``, and an array of
references named ``tags`` imports ``ITag`` from ``./tag.interface``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import jinja2

from .codegen import GeneratedFile
from .config import GeneratorConfig
from .errors import AttributeMissingError
from .loader import get_schemas, require
from .naming import ARRAY_MARKER, DEFAULT_MAPPER, NameMapper

INTERFACES_DIR = Path("interfaces")


def is_reference(descriptor: dict[str, Any]) -> bool:
    """Check if a property descriptor points at another schema."""
    return "type" not in descriptor or descriptor["type"] == "object"


def _is_array(descriptor: dict[str, Any], mapper: NameMapper) -> bool:
    return not is_reference(descriptor) and mapper.type_name(descriptor["type"]) == ARRAY_MARKER


def _items(key: str, descriptor: dict[str, Any]) -> dict[str, Any]:
    return require(descriptor, "items", f"array property '{key}'")


def _descriptor(key: str, descriptor: Any) -> dict[str, Any]:
    """Reject a property whose descriptor is not a mapping (e.g. ``nickname:`` in YAML)."""
    if not isinstance(descriptor, dict):
        raise AttributeMissingError("type", f"property '{key}'")
    return descriptor


def field_type(
    key: str,
    descriptor: dict[str, Any],
    mapper: NameMapper = DEFAULT_MAPPER,
) -> str:
    """Resolve the TypeScript type of the property ``key``."""
    descriptor = _descriptor(key, descriptor)
    if is_reference(descriptor):
        return mapper.interface_name(key)
    if _is_array(descriptor, mapper):
        return field_type(key, _items(key, descriptor), mapper) + "[]"
    return mapper.type_name(descriptor["type"])


def _references_schema(key: str, descriptor: dict[str, Any], mapper: NameMapper) -> bool:
    """True for references and for arrays (of arrays) of references."""
    descriptor = _descriptor(key, descriptor)
    while _is_array(descriptor, mapper):
        descriptor = _descriptor(key, _items(key, descriptor))
    return is_reference(descriptor)


def collect_imports(
    properties: dict[str, Any],
    mapper: NameMapper = DEFAULT_MAPPER,
    own_name: str | None = None,
) -> list[dict[str, str]]:
    """Build the import list for a schema's properties.

    Each interface is imported once, in the order first referenced. A
    property referring back to the schema itself (``own_name``) is skipped.
    """
    imports: dict[str, dict[str, str]] = {}
    for key, descriptor in properties.items():
        if not _references_schema(key, descriptor, mapper):
            continue
        name = mapper.interface_name(key)
        if name == own_name or name in imports:
            continue
        imports[name] = {"name": name, "module": mapper.module_name(key)}
    return list(imports.values())


def interface_file_name(schema_name: str, extension: str, mapper: NameMapper = DEFAULT_MAPPER) -> str:
    return f"{mapper.kebab(schema_name)}.interface.{extension}"


def render_interface(
    env: jinja2.Environment,
    schema_name: str,
    definition: dict[str, Any],
    mapper: NameMapper = DEFAULT_MAPPER,
) -> str:
    """Render the interface text for one schema definition."""
    properties = require(definition, "properties", f"schema '{schema_name}'")
    interface_name = "I" + mapper.pascal(schema_name)
    fields = [
        {"name": key, "type": field_type(key, descriptor, mapper)}
        for key, descriptor in properties.items()
    ]
    template = env.get_template("interface.ts.j2")
    return template.render(
        interface_name=interface_name,
        imports=collect_imports(properties, mapper, own_name=interface_name),
        fields=fields,
    )


def iter_interfaces(
    env: jinja2.Environment,
    doc: dict[str, Any],
    config: GeneratorConfig,
    mapper: NameMapper = DEFAULT_MAPPER,
) -> Iterator[GeneratedFile]:
    """Yield one interface file per schema, in document order.

    The reserved envelope schema is skipped.
    """
    for schema_name, definition in get_schemas(doc).items():
        if schema_name == config.reserved_schema:
            continue
        file_name = interface_file_name(schema_name, config.extension, mapper)
        yield GeneratedFile(
            path=INTERFACES_DIR / file_name,
            content=render_interface(env, schema_name, definition, mapper),
        )

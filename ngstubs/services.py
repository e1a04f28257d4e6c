"""Emit one Angular service per API tag.

Every operation whose ``tags`` list contains the tag becomes a method named
after its ``operationId``. The method calls the injected HttpClient with
``apiUrl`` followed by the literal path, so ``/pets/{id}`` is emitted as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

import jinja2

from .codegen import GeneratedFile
from .config import GeneratorConfig
from .errors import AttributeMissingError
from .loader import get_paths, get_tags, require
from .naming import DEFAULT_MAPPER, NameMapper

SERVICES_DIR = Path("services")

# Scan order within a path
HTTP_METHODS = ("get", "post", "put", "patch", "delete")


@dataclass(frozen=True)
class Operation:
    """One HTTP method on one path, selected for a tag."""

    method: str
    path: str
    operation_id: str
    parameters: tuple[str, ...] = ()


def _parameter_names(operation: dict[str, Any]) -> tuple[str, ...]:
    parameters = operation.get("parameters") or []
    return tuple(p["name"] for p in parameters if isinstance(p, dict) and "name" in p)


def collect_operations(tag_name: str, paths: dict[str, Any]) -> list[Operation]:
    """Select the operations tagged ``tag_name``, in path then method order.

    An operation without a ``tags`` list matches no tag. A matched operation
    must carry a non-empty ``operationId``.
    """
    operations: list[Operation] = []
    for path, path_item in paths.items():
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not operation or tag_name not in (operation.get("tags") or []):
                continue
            where = f"{method.upper()} {path}"
            operation_id = require(operation, "operationId", where)
            if not operation_id:
                raise AttributeMissingError("operationId", where)
            operations.append(
                Operation(
                    method=method,
                    path=path,
                    operation_id=operation_id,
                    parameters=_parameter_names(operation),
                )
            )
    return operations


def service_file_name(tag_name: str, extension: str) -> str:
    return f"{tag_name}.service.{extension}"


def render_service(
    env: jinja2.Environment,
    tag_name: str,
    operations: list[Operation],
    mapper: NameMapper = DEFAULT_MAPPER,
) -> str:
    """Render the service class text for one tag."""
    template = env.get_template("service.ts.j2")
    return template.render(
        class_name=f"{mapper.pascal(tag_name)}Service",
        operations=operations,
    )


def iter_services(
    env: jinja2.Environment,
    doc: dict[str, Any],
    config: GeneratorConfig,
    mapper: NameMapper = DEFAULT_MAPPER,
) -> Iterator[tuple[Path, GeneratedFile | None]]:
    """Yield ``(tag directory, service file)`` per tag, in declared order.

    The file is None for a tag no operation is tagged with; its directory is
    still yielded so the caller creates it.
    """
    paths = get_paths(doc)
    for tag in get_tags(doc):
        tag_name = require(tag, "name", "tag")
        tag_dir = SERVICES_DIR / tag_name
        operations = collect_operations(tag_name, paths)
        if not operations:
            yield tag_dir, None
            continue
        yield tag_dir, GeneratedFile(
            path=tag_dir / service_file_name(tag_name, config.extension),
            content=render_service(env, tag_name, operations, mapper),
        )

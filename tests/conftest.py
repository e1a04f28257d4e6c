"""Shared fixtures: a small petstore document and its on-disk forms."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from ngstubs.codegen import make_environment
from ngstubs.config import GeneratorConfig


# ---------------------------------------------------------------------------
# Petstore document
# ---------------------------------------------------------------------------

_PETSTORE: dict[str, Any] = {
    "openapi": "3.0.0",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "tags": [{"name": "pet"}, {"name": "store"}, {"name": "user"}],
    "paths": {
        "/pet": {
            "post": {"tags": ["pet"], "operationId": "addPet"},
            "put": {"tags": ["pet"], "operationId": "updatePet"},
        },
        "/pet/{petId}": {
            "get": {
                "tags": ["pet"],
                "operationId": "getPetById",
                "parameters": [{"name": "petId", "in": "path", "required": True}],
            },
            "delete": {"tags": ["pet"], "operationId": "deletePet"},
        },
        "/store/inventory": {
            "get": {"tags": ["store"], "operationId": "getInventory"},
        },
    },
    "components": {
        "schemas": {
            "Category": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                },
            },
            "Tag": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                },
            },
            "Pet": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "category": {"$ref": "#/components/schemas/Category"},
                    "name": {"type": "string"},
                    "photoUrls": {"type": "array", "items": {"type": "string"}},
                    "tags": {"type": "array", "items": {"$ref": "#/components/schemas/Tag"}},
                    "status": {"type": "string"},
                },
            },
            "OrderItem": {
                "type": "object",
                "properties": {
                    "quantity": {"type": "integer"},
                    "price": {"type": "double"},
                    "shipped": {"type": "boolean"},
                },
            },
            "ApiResponse": {
                "type": "object",
                "properties": {
                    "code": {"type": "integer"},
                    "type": {"type": "string"},
                    "message": {"type": "string"},
                },
            },
        }
    },
}


@pytest.fixture
def petstore() -> dict[str, Any]:
    """A fresh copy of the petstore document."""
    return copy.deepcopy(_PETSTORE)


@pytest.fixture
def petstore_file(tmp_path: Path, petstore) -> Path:
    """The petstore document written as JSON."""
    path = tmp_path / "petstore.json"
    path.write_text(json.dumps(petstore, indent=2), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def env():
    return make_environment()


@pytest.fixture
def config(tmp_path: Path, petstore_file: Path) -> GeneratorConfig:
    """Config writing into an empty ``out`` directory."""
    return GeneratorConfig(input_path=petstore_file, output_dir=tmp_path / "out")

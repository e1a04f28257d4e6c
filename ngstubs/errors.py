"""Errors raised while reading a document and emitting stubs.

Filesystem problems are not wrapped: a missing input file or an existing
service directory surfaces as the usual ``OSError`` subclass.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for errors raised by the generator."""


class ParseError(GeneratorError):
    """The input document is not well-formed JSON/YAML."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class AttributeMissingError(GeneratorError, KeyError):
    """The document lacks a key the generator needs."""

    def __init__(self, key: str, where: str) -> None:
        self.key = key
        self.where = where
        super().__init__(key)

    def __str__(self) -> str:
        return f"missing '{self.key}' in {self.where}"

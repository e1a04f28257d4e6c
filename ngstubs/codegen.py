"""Render templates and write generated output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import jinja2

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class GeneratedFile:
    """Text content and its path relative to the output directory."""

    path: Path
    content: str


def make_environment() -> jinja2.Environment:
    """Build the jinja2 environment the emitters render with."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def write_file(root: Path, generated: GeneratedFile) -> Path:
    """Write ``generated`` under ``root``, replacing any existing file."""
    output_path = root / generated.path
    output_path.write_text(generated.content, encoding="utf-8")
    logger.debug("wrote %s (%d bytes)", output_path, len(generated.content))
    return output_path

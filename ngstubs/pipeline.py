"""Load a document, emit interfaces, then services.

Files are written as soon as they are rendered. A failure stops the run and
leaves whatever was already written in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from .codegen import make_environment, write_file
from .config import GeneratorConfig
from .interfaces import iter_interfaces
from .loader import load_document
from .naming import DEFAULT_MAPPER, NameMapper
from .services import iter_services


def generate(config: GeneratorConfig, mapper: NameMapper = DEFAULT_MAPPER) -> Iterator[Path]:
    """Run the pipeline, yielding each written path."""
    doc = load_document(config.input_path)
    env = make_environment()

    config.interfaces_dir.mkdir(parents=True, exist_ok=True)
    for generated in iter_interfaces(env, doc, config, mapper):
        yield write_file(config.output_dir, generated)

    config.services_dir.mkdir(parents=True, exist_ok=True)
    for tag_dir, generated in iter_services(env, doc, config, mapper):
        # Raises FileExistsError on a re-run unless overwrite is set
        (config.output_dir / tag_dir).mkdir(exist_ok=config.overwrite)
        if generated is not None:
            yield write_file(config.output_dir, generated)


def run(config: GeneratorConfig, mapper: NameMapper = DEFAULT_MAPPER) -> list[Path]:
    """Run the pipeline to completion and return the written paths."""
    return list(generate(config, mapper))

"""Run configuration for one generation pass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Generic response envelope schema, never emitted as an interface
RESERVED_SCHEMA = "ApiResponse"


@dataclass(frozen=True)
class GeneratorConfig:
    """Where to read from, where to write to, and how to treat re-runs.

    ``overwrite`` decides what happens when a service directory is left over
    from a previous run: reuse it (True) or fail with FileExistsError (False).
    """

    input_path: Path
    output_dir: Path = Path(".")
    extension: str = "ts"
    overwrite: bool = False
    reserved_schema: str = RESERVED_SCHEMA

    @property
    def interfaces_dir(self) -> Path:
        return self.output_dir / "interfaces"

    @property
    def services_dir(self) -> Path:
        return self.output_dir / "services"

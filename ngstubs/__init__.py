"""Generate TypeScript interfaces and Angular services from OpenAPI documents."""

__version__ = "0.1.0"

from .config import GeneratorConfig
from .errors import AttributeMissingError, GeneratorError, ParseError
from .pipeline import generate, run

__all__ = [
    "GeneratorConfig",
    "GeneratorError",
    "ParseError",
    "AttributeMissingError",
    "generate",
    "run",
]

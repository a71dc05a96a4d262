from .engine import FeatureGenerator, parse
from .errors import (
    DocumentError,
    FeatureGeneratorError,
    FilesystemError,
    GenerationError,
    IdentifierError,
)
from .fragment import fragment

__all__ = [
    "DocumentError",
    "FeatureGenerator",
    "FeatureGeneratorError",
    "FilesystemError",
    "GenerationError",
    "IdentifierError",
    "fragment",
    "parse",
]

from __future__ import annotations


class FeatureGeneratorError(RuntimeError):
    pass


class DocumentError(FeatureGeneratorError):
    """The API document could not be located, fetched or resolved."""


class IdentifierError(FeatureGeneratorError):
    """An operation could not be given an identifier."""


class FilesystemError(FeatureGeneratorError):
    """A destination directory or feature file could not be created."""


class GenerationError(FeatureGeneratorError):
    """The completion service returned no usable text."""

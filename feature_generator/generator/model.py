from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class Fragment:
    identifier: str
    path: str
    method: str
    document: dict[str, Any]

    @property
    def operation(self) -> dict[str, Any]:
        return self.document["paths"][self.path][self.method]


@dataclass(frozen=True)
class GenerationRequest:
    schema: str
    language: str
    operation_id: str
    api_id: str | None = None

    @classmethod
    def from_identifier(cls, identifier: str, schema: str, language: str) -> GenerationRequest:
        api_id, sep, operation_id = identifier.rpartition(PATH_SEPARATOR)
        if not sep:
            return cls(schema=schema, language=language, operation_id=identifier)
        return cls(schema=schema, language=language, operation_id=operation_id, api_id=api_id)

"""Split a resolved OpenAPI/Swagger document into single-operation documents.

Every (path, method) pair becomes its own document carrying the source
version marker, the source ``info`` block and exactly one path item with one
operation. Each document is keyed by an identifier shaped like
``[<tag>/]<method><Endpoint>`` which doubles as the relative output path of the
generated feature.
"""

from __future__ import annotations

import json
import re
from typing import Any

from .errors import IdentifierError
from .ingest import list_http_methods
from .model import PATH_SEPARATOR, Fragment

SHARED_PATH_ITEM_FIELDS = ("description", "summary", "servers", "$ref", "parameters")
VERSION_FIELDS = ("swagger", "openapi")

_STRIPPED_CHARS = re.compile(r"[\s*!;,?:@&=+$.~'()]")
_PATH_PARAMETER = re.compile(r"\{(.+?)}")
_WHITESPACE = re.compile(r"\s+")


def fragment(spec: dict[str, Any]) -> dict[str, str]:
    return {identifier: to_json(item.document) for identifier, item in fragment_by_operation(spec).items()}


def fragment_by_operation(spec: dict[str, Any]) -> dict[str, Fragment]:
    paths = spec.get("paths") if isinstance(spec, dict) else None
    if not isinstance(paths, dict):
        return {}

    fragments: dict[str, Fragment] = {}
    for endpoint, path_item in sorted(paths.items()):
        if not isinstance(path_item, dict):
            continue
        for method, operation in read_operations(path_item):
            new_path_item = copy_path_item(path_item)
            new_path_item[method] = operation
            document = _envelope(spec)
            document["paths"] = {endpoint: new_path_item}
            identifier = operation_identifier(endpoint, new_path_item)
            fragments[identifier] = Fragment(
                identifier=identifier,
                path=endpoint,
                method=method,
                document=document,
            )
    return fragments


def read_operations(path_item: dict[str, Any]) -> list[tuple[str, dict[str, Any]]]:
    operations: list[tuple[str, dict[str, Any]]] = []
    for method in list_http_methods():
        operation = path_item.get(method)
        if isinstance(operation, dict):
            operations.append((method, operation))
    return operations


def copy_path_item(item: dict[str, Any]) -> dict[str, Any]:
    copied: dict[str, Any] = {}
    for key, value in item.items():
        if value is None:
            continue
        if key in SHARED_PATH_ITEM_FIELDS or key.startswith("x-"):
            copied[key] = value
    return copied


def operation_identifier(endpoint: str, path_item: dict[str, Any]) -> str:
    operations = read_operations(path_item)
    if not operations:
        raise IdentifierError(f"Cannot generate id of operation [{endpoint}]")

    method, operation = operations[0]
    operation_id = method.lower() + endpoint_format(endpoint)
    tags = operation.get("tags")
    if isinstance(tags, list) and tags:
        tag = _WHITESPACE.sub("-", str(tags[0]))
        return f"{tag}{PATH_SEPARATOR}{operation_id}"
    return operation_id


def endpoint_format(endpoint: str) -> str:
    """Turn ``/pets/{id}`` into ``PetsById``.

    Literal segments are capitalized and concatenated, placeholders are
    collected in order and appended as ``By<A>And<B>``.
    """
    builder: list[str] = []
    parameters: list[str] = []
    for segment in _STRIPPED_CHARS.sub("", endpoint).split(PATH_SEPARATOR):
        if not segment:
            continue
        if segment.startswith("{"):
            parameters.append(_capitalize(_PATH_PARAMETER.sub(r"\1", segment)))
        else:
            builder.append(_capitalize(segment))
    if parameters:
        builder.append("By" + "And".join(parameters))
    return "".join(builder)


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _envelope(spec: dict[str, Any]) -> dict[str, Any]:
    document: dict[str, Any] = {}
    for key in VERSION_FIELDS:
        if spec.get(key) is not None:
            document[key] = spec[key]
    if spec.get("info") is not None:
        document["info"] = spec["info"]
    return document


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from prance.util.resolver import RefResolver
from prance.util.url import absurl, fetch_url

from .errors import DocumentError
from .ingest import SpecSource, detect_source, load_raw_content
from .resolve import find_unresolved_refs
from .validate import validate_spec

logger = logging.getLogger(__name__)

RECURSION_STUB = {"type": "object"}


def dereference_spec(api_docs: str) -> dict[str, Any]:
    source = detect_source(api_docs)
    logger.debug("Loading API docs from %s", source.kind)
    url = _base_url(source)
    raw = _load(source, url)
    try:
        resolver = RefResolver(
            raw,
            url,
            strict=False,
            recursion_limit_handler=_recursion_stub,
        )
        resolver.resolve_references()
    except Exception as exc:
        raise DocumentError(f"Failed to resolve spec from {source.kind}: {exc}") from exc

    spec = resolver.specs
    if not isinstance(spec, dict) or not spec:
        raise DocumentError("Unresolved swagger schema")
    unresolved = find_unresolved_refs(spec)
    if unresolved:
        raise DocumentError(f"Unresolved swagger schema: {', '.join(sorted(set(unresolved)))}")

    is_valid, validation_error = validate_spec(spec)
    if not is_valid:
        logger.warning("API docs do not validate, fragments may be incomplete: %s", validation_error)
    return spec


def _base_url(source: SpecSource) -> str:
    if not source.is_location:
        # Relative references in inline content resolve against the working directory.
        return Path.cwd().joinpath("openapi.yaml").as_uri()
    if os.path.exists(source.value):
        return Path(source.value).absolute().as_uri()
    return source.value


def _load(source: SpecSource, url: str) -> dict[str, Any]:
    if source.is_location:
        try:
            raw = fetch_url(absurl(url), strict=False)
        except Exception as exc:
            raise DocumentError(f"Failed to read spec from {source.kind}: {exc}") from exc
    else:
        try:
            raw = load_raw_content(source.value)
        except Exception as exc:
            raise DocumentError(f"API docs are neither an existing location nor valid JSON/YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise DocumentError("API docs are neither an existing location nor a JSON/YAML mapping")
    if "swagger" not in raw and "openapi" not in raw:
        raise DocumentError("API docs declare neither 'swagger' nor 'openapi' version")
    return raw


def _recursion_stub(limit: int, parsed_url: Any, recursions: Any = ()) -> dict[str, Any]:
    logger.debug("Recursive reference %s cut after %d level(s)", parsed_url, limit)
    return dict(RECURSION_STUB)

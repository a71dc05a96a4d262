from __future__ import annotations

from pathlib import Path
from typing import Any

from .errors import FilesystemError
from .model import GenerationRequest
from .prompt import PROMPT_TEMPLATE

FEATURE_EXTENSION = ".feature"


def render_inputs(request: GenerationRequest) -> dict[str, Any]:
    inputs: dict[str, Any] = {
        "schema": request.schema,
        "language": request.language,
    }
    if request.api_id is not None:
        inputs["apiId"] = request.api_id
    inputs["operationId"] = request.operation_id
    return inputs


def render_prompt(request: GenerationRequest, template: str = PROMPT_TEMPLATE) -> str:
    lines = [f"{key}={value}" for key, value in render_inputs(request).items()]
    return template + "\n".join(lines)


def feature_path(destination: Path, identifier: str) -> Path:
    feature = destination.joinpath(identifier + FEATURE_EXTENSION)
    # Tags come from the document and must not lead out of the destination.
    if not feature.resolve().is_relative_to(destination.resolve()):
        raise FilesystemError(f"Feature [{identifier}] resolves outside of [{destination}]")
    return feature

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, cast

from openapi_spec_validator import validate
from openapi_spec_validator.validation.exceptions import OpenAPIValidationError


def validate_spec(spec: dict[str, Any]) -> tuple[bool, str | None]:
    try:
        validate(cast(Mapping[Hashable, Any], spec))
    except OpenAPIValidationError as exc:
        return False, _validation_error_message(exc)
    except Exception as exc:
        return False, _validation_error_message(exc)
    return True, None


def _validation_error_message(error: Exception) -> str:
    lines = str(error).strip().splitlines()
    message = lines[0] if lines else ""
    return message if message else error.__class__.__name__

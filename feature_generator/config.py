from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

from .generator.engine import DEFAULT_MODEL

REQUIRED_OPTIONS = ("language", "api_docs", "output", "token")

ENV_DEFAULTS = {
    "language": "FEATURE_GENERATOR_LANGUAGE",
    "api_docs": "FEATURE_GENERATOR_API_DOCS",
    "output": "FEATURE_GENERATOR_OUTPUT",
    "token": "OPENAI_API_KEY",
    "model": "OPENAI_MODEL",
    "base_url": "OPENAI_BASE_URL",
}


@dataclass(frozen=True)
class GeneratorSettings:
    language: str
    api_docs: str
    output: str
    token: str
    model: str = DEFAULT_MODEL
    base_url: str | None = None

    def masked(self) -> dict[str, Any]:
        values = asdict(self)
        values["token"] = _mask(self.token)
        if len(self.api_docs) > 80:
            values["api_docs"] = self.api_docs[:77] + "..."
        return values


def env_default(option: str) -> str | None:
    value = os.getenv(ENV_DEFAULTS[option])
    return value if value else None


def missing_options(values: dict[str, Any]) -> list[str]:
    return [option for option in REQUIRED_OPTIONS if not values.get(option)]


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "****"
    return f"{token[:4]}...{token[-4:]}"

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterable
from urllib.parse import urlparse

import yaml

LOCATION_SCHEMES = ("http", "https", "file")


@dataclass(frozen=True)
class SpecSource:
    value: str
    is_location: bool

    @property
    def kind(self) -> str:
        if not self.is_location:
            return "content"
        scheme = urlparse(self.value).scheme.lower()
        return scheme if scheme in LOCATION_SCHEMES else "file"


def is_location(value: str) -> bool:
    if not value or "\n" in value:
        return False
    if os.path.exists(value):
        return True
    parsed = urlparse(value.strip())
    return parsed.scheme.lower() in LOCATION_SCHEMES and bool(parsed.netloc or parsed.path)


def detect_source(value: str) -> SpecSource:
    return SpecSource(value=value, is_location=is_location(value))


def load_raw_content(content: str) -> Any:
    return yaml.safe_load(content)


def list_http_methods() -> Iterable[str]:
    return (
        "get",
        "post",
        "put",
        "patch",
        "delete",
        "options",
        "head",
        "trace",
    )

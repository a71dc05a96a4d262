from __future__ import annotations

from typing import Any


def find_unresolved_refs(value: Any, found: list[str] | None = None) -> list[str]:
    if found is None:
        found = []

    if isinstance(value, dict):
        ref = value.get("$ref")
        if isinstance(ref, str):
            found.append(ref)
        for key, val in value.items():
            if key == "$ref":
                continue
            find_unresolved_refs(val, found)
        return found

    if isinstance(value, list):
        for item in value:
            find_unresolved_refs(item, found)

    return found

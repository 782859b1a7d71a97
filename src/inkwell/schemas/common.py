"""Shared Pydantic types for common API elements."""
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

Slug = Annotated[
    str,
    Field(min_length=1, max_length=200, pattern=SLUG_PATTERN, description="URL-safe slug"),
]


def normalize_tag_labels(labels: list[str]) -> list[str]:
    """Trim labels, drop blanks and duplicates while keeping first-seen order."""
    seen: set[str] = set()
    normalized: list[str] = []
    for label in labels:
        cleaned = label.strip()
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        normalized.append(cleaned)
    return normalized


# Labels need not exist in the tag catalog.
TagLabels = Annotated[list[str], AfterValidator(normalize_tag_labels)]

"""Field rules for note drafts.

Both fields are checked independently, so a draft can carry a title error
and a content error at the same time. Validation runs on save attempts only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
CONTENT_MAX_LENGTH = 500


@dataclass(frozen=True)
class ValidationResult:
    title_error: Optional[str] = None
    content_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.title_error is None and self.content_error is None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"title": self.title_error, "content": self.content_error}


def validate_title(title: str) -> Optional[str]:
    if not title:
        return "Title cannot be empty"
    if len(title) < TITLE_MIN_LENGTH:
        return f"Title must be at least {TITLE_MIN_LENGTH} characters"
    if len(title) > TITLE_MAX_LENGTH:
        return f"Title must be at most {TITLE_MAX_LENGTH} characters"
    return None


def validate_content(content: str) -> Optional[str]:
    if not content:
        return "Content cannot be empty"
    if len(content) > CONTENT_MAX_LENGTH:
        return f"Content must be at most {CONTENT_MAX_LENGTH} characters"
    return None


def validate_note(title: str, content: str) -> ValidationResult:
    return ValidationResult(
        title_error=validate_title(title),
        content_error=validate_content(content),
    )

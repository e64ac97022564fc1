"""Field validation for post writes.

``validate_post`` is pure: it inspects an already-parsed request and returns
every problem it finds instead of stopping at the first one.
"""

from typing import List

from .models.post import (
    CATEGORY_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
    TAG_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from .schemas.posts import FieldError, PostWrite


def validate_post(request: PostWrite) -> List[FieldError]:
    """Return all field errors for a create/update request (empty when valid)."""
    errors: List[FieldError] = []

    if not 1 <= len(request.title) <= TITLE_MAX_LENGTH:
        errors.append(FieldError(
            field="title",
            message=f"Title must be between 1 and {TITLE_MAX_LENGTH} characters",
        ))

    if not 1 <= len(request.content) <= CONTENT_MAX_LENGTH:
        errors.append(FieldError(
            field="content",
            message=f"Content must be between 1 and {CONTENT_MAX_LENGTH} characters",
        ))

    if request.category is not None and len(request.category) > CATEGORY_MAX_LENGTH:
        errors.append(FieldError(
            field="category",
            message=f"Category cannot exceed {CATEGORY_MAX_LENGTH} characters",
        ))

    for index, tag in enumerate(request.tags or []):
        if len(tag) > TAG_MAX_LENGTH:
            errors.append(FieldError(
                field=f"tags[{index}]",
                message=f"Tag cannot exceed {TAG_MAX_LENGTH} characters",
            ))

    return errors

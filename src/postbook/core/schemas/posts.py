"""
Post management schemas.

These schemas define the API contracts for post CRUD operations and the
listing filters.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.post import DEFAULT_CATEGORY

ALL_CATEGORIES = "All"


class FieldError(BaseModel):
    """A single field-level validation problem."""

    field: str = Field(description="Request field the problem refers to")
    message: str = Field(description="Human-readable description")


class PostWrite(BaseModel):
    """Create/update request body.

    Strings are trimmed and blank tags dropped here; length rules live in
    ``core.validation.validate_post`` so that every problem is reported at once.
    """

    title: str = Field(default="", description="Post title (1-100 characters)")
    content: str = Field(default="", description="Post content (1-10000 characters)")
    category: Optional[str] = Field(
        default=None,
        validate_default=True,
        description=f"Category (max 50 characters, defaults to '{DEFAULT_CATEGORY}')"
    )
    tags: Optional[List[str]] = Field(
        default=None, validate_default=True, description="Tags (each max 30 characters)"
    )

    @field_validator("title", "content")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("category")
    @classmethod
    def default_category(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            return DEFAULT_CATEGORY
        return v.strip()

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: Optional[List[str]]) -> List[str]:
        if not v:
            return []
        return [tag.strip() for tag in v if tag.strip()]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "content": "Buy milk, eggs and coffee",
                "category": "Errands",
                "tags": ["errand", "weekly"],
            }
        }
    )


class PostResponse(BaseModel):
    """Post response schema."""

    id: uuid.UUID = Field(description="Post unique identifier")
    title: str = Field(description="Post title")
    content: str = Field(description="Post content")
    category: str = Field(description="Post category")
    tags: List[str] = Field(description="Post tags in their stored order")
    owner_id: uuid.UUID = Field(description="Owner user id")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Groceries",
                "content": "Buy milk, eggs and coffee",
                "category": "Errands",
                "tags": ["errand", "weekly"],
                "owner_id": "456e7890-e89b-12d3-a456-426614174000",
                "created_at": "2025-09-13T10:30:00Z",
                "updated_at": "2025-09-13T11:00:00Z",
            }
        },
    )


class PostFilters(BaseModel):
    """Listing filters; blank values count as absent."""

    category: Optional[str] = Field(default=None, description="Exact category, 'All' disables the filter")
    tag: Optional[str] = Field(default=None, description="Posts carrying this tag")
    search: Optional[str] = Field(
        default=None, description="Case-insensitive substring of title, content or any tag"
    )

    @field_validator("category", "tag", "search")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        return v

    @property
    def category_filter(self) -> Optional[str]:
        """Category to filter on, or None when absent or the 'All' sentinel."""
        if self.category is None or self.category == ALL_CATEGORIES:
            return None
        return self.category

    def as_query_params(self) -> Dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v is not None}


class DeleteResponse(BaseModel):
    message: str = Field(default="Post deleted successfully")


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response for invalid input."""

    message: str = Field(default="Validation failed")
    errors: List[FieldError] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Validation failed",
                "errors": [
                    {"field": "title", "message": "Title must be between 1 and 100 characters"},
                    {"field": "tags[2]", "message": "Tag cannot exceed 30 characters"},
                ],
            }
        }
    )

"""
Domain exceptions for post management.

Each carries the HTTP status and the public message it maps to; the API layer
turns them into JSON responses.
"""

from typing import Any, Dict, List, Optional


class PostbookError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class PostValidationError(PostbookError):
    """One or more request fields are invalid."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: List[Any], message: Optional[str] = None):
        super().__init__(message)
        self.errors = list(errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errors": [
                e.model_dump() if hasattr(e, "model_dump") else dict(e) for e in self.errors
            ],
        }


class PostNotFoundError(PostbookError):
    """Post does not exist, or belongs to someone else."""

    status_code = 404
    default_message = "Post not found"


class InvalidIdentifierError(PostbookError):
    """Identifier is not a well-formed post id."""

    status_code = 400
    default_message = "Invalid post ID"


class StoreError(PostbookError):
    """The document store failed; details stay in the logs."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(message)
        self.operation = operation

"""Exception handlers that turn domain errors into JSON responses."""

import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import PostbookError, StoreError
from ..core.schemas.posts import FieldError

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path")


def _field_name(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]

    name = ""
    for part in parts:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name = f"{name}.{part}" if name else str(part)
    return name


def field_errors_from_pydantic(errors: Sequence[Dict[str, Any]]) -> List[FieldError]:
    """Convert FastAPI/pydantic error dicts into FieldError entries."""
    result = []
    for error in errors:
        field = _field_name(error.get("loc", ()))
        if field == "tags" and error.get("type") == "list_type":
            message = "Tags must be an array"
        else:
            message = error.get("msg", "Invalid value")
        result.append(FieldError(field=field, message=message))
    return result


async def postbook_error_handler(request: Request, exc: PostbookError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(f"Store failure during {exc.operation} on {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = field_errors_from_pydantic(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation failed",
            "errors": [e.model_dump() for e in errors],
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(PostbookError, postbook_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

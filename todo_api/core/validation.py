from typing import Any, Iterable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

_REQUEST_LOCATIONS = {"body", "query", "path", "header"}


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error entries into ``{field, message}`` pairs."""
    formatted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in _REQUEST_LOCATIONS]
        formatted.append(
            {
                "field": ".".join(location) or "__root__",
                "message": error.get("msg", "Invalid value"),
            }
        )
    return formatted


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation failed",
            "errors": format_validation_errors(exc.errors()),
        },
    )

# File: app/core/errors.py

"""
Exception handlers registered on the application.

Validation errors are reported by field location only. Input values are
never echoed back, so a rejected password does not leak into the response
or the logs.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        loc = error["loc"]
        if len(loc) > 1 and not isinstance(loc[1], str):
            # undecodable body: loc[1] is a byte offset, not a field
            loc = loc[:1]
        # drop the leading "body" / "path" / "query" segment
        loc = [str(part) for part in loc[1:]] or [str(loc[0])]
        errors.append(
            {
                "field": ".".join(loc),
                "message": error["msg"],
                "type": error["type"],
            }
        )
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc)
    logger.warning(
        "Rejected %s %s: %s",
        request.method,
        request.url.path,
        ", ".join(f"{e['field']} ({e['type']})" for e in errors),
    )
    return JSONResponse(
        status_code=422,
        content={"detail": "Invalid request payload", "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

"""Error types raised by services and repositories, and their HTTP mapping."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_PATH = "invalid path requested"


class ContactsError(Exception):
    status_code = 500
    message = "internal error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequestError(ContactsError):
    status_code = 400
    message = "invalid request"


class NotFoundError(ContactsError):
    status_code = 404
    message = "not found"


class SerializationError(ContactsError):
    status_code = 500
    message = "serialization error"


class RecordDecodeError(SerializationError):
    message = "could not decode user record"


class StoreError(ContactsError):
    status_code = 502
    message = "record store request failed"


async def contacts_error_handler(request: Request, exc: ContactsError):
    if isinstance(exc, StoreError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unmatched_route_handler(request: Request, exc: StarletteHTTPException):
    # unknown paths and methods share the "invalid path" answer
    if exc.status_code in (404, 405):
        logger.info("rejecting %s %s", request.method, request.url.path)
        return PlainTextResponse(INVALID_PATH, status_code=400)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContactsError, contacts_error_handler)
    app.add_exception_handler(StarletteHTTPException, unmatched_route_handler)

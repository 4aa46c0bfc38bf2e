"""Translate handler results and request validation errors into HTTP responses."""

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flowershop.shared.results import ErrorKind, Result

STATUS_CODES = {
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNEXPECTED: 500,
}


def unwrap(result: Result):
    """Return the value of a successful result, or raise the matching HTTPException."""
    if result.ok:
        return result.value
    raise HTTPException(status_code=STATUS_CODES[result.error.kind], detail=result.error.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def register_validation_handler(app: FastAPI) -> None:
    """Report malformed request bodies and parameters as 400 Bad Request."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)

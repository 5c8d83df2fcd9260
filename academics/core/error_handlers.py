import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from academics.core.errors import AcademicsError, DependencyError, ValidationError

logger = logging.getLogger(__name__)


def _location(loc: tuple) -> str:
    # ("query", "academicYear") -> "academicYear"; body-level errors keep the field path
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        content: dict = {"message": exc.message}
        if exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(DependencyError)
    async def dependency_error_handler(request: Request, exc: DependencyError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.exception_handler(AcademicsError)
    async def academics_error_handler(request: Request, exc: AcademicsError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("%s %s raised an unhandled error", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": _location(tuple(err.get("loc", ()))), "message": err.get("msg", "Invalid value")}
            for err in exc.errors()
        ]
        # bad request bodies read as "Invalid data", bad path/query values as "Validation failed"
        in_body = any(err.get("loc", ("",))[0] == "body" for err in exc.errors())
        message = "Invalid data" if in_body else "Validation failed"
        return JSONResponse(status_code=400, content={"message": message, "errors": errors})

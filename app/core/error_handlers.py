from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import StudentRecordsError
from app.schemas.student_schemas import MessageResponse
from app.services.validation import format_validation_errors
from app.utils.logger import logger


def _envelope(status_code: int, message: str, headers=None) -> JSONResponse:
    body = MessageResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def handle_student_records_error(request: Request, exc: StudentRecordsError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
    return _envelope(exc.status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return _envelope(400, format_validation_errors(exc.errors()))


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    # keeps headers such as Allow on 405
    return _envelope(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StudentRecordsError, handle_student_records_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

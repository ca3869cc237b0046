from __future__ import annotations

from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

GENERIC_ERROR = "An unexpected error occurred"


class QuizAppError(Exception):
    """Base error; handlers registered in main.py turn it into {"error": ...}."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidRequestError(QuizAppError):
    status_code = 400


class InvalidTopicError(InvalidRequestError):
    pass


class ConfigurationError(QuizAppError):
    status_code = 500


class GenerationErrorKind(str, Enum):
    INVALID_API_KEY = "INVALID_API_KEY"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    CONTENT_FILTERED = "CONTENT_FILTERED"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class GenerationError(QuizAppError):
    """The external text API failed (network, quota, content filter...)."""

    status_code = 500

    def __init__(self, message: str, kind: GenerationErrorKind = GenerationErrorKind.UNKNOWN_ERROR) -> None:
        self.kind = kind
        super().__init__(message)


class ParseErrorKind(str, Enum):
    NO_JSON_FOUND = "NoJsonFound"
    MALFORMED_JSON = "MalformedJson"
    NOT_AN_ARRAY = "NotAnArray"
    WRONG_QUESTION_COUNT = "WrongQuestionCount"
    INVALID_QUESTION_STRUCTURE = "InvalidQuestionStructure"
    INVALID_OPTION_STRUCTURE = "InvalidOptionStructure"
    INVALID_SOURCE_STRUCTURE = "InvalidSourceStructure"


class QuizParseError(QuizAppError):
    """The model reply could not be turned into a valid question set."""

    status_code = 500

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        *,
        question_number: Optional[int] = None,
        count: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.question_number = question_number
        self.count = count
        super().__init__(message)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuizAppError)
    async def _app_error(_request: Request, exc: QuizAppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"[error] {exc.__class__.__name__}: {exc.message}")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        msg = first.get("msg", "Invalid request")
        return _error(422, f"{loc}: {msg}" if loc else msg)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unhandled(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"[error] unhandled: {exc}")
        return _error(500, GENERIC_ERROR)

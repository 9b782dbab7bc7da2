import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CustomException(Exception):
    http_code: int
    code: str
    message: str

    def __init__(self, http_code: int = None, code: str = None, message: str = None):
        self.http_code = http_code if http_code else 500
        self.code = code if code else str(self.http_code)
        self.message = message
        super().__init__(message)


async def http_exception_handler(request: Request, exc: CustomException):
    return JSONResponse(
        status_code=exc.http_code,
        content={"success": False, "code": exc.code, "message": exc.message}
    )


class MediChartError(Exception):
    """Base class for errors raised by the record-keeping core."""
    http_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(MediChartError):
    """A required field is missing or blank, or an edit targets something invalid."""
    http_code = 400

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"'{field}' is required")


class NotFoundError(MediChartError):
    http_code = 404

    def __init__(self, entity: str, record_id: Any):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with id {record_id} not found")


class StorageError(MediChartError):
    """The database rejected or failed an operation; nothing was applied."""
    http_code = 500


class StorageUnavailable(StorageError):
    http_code = 503


class MalformedStoredDate(MediChartError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Stored date '{value}' is not an ISO-8601 date")


async def medichart_exception_handler(request: Request, exc: MediChartError):
    if exc.http_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.http_code,
        content={"success": False, "code": str(exc.http_code), "message": exc.message}
    )

"""
Domain errors shared by the storage and service layers.

Repositories raise these; services either re-raise them with context or turn
them into `HTTPException`. Anything that escapes is mapped by the handlers
registered in `install_error_handlers`.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(RuntimeError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(DomainError):
    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(DomainError):
    status_code = status.HTTP_403_FORBIDDEN


def wrap(exc: Exception, message: str) -> HTTPException:
    """
    Build an HTTPException carrying `message: <cause>`.

    Domain errors keep their own status; anything else is a 500.
    """
    if isinstance(exc, HTTPException):
        return HTTPException(status_code=exc.status_code, detail=f"{message}: {exc.detail}")
    if isinstance(exc, asyncpg.UniqueViolationError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{message}: resource already exists")
    if isinstance(exc, asyncpg.ForeignKeyViolationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{message}: referenced resource does not exist",
        )
    status_code = getattr(exc, "status_code", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=f"{message}: {exc}")


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def _unique_violation_handler(request: Request, exc: asyncpg.UniqueViolationError) -> JSONResponse:
    logger.info("unique_violation path=%s constraint=%s", request.url.path, getattr(exc, "constraint_name", None))
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": "resource already exists"})


async def _foreign_key_violation_handler(
    request: Request,
    exc: asyncpg.ForeignKeyViolationError,
) -> JSONResponse:
    logger.info("foreign_key_violation path=%s constraint=%s", request.url.path, getattr(exc, "constraint_name", None))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "referenced resource does not exist"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(asyncpg.UniqueViolationError, _unique_violation_handler)
    app.add_exception_handler(asyncpg.ForeignKeyViolationError, _foreign_key_violation_handler)

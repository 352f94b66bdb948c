"""Mapping of domain and adapter errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from partyparty.adapter.error import AdapterError
from partyparty.application.usecase.party import MembershipItem
from partyparty.domain.error import (
    NotAuthenticatedError,
    NotFoundError,
    PartialReconciliationError,
    SyncFailure,
    ValidationError,
)
from partyparty.interface.error import InvalidAuthorizationHeaderError


def _detail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


async def not_authenticated_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def validation_handler(request: Request, exc: Exception) -> JSONResponse:
    return _detail(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _detail(status.HTTP_404_NOT_FOUND, str(exc))


async def sync_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("Record store sync failed", path=request.url.path, error=str(exc))
    return _detail(status.HTTP_502_BAD_GATEWAY, str(exc))


async def adapter_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("Upstream provider failed", path=request.url.path, error=str(exc))
    return _detail(status.HTTP_502_BAD_GATEWAY, "Upstream service unavailable")


async def partial_reconciliation_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, PartialReconciliationError)
    membership = MembershipItem.from_outcome(exc.outcome)
    return JSONResponse(
        status_code=status.HTTP_207_MULTI_STATUS,
        content={"detail": str(exc), "membership": membership.model_dump()},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error-to-status mapping on an application."""
    app.add_exception_handler(InvalidAuthorizationHeaderError, not_authenticated_handler)
    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(PartialReconciliationError, partial_reconciliation_handler)
    app.add_exception_handler(SyncFailure, sync_failure_handler)
    app.add_exception_handler(AdapterError, adapter_error_handler)

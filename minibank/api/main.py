"""FastAPI application factory"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from minibank.api.middleware import RequestIDMiddleware, MetricsMiddleware
from minibank.api.dependencies import get_request_id
from minibank.api.routes import accounts
from minibank.domain.exceptions import AccountNotFoundError, DuplicateAccountError
from minibank.domain.registry import AccountRegistry
from minibank.domain.seed import seed_demo_accounts
from minibank.infrastructure.observability.logging import setup_logging
from minibank.infrastructure.observability.metrics import accounts_gauge
from minibank.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


async def account_not_found_handler(request: Request, exc: AccountNotFoundError) -> PlainTextResponse:
    logging.warning(str(exc), extra={"request_id": get_request_id(request)})
    return PlainTextResponse(str(exc), status_code=404)


async def duplicate_account_handler(request: Request, exc: DuplicateAccountError) -> PlainTextResponse:
    logging.warning(str(exc), extra={"request_id": get_request_id(request)})
    return PlainTextResponse(str(exc), status_code=400)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Drop the raw input: rejected NaN/Infinity values are not JSON serializable
    errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
    return JSONResponse({"detail": jsonable_encoder(errors)}, status_code=422)


def create_app(registry: Optional[AccountRegistry] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        registry: Account store to serve. A fresh one is created when omitted,
            seeded with demo accounts only if settings.seed_demo_accounts is on.
    """
    if registry is None:
        registry = AccountRegistry()
        if settings.seed_demo_accounts:
            seed_demo_accounts(registry)

    app = FastAPI(
        title="Mini Bank",
        description="In-memory bank account and transfer service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.registry = registry
    accounts_gauge.set(len(registry))

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Domain errors surface as plain-text bodies
    app.add_exception_handler(AccountNotFoundError, account_not_found_handler)
    app.add_exception_handler(DuplicateAccountError, duplicate_account_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name, "accounts": len(registry)}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(accounts.router, tags=["accounts"])

    return app


app = create_app()

"""
dispatcher/main.py

FastAPI application entry point for the smoke alert dispatcher.
Loads the service-account bundle at startup and registers routers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dispatcher.errors import DispatchError
from dispatcher.routers.webhooks import router as webhooks_router
from dispatcher.services.credentials import get_service_account

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle: startup and shutdown."""
    account = get_service_account()
    logger.info("dispatcher_starting", project_id=account.project_id)
    yield
    logger.info("dispatcher_shutting_down")


app = FastAPI(
    title="Smoke Alert Dispatcher",
    description="Forwards smoke detection inserts to devices via FCM",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(DispatchError)
async def dispatch_error_handler(request: Request, exc: DispatchError) -> JSONResponse:
    """
    Report a failed invocation with the error's status and provider details.

    Services log the underlying failure; this records only the response sent.
    """
    logger.warning(
        "webhook_dispatch_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


app.include_router(webhooks_router)

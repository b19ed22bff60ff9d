import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from oakwire_api.config import get_server_config
from oakwire_api.routes import health_router, router
from oakwire_api.safeguards import AuditLog
from oakwire_sdk import OakwireError

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = get_server_config()

    app.state.server_config = config
    app.state.api_key = config.api_key

    if config.audit_enabled:
        app.state.audit = AuditLog()
        log.info("Audit trail at %s", app.state.audit.path)
    else:
        app.state.audit = None
        log.warning("Audit trail disabled")

    yield


async def oakwire_error_handler(request: Request, exc: OakwireError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Oakwire API", lifespan=lifespan)

    app.add_exception_handler(OakwireError, oakwire_error_handler)

    app.include_router(health_router)
    app.include_router(router)

    return app

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_service.deps import get_settings_dep, get_user_store
from user_service.logging_config import configure_logging
from user_service.models import HealthResponse
from user_service.routers.users import router as users_router
from user_service.settings import Settings, get_settings
from user_service.user_store import InMemoryUserStore

logger = logging.getLogger("user_service")

APP_VERSION = "1.0.0"


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed input is a client error like a bad path id: 400, not FastAPI's default 422.
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def _log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("%s %s failed", request.method, request.url.path)
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


def create_app(settings: Optional[Settings] = None, store: Optional[InMemoryUserStore] = None) -> FastAPI:
    """Build the API around one explicitly constructed user store.

    Tests call this per test to get a fresh, empty store.
    """
    s = settings or get_settings()

    app = FastAPI(title="User Service", version=APP_VERSION)
    app.state.settings = s
    app.state.user_store = store if store is not None else InMemoryUserStore()

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.middleware("http")(_log_requests)
    app.include_router(users_router)

    app.get("/healthz", response_model=HealthResponse)(healthz)

    return app


def healthz(
    settings: Settings = Depends(get_settings_dep),
    user_store: InMemoryUserStore = Depends(get_user_store),
) -> HealthResponse:
    return HealthResponse(ok=True, service=settings.app_name, version=APP_VERSION, users=len(user_store))


configure_logging(get_settings().log_level)

app = create_app()

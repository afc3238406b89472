"""Local stand-in instance: `uvicorn client_registration.main:app`.

Only the app registration endpoint and a health check are served; it
exists so the registration client has something real to talk to.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from client_registration.api.apps import router as apps_router
from client_registration.api.health import router as health_router
from client_registration.core.config import SETTINGS
from client_registration.core.logging import setup_logging
from client_registration.middleware.request_context import (
    RequestContextMiddleware,
    install_log_filter,
)

setup_logging(SETTINGS.log_level, json_format=SETTINGS.log_json)
install_log_filter()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="client-registration stand-in",
    docs_url="/docs" if SETTINGS.is_dev else None,
    redoc_url="/redoc" if SETTINGS.is_dev else None,
)

app.add_middleware(RequestContextMiddleware)

app.include_router(apps_router)
app.include_router(health_router)

logger.info(
    "stand-in instance started  env=%s log_level=%s port=%d",
    SETTINGS.app_env,
    SETTINGS.log_level,
    SETTINGS.port,
)

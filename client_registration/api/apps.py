"""Stand-in for an instance's app registration endpoint (POST /api/v1/apps).

Issues client credentials in memory so the registration client can be
exercised end-to-end without a real instance.  Replies with 200 and the
same body shape a Mastodon-compatible server uses.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from client_registration.models.registration import RegisteredApp
from client_registration.models.wire import AppIn, RegisteredOut
from client_registration.repos.registered_app_repo import InMemoryRegisteredAppRepo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["apps"])

# Module-level singleton; tests clear it between runs
app_repo = InMemoryRegisteredAppRepo()


@router.post("/apps", response_model=RegisteredOut)
def create_app(payload: AppIn) -> RegisteredOut:
    # FastAPI has already rejected a body without client_name with a 422
    registered = RegisteredApp.new(payload.to_app())
    app_repo.add(registered)

    # NOTE: never log client_secret
    logger.info(
        "App registered  client_id=%s client_name=%s scopes=%s website=%s",
        registered.client_id,
        registered.app.client_name,
        registered.app.scopes,
        registered.app.website or "-",
    )

    return RegisteredOut(
        id=str(registered.id),
        name=registered.app.client_name,
        website=registered.app.website,
        redirect_uri=registered.app.redirect_uris,
        client_id=registered.client_id,
        client_secret=registered.client_secret,
    )

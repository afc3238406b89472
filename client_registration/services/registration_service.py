from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from client_registration.core.config import SETTINGS
from client_registration.core.errors import RegistrationFailedError
from client_registration.models.app import Finalizable, to_app
from client_registration.models.registration import Registered
from client_registration.models.wire import AppIn, RegisteredOut

logger = logging.getLogger(__name__)

APPS_PATH = "/api/v1/apps"


def register(
    base: str,
    app: Finalizable,
    *,
    http: httpx.Client | None = None,
) -> Registered:
    """Register an App (or a builder for one) with the instance at `base`.

    Raises MissingFieldError before any I/O if a builder lacks client_name,
    and RegistrationFailedError if the instance can't be reached, refuses,
    or answers with something that isn't a registration.

    `http` lets callers reuse a client (or pass a TestClient); when omitted
    a short-lived client is opened and closed here.
    """
    finished = to_app(app)
    base = base.rstrip("/")
    payload = AppIn.from_app(finished).to_payload()

    logger.info(
        "Registering app  instance=%s client_name=%s scopes=%s",
        base,
        finished.client_name,
        finished.scopes,
        extra={"instance": base, "client_name": finished.client_name},
    )

    if http is None:
        with httpx.Client(timeout=SETTINGS.http_timeout_sec) as client:
            resp = _post(client, base, payload)
    else:
        resp = _post(http, base, payload)

    if not resp.is_success:
        logger.warning(
            "Registration rejected  instance=%s status=%d", base, resp.status_code
        )
        raise RegistrationFailedError(
            f"instance rejected registration (HTTP {resp.status_code})",
            status_code=resp.status_code,
        )

    try:
        body = RegisteredOut.model_validate(resp.json())
    except (ValueError, ValidationError):
        # resp.json() raises a ValueError subclass on a non-JSON body
        logger.warning(
            "Registration reply unreadable  instance=%s status=%d",
            base,
            resp.status_code,
        )
        raise RegistrationFailedError(
            "instance returned an unreadable registration reply",
            status_code=resp.status_code,
        ) from None

    logger.info(
        "App registered  instance=%s client_id=%s", base, body.client_id
    )
    return Registered(
        base=base,
        client_id=body.client_id,
        client_secret=body.client_secret,
        redirect=body.redirect_uri,
        scopes=finished.scopes,
    )


def _post(client: httpx.Client, base: str, payload: dict[str, str]) -> httpx.Response:
    try:
        return client.post(f"{base}{APPS_PATH}", json=payload)
    except httpx.HTTPError as exc:
        logger.warning("Registration request failed  instance=%s error=%s", base, exc)
        raise RegistrationFailedError(
            f"could not reach {base}: {exc}"
        ) from exc


def authorize_url(registered: Registered) -> str:
    """URL to send the user to so they can grant the registered app access.

    The scope goes in using its percent-encoded spelling as-is; the other
    values are quoted here.
    """
    return (
        f"{registered.base}/oauth/authorize"
        f"?client_id={quote(registered.client_id, safe='')}"
        f"&redirect_uri={quote(registered.redirect, safe='')}"
        f"&scope={registered.scopes.encode()}"
        "&response_type=code"
    )

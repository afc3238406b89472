"""Demo: register an app with the stand-in instance and print the authorize URL.

Run with:
    python scripts/demo_register.py
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from client_registration.core.errors import MissingFieldError
from client_registration.main import app
from client_registration.models.app import App
from client_registration.models.scopes import Scopes
from client_registration.services import registration_service

INSTANCE = "http://testserver"


def main() -> None:
    with TestClient(app) as http:
        _walk(http)

    print("\nAll steps completed.")


def _walk(http: TestClient) -> None:
    # ── Step 1: a builder without client_name is rejected ───────────
    builder = App.builder().set_scopes(Scopes.READ_WRITE)
    try:
        builder.build()
    except MissingFieldError as exc:
        print(f"1. build() without name    → {exc}")

    # ── Step 2: fill in the name and build ──────────────────────────
    finished = builder.set_client_name("demo-app").build()
    print(f"2. build()                 → {finished}")

    # ── Step 3: register it ─────────────────────────────────────────
    registered = registration_service.register(INSTANCE, finished, http=http)
    print(f"3. POST /api/v1/apps       → client_id={registered.client_id[:12]}…")

    # ── Step 4: where to send the user next ─────────────────────────
    print(f"4. authorize URL           → {registration_service.authorize_url(registered)}")


if __name__ == "__main__":
    main()

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from client_registration.models.app import App
from client_registration.models.scopes import Scopes


@dataclass(frozen=True, slots=True)
class Registered:
    """Client credentials an instance issued for a registered App.

    client_secret is a secret and is left out of repr().
    """

    base: str  # instance URL, no trailing slash
    client_id: str
    client_secret: str = field(repr=False)
    redirect: str
    scopes: Scopes


@dataclass(frozen=True, slots=True)
class RegisteredApp:
    """Server-side record of an app the stand-in endpoint has registered."""

    id: UUID
    client_id: str
    client_secret: str = field(repr=False)
    app: App

    @staticmethod
    def new(app: App) -> RegisteredApp:
        return RegisteredApp(
            id=uuid4(),
            client_id=secrets.token_urlsafe(32),
            client_secret=secrets.token_urlsafe(32),
            app=app,
        )

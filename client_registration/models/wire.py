"""Wire shapes for POST /api/v1/apps.

AppIn is the request body, RegisteredOut the instance's reply.  Both the
registration client and the stand-in endpoint use them, so the two sides
cannot drift apart.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from client_registration.models.app import OOB_REDIRECT_URI, App
from client_registration.models.scopes import Scopes


class AppIn(BaseModel):
    client_name: str
    redirect_uris: str = OOB_REDIRECT_URI
    scopes: Scopes = Scopes.READ
    website: str | None = None

    @field_validator("scopes", mode="before")
    @classmethod
    def _parse_scopes(cls, v: Any) -> Any:
        # Instances are lenient about word order and some clients send the
        # percent-encoded form; normalize both to a member.
        if isinstance(v, str):
            return Scopes.parse(v)
        return v

    @staticmethod
    def from_app(app: App) -> AppIn:
        return AppIn(
            client_name=app.client_name,
            redirect_uris=app.redirect_uris,
            scopes=app.scopes,
            website=app.website,
        )

    def to_payload(self) -> dict[str, str]:
        # website is dropped entirely when absent, never sent as null
        return self.model_dump(mode="json", exclude_none=True)

    def to_app(self) -> App:
        return App(
            client_name=self.client_name,
            redirect_uris=self.redirect_uris,
            scopes=self.scopes,
            website=self.website,
        )


class RegisteredOut(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    website: str | None = None
    redirect_uri: str
    client_id: str
    client_secret: str

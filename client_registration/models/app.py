from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from client_registration.core.errors import MissingFieldError
from client_registration.models.scopes import Scopes

# Redirect used when the app has no web callback: the instance shows the
# authorization code to the user instead of redirecting.
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


class Finalizable(Protocol):
    def into_app(self) -> App: ...


@dataclass(frozen=True, slots=True)
class App:
    """An application ready to be registered with an instance."""

    client_name: str
    redirect_uris: str = OOB_REDIRECT_URI
    scopes: Scopes = Scopes.READ
    website: str | None = None  # None means "leave it out of the payload"

    @staticmethod
    def builder() -> AppBuilder:
        return AppBuilder()

    def into_app(self) -> App:
        return self


@dataclass(slots=True)
class AppBuilder:
    """Staging area for an App.

    Nothing is checked while fields are being set; build() is where a
    missing client_name is reported.  Staged values survive build(), so a
    rejected builder can be fixed up and built again.

        app = (
            App.builder()
            .set_client_name("my-app")
            .set_scopes(Scopes.READ_WRITE)
            .build()
        )
    """

    client_name: str | None = None
    redirect_uris: str | None = None
    scopes: Scopes | None = None
    website: str | None = None

    def set_client_name(self, name: str) -> AppBuilder:
        """Name shown to the user while they decide whether to grant access."""
        self.client_name = name
        return self

    def set_redirect_uris(self, uris: str) -> AppBuilder:
        """Where the user lands after authorizing. Defaults to out-of-band."""
        self.redirect_uris = uris
        return self

    def set_scopes(self, scopes: Scopes) -> AppBuilder:
        self.scopes = scopes
        return self

    def set_website(self, website: str) -> AppBuilder:
        self.website = website
        return self

    def build(self) -> App:
        if self.client_name is None:
            raise MissingFieldError("client_name")
        return App(
            client_name=self.client_name,
            redirect_uris=(
                self.redirect_uris
                if self.redirect_uris is not None
                else OOB_REDIRECT_URI
            ),
            scopes=self.scopes if self.scopes is not None else Scopes.default(),
            website=self.website,
        )

    def into_app(self) -> App:
        return self.build()


def to_app(value: Finalizable) -> App:
    """Accept either a finished App or a builder and hand back an App."""
    return value.into_app()

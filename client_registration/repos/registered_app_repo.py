from __future__ import annotations

from typing import Protocol

from client_registration.models.registration import RegisteredApp


class RegisteredAppRepo(Protocol):
    def get(self, client_id: str) -> RegisteredApp | None: ...
    def add(self, registered: RegisteredApp) -> None: ...
    def list_all(self) -> list[RegisteredApp]: ...


class InMemoryRegisteredAppRepo:
    def __init__(self) -> None:
        self._by_client_id: dict[str, RegisteredApp] = {}

    def get(self, client_id: str) -> RegisteredApp | None:
        return self._by_client_id.get(client_id)

    def add(self, registered: RegisteredApp) -> None:
        if registered.client_id in self._by_client_id:
            raise ValueError(f"client_id already registered: {registered.client_id}")
        self._by_client_id[registered.client_id] = registered

    def list_all(self) -> list[RegisteredApp]:
        return list(self._by_client_id.values())

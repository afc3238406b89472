from __future__ import annotations


class RegistrationError(Exception):
    """Base class for everything this package raises on purpose."""


class MissingFieldError(RegistrationError, ValueError):
    def __init__(self, field: str) -> None:
        super().__init__(f"missing field: {field}")
        self.field = field


class InvalidScopeError(RegistrationError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"unknown scope: {value!r}")
        self.value = value


class RegistrationFailedError(RegistrationError):
    """The instance refused the registration or replied with garbage.

    status_code is None when the request never got an HTTP response
    (connection refused, timeout, ...).
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

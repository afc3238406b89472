from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from client_registration.core.errors import MissingFieldError
from client_registration.models.app import (
    OOB_REDIRECT_URI,
    App,
    AppBuilder,
    to_app,
)
from client_registration.models.scopes import Scopes


def test_fresh_builders_are_equal() -> None:
    assert App.builder() == AppBuilder()


def test_build_with_only_client_name_applies_defaults() -> None:
    app = App.builder().set_client_name("test").build()
    assert app.client_name == "test"
    assert app.redirect_uris == OOB_REDIRECT_URI == "urn:ietf:wg:oauth:2.0:oob"
    assert app.scopes is Scopes.READ
    assert app.website is None


def test_build_keeps_chosen_scopes() -> None:
    app = App.builder().set_client_name("test").set_scopes(Scopes.ALL).build()
    assert app.scopes is Scopes.ALL


def test_build_all_fields() -> None:
    builder = AppBuilder()
    builder.set_client_name("foo-test")
    builder.set_redirect_uris("http://example.com")
    builder.set_scopes(Scopes.READ_WRITE)
    builder.set_website("https://example.com")

    assert builder.build() == App(
        client_name="foo-test",
        redirect_uris="http://example.com",
        scopes=Scopes.READ_WRITE,
        website="https://example.com",
    )


def test_empty_client_name_is_accepted() -> None:
    # Only presence is checked, not content
    assert App.builder().set_client_name("").build().client_name == ""


def test_last_write_wins() -> None:
    app = (
        App.builder()
        .set_client_name("first")
        .set_client_name("second")
        .set_scopes(Scopes.WRITE)
        .set_scopes(Scopes.FOLLOW)
        .build()
    )
    assert app.client_name == "second"
    assert app.scopes is Scopes.FOLLOW


def test_build_fails_without_client_name() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        App.builder().build()
    assert exc_info.value.field == "client_name"
    assert str(exc_info.value) == "missing field: client_name"


def test_build_fails_without_client_name_even_when_everything_else_is_set() -> None:
    builder = (
        App.builder()
        .set_website("https://example.com")
        .set_redirect_uris("https://example.com")
        .set_scopes(Scopes.ALL)
    )
    with pytest.raises(MissingFieldError):
        builder.build()


def test_rejected_builder_can_be_fixed_and_rebuilt() -> None:
    builder = App.builder().set_scopes(Scopes.WRITE)
    with pytest.raises(MissingFieldError):
        builder.build()

    app = builder.set_client_name("retry").build()
    assert app.client_name == "retry"
    assert app.scopes is Scopes.WRITE


def test_app_is_immutable() -> None:
    app = App(client_name="x")
    with pytest.raises(FrozenInstanceError):
        app.client_name = "y"  # type: ignore[misc]


def test_to_app_passes_an_app_through() -> None:
    app = App(
        client_name="foo-test",
        redirect_uris="http://example.com",
        scopes=Scopes.ALL,
    )
    assert to_app(app) is app
    assert app.into_app() == app


def test_to_app_builds_a_builder() -> None:
    builder = (
        App.builder()
        .set_client_name("foo-test")
        .set_redirect_uris("http://example.com")
        .set_scopes(Scopes.ALL)
    )
    assert to_app(builder) == App(
        client_name="foo-test",
        redirect_uris="http://example.com",
        scopes=Scopes.ALL,
        website=None,
    )


def test_to_app_propagates_missing_field() -> None:
    with pytest.raises(MissingFieldError):
        to_app(App.builder())

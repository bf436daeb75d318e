"""Container assembly."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from stackit.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the container, using in-memory flavours for `mocked` components.

    Production passes nothing; the test container mocks everything it can.
    """
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    # FastapiProvider exposes the Request to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach `container` to the app, replacing any previous one."""
    setup_dishka(container, app)

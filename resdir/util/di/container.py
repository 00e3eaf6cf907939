"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from resdir.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: PostgreSQL plus the HTTP classifier.

    Settings are loaded from environment variables when first resolved.
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the Request to REQUEST-scoped providers
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so ``FromDishka`` route parameters resolve."""
    setup_dishka(container, app)

"""Production container and FastAPI integration."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from threadline.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with PostgreSQL persistence.

    Settings come from the environment when first resolved.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``.

    Routes resolve ``FromDishka[...]`` parameters from a REQUEST scope opened
    per HTTP request. Closing the container (see the app lifespan) disposes
    the database engine.
    """
    setup_dishka(container, app)

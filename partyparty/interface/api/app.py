"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from partyparty.config import Settings
from partyparty.interface.api.errors import register_error_handlers
from partyparty.interface.api.routes import (
    devices,
    guests,
    health,
    hosts,
    invites,
    parties,
)
from partyparty.util.di.container import create_container, setup_di
from partyparty.util.observability import instrument_fastapi, instrument_httpx


def build_app(container: AsyncContainer, debug: bool = False) -> FastAPI:
    """Assemble routes, error handlers and DI on a new application.

    Args:
        container: DI container the routes resolve use cases from
        debug: FastAPI debug flag

    Returns:
        Application without instrumentation or middleware
    """
    app_instance = FastAPI(
        title="PartyParty API",
        description="Reconciles devices, host profiles and party invitations "
        "against the PartyParty record store",
        version="0.1.0",
        debug=debug,
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(devices.router)
    app_instance.include_router(hosts.router)
    app_instance.include_router(guests.router)
    app_instance.include_router(parties.router)
    app_instance.include_router(invites.router)

    return app_instance


def create_app() -> FastAPI:
    """Create the production FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Instrument httpx for record store and identity provider calls
    instrument_httpx()

    app_instance = build_app(create_container(), debug=settings.debug)

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8081",  # Expo web dev server
            "http://localhost:19006",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    return app_instance

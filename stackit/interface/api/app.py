"""StackIt HTTP application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stackit.config import Settings
from stackit.interface.api.errors import register_error_handlers
from stackit.interface.api.routes import (
    answers,
    health,
    notifications,
    questions,
    votes,
)
from stackit.util.di.container import create_container, setup_di
from stackit.util.observability import instrument_fastapi

# Dev servers of the web client (CRA and Vite)
LOCAL_FRONTENDS = ("http://localhost:3000", "http://localhost:5173")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Disposes the engine pool with the APP scope
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Assemble the API with the production container.

    Logfire must already be configured (scripts/start_app.py does it, the
    test conftest silences it). Tests swap the container afterwards with
    ``setup_di``.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="StackIt API",
        description="Questions, answers, votes and notifications for StackIt",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # Cookie auth needs credentials and explicit origins
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=sorted({settings.api.frontend_url, *LOCAL_FRONTENDS}),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, create_container())
    register_error_handlers(app_instance)

    for module in (health, questions, answers, votes, notifications):
        app_instance.include_router(module.router)

    return app_instance


# Imported by uvicorn; see scripts/start_app.py
app = create_app()

"""Logfire setup for the StackIt API.

Services emit spans named after the operation they guard, e.g.
``vote_service.cast_vote`` or ``acceptance_service.accept_answer``, and
attach question, answer and user ids as attributes.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from stackit.config import ObservabilitySettings, Settings

SERVICE_NAME = "stackit-api"

# Request parameters that carry credentials
_CREDENTIAL_PARAMS = frozenset({"auth_token", "authorization"})


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire; without
    it everything stays on the console.
    """
    send = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=list(_CREDENTIAL_PARAMS)),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Keep path and query ids, never the token
    values = {
        name: value
        for name, value in attributes.get("values", {}).items()
        if name not in _CREDENTIAL_PARAMS
    }
    return {**attributes, "values": values}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through `engine`, including the row locks."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)

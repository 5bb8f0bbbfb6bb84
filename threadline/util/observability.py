"""Logfire setup and instrumentation.

Services trace their operations directly:

    import logfire

    with logfire.span("cascade_delete_service.delete", comment_id=str(comment_id)):
        ...
    logfire.warn("Sub-comment counter not adjusted", parent_id=str(parent_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from threadline.config import ObservabilitySettings, Settings

SERVICE_NAME = "threadline"
SERVICE_VERSION = "0.1.0"


def _should_send(observability: ObservabilitySettings) -> bool:
    # Explicit setting wins, otherwise send only when a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry to Logfire cloud;
    without it everything goes to the console only. Calling this again
    reconfigures logfire with the same options.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
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
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request (route, status, duration, errors)."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement of ``engine``.

    Each level of a cascade traversal shows up as its own query under the
    delete span.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)

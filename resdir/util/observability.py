"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Resource submitted", resource_id=resource.id)

    with logfire.span("resource_service.set_status", resource_id=resource_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from resdir.config import Settings

# Submitter emails are private; keep them out of exported telemetry
SCRUB_PATTERNS = ["submitter_email", "email"]

# Listing parameters worth seeing on request spans
_QUERY_ATTRIBUTES = ("tags", "status", "sortBy", "sortOrder", "search", "public_only")


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, then token presence, else console only."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="resdir-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
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
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI with Logfire, tagging spans with listing filters.

    Headers are not captured: admin requests may carry credentials.
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):  # Absent on websockets
            result["method"] = request.method
        result["path"] = request.url.path
        for name in _QUERY_ATTRIBUTES:
            value = request.query_params.get(name)
            if value is not None:
                result[f"query.{name}"] = value
        return result

    logfire.instrument_fastapi(app, request_attributes_mapper=_map_request_attributes)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument the directory database engine with Logfire."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument outbound httpx calls (the tag classifier) with Logfire."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
